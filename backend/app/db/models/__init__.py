# backend/app/db/models/__init__.py

from app.db.models.doctor import Doctor
from app.db.models.prescription import Prescription
from app.db.models.prescription_medication import PrescriptionMedication
from app.db.models.audit_log import AuditLog
