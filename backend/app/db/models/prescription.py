"""Module: prescription."""

import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


# Issued prescription. Looked up by prescription_code, never by prescription_id.
class Prescription(Base):
    __tablename__ = "prescriptions"
    __table_args__ = (
        CheckConstraint("patient_age >= 0", name="ck_prescriptions_patient_age"),
    )

    prescription_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    # Public short code; assigned once at creation.
    prescription_code: Mapped[str] = mapped_column(String(32), unique=True, index=True, nullable=False)

    doctor_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("doctors.doctor_id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    doctor_name: Mapped[str] = mapped_column(String, nullable=False)

    # Patient snapshot. Patients have no identity of their own.
    patient_name: Mapped[str] = mapped_column(String, nullable=False)
    patient_age: Mapped[int] = mapped_column(Integer, nullable=False)
    patient_gender: Mapped[str] = mapped_column(String, nullable=True)
    patient_contact_number: Mapped[str] = mapped_column(String, nullable=True)

    notes: Mapped[str] = mapped_column(String, nullable=True)

    issued_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)
