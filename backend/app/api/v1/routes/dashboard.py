from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import desc, distinct, func, select
from sqlalchemy.orm import Session

from app.api.v1.routes.deps import get_current_doctor, get_db
from app.api.v1.routes.prescriptions import PrescriptionRead, as_prescription_read, load_medications
from app.core.dates import format_display_date
from app.db.models.doctor import Doctor
from app.db.models.prescription import Prescription

router = APIRouter()

RECENT_LIMIT = 5


class DashboardSummary(BaseModel):
    doctor_name: str
    total_prescriptions: int
    patient_count: int
    last_prescription_date: str | None = None
    recent_prescriptions: list[PrescriptionRead]


@router.get("/summary", response_model=DashboardSummary)
def dashboard_summary(
    doctor: Doctor = Depends(get_current_doctor),
    db: Session = Depends(get_db),
):
    total = db.execute(
        select(func.count(Prescription.prescription_id)).where(Prescription.doctor_id == doctor.doctor_id)
    ).scalar_one()

    # Patients have no identity beyond their name, so distinct names are counted.
    patient_count = db.execute(
        select(func.count(distinct(func.lower(Prescription.patient_name)))).where(
            Prescription.doctor_id == doctor.doctor_id
        )
    ).scalar_one()

    recent = db.execute(
        select(Prescription)
        .where(Prescription.doctor_id == doctor.doctor_id)
        .order_by(desc(Prescription.issued_at), desc(Prescription.created_at))
        .limit(RECENT_LIMIT)
    ).scalars().all()

    medications = load_medications(db, [r.prescription_id for r in recent])

    return DashboardSummary(
        doctor_name=doctor.full_name,
        total_prescriptions=int(total or 0),
        patient_count=int(patient_count or 0),
        last_prescription_date=format_display_date(recent[0].issued_at) if recent else None,
        recent_prescriptions=[as_prescription_read(r, medications[r.prescription_id]) for r in recent],
    )
