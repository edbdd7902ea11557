"""Module: scan."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.api.v1.routes.deps import get_db
from app.api.v1.routes.prescriptions import get_by_code
from app.core.dates import format_display_date, to_iso

logger = logging.getLogger(__name__)

router = APIRouter()


class ScanResult(BaseModel):
    prescription_code: str
    date: str
    display_date: str
    doctor_name: str
    patient_name: str


# Endpoint: public lookup used by the page a scanned QR code opens.
@router.get("", summary="Look up a prescription by code", response_model=ScanResult)
def lookup_prescription(
    code: str = Query(default=""),
    db: Session = Depends(get_db),
):
    cleaned = code.strip()
    if not cleaned:
        raise HTTPException(status_code=400, detail="Please enter a prescription code")

    prescription = get_by_code(db, cleaned)
    if not prescription:
        logger.info("Scan lookup for unknown prescription code")
        raise HTTPException(status_code=404, detail="No prescription found with this code")

    return ScanResult(
        prescription_code=prescription.prescription_code,
        date=to_iso(prescription.issued_at),
        display_date=format_display_date(prescription.issued_at),
        doctor_name=prescription.doctor_name,
        patient_name=prescription.patient_name,
    )
