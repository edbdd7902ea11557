"""Module: prescriptions."""

from __future__ import annotations

import logging
import uuid
from collections import defaultdict
from datetime import UTC, datetime
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field, StringConstraints, field_validator
from sqlalchemy import desc, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.v1.routes.deps import get_current_doctor, get_db
from app.core.codes import CodeGenerationError, build_scan_url, generate_code, is_well_formed_code
from app.core.dates import format_display_date, to_iso
from app.core.qr_payload import encode_qr_payload
from app.db.models.audit_log import AuditLog
from app.db.models.doctor import Doctor
from app.db.models.prescription import Prescription
from app.db.models.prescription_medication import PrescriptionMedication

logger = logging.getLogger(__name__)

router = APIRouter()

# Fresh draws allowed when a generated code is already taken.
MAX_CODE_ATTEMPTS = 5

PatientName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class PatientPayload(BaseModel):
    name: PatientName
    age: int = Field(ge=0)
    gender: Literal["male", "female", "other"] | None = None
    contact_number: str | None = None

    @field_validator("gender", mode="before")
    @classmethod
    def _blank_gender_is_unset(cls, value):
        if isinstance(value, str):
            value = value.strip().lower()
            return value or None
        return value


# Response shape for stored patients; rows are returned as stored, not re-validated.
class PatientRead(BaseModel):
    name: str
    age: int
    gender: str | None = None
    contact_number: str | None = None


class MedicationPayload(BaseModel):
    name: str
    dosage: str = ""
    frequency: str = ""
    duration: str = ""
    notes: str | None = None


class PrescriptionCreatePayload(BaseModel):
    patient: PatientPayload
    medications: list[MedicationPayload] = []
    notes: str | None = None


class PrescriptionRead(BaseModel):
    id: str
    prescription_code: str
    doctor_id: str
    doctor_name: str
    patient: PatientRead
    medications: list[MedicationPayload]
    date: str
    display_date: str
    notes: str | None = None
    qr_payload: str
    scan_url: str


# -------------------------
# Helpers
# -------------------------
def _normalize_optional(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned if cleaned else None


def _draw_code() -> str:
    try:
        return generate_code()
    except CodeGenerationError:
        raise HTTPException(status_code=503, detail="Unable to generate prescription code")


def code_taken(db: Session, code: str) -> bool:
    return db.execute(
        select(Prescription.prescription_id).where(Prescription.prescription_code == code)
    ).first() is not None


def _insert_with_fresh_code(db: Session, build) -> Prescription:
    """
    Insert ``build(code)`` under a newly drawn code.

    A clash is caught either by the lookup before insert or, when another
    request took the same code in between, by the unique index at flush.
    Both cases draw again, up to MAX_CODE_ATTEMPTS.
    """
    for _ in range(MAX_CODE_ATTEMPTS):
        code = _draw_code()
        if code_taken(db, code):
            logger.warning("Prescription code collision, drawing again")
            continue

        prescription = build(code)
        db.add(prescription)
        try:
            db.flush()
        except IntegrityError:
            db.rollback()
            logger.warning("Prescription code claimed concurrently, drawing again")
            continue
        return prescription

    logger.error("No free prescription code after %d attempts", MAX_CODE_ATTEMPTS)
    raise HTTPException(status_code=503, detail="Unable to generate prescription code")


def load_medications(db: Session, prescription_ids: list[uuid.UUID]) -> dict[uuid.UUID, list[MedicationPayload]]:
    out: dict[uuid.UUID, list[MedicationPayload]] = defaultdict(list)
    if not prescription_ids:
        return out

    rows = db.execute(
        select(PrescriptionMedication)
        .where(PrescriptionMedication.prescription_id.in_(prescription_ids))
        .order_by(PrescriptionMedication.prescription_id, PrescriptionMedication.position)
    ).scalars().all()

    for row in rows:
        out[row.prescription_id].append(
            MedicationPayload(
                name=row.name,
                dosage=row.dosage or "",
                frequency=row.frequency or "",
                duration=row.duration or "",
                notes=row.notes,
            )
        )
    return out


def as_prescription_read(prescription: Prescription, medications: list[MedicationPayload]) -> PrescriptionRead:
    patient = PatientRead(
        name=prescription.patient_name or "",
        age=prescription.patient_age,
        gender=prescription.patient_gender,
        contact_number=prescription.patient_contact_number,
    )
    return PrescriptionRead(
        id=str(prescription.prescription_id),
        prescription_code=prescription.prescription_code,
        doctor_id=str(prescription.doctor_id),
        doctor_name=prescription.doctor_name,
        patient=patient,
        medications=medications,
        date=to_iso(prescription.issued_at),
        display_date=format_display_date(prescription.issued_at),
        notes=prescription.notes,
        qr_payload=encode_qr_payload({"medications": medications}),
        scan_url=build_scan_url(prescription.prescription_code),
    )


def get_by_code(db: Session, code: str) -> Prescription | None:
    # Strings that could never have been issued are not worth a query.
    if not is_well_formed_code(code):
        return None
    return db.execute(
        select(Prescription).where(Prescription.prescription_code == code)
    ).scalar_one_or_none()


# -------------------------
# Endpoints
# -------------------------

@router.post("", summary="Issue a prescription", response_model=PrescriptionRead)
def create_prescription(
    payload: PrescriptionCreatePayload,
    doctor: Doctor = Depends(get_current_doctor),
    db: Session = Depends(get_db),
):
    # Rows left blank in the form are not part of the prescription.
    medications = [m for m in payload.medications if m.name.strip()]
    doctor_id = doctor.doctor_id
    doctor_name = doctor.full_name or "Doctor"

    def build(code: str) -> Prescription:
        return Prescription(
            prescription_code=code,
            doctor_id=doctor_id,
            doctor_name=doctor_name,
            patient_name=payload.patient.name,
            patient_age=payload.patient.age,
            patient_gender=payload.patient.gender,
            patient_contact_number=_normalize_optional(payload.patient.contact_number),
            notes=_normalize_optional(payload.notes),
            issued_at=datetime.now(UTC).replace(tzinfo=None),
        )

    prescription = _insert_with_fresh_code(db, build)
    code = prescription.prescription_code

    for position, medication in enumerate(medications):
        db.add(
            PrescriptionMedication(
                prescription_id=prescription.prescription_id,
                position=position,
                name=medication.name.strip(),
                dosage=medication.dosage.strip(),
                frequency=medication.frequency.strip(),
                duration=medication.duration.strip(),
                notes=_normalize_optional(medication.notes),
            )
        )

    db.add(
        AuditLog(
            actor_doctor_id=doctor_id,
            action="prescription.issued",
            target_type="prescription",
            target_id=prescription.prescription_id,
            meta={"prescription_code": code, "medication_count": len(medications)},
        )
    )
    db.commit()
    db.refresh(prescription)

    logger.info("Issued prescription %s by doctor %s", code, doctor_id)
    stored = load_medications(db, [prescription.prescription_id])
    return as_prescription_read(prescription, stored[prescription.prescription_id])

@router.get("", summary="List the signed-in doctor's prescriptions", response_model=list[PrescriptionRead])
def list_prescriptions(
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    doctor: Doctor = Depends(get_current_doctor),
    db: Session = Depends(get_db),
):
    rows = db.execute(
        select(Prescription)
        .where(Prescription.doctor_id == doctor.doctor_id)
        .order_by(desc(Prescription.issued_at), desc(Prescription.created_at))
        .offset(offset)
        .limit(limit)
    ).scalars().all()

    medications = load_medications(db, [r.prescription_id for r in rows])
    return [as_prescription_read(r, medications[r.prescription_id]) for r in rows]


@router.get(
    "/{code}",
    summary="Get a prescription by its code",
    response_model=PrescriptionRead,
    dependencies=[Depends(get_current_doctor)],
)
def get_prescription(
    code: str,
    db: Session = Depends(get_db),
):
    prescription = get_by_code(db, code.strip())
    if not prescription:
        raise HTTPException(status_code=404, detail="Prescription not found")

    medications = load_medications(db, [prescription.prescription_id])
    return as_prescription_read(prescription, medications[prescription.prescription_id])
