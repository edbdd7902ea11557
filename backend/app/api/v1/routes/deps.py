"""Module: deps."""

import uuid
from typing import Dict, Generator

from fastapi import Depends, Header, HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.models.doctor import Doctor
from app.db.session import SessionLocal

# Issued bearer tokens mapped to doctor ids. Process-local: a restart signs everyone out.
TOKENS: Dict[str, str] = {}


# Dependency provider: one DB session per request lifecycle.
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_token_value(authorization: str | None) -> str:
    if not authorization:
        raise HTTPException(status_code=401, detail="Missing Authorization header")

    parts = authorization.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1].strip():
        raise HTTPException(status_code=401, detail="Invalid Authorization header")

    return parts[1].strip()


def get_current_doctor(
    authorization: str | None = Header(default=None),
    db: Session = Depends(get_db),
) -> Doctor:
    token = get_token_value(authorization)
    doctor_id = TOKENS.get(token)
    if not doctor_id:
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    doctor = db.execute(select(Doctor).where(Doctor.doctor_id == uuid.UUID(doctor_id))).scalar_one_or_none()
    if not doctor:
        raise HTTPException(status_code=401, detail="Doctor not found")

    return doctor
