"""Module: auth."""

import logging

from fastapi import APIRouter, Depends, Header, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.api.v1.routes.deps import TOKENS, get_current_doctor, get_db, get_token_value
from app.core.security import hash_password, new_access_token, verify_password
from app.db.models.doctor import Doctor

logger = logging.getLogger(__name__)

router = APIRouter()

DOCTOR_ROLE = "DOCTOR"


class LoginRequest(BaseModel):
    email: str
    password: str


class RegisterRequest(BaseModel):
    email: str = Field(min_length=3)
    password: str = Field(min_length=6)
    full_name: str = Field(min_length=1)


class DoctorPayload(BaseModel):
    doctor_id: str
    email: str
    full_name: str
    role: str


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    doctor: DoctorPayload


def _normalize_email(value: str) -> str:
    return value.strip().lower()


def _as_doctor_payload(doctor: Doctor) -> DoctorPayload:
    return DoctorPayload(
        doctor_id=str(doctor.doctor_id),
        email=doctor.email,
        full_name=doctor.full_name,
        role=(doctor.role or DOCTOR_ROLE).upper(),
    )


@router.post("/register", response_model=DoctorPayload)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    normalized_email = _normalize_email(payload.email)
    if "@" not in normalized_email:
        raise HTTPException(status_code=400, detail="Invalid email address")

    full_name = payload.full_name.strip()
    if not full_name:
        raise HTTPException(status_code=400, detail="Full name is required")

    exists = db.execute(select(Doctor.doctor_id).where(func.lower(Doctor.email) == normalized_email)).first()
    if exists:
        raise HTTPException(status_code=409, detail="Email already registered")

    doctor = Doctor(
        email=normalized_email,
        password=hash_password(payload.password),
        role=DOCTOR_ROLE,
        full_name=full_name,
    )
    db.add(doctor)
    db.commit()
    db.refresh(doctor)
    return _as_doctor_payload(doctor)


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    normalized_email = _normalize_email(payload.email)
    doctor = db.execute(
        select(Doctor).where(func.lower(Doctor.email) == normalized_email)
    ).scalar_one_or_none()

    if not doctor or not verify_password(payload.password, doctor.password):
        logger.info("Failed login attempt")
        raise HTTPException(status_code=401, detail="Invalid email or password")

    token = new_access_token()
    TOKENS[token] = str(doctor.doctor_id)

    return LoginResponse(
        access_token=token,
        doctor=_as_doctor_payload(doctor),
    )


@router.post("/logout")
def logout(authorization: str | None = Header(default=None)):
    token = get_token_value(authorization)
    if TOKENS.pop(token, None) is None:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    return {"success": True}


@router.get("/me", response_model=DoctorPayload)
def me(doctor: Doctor = Depends(get_current_doctor)):
    return _as_doctor_payload(doctor)
