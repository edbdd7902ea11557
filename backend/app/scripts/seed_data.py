"""Module: seed_data."""

import logging
import random
import string
from datetime import UTC, datetime, timedelta

from faker import Faker
from sqlalchemy import func, select

from app.core.catalog import MEDICATION_CATALOG
from app.core.codes import generate_code
from app.core.security import hash_password
from app.db.init_db import init_db
from app.db.models.audit_log import AuditLog
from app.db.models.doctor import Doctor
from app.db.models.prescription import Prescription
from app.db.models.prescription_medication import PrescriptionMedication
from app.db.session import SessionLocal

logger = logging.getLogger("app.scripts.seed_data")

fake = Faker()

DEMO_PASSWORD = "password123"
GENDERS = ["male", "female", "other", None]
DOSAGES = ["250mg", "500mg", "1 tablet", "2 tablets", "5ml"]
FREQUENCIES = ["1", "2", "3", "twice daily", "as needed"]
DURATIONS = ["3", "5", "7", "10", "2 weeks"]


# Shared helpers used by the seed builders.
def generate_password(length: int = 12) -> str:
    chars = string.ascii_letters + string.digits
    return "".join(random.choice(chars) for _ in range(length))


def generate_mobile() -> str:
    return "04" + "".join(random.choice(string.digits) for _ in range(8))


def _unique_code(session, used: set[str]) -> str:
    while True:
        code = generate_code()
        if code in used:
            continue
        taken = session.execute(
            select(Prescription.prescription_id).where(Prescription.prescription_code == code)
        ).first()
        if not taken:
            used.add(code)
            return code


def seed_doctors(session, count: int = 3) -> list[Doctor]:
    doctors = []
    for i in range(count):
        doctor = Doctor(
            email=f"doctor{i + 1}@example.com",
            password=hash_password(DEMO_PASSWORD),
            role="DOCTOR",
            full_name=f"Dr. {fake.first_name()} {fake.last_name()}",
        )
        session.add(doctor)
        doctors.append(doctor)
    session.flush()
    return doctors


def seed_prescriptions(session, doctors: list[Doctor], per_doctor: int = 8) -> int:
    used: set[str] = set()
    now = datetime.now(UTC).replace(tzinfo=None)
    created = 0

    for doctor in doctors:
        # A handful of repeat patients so dashboard patient counts differ from totals.
        patients = [
            (fake.name(), random.randint(1, 90), random.choice(GENDERS), generate_mobile())
            for _ in range(max(1, per_doctor // 2))
        ]
        for _ in range(per_doctor):
            name, age, gender, phone = random.choice(patients)
            prescription = Prescription(
                prescription_code=_unique_code(session, used),
                doctor_id=doctor.doctor_id,
                doctor_name=doctor.full_name,
                patient_name=name,
                patient_age=age,
                patient_gender=gender,
                patient_contact_number=phone if random.random() < 0.7 else None,
                notes=fake.sentence() if random.random() < 0.5 else None,
                issued_at=now - timedelta(days=random.randint(0, 120), minutes=random.randint(0, 1440)),
            )
            session.add(prescription)
            session.flush()

            for position in range(random.randint(1, 3)):
                session.add(
                    PrescriptionMedication(
                        prescription_id=prescription.prescription_id,
                        position=position,
                        name=random.choice(MEDICATION_CATALOG),
                        dosage=random.choice(DOSAGES),
                        frequency=random.choice(FREQUENCIES),
                        duration=random.choice(DURATIONS),
                        notes="After meals" if random.random() < 0.3 else None,
                    )
                )

            session.add(
                AuditLog(
                    actor_doctor_id=doctor.doctor_id,
                    action="prescription.issued",
                    target_type="prescription",
                    target_id=prescription.prescription_id,
                    meta={"prescription_code": prescription.prescription_code, "seeded": True},
                )
            )
            created += 1

    return created


def run() -> None:
    init_db()
    session = SessionLocal()
    try:
        existing = session.execute(select(func.count(Doctor.doctor_id))).scalar_one()
        if existing:
            logger.info("Database already has %d doctors; skipping seed", existing)
            return

        doctors = seed_doctors(session)
        created = seed_prescriptions(session, doctors)
        session.commit()
        logger.info("Seeded %d doctors and %d prescriptions", len(doctors), created)
        print(f"Seeded {len(doctors)} doctors (password: {DEMO_PASSWORD}) and {created} prescriptions.")
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run()
