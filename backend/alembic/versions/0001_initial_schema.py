"""initial prescription schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2025-01-05 15:45:00
"""
from alembic import op
import sqlalchemy as sa


revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "doctors",
        sa.Column("doctor_id", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password", sa.String(), nullable=False),
        sa.Column("role", sa.String(), nullable=False, server_default="DOCTOR"),
        sa.Column("full_name", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("email", name="uq_doctors_email"),
    )

    op.create_table(
        "prescriptions",
        sa.Column("prescription_id", sa.Uuid(), primary_key=True),
        sa.Column("prescription_code", sa.String(length=32), nullable=False),
        sa.Column(
            "doctor_id",
            sa.Uuid(),
            sa.ForeignKey(
                "doctors.doctor_id",
                name="fk_prescriptions_doctor_id_doctors",
                ondelete="RESTRICT",
            ),
            nullable=False,
        ),
        sa.Column("doctor_name", sa.String(), nullable=False),
        sa.Column("patient_name", sa.String(), nullable=False),
        sa.Column("patient_age", sa.Integer(), nullable=False),
        sa.Column("patient_gender", sa.String(), nullable=True),
        sa.Column("patient_contact_number", sa.String(), nullable=True),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("issued_at", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.CheckConstraint("patient_age >= 0", name="ck_prescriptions_patient_age"),
    )
    op.create_index(
        "ix_prescriptions_prescription_code", "prescriptions", ["prescription_code"], unique=True
    )
    op.create_index("ix_prescriptions_doctor_id", "prescriptions", ["doctor_id"])

    op.create_table(
        "prescription_medications",
        sa.Column("medication_id", sa.Uuid(), primary_key=True),
        sa.Column(
            "prescription_id",
            sa.Uuid(),
            sa.ForeignKey(
                "prescriptions.prescription_id",
                name="fk_prescription_medications_prescription_id_prescriptions",
                ondelete="CASCADE",
            ),
            nullable=False,
        ),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("dosage", sa.String(), nullable=False),
        sa.Column("frequency", sa.String(), nullable=False),
        sa.Column("duration", sa.String(), nullable=False),
        sa.Column("notes", sa.String(), nullable=True),
    )
    op.create_index(
        "ix_prescription_medications_prescription_id", "prescription_medications", ["prescription_id"]
    )

    op.create_table(
        "audit_log",
        sa.Column("audit_id", sa.Uuid(), primary_key=True),
        sa.Column("actor_doctor_id", sa.Uuid(), nullable=True),
        sa.Column("action", sa.String(), nullable=False),
        sa.Column("target_type", sa.String(), nullable=False),
        sa.Column("target_id", sa.Uuid(), nullable=True),
        sa.Column("meta", sa.JSON(), nullable=True),
        sa.Column("occurred_at", sa.DateTime(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("audit_log")
    op.drop_index("ix_prescription_medications_prescription_id", table_name="prescription_medications")
    op.drop_table("prescription_medications")
    op.drop_index("ix_prescriptions_doctor_id", table_name="prescriptions")
    op.drop_index("ix_prescriptions_prescription_code", table_name="prescriptions")
    op.drop_table("prescriptions")
    op.drop_table("doctors")
