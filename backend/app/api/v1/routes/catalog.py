"""Module: catalog."""

from fastapi import APIRouter

from app.core.catalog import medication_options

router = APIRouter()


# Endpoint: medication names offered in the prescription form.
@router.get("/medications")
def list_medication_options():
    return medication_options()
