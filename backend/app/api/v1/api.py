"""Module: api."""

# backend/app/api/v1/api.py
from fastapi import APIRouter

# Core operational routes (health/auth).
from app.api.v1.routes.health import router as health_router
from app.api.v1.routes.auth import router as auth_router

# Domain routes used by the prescription desk frontend.
from app.api.v1.routes.catalog import router as catalog_router
from app.api.v1.routes.prescriptions import router as prescriptions_router
from app.api.v1.routes.scan import router as scan_router
from app.api.v1.routes.dashboard import router as dashboard_router


api_router = APIRouter()

# Register operational endpoints first for service-level concerns.
api_router.include_router(health_router, prefix="/health", tags=["health"])
api_router.include_router(auth_router, prefix="/auth", tags=["auth"])

# Register business/domain endpoints consumed by the application UI.
api_router.include_router(catalog_router, prefix="/catalog", tags=["catalog"])
api_router.include_router(prescriptions_router, prefix="/prescriptions", tags=["prescriptions"])
api_router.include_router(scan_router, prefix="/scan", tags=["scan"])
api_router.include_router(dashboard_router, prefix="/dashboard", tags=["dashboard"])
