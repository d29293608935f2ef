# API routes
from fastapi import APIRouter
from patient_dashboard.api.patients import router as patients_router
from patient_dashboard.api.dashboard import router as dashboard_router

# Combine all routers
router = APIRouter()
router.include_router(patients_router)
router.include_router(dashboard_router)

__all__ = ["router"]
