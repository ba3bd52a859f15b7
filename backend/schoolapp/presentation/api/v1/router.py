"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from schoolapp.presentation.api.v1.endpoints.employees import router as employees_router
from schoolapp.presentation.api.v1.endpoints.health import router as health_router
from schoolapp.presentation.api.v1.endpoints.teachers import router as teachers_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(teachers_router)
router.include_router(employees_router)
