"""API router configuration."""

from fastapi import APIRouter

from api.routes.auth import router as auth_router
from api.routes.experiences import router as experiences_router
from api.routes.health import router as health_router
from api.routes.me import router as me_router
from api.routes.projects import router as projects_router
from api.routes.public import router as public_router
from api.schemas.common import ErrorResponse

router = APIRouter(
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Store or auth service failure"},
    },
)
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(public_router)
router.include_router(me_router)
router.include_router(experiences_router)
router.include_router(projects_router)
