"""API routes, mounted under settings.API_PREFIX."""

from fastapi import APIRouter

from reviewgate.api import auth, change_password, health, users

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(change_password.router, prefix="/change-password", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(health.router, prefix="/health", tags=["health"])
