from fastapi import APIRouter

from .profile import profile_router


v1_router = APIRouter(prefix="/api")
v1_router.include_router(profile_router, prefix="/profile", tags=["profile"])


__all__ = ["v1_router"]
