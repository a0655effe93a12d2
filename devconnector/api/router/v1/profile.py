from typing import Any, Dict, List

from beanie import PydanticObjectId
from fastapi import APIRouter, Depends

from devconnector.api.dependencies import (
    get_current_user_id,
    get_github_service,
    get_profile_service,
)
from devconnector.core.validation import (
    EDUCATION_RULES,
    EXPERIENCE_RULES,
    PROFILE_RULES,
    validated_body,
)
from devconnector.schemas.pydantic import MessageResponse, ProfileResponse
from devconnector.services.github_service import GithubService
from devconnector.services.profile_service import ProfileService

profile_router = APIRouter()


@profile_router.get("/me", response_model=ProfileResponse)
async def read_my_profile(
    user_id: PydanticObjectId = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    """Current user's profile."""
    return await service.get_profile_for_user(user_id)


@profile_router.post("", response_model=ProfileResponse)
async def upsert_profile(
    user_id: PydanticObjectId = Depends(get_current_user_id),
    body: Dict[str, Any] = Depends(validated_body(PROFILE_RULES)),
    service: ProfileService = Depends(get_profile_service),
):
    """Create or update the current user's profile."""
    return await service.upsert_profile(user_id, body)


@profile_router.get("", response_model=List[ProfileResponse])
async def list_profiles(service: ProfileService = Depends(get_profile_service)):
    return await service.list_profiles()


@profile_router.get("/user/{user_id}", response_model=ProfileResponse)
async def read_profile_by_user(
    user_id: str,
    service: ProfileService = Depends(get_profile_service),
):
    return await service.get_profile_by_owner(user_id)


@profile_router.delete("", response_model=MessageResponse)
async def delete_account(
    user_id: PydanticObjectId = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    """Delete the current user's profile and account."""
    await service.delete_account(user_id)
    return MessageResponse(msg="User deleted")


@profile_router.put("/experience", response_model=ProfileResponse)
async def add_experience(
    user_id: PydanticObjectId = Depends(get_current_user_id),
    body: Dict[str, Any] = Depends(validated_body(EXPERIENCE_RULES)),
    service: ProfileService = Depends(get_profile_service),
):
    return await service.add_experience(user_id, body)


@profile_router.delete("/experience/{exp_id}", response_model=ProfileResponse)
async def remove_experience(
    exp_id: str,
    user_id: PydanticObjectId = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    return await service.remove_experience(user_id, exp_id)


@profile_router.put("/education", response_model=ProfileResponse)
async def add_education(
    user_id: PydanticObjectId = Depends(get_current_user_id),
    body: Dict[str, Any] = Depends(validated_body(EDUCATION_RULES)),
    service: ProfileService = Depends(get_profile_service),
):
    return await service.add_education(user_id, body)


@profile_router.delete("/education/{edu_id}", response_model=ProfileResponse)
async def remove_education(
    edu_id: str,
    user_id: PydanticObjectId = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    return await service.remove_education(user_id, edu_id)


@profile_router.get("/github/{username}")
async def read_github_repositories(
    username: str,
    github: GithubService = Depends(get_github_service),
):
    """Most recent public repositories for a GitHub user."""
    return await github.list_repositories(username)
