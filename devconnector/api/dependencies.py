from typing import Optional

import jwt
from beanie import PydanticObjectId
from bson.errors import InvalidId
from fastapi import Header

from devconnector.core.config import settings
from devconnector.services.exceptions import AuthenticationError
from devconnector.services.github_service import GithubService
from devconnector.services.profile_service import ProfileService


async def get_current_user_id(
    x_auth_token: Optional[str] = Header(None, alias="x-auth-token"),
    authorization: Optional[str] = Header(None),
) -> PydanticObjectId:
    """
    Resolve the caller from the ``x-auth-token`` header (or a Bearer
    ``Authorization`` header) and reject the request when it is missing or invalid.
    """
    token = x_auth_token
    if not token and authorization and authorization.lower().startswith("bearer "):
        token = authorization[len("bearer "):].strip()
    if not token:
        raise AuthenticationError("No token, authorization denied")

    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=["HS256"])
        return PydanticObjectId(payload["user"]["id"])
    except (jwt.PyJWTError, KeyError, TypeError, InvalidId) as e:
        raise AuthenticationError("Token is not valid") from e


def get_profile_service() -> ProfileService:
    return ProfileService()


def get_github_service() -> GithubService:
    return GithubService(
        token=settings.GITHUB_TOKEN,
        base_url=settings.GITHUB_API_URL,
        timeout=settings.GITHUB_TIMEOUT_SECONDS,
    )
