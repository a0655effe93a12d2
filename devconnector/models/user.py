from __future__ import annotations

from datetime import datetime, timedelta, timezone
import jwt
from typing import Optional
from beanie import Document
from pydantic import Field, EmailStr
from devconnector.core.config import settings


class User(Document):
    name: str
    email: EmailStr
    avatar: Optional[str] = None
    date: datetime = Field(default_factory=datetime.utcnow)

    def generate_jwt(self, expires_minutes: Optional[int] = None) -> str:
        """Generate an access token carrying this user's id."""
        minutes = expires_minutes or settings.JWT_EXPIRE_MINUTES
        expiration = datetime.now(timezone.utc) + timedelta(minutes=minutes)

        payload = {
            "user": {"id": str(self.id)},
            "exp": int(expiration.timestamp()),
        }

        return jwt.encode(
            payload,
            settings.JWT_SECRET_KEY,
            algorithm="HS256"
        )

    class Settings:
        name = "users"  # MongoDB collection name
