from __future__ import annotations

from datetime import datetime
from typing import Optional, List

from beanie import Document, PydanticObjectId
from pydantic import BaseModel, ConfigDict, Field
from pymongo import ASCENDING, IndexModel


SOCIAL_NETWORKS = ("youtube", "twitter", "instagram", "linkedin", "facebook")


class Social(BaseModel):
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None
    facebook: Optional[str] = None


class Experience(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: PydanticObjectId = Field(default_factory=PydanticObjectId, alias="_id")
    title: str
    company: str
    location: Optional[str] = None
    from_: datetime = Field(..., alias="from")
    to: Optional[datetime] = None
    current: bool = False
    description: Optional[str] = None


class Education(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: PydanticObjectId = Field(default_factory=PydanticObjectId, alias="_id")
    school: str
    degree: str
    field_of_study: str = Field(..., alias="fieldOfStudy")
    from_: datetime = Field(..., alias="from")
    to: Optional[datetime] = None
    current: bool = False
    description: Optional[str] = None


class Profile(Document):
    """One developer profile per user, keyed by the owning user's id.

    ``experience`` and ``education`` are kept newest first.
    """
    user: PydanticObjectId
    company: Optional[str] = None
    website: str = ""
    location: Optional[str] = None
    status: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    social: Social = Field(default_factory=Social)
    experience: List[Experience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    date: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "profile"
        indexes = [
            IndexModel([("user", ASCENDING)], unique=True),
        ]
