from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Union

from beanie import PydanticObjectId
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from devconnector.models import Education, Experience, Profile, Social, User


# Top-level profile fields a client may overwrite verbatim; everything else
# in the body is ignored.
PASS_THROUGH_FIELDS = ("company", "location", "status", "bio", "githubusername")


class ProfileUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: str
    skills: Union[List[str], str]
    company: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    website: Optional[str] = None
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None
    facebook: Optional[str] = None


class ExperienceCreate(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str
    company: str
    location: Optional[str] = None
    from_: datetime = Field(..., alias="from")
    to: Optional[datetime] = None
    current: bool = False
    description: Optional[str] = None


class EducationCreate(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    school: str
    degree: str
    field_of_study: str = Field(
        ..., validation_alias=AliasChoices("fieldOfStudy", "fieldofstudy", "field_of_study")
    )
    from_: datetime = Field(..., alias="from")
    to: Optional[datetime] = None
    current: bool = False
    description: Optional[str] = None


class OwnerSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: PydanticObjectId = Field(..., alias="_id")
    name: str
    avatar: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "OwnerSummary":
        return cls(id=user.id, name=user.name, avatar=user.avatar)


class ProfileResponse(BaseModel):
    """Profile as returned to clients, with the owner expanded to name and avatar."""
    model_config = ConfigDict(populate_by_name=True)

    id: PydanticObjectId = Field(..., alias="_id")
    user: Optional[OwnerSummary] = None
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
    date: datetime

    @classmethod
    def from_document(cls, profile: Profile, owner: Optional[User]) -> "ProfileResponse":
        data = profile.model_dump(exclude={"user", "revision_id"})
        data["user"] = OwnerSummary.from_user(owner) if owner else None
        return cls.model_validate(data)


class MessageResponse(BaseModel):
    msg: str
