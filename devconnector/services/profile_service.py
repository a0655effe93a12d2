from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Type, TypeVar, Union

from beanie import PydanticObjectId
from beanie.operators import In
from pydantic import BaseModel, ValidationError
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from devconnector.models import Education, Experience, Profile, User, SOCIAL_NETWORKS
from devconnector.schemas.pydantic import (
    PASS_THROUGH_FIELDS,
    EducationCreate,
    ExperienceCreate,
    ProfileResponse,
    ProfileUpdate,
)
from devconnector.utils import normalize_url
from .exceptions import ProfileNotFoundError, ProfileValidationError, StorageError
from .sub_collections import prepend, remove_by_id

logger = logging.getLogger(__name__)

NO_PROFILE_MESSAGE = "There is no profile for this user"
PROFILE_NOT_FOUND_MESSAGE = "Profile not found"

_ACCEPTED_KEYS = frozenset(ProfileUpdate.model_fields)

M = TypeVar("M", bound=BaseModel)


def split_skills(skills: Union[List[str], str]) -> List[str]:
    """Keep a list as-is; split a comma-delimited string and trim each element."""
    if isinstance(skills, list):
        return skills
    return [skill.strip() for skill in skills.split(",")]


def build_profile_fields(update: ProfileUpdate) -> Dict[str, Any]:
    """
    Assemble the set of profile fields written by a create-or-update call.

    ``website``, ``skills`` and ``social`` are always written. The other
    allow-listed fields are written only when the client sent them, so
    untouched fields keep their stored value.

    Raises:
        MalformedURLError: If the website or a social link has no usable host
    """
    fields: Dict[str, Any] = {
        "website": normalize_url(update.website, force_https=True, field="website"),
        "skills": split_skills(update.skills),
        "social": {
            network: normalize_url(getattr(update, network), force_https=True, field=network) or None
            for network in SOCIAL_NETWORKS
        },
    }
    for name in PASS_THROUGH_FIELDS:
        if name in update.model_fields_set:
            fields[name] = getattr(update, name)
    return fields


@contextmanager
def _storage_errors(action: str) -> Iterator[None]:
    try:
        yield
    except PyMongoError as e:
        raise StorageError(f"Failed to {action}: {e}") from e


def _parse(model: Type[M], body: Dict[str, Any]) -> M:
    try:
        return model.model_validate(body)
    except ValidationError as e:
        failures = [
            {
                "field": ".".join(str(part) for part in error["loc"]) or "body",
                "message": error["msg"],
            }
            for error in e.errors()
        ]
        raise ProfileValidationError(failures) from e


class ProfileService:
    """Reads and writes the single profile document each user owns."""

    async def get_profile_for_user(self, user_id: PydanticObjectId) -> ProfileResponse:
        profile = await self._find_by_owner(user_id)
        if profile is None:
            raise ProfileNotFoundError(NO_PROFILE_MESSAGE)
        return await self._expand_one(profile)

    async def list_profiles(self) -> List[ProfileResponse]:
        with _storage_errors("list profiles"):
            profiles = await Profile.find_all().to_list()
        return await self._expand(profiles)

    async def get_profile_by_owner(self, raw_user_id: str) -> ProfileResponse:
        """Fetch a profile by its owner's id; a malformed id reads as not found."""
        if not PydanticObjectId.is_valid(raw_user_id):
            logger.debug(f"Malformed owner id {raw_user_id!r}")
            raise ProfileNotFoundError(PROFILE_NOT_FOUND_MESSAGE)

        profile = await self._find_by_owner(PydanticObjectId(raw_user_id))
        if profile is None:
            raise ProfileNotFoundError(PROFILE_NOT_FOUND_MESSAGE)
        return await self._expand_one(profile)

    async def upsert_profile(self, user_id: PydanticObjectId, body: Dict[str, Any]) -> ProfileResponse:
        """
        Create the caller's profile or overwrite the fields named in ``body``.

        The write is one server-side ``find_one_and_update`` with
        ``upsert=True`` keyed on the owner. Schema defaults are only seeded
        when the document is inserted, and the unique index on ``user`` keeps
        a second profile from ever being created.

        Args:
            user_id: Authenticated caller
            body: Request body that already passed PROFILE_RULES

        Returns:
            The persisted profile with its owner expanded
        """
        ignored = sorted(set(body) - _ACCEPTED_KEYS)
        if ignored:
            logger.debug(f"Ignoring non-profile fields for user {user_id}: {ignored}")

        update = _parse(ProfileUpdate, body)
        fields = build_profile_fields(update)
        seed = Profile(user=user_id).model_dump(exclude={"id", "revision_id", "user", *fields})

        with _storage_errors("save profile"):
            raw = await self._upsert_raw(user_id, {"$set": fields, "$setOnInsert": seed})

        profile = Profile.model_validate(raw)
        logger.info(f"Saved profile {profile.id} for user {user_id}")
        return await self._expand_one(profile)

    async def _upsert_raw(self, user_id: PydanticObjectId, update: Dict[str, Any]) -> Dict[str, Any]:
        collection = Profile.get_motor_collection()
        try:
            return await collection.find_one_and_update(
                {"user": user_id}, update, upsert=True, return_document=ReturnDocument.AFTER
            )
        except DuplicateKeyError:
            # a concurrent first save inserted the profile; it now matches
            logger.debug(f"Concurrent profile insert for user {user_id}, retrying as update")
            return await collection.find_one_and_update(
                {"user": user_id}, update, upsert=True, return_document=ReturnDocument.AFTER
            )

    async def add_experience(self, user_id: PydanticObjectId, body: Dict[str, Any]) -> ProfileResponse:
        payload = _parse(ExperienceCreate, body)
        return await self._add_entry(user_id, "experience", Experience(**payload.model_dump()))

    async def remove_experience(self, user_id: PydanticObjectId, exp_id: str) -> ProfileResponse:
        return await self._remove_entry(user_id, "experience", exp_id)

    async def add_education(self, user_id: PydanticObjectId, body: Dict[str, Any]) -> ProfileResponse:
        payload = _parse(EducationCreate, body)
        return await self._add_entry(user_id, "education", Education(**payload.model_dump()))

    async def remove_education(self, user_id: PydanticObjectId, edu_id: str) -> ProfileResponse:
        return await self._remove_entry(user_id, "education", edu_id)

    async def delete_account(self, user_id: PydanticObjectId) -> None:
        """Remove the caller's profile, then the caller's user record."""
        with _storage_errors("delete account"):
            await Profile.find_one(Profile.user == user_id).delete()
            await User.find_one(User.id == user_id).delete()
        # profiles are the only user-owned documents, nothing further to cascade
        logger.info(f"Deleted profile and account for user {user_id}")

    async def _add_entry(self, user_id: PydanticObjectId, collection: str, entry: BaseModel) -> ProfileResponse:
        profile = await self._find_by_owner(user_id)
        if profile is None:
            raise ProfileNotFoundError(NO_PROFILE_MESSAGE)

        setattr(profile, collection, prepend(getattr(profile, collection), entry))
        with _storage_errors(f"add {collection} entry"):
            await profile.save()

        logger.info(f"Added {collection} entry {entry.id} to profile {profile.id}")
        return await self._expand_one(profile)

    async def _remove_entry(self, user_id: PydanticObjectId, collection: str, entry_id: str) -> ProfileResponse:
        profile = await self._find_by_owner(user_id)
        if profile is None:
            raise ProfileNotFoundError(NO_PROFILE_MESSAGE)

        entries = getattr(profile, collection)
        remaining = remove_by_id(entries, entry_id)
        if len(remaining) == len(entries):
            logger.debug(f"No {collection} entry {entry_id!r} on profile {profile.id}")

        setattr(profile, collection, remaining)
        with _storage_errors(f"remove {collection} entry"):
            await profile.save()
        return await self._expand_one(profile)

    async def _find_by_owner(self, user_id: PydanticObjectId) -> Optional[Profile]:
        with _storage_errors("load profile"):
            return await Profile.find_one(Profile.user == user_id)

    async def _expand_one(self, profile: Profile) -> ProfileResponse:
        return (await self._expand([profile]))[0]

    async def _expand(self, profiles: List[Profile]) -> List[ProfileResponse]:
        if not profiles:
            return []
        owner_ids = list({profile.user for profile in profiles})
        with _storage_errors("load profile owners"):
            owners = await User.find(In(User.id, owner_ids)).to_list()
        owners_by_id = {owner.id: owner for owner in owners}
        return [
            ProfileResponse.from_document(profile, owners_by_id.get(profile.user))
            for profile in profiles
        ]
