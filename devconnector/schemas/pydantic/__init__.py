from .profile import (
    PASS_THROUGH_FIELDS,
    ProfileUpdate,
    ExperienceCreate,
    EducationCreate,
    OwnerSummary,
    ProfileResponse,
    MessageResponse,
)

__all__ = [
    "PASS_THROUGH_FIELDS",
    "ProfileUpdate",
    "ExperienceCreate",
    "EducationCreate",
    "OwnerSummary",
    "ProfileResponse",
    "MessageResponse",
]
