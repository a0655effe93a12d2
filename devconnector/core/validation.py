"""Declarative presence checks run against request bodies before any
persistence logic executes.

Each rule names a field and the message reported when that field is missing
or empty. Rules are evaluated in declaration order and every failure is
collected, so the client sees all problems at once.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from fastapi import Body, Request
from pydantic import BaseModel, ConfigDict

from devconnector.services.exceptions import ProfileValidationError

logger = logging.getLogger(__name__)


class Rule(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str
    message: str
    aliases: Tuple[str, ...] = ()

    def value_from(self, body: Dict[str, Any]) -> Any:
        for name in (self.field, *self.aliases):
            if name in body:
                return body[name]
        return None


def check(field_name: str, message: str, *aliases: str) -> Rule:
    """Require ``field_name`` (or one of its aliases) to be present and non-empty."""
    return Rule(field=field_name, message=message, aliases=tuple(aliases))


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def validate(body: Dict[str, Any], rules: Sequence[Rule]) -> List[Dict[str, str]]:
    """Return the ordered ``{field, message}`` failures for ``body``; empty means valid."""
    return [
        {"field": rule.field, "message": rule.message}
        for rule in rules
        if is_empty(rule.value_from(body))
    ]


PROFILE_RULES = (
    check("status", "Status is required"),
    check("skills", "Skills is required"),
)

EXPERIENCE_RULES = (
    check("title", "Title is required"),
    check("company", "Company is required"),
    check("from", "From date is required"),
)

EDUCATION_RULES = (
    check("school", "School is required"),
    check("degree", "Degree is required"),
    check("fieldOfStudy", "Field of study is required", "fieldofstudy"),
    check("from", "From date is required"),
)


def validated_body(rules: Sequence[Rule]):
    """
    Build a FastAPI dependency that enforces ``rules`` on the JSON body.

    FastAPI parses the body, so unparseable or non-object JSON surfaces as a
    RequestValidationError. The dependency raises ProfileValidationError on
    any rule failure, so route handlers only ever receive a body that passed
    every rule.
    """

    async def dependency(request: Request, body: Optional[Dict[str, Any]] = Body(None)) -> Dict[str, Any]:
        body = body or {}
        failures = validate(body, rules)
        if failures:
            logger.info(f"Rejected {request.method} {request.url.path}: {failures}")
            raise ProfileValidationError(failures)
        return body

    return dependency
