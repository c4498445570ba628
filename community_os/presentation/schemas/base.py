"""
Request validation schemas.

Bodies arrive camelCase (postId) and are exposed snake_case (post_id).
Field helpers attach the user-facing messages that end up in the
400 {"error": "Validation error", "details": [...]} response.
"""

import re
from typing import Annotated, Optional, Type, TypeVar

from fastapi.exceptions import RequestValidationError
from pydantic import AfterValidator, ConfigDict, ValidationError

from community_os.application.dto.base import CamelModel
from community_os.domain.value_objects import HEX_COLOR_PATTERN, is_web_url

SchemaT = TypeVar("SchemaT", bound="RequestSchema")


class RequestSchema(CamelModel):
    model_config = ConfigDict(extra="ignore")


# Canonical 8-4-4-4-12 form only; braces, urn: prefixes and bare hex are rejected
UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}\Z"
)


def _uuid_check(message: str):
    def check(value: str) -> str:
        if not UUID_PATTERN.match(value):
            raise ValueError(message)
        return value

    return check


def UUIDString(message: str = "Must be a valid UUID"):
    return Annotated[str, AfterValidator(_uuid_check(message))]


def BoundedText(
    label: str,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    strip: bool = True,
    pattern: Optional[str] = None,
    pattern_message: Optional[str] = None,
):
    compiled = re.compile(pattern) if pattern else None

    def check(value: str) -> str:
        text = value.strip() if strip else value
        if min_length is not None and len(text) < min_length:
            if min_length == 1:
                raise ValueError(f"{label} is required")
            raise ValueError(f"{label} must be at least {min_length} characters")
        if max_length is not None and len(text) > max_length:
            raise ValueError(f"{label} must not exceed {max_length} characters")
        if compiled is not None and not compiled.match(text):
            raise ValueError(pattern_message or f"{label} has an invalid format")
        return text

    return Annotated[str, AfterValidator(check)]


def _required_id(label: str):
    def check(value: str) -> str:
        if not value or not value.strip():
            raise ValueError(f"{label} is required")
        return value.strip()

    return check


def RequiredId(label: str):
    """Opaque identifier (identity-provider subjects are not always UUIDs)."""
    return Annotated[str, AfterValidator(_required_id(label))]


def _web_url(label: str):
    def check(value: str) -> str:
        if not is_web_url(value):
            raise ValueError(f"{label} must be a valid http(s) URL")
        return value

    return check


def WebUrl(label: str):
    return Annotated[str, AfterValidator(_web_url(label))]


def _hex_color(value: str) -> str:
    if not HEX_COLOR_PATTERN.match(value):
        raise ValueError("Primary color must be a hex color (#RGB or #RRGGBB)")
    return value


HexColorString = Annotated[str, AfterValidator(_hex_color)]


def parse_params(schema: Type[SchemaT], **params) -> SchemaT:
    """Validate query parameters, reporting failures like body validation."""
    try:
        return schema.model_validate(params)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False, include_context=False)) from e
