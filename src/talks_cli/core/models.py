"""
Talk record model and its JSON codec.

The registry exchanges talks as JSON objects with exactly five fields
(``id``, ``name``, ``type``, ``desc``, ``hidden``); a listing is a JSON
array of such objects.
"""

from typing import Any, Iterable, List, Union
import json
import logging

from pydantic import (
    BaseModel,
    ConfigDict,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from .errors import DecodeError

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class Talk(BaseModel):
    """A scheduled presentation as stored by the registry."""

    model_config = ConfigDict(extra="ignore")

    id: int = 0
    name: str = ""
    type: str = ""
    desc: str = ""
    hidden: bool = False

    @field_validator("*", mode="before")
    @classmethod
    def null_as_zero_value(cls, v: Any, info: ValidationInfo) -> Any:
        """Treat JSON null as the field's zero value."""
        if v is None:
            return cls.model_fields[info.field_name].get_default()
        return v

    def display_line(self) -> str:
        """Render the talk the way the listing prints it."""
        return f"[{self.type}]: {self.desc} by {self.name}"


_TALK_LIST = TypeAdapter(List[Talk])


def decode_talks(body: Union[bytes, str]) -> List[Talk]:
    """
    Decode a registry listing into talk records.

    Unknown fields are ignored and missing ones take their zero value.
    A ``null`` body decodes as an empty listing.

    Raises:
        DecodeError: If the body is not a JSON array of talk objects
    """
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")

    try:
        raw = json.loads(body)
    except ValueError as e:
        raise DecodeError(f"Response is not valid JSON: {e}", original_error=e) from e

    if raw is None:
        return []
    if not isinstance(raw, list):
        raise DecodeError(f"Expected a JSON array of talks, got {type(raw).__name__}")

    try:
        talks = _TALK_LIST.validate_python(raw)
    except ValidationError as e:
        raise DecodeError(
            f"Response is not a list of talks: {e.error_count()} invalid field(s)",
            errors=e.errors(include_url=False),
            original_error=e,
        ) from e

    logger.debug(f"Decoded {len(talks)} talk(s)")
    return talks


def encode_talk(talk: Talk) -> bytes:
    """Encode a talk as a compact JSON object followed by a newline."""
    return (talk.model_dump_json() + "\n").encode("utf-8")


def sort_by_type(talks: Iterable[Talk]) -> List[Talk]:
    """Order talks by category, keeping server order within a category."""
    return sorted(talks, key=lambda talk: talk.type)


def filter_by_type(talks: Iterable[Talk], talk_type: str) -> List[Talk]:
    """Keep only talks whose category matches exactly."""
    return [talk for talk in talks if talk.type == talk_type]
