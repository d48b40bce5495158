"""
Typed field structure for a post.

Replaces free-form dictionaries: only the recognized post fields are read from a
mapping. ``url`` and ``title`` must be non-empty strings and ``date`` must already
be a datetime; the optional fields are coerced rather than rejected.
"""
import logging
from datetime import datetime
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

logger = logging.getLogger(__name__)

POST_FIELDS = ('url', 'title', 'notes', 'others', 'tags', 'date', 'shared', 'hash')


class PostValues(BaseModel):
    model_config = ConfigDict(extra='ignore')

    url: str = Field(min_length=1)
    title: str = Field(min_length=1)
    notes: str = ''
    others: Optional[int] = None
    tags: List[str] = Field(default_factory=list)
    # Must already be a datetime; strings are not parsed here.
    date: Optional[datetime] = Field(None, strict=True)
    shared: bool = True
    hash: Optional[str] = None

    @field_validator('notes', 'hash', mode='before')
    @classmethod
    def _as_string(cls, value):
        return value if value is None else str(value)

    @field_validator('shared', mode='before')
    @classmethod
    def _as_bool(cls, value):
        return bool(value)

    @field_validator('others', mode='before')
    @classmethod
    def _as_count(cls, value):
        if value is None:
            return None
        try:
            return max(int(value), 0)
        except (TypeError, ValueError):
            return 0

    @field_validator('tags', mode='before')
    @classmethod
    def _as_tag_list(cls, value):
        if isinstance(value, str):
            return [value]
        try:
            return [str(tag) for tag in value]
        except TypeError:
            return [str(value)]

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> 'PostValues':
        """Build from a mapping, ignoring unknown keys and keys set to None."""
        if isinstance(values, cls):
            # Re-validate: instances made with model_construct() skip validation.
            values = {key: getattr(values, key, None) for key in POST_FIELDS}
        if not isinstance(values, Mapping):
            logger.warning(f"Rejected post values of type {type(values).__name__}")
            raise ValidationError("Post values must be a mapping with at least 'url' and 'title'")

        data = {key: values[key] for key in POST_FIELDS if values.get(key) is not None}
        try:
            return cls(**data)
        except PydanticValidationError as e:
            logger.warning(f"Invalid post values for {data.get('url')!r}: {e.error_count()} error(s)")
            raise ValidationError("Invalid post values", e.errors()) from e
