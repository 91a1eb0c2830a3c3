import re
from typing import Any
from uuid import UUID
from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

INVISIBLE_CHARS_PATTERN = re.compile(
    r"[\u200e\u200f\u202a-\u202e\u2066-\u2069\ufeff]")


def deep_clean(value: Any):
    """Recursively strip strings, drop invisible chars and turn blanks into None."""

    if isinstance(value, dict):
        return {k: deep_clean(v) for k, v in value.items()}

    if isinstance(value, list):
        return [deep_clean(v) for v in value]

    if isinstance(value, str):
        cleaned = INVISIBLE_CHARS_PATTERN.sub("", value).strip()
        return None if cleaned == "" else cleaned

    if isinstance(value, UUID):
        return value

    return value


class EmptyStringModel(BaseModel):
    """Request body base: camelCase or snake_case keys, blank strings become None."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @model_validator(mode="before")
    @classmethod
    def clean_input(cls, values):
        if isinstance(values, dict):
            return deep_clean(values)
        return values
