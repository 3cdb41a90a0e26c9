from typing import Any, ClassVar
from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class ORMModel(BaseModel):
    """Response model read from ORM objects and rendered with camelCase keys."""
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class InputModel(BaseModel):
    """Request payload; strings are trimmed and blank strings count as missing."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # kept exactly as sent, only an empty string counts as missing
    verbatim_fields: ClassVar[frozenset[str]] = frozenset()

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any, info: ValidationInfo) -> Any:
        if not isinstance(v, str):
            return v
        if info.field_name not in cls.verbatim_fields:
            v = v.strip()
        return v or None


class MessageOut(BaseModel):
    message: str
