"""Shared base for schemas that are filled from untrusted oracle output."""

import types
import typing

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

_TRUE_WORDS = {"true", "yes", "y", "1", "present", "current", "ongoing"}
_FALSE_WORDS = {"false", "no", "n", "0", ""}


def _literal_values(annotation: typing.Any) -> tuple:
    """Allowed values of a ``Literal`` annotation, looking inside ``X | None``."""
    origin = typing.get_origin(annotation)
    if origin is typing.Literal:
        return typing.get_args(annotation)
    if origin in (typing.Union, types.UnionType):
        for arg in typing.get_args(annotation):
            values = _literal_values(arg)
            if values:
                return values
    return ()


def _fold_literal(value: typing.Any, allowed: tuple, default: typing.Any) -> typing.Any:
    """Case-fold ``value`` onto one of ``allowed``; unknown values become ``default``."""
    if not isinstance(value, str):
        return value if value in allowed else default
    folded = value.strip().lower()
    if folded in allowed:
        return folded
    # "Full Time" / "full_time" -> "full-time"
    hyphenated = "-".join(folded.replace("_", " ").split())
    return hyphenated if hyphenated in allowed else default


def _coerce_bool(value: typing.Any, default: typing.Any) -> typing.Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        folded = value.strip().lower()
        if folded in _TRUE_WORDS:
            return True
        if folded in _FALSE_WORDS:
            return False
    return default


class LenientModel(BaseModel):
    """Accepts snake_case or camelCase keys and repairs common LLM quirks.

    - ``null`` for a defaulted field becomes the field default
    - a bare string where a list is expected becomes a one-item list
    - ``null`` items inside lists are dropped
    - numbers are accepted for string fields
    - enum-like (``Literal``) values are case-folded; unknown ones become the default
    - booleans accept yes/no style words; anything else becomes the default
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def _repair(cls, value: typing.Any, info: ValidationInfo) -> typing.Any:
        field = cls.model_fields[info.field_name]
        if field.is_required():
            return value
        if value is None:
            return field.get_default(call_default_factory=True)

        annotation = field.annotation
        if typing.get_origin(annotation) is list:
            if isinstance(value, str):
                return [value] if value.strip() else []
            if isinstance(value, (list, tuple)):
                return [item for item in value if item is not None]
            return value

        allowed = _literal_values(annotation)
        if allowed:
            return _fold_literal(value, allowed, field.get_default(call_default_factory=True))
        if annotation is bool:
            return _coerce_bool(value, field.get_default(call_default_factory=True))
        return value
