"""Validation of JSON objects describing a person record."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

COLUMNS: tuple[str, ...] = (
    "id",
    "job_id",
    "department_id",
    "manager_id",
    "first_name",
    "last_name",
    "hire_date",
)

_INT_FIELDS = frozenset({0, 1, 2, 3})
_STRING_FIELDS = frozenset({4, 5, 6})
_LIMITED_STRING_FIELDS = frozenset({4, 5})
_MAX_STRING_LENGTH = 50
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class ValidationError(ValueError):
    """Raised when a JSON object does not describe a valid person."""


def _is_int(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return _INT32_MIN <= value <= _INT32_MAX
    if isinstance(value, float):
        return value.is_integer() and _INT32_MIN <= value <= _INT32_MAX
    return False


def _members(data: Any, *, strict: bool) -> Mapping[str, Any]:
    if data is None:
        return {}
    if isinstance(data, Mapping):
        return data
    if strict:
        raise ValidationError("The JSON value must be an object")
    raise TypeError("The JSON value must be an object")


def _check_masquerading(masquerading: Sequence[str]) -> None:
    if len(masquerading) != len(COLUMNS):
        raise ValidationError("Bad masquerading vector")


def validate_field(
    index: int, field_name: str, value: Any, is_for_creation: bool
) -> None:
    """Check one column value; raise :class:`ValidationError` if it is invalid."""
    if not 0 <= index < len(COLUMNS):
        raise ValidationError("Internal error in the server")
    if value is None:
        raise ValidationError(f"The {field_name} column cannot be null")
    if index == 0 and is_for_creation:
        raise ValidationError("The automatic primary key cannot be set")
    if index in _INT_FIELDS and not _is_int(value):
        raise ValidationError(f"Type error in the {field_name} field")
    if index in _STRING_FIELDS and not isinstance(value, str):
        raise ValidationError(f"Type error in the {field_name} field")
    if (
        index in _LIMITED_STRING_FIELDS
        and len(value.encode("utf-8")) > _MAX_STRING_LENGTH
    ):
        raise ValidationError(
            f"String length exceeds limit for the {field_name} field "
            f"(the maximum value is {_MAX_STRING_LENGTH})"
        )


def validate_for_creation(data: Any) -> None:
    """Check that ``data`` can create a new person."""
    members = _members(data, strict=False)
    for index, name in enumerate(COLUMNS):
        if name in members:
            validate_field(index, name, members[name], True)
        elif index != 0:
            raise ValidationError(f"The {name} column cannot be null")


def validate_masqueraded_for_creation(
    data: Any, masquerading: Sequence[str]
) -> None:
    """Check ``data`` for creation, reading columns under the given aliases."""
    _check_masquerading(masquerading)
    members = _members(data, strict=True)
    for index, alias in enumerate(masquerading):
        if not alias:
            continue
        if alias in members:
            validate_field(index, alias, members[alias], True)
        elif index != 0:
            raise ValidationError(f"The {alias} column cannot be null")


def validate_for_update(data: Any) -> None:
    """Check that ``data`` can update an existing person."""
    members = _members(data, strict=False)
    if COLUMNS[0] not in members:
        raise ValidationError(
            "The value of primary key must be set in the json object for update"
        )
    for index, name in enumerate(COLUMNS):
        if name in members:
            validate_field(index, name, members[name], False)


def validate_masqueraded_for_update(
    data: Any, masquerading: Sequence[str]
) -> None:
    """Check ``data`` for update, reading columns under the given aliases."""
    _check_masquerading(masquerading)
    members = _members(data, strict=True)
    primary = masquerading[0]
    if not primary or primary not in members:
        raise ValidationError(
            "The value of primary key must be set in the json object for update"
        )
    for index, alias in enumerate(masquerading):
        if alias and alias in members:
            validate_field(index, alias, members[alias], False)