"""The person record: column values, dirty tracking and JSON conversion."""

from __future__ import annotations

import datetime as _dt
import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any, Callable

from .person_validation import COLUMNS, ValidationError

_log = logging.getLogger(__name__)

_DATE_PREFIX = re.compile(r"\s*(\d{1,4})-(\d{1,2})-(\d{1,2})")
_INT32_SPAN = 2**32
_INT32_MIN = -(2**31)


def parse_date(text: str) -> _dt.date:
    """Parse a ``YYYY-MM-DD`` date; anything after the day is ignored."""
    match = _DATE_PREFIX.match(text)
    if match is None:
        raise ValueError(f"Invalid date: {text!r}")
    year, month, day = (int(part) for part in match.groups())
    return _dt.date(year, month, day)


def _to_int32(value: Any) -> int:
    if isinstance(value, str):
        value = value.strip()
    number = int(value)
    return (number - _INT32_MIN) % _INT32_SPAN + _INT32_MIN


def _to_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to a string")


def _to_date(value: Any) -> _dt.date:
    if isinstance(value, _dt.datetime):
        return value.date()
    if isinstance(value, _dt.date):
        return value
    return parse_date(_to_string(value))


_CONVERTERS: tuple[Callable[[Any], Any], ...] = (
    _to_int32,
    _to_int32,
    _to_int32,
    _to_int32,
    _to_string,
    _to_string,
    _to_date,
)


def _members(data: Any) -> Mapping[str, Any]:
    if data is None:
        return {}
    if isinstance(data, Mapping):
        return data
    raise TypeError("The JSON value must be an object")


def _check_masquerading(masquerading: Sequence[str]) -> None:
    if len(masquerading) != len(COLUMNS):
        raise ValidationError("Bad masquerading vector")


class _Column:
    """A column attribute; assigning to it marks the column as changed."""

    def __init__(self, index: int) -> None:
        self.index = index

    def __get__(self, obj: Person | None, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return obj._values[self.index]

    def __set__(self, obj: Person, value: Any) -> None:
        obj._assign(self.index, value)
        obj._dirty[self.index] = True


class Person:
    """One row of the ``person`` table."""

    table_name = "person"
    primary_key_name = "id"
    column_count = len(COLUMNS)

    id = _Column(0)
    job_id = _Column(1)
    department_id = _Column(2)
    manager_id = _Column(3)
    first_name = _Column(4)
    last_name = _Column(5)
    hire_date = _Column(6)

    def __init__(self) -> None:
        self._values: list[Any] = [None] * len(COLUMNS)
        self._dirty: list[bool] = [False] * len(COLUMNS)

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={value!r}" for name, value in zip(COLUMNS, self._values)
        )
        return f"Person({fields})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self._values == other._values and self._dirty == other._dirty

    def _assign(self, index: int, value: Any) -> None:
        self._values[index] = None if value is None else _CONVERTERS[index](value)

    @property
    def values(self) -> tuple[Any, ...]:
        """Column values in table order; ``None`` stands for null."""
        return tuple(self._values)

    @property
    def dirty(self) -> tuple[bool, ...]:
        """Per-column flags telling which columns were set."""
        return tuple(self._dirty)

    @property
    def primary_key(self) -> int:
        """The id; raises :class:`LookupError` if it is null."""
        if self._values[0] is None:
            raise LookupError("The primary key is not set")
        return self._values[0]

    @staticmethod
    def column_name(index: int) -> str:
        """Return the name of the column at ``index``."""
        if not 0 <= index < len(COLUMNS):
            raise IndexError(f"Column index out of range: {index}")
        return COLUMNS[index]

    @classmethod
    def from_row(cls, row: Any, index_offset: int = 0) -> Person:
        """Build a person from a result row.

        A negative offset reads columns by name from a mapping; otherwise
        columns are read by position starting at ``index_offset``.
        """
        person = cls()
        if index_offset < 0:
            for index, name in enumerate(COLUMNS):
                value = row[name]
                if value is not None:
                    person._assign(index, value)
            return person
        if index_offset + len(COLUMNS) > len(row):
            raise ValueError("Invalid SQL result for this model")
        for index in range(len(COLUMNS)):
            value = row[index_offset + index]
            if value is not None:
                person._assign(index, value)
        return person

    @classmethod
    def from_json(cls, data: Any) -> Person:
        """Build a person from a JSON object keyed by column names."""
        person = cls()
        members = _members(data)
        for index, name in enumerate(COLUMNS):
            if name in members:
                person._dirty[index] = True
                if members[name] is not None:
                    person._assign(index, members[name])
        return person

    @classmethod
    def from_masqueraded_json(
        cls, data: Any, masquerading: Sequence[str]
    ) -> Person:
        """Build a person from a JSON object keyed by column aliases."""
        _check_masquerading(masquerading)
        person = cls()
        members = _members(data)
        for index, alias in enumerate(masquerading):
            if alias and alias in members:
                person._dirty[index] = True
                if members[alias] is not None:
                    person._assign(index, members[alias])
        return person

    def update_by_json(self, data: Any) -> None:
        """Update columns present in ``data``; the id is never marked changed."""
        members = _members(data)
        for index, name in enumerate(COLUMNS):
            if name in members:
                if index != 0:
                    self._dirty[index] = True
                if members[name] is not None:
                    self._assign(index, members[name])

    def update_by_masqueraded_json(
        self, data: Any, masquerading: Sequence[str]
    ) -> None:
        """Update columns present in ``data`` under the given aliases."""
        _check_masquerading(masquerading)
        members = _members(data)
        for index, alias in enumerate(masquerading):
            if alias and alias in members:
                if index != 0:
                    self._dirty[index] = True
                if members[alias] is not None:
                    self._assign(index, members[alias])

    def _json_value(self, index: int) -> Any:
        value = self._values[index]
        if value is not None and index == 6:
            return value.isoformat()
        return value

    def to_json(self) -> dict[str, Any]:
        """Return all columns as a JSON object, with ``None`` for nulls."""
        return {name: self._json_value(index) for index, name in enumerate(COLUMNS)}

    def to_masqueraded_json(self, masquerading: Sequence[str]) -> dict[str, Any]:
        """Return columns under the given aliases; empty aliases are skipped.

        An alias list of the wrong length falls back to :meth:`to_json`.
        """
        if len(masquerading) != len(COLUMNS):
            _log.error("Masquerade failed")
            return self.to_json()
        return {
            alias: self._json_value(index)
            for index, alias in enumerate(masquerading)
            if alias
        }