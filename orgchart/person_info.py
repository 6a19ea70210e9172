"""Read-only view of a person joined with job, department and manager."""

from __future__ import annotations

import datetime as _dt
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable

from .person import parse_date

_INT32_SPAN = 2**32
_INT32_MIN = -(2**31)

_POSITIONAL_COLUMNS: tuple[str, ...] = (
    "id",
    "job_id",
    "department_id",
    "manager_id",
    "first_name",
    "last_name",
    "hire_date",
    "job_title",
    "department_name",
    "manager_full_name",
)


def _int32(value: Any) -> int:
    if isinstance(value, str):
        value = value.strip()
    return (int(value) - _INT32_MIN) % _INT32_SPAN + _INT32_MIN


def _text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def _date(value: Any) -> _dt.date:
    if isinstance(value, _dt.datetime):
        return value.date()
    if isinstance(value, _dt.date):
        return value
    return parse_date(_text(value))


_CONVERTERS: dict[str, Callable[[Any], Any]] = {
    "id": _int32,
    "job_id": _int32,
    "department_id": _int32,
    "manager_id": _int32,
    "first_name": _text,
    "last_name": _text,
    "hire_date": _date,
    "job_title": _text,
    "department_name": _text,
    "manager_full_name": _text,
}


@dataclass(frozen=True)
class PersonInfo:
    """A person row together with the names of related records."""

    id: int | None = None
    job_id: int | None = None
    job_title: str | None = None
    department_id: int | None = None
    department_name: str | None = None
    manager_id: int | None = None
    manager_full_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    hire_date: _dt.date | None = None

    @classmethod
    def from_row(cls, row: Any, index_offset: int = 0) -> PersonInfo:
        """Build from a result row.

        A negative offset reads columns by name from a mapping; otherwise
        the ten columns are read by position starting at ``index_offset``.
        """
        if index_offset < 0:
            if not isinstance(row, Mapping):
                raise TypeError("Named access needs a mapping row")
            raw = {name: row[name] for name in _POSITIONAL_COLUMNS}
        else:
            if not isinstance(row, Sequence) or isinstance(row, str):
                raise TypeError("Positional access needs a sequence row")
            if index_offset + len(_POSITIONAL_COLUMNS) > len(row):
                raise ValueError("Invalid SQL result for this model")
            raw = {
                name: row[index_offset + index]
                for index, name in enumerate(_POSITIONAL_COLUMNS)
            }
        values = {
            name: None if value is None else _CONVERTERS[name](value)
            for name, value in raw.items()
        }
        return cls(**values)

    def to_json(self) -> dict[str, Any]:
        """Return the columns as a JSON object, with ``None`` for nulls.

        A null department name is left out of the object.
        """
        result: dict[str, Any] = {
            "id": self.id,
            "job_id": self.job_id,
            "job_title": self.job_title,
            "department_id": self.department_id,
        }
        if self.department_name is not None:
            result["department_name"] = self.department_name
        result.update(
            manager_id=self.manager_id,
            manager_full_name=self.manager_full_name,
            first_name=self.first_name,
            last_name=self.last_name,
            hire_date=None if self.hire_date is None else self.hire_date.isoformat(),
        )
        return result