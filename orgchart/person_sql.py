"""SQL statements and bound arguments for storing person records."""

from __future__ import annotations

from typing import Any, NamedTuple

from .person import Person
from .person_validation import COLUMNS

_WRITABLE = range(1, len(COLUMNS))


class InsertStatement(NamedTuple):
    """An insert statement and whether it returns the stored row."""

    sql: str
    need_selection: bool


def insert_columns() -> tuple[str, ...]:
    """Return the columns an insert may write; the id is generated."""
    return COLUMNS[1:]


def _dirty_indices(person: Person) -> list[int]:
    dirty = person.dirty
    return [index for index in _WRITABLE if dirty[index]]


def update_columns(person: Person) -> list[str]:
    """Return the names of the changed columns, the id excluded."""
    return [COLUMNS[index] for index in _dirty_indices(person)]


def output_args(person: Person) -> list[Any]:
    """Return the values to bind for an insert, ``None`` for nulls."""
    values = person.values
    return [values[index] for index in _dirty_indices(person)]


def update_args(person: Person) -> list[Any]:
    """Return the values to bind for an update, ``None`` for nulls."""
    return output_args(person)


def sql_for_inserting(person: Person) -> InsertStatement:
    """Build the insert statement for the changed columns of ``person``."""
    indices = _dirty_indices(person)
    columns = ["id", *(COLUMNS[index] for index in indices)]
    values = ["default", *(f"${number}" for number in range(1, len(indices) + 1))]
    sql = (
        f"insert into {Person.table_name} ({','.join(columns)})"
        f" values ({','.join(values)}) returning *"
    )
    return InsertStatement(sql=sql, need_selection=True)


def sql_for_finding_by_primary_key() -> str:
    """Return the query that selects one person by id."""
    return f"select * from {Person.table_name} where id = $1"


def sql_for_deleting_by_primary_key() -> str:
    """Return the statement that deletes one person by id."""
    return f"delete from {Person.table_name} where id = $1"