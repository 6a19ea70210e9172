import datetime as dt

import pytest

from orgchart.person import Person, parse_date
from orgchart.person_validation import ValidationError

FULL = {
    "id": 7,
    "job_id": 2,
    "department_id": 3,
    "manager_id": 1,
    "first_name": "Ada",
    "last_name": "Lovelace",
    "hire_date": "2020-01-15",
}

ALIASES = ["pid", "job", "dept", "mgr", "first", "last", "hired"]


def test_parse_date_plain():
    assert parse_date("2020-01-15") == dt.date(2020, 1, 15)


def test_parse_date_ignores_trailing_time():
    assert parse_date("2021-03-04 10:20:30") == dt.date(2021, 3, 4)


def test_parse_date_rejects_garbage():
    with pytest.raises(ValueError):
        parse_date("not a date")


def test_new_person_is_empty_and_clean():
    person = Person()
    assert person.values == (None,) * 7
    assert person.dirty == (False,) * 7


def test_json_round_trip():
    person = Person.from_json(FULL)
    assert person.to_json() == FULL
    assert person.hire_date == dt.date(2020, 1, 15)


def test_from_json_marks_present_columns_dirty():
    person = Person.from_json({"id": None, "first_name": "Ada"})
    assert person.dirty == (True, False, False, False, True, False, False)
    assert person.id is None
    assert person.first_name == "Ada"


def test_to_json_has_all_columns_with_nulls():
    result = Person().to_json()
    assert set(result) == set(FULL)
    assert all(value is None for value in result.values())


def test_update_by_json_does_not_mark_id_dirty():
    person = Person()
    person.update_by_json({"id": 9, "last_name": "Hopper"})
    assert person.id == 9
    assert person.last_name == "Hopper"
    assert person.dirty[0] is False
    assert person.dirty[5] is True


def test_assignment_marks_dirty_and_rounds_date():
    person = Person()
    person.hire_date = dt.datetime(2019, 5, 6, 13, 45)
    person.manager_id = 4
    assert person.hire_date == dt.date(2019, 5, 6)
    assert person.dirty[6] is True
    assert person.dirty[3] is True
    assert person.dirty[1] is False


def test_from_row_by_position():
    row = [1, 2, 3, None, "Ada", "Lovelace", "2020-01-15"]
    person = Person.from_row(row)
    assert person.values == (1, 2, 3, None, "Ada", "Lovelace", dt.date(2020, 1, 15))
    assert person.dirty == (False,) * 7


def test_from_row_with_offset():
    row = ["extra", 5, 6, 7, 8, "Grace", "Hopper", "2018-02-03"]
    person = Person.from_row(row, 1)
    assert person.id == 5
    assert person.last_name == "Hopper"


def test_from_row_by_name():
    row = dict(FULL, manager_id=None)
    person = Person.from_row(row, -1)
    assert person.manager_id is None
    assert person.first_name == "Ada"
    assert person.to_json()["hire_date"] == "2020-01-15"


def test_from_row_too_short():
    with pytest.raises(ValueError):
        Person.from_row([1, 2, 3])


def test_masqueraded_round_trip():
    masked = dict(zip(ALIASES, FULL.values()))
    person = Person.from_masqueraded_json(masked, ALIASES)
    assert person.to_json() == FULL
    assert person.to_masqueraded_json(ALIASES) == masked


def test_masqueraded_skips_empty_aliases():
    aliases = ["", "job", "", "", "first", "", ""]
    person = Person.from_json(FULL)
    assert person.to_masqueraded_json(aliases) == {"job": 2, "first": "Ada"}


def test_masqueraded_bad_vector_raises():
    with pytest.raises(ValidationError):
        Person.from_masqueraded_json(FULL, ["id"])
    with pytest.raises(ValidationError):
        Person().update_by_masqueraded_json(FULL, ["id", "job_id"])


def test_to_masqueraded_json_falls_back():
    person = Person.from_json(FULL)
    assert person.to_masqueraded_json(["only"]) == person.to_json()


def test_update_by_masqueraded_json():
    person = Person()
    person.update_by_masqueraded_json({"pid": 3, "dept": 4}, ALIASES)
    assert person.id == 3
    assert person.department_id == 4
    assert person.dirty == (False, False, True, False, False, False, False)


def test_column_name():
    assert Person.column_name(0) == "id"
    assert Person.column_name(6) == "hire_date"
    with pytest.raises(IndexError):
        Person.column_name(7)


def test_primary_key():
    person = Person.from_json(FULL)
    assert person.primary_key == 7
    with pytest.raises(LookupError):
        _ = Person().primary_key


def test_non_object_json_raises():
    with pytest.raises(TypeError):
        Person.from_json([1, 2, 3])