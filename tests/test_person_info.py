import datetime as dt

import pytest

from orgchart.person_info import PersonInfo


def _named_row():
    return {
        "id": 7,
        "job_id": 2,
        "job_title": "Engineer",
        "department_id": 3,
        "department_name": "Research",
        "manager_id": 1,
        "manager_full_name": "Ada Lovelace",
        "first_name": "Grace",
        "last_name": "Hopper",
        "hire_date": "2020-05-17",
    }


def _positional_row():
    return [7, 2, 3, 1, "Grace", "Hopper", "2020-05-17",
            "Engineer", "Research", "Ada Lovelace"]


def test_from_row_by_name():
    info = PersonInfo.from_row(_named_row(), -1)
    assert info.id == 7
    assert info.job_title == "Engineer"
    assert info.department_name == "Research"
    assert info.manager_full_name == "Ada Lovelace"
    assert info.hire_date == dt.date(2020, 5, 17)


def test_positional_matches_named():
    assert PersonInfo.from_row(_positional_row()) == PersonInfo.from_row(
        _named_row(), -1
    )


def test_positional_with_offset():
    row = ["skip", "skip", *_positional_row()]
    info = PersonInfo.from_row(row, 2)
    assert info == PersonInfo.from_row(_positional_row(), 0)


def test_short_row_raises():
    with pytest.raises(ValueError, match="Invalid SQL result for this model"):
        PersonInfo.from_row(_positional_row()[:-1])


def test_offset_past_end_raises():
    with pytest.raises(ValueError):
        PersonInfo.from_row(_positional_row(), 1)


def test_nulls_stay_none():
    row = dict.fromkeys(_named_row())
    info = PersonInfo.from_row(row, -1)
    assert info == PersonInfo()


def test_string_numbers_are_converted():
    row = _named_row()
    row["id"] = "42"
    info = PersonInfo.from_row(row, -1)
    assert info.id == 42


def test_to_json_full():
    data = PersonInfo.from_row(_named_row(), -1).to_json()
    assert data == _named_row()


def test_to_json_omits_null_department_name():
    row = _named_row()
    row["department_name"] = None
    data = PersonInfo.from_row(row, -1).to_json()
    assert "department_name" not in data
    assert data["manager_full_name"] == "Ada Lovelace"


def test_to_json_nulls():
    data = PersonInfo().to_json()
    assert set(data) == set(_named_row()) - {"department_name"}
    assert all(value is None for value in data.values())


def test_to_json_date_format():
    info = PersonInfo(hire_date=dt.date(2021, 1, 2))
    assert info.to_json()["hire_date"] == "2021-01-02"