import pytest

from stafftrack.employees.service import EmployeeService


def test_directory_lists_newest_first(world):
    rows = EmployeeService(world.employees).list_directory()

    assert [r["employee_number"] for r in rows] == ["EMP-0004", "EMP-0003", "EMP-0002"]
    assert rows[0]["full_name"] == "Eve Employee"
    assert rows[0]["hire_date"] == "2024-01-05"


@pytest.mark.parametrize(
    "query, expected",
    [
        ("engineering", {"EMP-0003", "EMP-0004"}),
        ("HR MANAGER", {"EMP-0002"}),
        ("eve@", {"EMP-0004"}),
        ("emp-0003", {"EMP-0003"}),
        ("dana", {"EMP-0003"}),
        ("nobody", set()),
        ("   ", {"EMP-0002", "EMP-0003", "EMP-0004"}),
    ],
)
def test_directory_search_is_case_insensitive(world, query, expected):
    rows = EmployeeService(world.employees).list_directory(query)
    assert {r["employee_number"] for r in rows} == expected
