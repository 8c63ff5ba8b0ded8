# tests/test_student_repo.py

from unittest.mock import MagicMock

import pytest

from db.errors import NotFound
from models.student import Student
from repositories.student_repo import StudentRepository

ROW = {"id": 3, "roll": 14, "name": "Ravi", "class": "9B"}


@pytest.fixture
def gateway():
    return MagicMock()


@pytest.fixture
def repo(gateway):
    return StudentRepository(gateway)


def test_add_binds_values_and_returns_student(repo, gateway):
    gateway.execute.return_value = [ROW]

    student = repo.add(14, "Ravi", "9B")

    sql, params = gateway.execute.call_args.args
    assert "INSERT INTO students" in sql
    assert "RETURNING" in sql
    assert params == (14, "Ravi", "9B")
    assert student == Student(id=3, roll=14, name="Ravi", class_name="9B")


def test_values_are_never_interpolated(repo, gateway):
    gateway.execute.return_value = [ROW]

    repo.add(14, "Robert'); DROP TABLE students;--", "9B")

    sql, _ = gateway.execute.call_args.args
    assert "DROP TABLE" not in sql


def test_list_all_orders_by_roll(repo, gateway):
    gateway.execute.return_value = [ROW]

    students = repo.list_all()

    sql = gateway.execute.call_args.args[0]
    assert "ORDER BY roll" in sql
    assert [s.roll for s in students] == [14]


def test_get_by_id_missing_raises_not_found(repo, gateway):
    gateway.execute.return_value = []

    with pytest.raises(NotFound, match="Student not found"):
        repo.get_by_id(99)


def test_update_binds_id_last(repo, gateway):
    gateway.execute.return_value = [dict(ROW, name="Ravi K")]

    student = repo.update(3, 14, "Ravi K", "9B")

    assert gateway.execute.call_args.args[1] == (14, "Ravi K", "9B", 3)
    assert student.name == "Ravi K"


def test_update_missing_raises_not_found(repo, gateway):
    gateway.execute.return_value = []

    with pytest.raises(NotFound):
        repo.update(3, 14, "Ravi", "9B")


def test_delete_missing_raises_not_found(repo, gateway):
    gateway.execute.return_value = []

    with pytest.raises(NotFound):
        repo.delete(3)


def test_delete_existing(repo, gateway):
    gateway.execute.return_value = [{"id": 3}]

    repo.delete(3)

    assert gateway.execute.call_args.args[1] == (3,)
