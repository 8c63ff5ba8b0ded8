# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from db.errors import Conflict
from main import create_app


class FakeGateway:
    """
    In-memory stand-in for DatabaseGateway.

    Understands the handful of statements StudentRepository issues and
    enforces the same constraints as the real table (unique roll,
    store-assigned ids that are never reused).
    """

    def __init__(self, can_initialize=True):
        self.can_initialize = can_initialize
        self.rows = {}
        self.next_id = 1
        self.init_calls = 0
        self.closed = False
        self._ready = False

    @property
    def is_ready(self):
        return self._ready

    def initialize(self):
        self.init_calls += 1
        if self.can_initialize:
            self._ready = True
        return self._ready

    def close(self):
        self.closed = True
        self._ready = False

    def _check_roll(self, roll, exclude_id=None):
        for row in self.rows.values():
            if row["roll"] == roll and row["id"] != exclude_id:
                raise Conflict(
                    'duplicate key value violates unique constraint "students_roll_key"'
                )

    def execute(self, sql, params=()):
        statement = " ".join(sql.split()).upper()
        if statement.startswith("CREATE"):
            return []

        if statement.startswith("INSERT"):
            roll, name, class_name = params
            self._check_roll(roll)
            row = {"id": self.next_id, "roll": roll, "name": name, "class": class_name}
            self.rows[self.next_id] = row
            self.next_id += 1
            return [dict(row)]

        if statement.startswith("SELECT"):
            if "WHERE ID" in statement:
                row = self.rows.get(params[0])
                return [dict(row)] if row else []
            return [dict(r) for r in sorted(self.rows.values(), key=lambda r: r["roll"])]

        if statement.startswith("UPDATE"):
            roll, name, class_name, student_id = params
            if student_id not in self.rows:
                return []
            self._check_roll(roll, exclude_id=student_id)
            self.rows[student_id].update(roll=roll, name=name, **{"class": class_name})
            return [dict(self.rows[student_id])]

        if statement.startswith("DELETE"):
            row = self.rows.pop(params[0], None)
            return [{"id": row["id"]}] if row else []

        raise AssertionError(f"unexpected statement: {sql}")


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def client(gateway):
    with TestClient(create_app(gateway)) as test_client:
        yield test_client


@pytest.fixture
def unready_gateway():
    return FakeGateway(can_initialize=False)


@pytest.fixture
def unready_client(unready_gateway):
    with TestClient(create_app(unready_gateway)) as test_client:
        yield test_client


@pytest.fixture
def alice():
    return {"roll": 1, "name": "Alice", "class": "10A"}
