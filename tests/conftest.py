import copy
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app.db.repository import ScheduleRepository, get_schedule_repository
from app.main import app


class FakeQuery:
    """Mimics the supabase-py builder chain: table().select().eq()/in_().execute()."""

    def __init__(self, client, table):
        self.client = client
        self.table = table
        self.fields = "*"
        self.filters = []

    def select(self, fields="*"):
        self.fields = fields
        return self

    def eq(self, column, value):
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def in_(self, column, values):
        values = list(values)
        self.filters.append(lambda row: row.get(column) in values)
        return self

    def execute(self):
        self.client.calls.append((self.table, self.fields))
        error = self.client.errors.get(self.table)
        if error is not None:
            raise error

        rows = [
            copy.deepcopy(row)
            for row in self.client.tables.get(self.table, [])
            if all(f(row) for f in self.filters)
        ]
        if self.fields.strip() != "*":
            keep = [f.strip() for f in self.fields.split(",")]
            rows = [{k: row.get(k) for k in keep} for row in rows]
        return SimpleNamespace(data=rows)


class FakeSupabaseClient:
    def __init__(self, tables=None):
        self.tables = tables or {}
        self.errors = {}
        self.calls = []

    def table(self, name):
        return FakeQuery(self, name)


@pytest.fixture
def store():
    return FakeSupabaseClient({
        "schedule": [
            {"schedule_id": 1, "class_id": "C1", "teacher_id": "T1", "day": "Mon", "period": 1},
            {"schedule_id": 2, "class_id": "C1", "teacher_id": "T2", "day": "Tue", "period": 3},
            {"schedule_id": 3, "class_id": "C2", "teacher_id": "T1", "day": "Wed", "period": 2},
        ],
        "teacher": [
            {"teacher_id": "T1", "name": "Alice", "email": "a@x.com", "role": "Leader"},
            {"teacher_id": "T2", "name": "Bob", "email": "b@x.com", "role": None},
        ],
    })


@pytest.fixture
def repo(store):
    return ScheduleRepository(client=store)


@pytest.fixture
def client(repo):
    app.dependency_overrides[get_schedule_repository] = lambda: repo
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
