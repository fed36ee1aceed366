from __future__ import annotations

import mysql.connector
import pytest

from attendance_tracker.core.exceptions import PersistenceError
from attendance_tracker.persistence.mysql_store import MySQLSnapshotStore


class FakeCursor:
    def __init__(self, db: dict):
        self._db = db
        self._row = None
        self.executed: list[tuple[str, tuple]] = []

    def execute(self, sql: str, params: tuple = ()):
        self.executed.append((sql, params))
        statement = " ".join(sql.split())
        if statement.startswith("SELECT payload"):
            value = self._db.get(params[0])
            self._row = {"payload": value} if value is not None else None
        elif statement.startswith("INSERT INTO kv_store"):
            self._db[params[0]] = params[1]
        elif statement.startswith("DELETE FROM kv_store"):
            self._db.pop(params[0], None)

    def fetchone(self):
        return self._row

    def close(self):
        pass


class FakeConnection:
    def __init__(self, db: dict, *, fail: bool = False):
        self._db = db
        self._fail = fail
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary: bool = True):
        if self._fail:
            raise mysql.connector.Error("connection lost")
        return FakeCursor(self._db)

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, *, fail: bool = False):
        self.db: dict[str, str] = {}
        self.fail = fail
        self.connections: list[FakeConnection] = []

    def connect(self):
        conn = FakeConnection(self.db, fail=self.fail)
        self.connections.append(conn)
        return conn


def test_upsert_and_read_back():
    factory = FakeConnFactory()
    store = MySQLSnapshotStore(factory)

    assert store.get_item("student-app-storage") is None
    store.set_item("student-app-storage", "{}")
    store.set_item("student-app-storage", '{"state": 1}')

    assert store.get_item("student-app-storage") == '{"state": 1}'
    assert factory.connections[1].committed

    store.remove_item("student-app-storage")
    assert factory.db == {}


def test_driver_errors_become_persistence_errors():
    factory = FakeConnFactory(fail=True)
    store = MySQLSnapshotStore(factory)

    with pytest.raises(PersistenceError):
        store.set_item("k", "{}")
    assert factory.connections[0].rolled_back
