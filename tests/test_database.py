import sqlite3

import pytest

from jerseyhub.database import Database, RepositoryError


@pytest.fixture
def db():
    connection = sqlite3.connect(":memory:")
    connection.execute("CREATE TABLE items (id INTEGER PRIMARY KEY, name TEXT, qty INTEGER)")
    yield Database(connection)
    connection.close()


def test_execute_returns_affected_rows(db):
    db.execute("INSERT INTO items (name, qty) VALUES (?, ?)", "a", 1)
    db.execute("INSERT INTO items (name, qty) VALUES (?, ?)", "b", 2)
    assert db.execute("UPDATE items SET qty = qty + 1") == 2


def test_rows_are_dicts_with_lowercase_keys(db):
    db.execute("INSERT INTO items (name, qty) VALUES (?, ?)", "a", 3)
    assert db.rows("SELECT name AS Name, qty FROM items") == [{"name": "a", "qty": 3}]


def test_first_and_scalar_on_empty_result(db):
    assert db.first("SELECT * FROM items") is None
    assert db.scalar("SELECT id FROM items") is None


def test_scalar_returns_first_column(db):
    db.execute("INSERT INTO items (name, qty) VALUES (?, ?)", "a", 3)
    assert db.scalar("SELECT count(*) FROM items") == 1


def test_column_collects_first_values(db):
    for name in ("x", "y", "z"):
        db.execute("INSERT INTO items (name, qty) VALUES (?, ?)", name, 0)
    assert db.column("SELECT name FROM items ORDER BY id") == ["x", "y", "z"]


def test_errors_are_wrapped_and_connection_survives(db):
    with pytest.raises(RepositoryError):
        db.rows("SELECT * FROM missing_table")
    db.execute("INSERT INTO items (name, qty) VALUES (?, ?)", "ok", 1)
    assert db.column("SELECT name FROM items") == ["ok"]


def test_changes_are_committed(tmp_path):
    path = tmp_path / "shop.db"
    first = sqlite3.connect(path)
    db = Database(first)
    db.execute("CREATE TABLE t (v INTEGER)")
    db.execute("INSERT INTO t (v) VALUES (?)", 7)
    second = sqlite3.connect(path)
    try:
        assert Database(second).scalar("SELECT v FROM t") == 7
    finally:
        second.close()
        first.close()