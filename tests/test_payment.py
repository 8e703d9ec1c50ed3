import sqlite3

import pytest

from jerseyhub.database import Database, RepositoryError
from jerseyhub.payment import PaymentRepository


@pytest.fixture
def db():
    connection = sqlite3.connect(":memory:")
    connection.execute("CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT)")
    connection.execute(
        "CREATE TABLE orders (id INTEGER PRIMARY KEY, final_price REAL, "
        "payment_status TEXT DEFAULT 'NOT PAID')"
    )
    connection.execute("INSERT INTO users (id, name) VALUES (1, 'Arun K')")
    connection.execute("INSERT INTO orders (id, final_price) VALUES (7, 400.5)")
    connection.commit()
    yield Database(connection)
    connection.close()


def test_find_username(db):
    repo = PaymentRepository(db)
    assert repo.find_username(1) == "Arun K"
    assert repo.find_username(2) == ""


def test_find_price(db):
    repo = PaymentRepository(db)
    assert repo.find_price(7) == 400.5
    assert repo.find_price(8) == 0.0


def test_update_payment_details_marks_paid(db):
    PaymentRepository(db).update_payment_details("7", "pay-id", "razor-id")
    assert db.scalar("SELECT payment_status FROM orders WHERE id = ?", 7) == "PAID"


def test_errors_are_raised():
    repo = PaymentRepository(Database(sqlite3.connect(":memory:")))
    with pytest.raises(RepositoryError):
        repo.find_username(1)
    with pytest.raises(RepositoryError):
        repo.find_price(1)
    with pytest.raises(RepositoryError):
        repo.update_payment_details("1", "p", "r")