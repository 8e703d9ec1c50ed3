import sqlite3

import pytest

from jerseyhub.database import Database, RepositoryError
from jerseyhub.order import OrderRepository
from jerseyhub.records import CartItem, Order

SCHEMA = """
CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT);
CREATE TABLE addresses (
    id INTEGER PRIMARY KEY, user_id INTEGER, house_name TEXT, street TEXT, city TEXT
);
CREATE TABLE payment_methods (id INTEGER PRIMARY KEY, payment_name TEXT);
CREATE TABLE orders (
    id INTEGER PRIMARY KEY,
    order_id TEXT,
    user_id INTEGER,
    address_id INTEGER,
    payment_method_id INTEGER,
    final_price REAL,
    order_status TEXT DEFAULT 'PENDING',
    payment_status TEXT DEFAULT 'NOT PAID'
);
CREATE TABLE inventories (id INTEGER PRIMARY KEY, product_name TEXT, price REAL);
CREATE TABLE cart_products (
    id INTEGER PRIMARY KEY, user_id INTEGER, inventory_id INTEGER,
    quantity INTEGER, total_price REAL
);
CREATE TABLE order_items (
    id INTEGER PRIMARY KEY, order_id INTEGER, inventory_id INTEGER,
    quantity INTEGER, total_price REAL
);
CREATE TABLE wallets (id INTEGER PRIMARY KEY, user_id INTEGER, amount REAL);
"""


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    connection.executescript(SCHEMA)
    yield connection
    connection.close()


@pytest.fixture
def repo(conn):
    return OrderRepository(Database(conn))


@pytest.fixture
def broken():
    connection = sqlite3.connect(":memory:")
    yield OrderRepository(Database(connection))
    connection.close()


def test_order_items_creates_order_visible_in_get_orders(repo):
    new_id = repo.order_items(7, 3, 2, 450.5)
    orders = repo.get_orders(7)
    assert [o.id for o in orders] == [new_id]
    order = orders[0]
    assert (order.user_id, order.address_id, order.payment_method_id) == (7, 3, 2)
    assert order.final_price == 450.5


def test_order_items_failure_returns_zero(broken):
    assert broken.order_items(1, 1, 1, 10.0) == 0


def test_get_orders_missing_table_raises(broken):
    with pytest.raises(RepositoryError):
        broken.get_orders(1)


def test_get_cart_reads_joined_products(conn, repo):
    conn.execute("INSERT INTO inventories (id, product_name, price) VALUES (4, 'home kit', 400)")
    conn.execute(
        "INSERT INTO cart_products (user_id, inventory_id, quantity, total_price) "
        "VALUES (9, 4, 2, 800)"
    )
    conn.commit()
    assert repo.get_cart(9) == [CartItem(product_name="home kit", quantity=2, total=800.0)]
    assert repo.get_cart(10) == []


def test_add_order_products_copies_cart(conn, repo):
    conn.execute("INSERT INTO inventories (id, product_name, price) VALUES (5, 'away kit', 300)")
    conn.commit()
    repo.add_order_products(11, [CartItem(product_name="away kit", quantity=3, total=900.0)])
    db = Database(conn)
    assert db.scalar("SELECT inventory_id FROM order_items WHERE order_id = ?", 11) == 5
    assert db.scalar("SELECT quantity FROM order_items WHERE order_id = ?", 11) == 3
    assert db.scalar("SELECT total_price FROM order_items WHERE order_id = ?", 11) == 900.0
    assert db.scalar("SELECT COUNT(*) FROM order_items") == 1


def test_add_order_products_missing_table_raises(broken):
    with pytest.raises(RepositoryError, match="no such table"):
        broken.add_order_products(
            11, [CartItem(product_name="away kit", quantity=3, total=900.0)]
        )


def test_cancel_order_sets_canceled(repo):
    order_id = repo.order_items(1, 1, 1, 10.0)
    repo.cancel_order(order_id)
    assert repo.order_status(order_id) == "CANCELED"


def test_return_order_sets_returned(repo):
    order_id = repo.order_items(1, 1, 1, 10.0)
    repo.return_order(order_id)
    assert repo.order_status(order_id) == "RETURNED"


def test_edit_order_status_round_trip(repo):
    order_id = repo.order_items(1, 1, 1, 10.0)
    repo.edit_order_status("SHIPPED", order_id)
    assert repo.order_status(order_id) == "SHIPPED"


def test_order_status_of_missing_order_is_empty(repo):
    assert repo.order_status(999) == ""


def test_admin_orders_lists_orders_with_status(conn, repo):
    conn.execute("INSERT INTO users (id, name) VALUES (1, 'Arun')")
    conn.execute(
        "INSERT INTO addresses (id, user_id, house_name, street, city) "
        "VALUES (2, 1, 'nellikkal', 'pallippuram', 'cherthala')"
    )
    conn.execute("INSERT INTO payment_methods (id, payment_name) VALUES (3, 'COD')")
    conn.commit()
    order_id = repo.order_items(1, 2, 3, 250.0)
    details = repo.admin_orders("PENDING")
    assert len(details) == 1
    detail = details[0]
    assert detail.order_id == order_id
    assert detail.username == "Arun"
    assert detail.address == "nellikkal pallippuram cherthala"
    assert detail.payment_method == "COD"
    assert detail.total == 250.0
    assert repo.admin_orders("SHIPPED") == []


def test_check_order_accepts_owner_and_rejects_others(conn, repo):
    conn.execute("INSERT INTO orders (order_id, user_id) VALUES ('ORD1', 4)")
    conn.commit()
    repo.check_order("ORD1", 4)
    with pytest.raises(RepositoryError, match="the order is not did by this user"):
        repo.check_order("ORD1", 5)


def test_check_order_unknown_order_rejected(repo):
    with pytest.raises(RepositoryError, match="the order is not did by this user"):
        repo.check_order("missing", 1)


def test_get_order_detail(conn, repo):
    conn.execute("INSERT INTO orders (order_id, user_id, final_price) VALUES ('ORD2', 6, 99.0)")
    conn.commit()
    order = repo.get_order_detail("ORD2")
    assert (order.order_id, order.user_id, order.final_price) == ("ORD2", 6, 99.0)
    assert repo.get_order_detail("nothing") == Order()


def test_amount_and_user_from_order_id(repo):
    order_id = repo.order_items(12, 1, 1, 321.0)
    assert repo.find_amount_from_order_id(order_id) == 321.0
    assert repo.find_user_id_from_order_id(order_id) == 12
    assert repo.find_amount_from_order_id(order_id + 1) == 0.0
    assert repo.find_user_id_from_order_id(order_id + 1) == 0


def test_wallet_creation_and_lookup(repo):
    assert repo.find_wallet_id_from_user_id(8) == 0
    wallet_id = repo.create_new_wallet(8)
    assert wallet_id > 0
    assert repo.find_wallet_id_from_user_id(8) == wallet_id


def test_credit_to_user_wallet_sets_amount(conn, repo):
    wallet_id = repo.create_new_wallet(3)
    repo.credit_to_user_wallet(150.0, wallet_id)
    amount = conn.execute("SELECT amount FROM wallets WHERE id = ?", (wallet_id,)).fetchone()[0]
    assert amount == 150.0