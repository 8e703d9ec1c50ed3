"""Storage operations for orders, returns and refunds to wallets."""

from typing import Iterable, List

from .database import Database, RepositoryError
from .records import CartItem, Order, OrderDetails

CANCELED = "CANCELED"
RETURNED = "RETURNED"


class OrderRepository:
    """Places orders, changes their status and credits refunds to wallets."""

    def __init__(self, db: Database):
        self.db = db

    def get_orders(self, user_id: int) -> List[Order]:
        """Return every order the user has placed."""
        rows = self.db.rows("SELECT * FROM orders WHERE user_id = ?", user_id)
        return [Order.from_row(row) for row in rows]

    def get_cart(self, user_id: int) -> List[CartItem]:
        """Return the products in the user's cart with quantity and total."""
        rows = self.db.rows(
            "SELECT inventories.product_name, cart_products.quantity, "
            "cart_products.total_price AS total FROM cart_products "
            "JOIN inventories ON cart_products.inventory_id = inventories.id "
            "WHERE user_id = ?",
            user_id,
        )
        return [CartItem.from_row(row) for row in rows]

    def order_items(
        self, user_id: int, address_id: int, payment_id: int, total: float
    ) -> int:
        """Create an order and return its id.

        Failures are not reported; the id is then 0.
        """
        try:
            order_id = self.db.scalar(
                "INSERT INTO orders (user_id, address_id, payment_method_id, final_price) "
                "VALUES (?, ?, ?, ?) RETURNING id",
                user_id,
                address_id,
                payment_id,
                total,
            )
        except RepositoryError:
            return 0
        return int(order_id) if order_id is not None else 0

    def add_order_products(self, order_id: int, cart: Iterable[CartItem]) -> None:
        """Copy the cart's products into the order's items."""
        for item in cart:
            inventory_id = self.db.scalar(
                "SELECT id FROM inventories WHERE product_name = ?", item.product_name
            )
            self.db.execute(
                "INSERT INTO order_items (order_id, inventory_id, quantity, total_price) "
                "VALUES (?, ?, ?, ?)",
                order_id,
                inventory_id or 0,
                item.quantity,
                item.total,
            )

    def cancel_order(self, order_id: int) -> None:
        """Mark the order as canceled."""
        self.edit_order_status(CANCELED, order_id)

    def edit_order_status(self, status: str, order_id: int) -> None:
        """Set the order's status."""
        self.db.execute("UPDATE orders SET order_status = ? WHERE id = ?", status, order_id)

    def admin_orders(self, status: str) -> List[OrderDetails]:
        """Return the orders with the given status, as shown to administrators."""
        rows = self.db.rows(
            "SELECT orders.id AS order_id, users.name AS username, "
            "addresses.house_name || ' ' || addresses.street || ' ' || addresses.city "
            "AS address, payment_methods.payment_name AS payment_method, "
            "orders.final_price AS total FROM orders "
            "JOIN users ON users.id = orders.user_id "
            "JOIN payment_methods ON payment_methods.id = orders.payment_method_id "
            "JOIN addresses ON orders.address_id = addresses.id "
            "WHERE order_status = ?",
            status,
        )
        return [OrderDetails.from_row(row) for row in rows]

    def check_order(self, order_id: str, user_id: int) -> None:
        """Raise unless the order with this order number was placed by the user."""
        owner = self.db.scalar("SELECT user_id FROM orders WHERE order_id = ?", order_id)
        if user_id != (owner or 0):
            raise RepositoryError("the order is not did by this user")

    def get_order_detail(self, order_id: str) -> Order:
        """Return the order with this order number."""
        row = self.db.first("SELECT * FROM orders WHERE order_id = ?", order_id)
        return Order.from_row(row) if row else Order()

    def return_order(self, order_id: int) -> None:
        """Mark the order as returned."""
        self.edit_order_status(RETURNED, order_id)

    def order_status(self, order_id: int) -> str:
        """Return the order's status, or an empty string."""
        status = self.db.scalar("SELECT order_status FROM orders WHERE id = ?", order_id)
        return status if status is not None else ""

    def find_amount_from_order_id(self, order_id: int) -> float:
        """Return the order's final price, or 0.0."""
        amount = self.db.scalar("SELECT final_price FROM orders WHERE id = ?", order_id)
        return float(amount) if amount is not None else 0.0

    def credit_to_user_wallet(self, amount: float, wallet_id: int) -> None:
        """Set the wallet's balance to the given amount."""
        self.db.execute("UPDATE wallets SET amount = ? WHERE id = ?", amount, wallet_id)

    def find_user_id_from_order_id(self, order_id: int) -> int:
        """Return the id of the user who placed the order, or 0."""
        user_id = self.db.scalar("SELECT user_id FROM orders WHERE id = ?", order_id)
        return int(user_id) if user_id is not None else 0

    def find_wallet_id_from_user_id(self, user_id: int) -> int:
        """Return the user's wallet id, or 0 when the user has no wallet."""
        count = self.db.scalar("SELECT COUNT(*) FROM wallets WHERE user_id = ?", user_id)
        if not count:
            return 0
        wallet_id = self.db.scalar("SELECT id FROM wallets WHERE user_id = ?", user_id)
        return int(wallet_id) if wallet_id is not None else 0

    def create_new_wallet(self, user_id: int) -> int:
        """Create an empty wallet for the user and return its id."""
        self.db.execute("INSERT INTO wallets (user_id, amount) VALUES (?, ?)", user_id, 0)
        wallet_id = self.db.scalar("SELECT id FROM wallets WHERE user_id = ?", user_id)
        return int(wallet_id) if wallet_id is not None else 0