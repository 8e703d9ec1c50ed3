"""Storage operations behind the shopping cart and checkout."""

from typing import List

from .database import Database
from .records import Address, CartItem, PaymentMethod


class CartRepository:
    """Carts, their line items and checkout look-ups."""

    def __init__(self, db: Database):
        self.db = db

    def get_addresses(self, user_id: int) -> List[Address]:
        """Return the user's saved addresses."""
        rows = self.db.rows("SELECT * FROM addresses WHERE user_id = ?", user_id)
        return [Address.from_row(row) for row in rows]

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

    def get_payment_options(self) -> List[PaymentMethod]:
        """Return every payment method."""
        return [PaymentMethod.from_row(row) for row in self.db.rows("SELECT * FROM payment_methods")]

    def get_cart_id(self, user_id: int) -> int:
        """Return the user's cart id, or 0 when the user has no cart."""
        return self.db.scalar("SELECT id FROM carts WHERE user_id = ?", user_id) or 0

    def create_new_cart(self, user_id: int) -> int:
        """Create a cart for the user and return its id."""
        self.db.execute("INSERT INTO carts (user_id) VALUES (?)", user_id)
        return self.db.scalar("select id from carts where user_id = ?", user_id) or 0

    def add_line_items(self, cart_id: int, inventory_id: int) -> None:
        """Put a product into a cart."""
        self.db.execute(
            "INSERT INTO line_items (cart_id, inventory_id) VALUES (?, ?)",
            cart_id,
            inventory_id,
        )