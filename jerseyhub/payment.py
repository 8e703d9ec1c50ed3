"""Storage operations used when taking payment for an order."""

from .database import Database

PAID = "PAID"


class PaymentRepository:
    """Looks up payment details and records completed payments."""

    def __init__(self, db: Database):
        self.db = db

    def find_username(self, user_id: int) -> str:
        """Return the name of the user, or an empty string."""
        name = self.db.scalar("SELECT name FROM users WHERE id = ?", user_id)
        return name if name is not None else ""

    def find_price(self, order_id: int) -> float:
        """Return the final price of the order, or 0.0."""
        price = self.db.scalar("SELECT final_price FROM orders WHERE id = ?", order_id)
        return float(price) if price is not None else 0.0

    def update_payment_details(self, order_id: str, payment_id: str, razor_id: str) -> None:
        """Mark the order as paid."""
        self.db.execute("UPDATE orders SET payment_status = ? WHERE id = ?", PAID, order_id)