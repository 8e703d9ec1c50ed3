"""Storage operations for category offers."""

from .database import Database
from .records import NewOffer


class OfferRepository:
    """Adds offers on categories, expires them and reads their discount."""

    def __init__(self, db: Database):
        self.db = db

    def add_new_offer(self, offer: NewOffer) -> None:
        """Store a new offer for a category."""
        self.db.execute(
            "INSERT INTO offers (category_id, discount_rate) VALUES (?, ?)",
            offer.category_id,
            offer.discount,
        )

    def make_offer_expire(self, offer_id: int) -> None:
        """Mark the offer with the given id as no longer valid."""
        self.db.execute("UPDATE offers SET valid = ? WHERE id = ?", False, offer_id)

    def find_discount_percentage(self, category_id: int) -> int:
        """Return the valid offer's discount for a category, or 0 if none."""
        rate = self.db.scalar(
            "SELECT discount_rate FROM offers WHERE category_id = ? AND valid = ?",
            category_id,
            True,
        )
        return int(rate) if rate is not None else 0