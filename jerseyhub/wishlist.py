"""Storage operations for user wishlists."""

from typing import List

from .database import Database
from .records import Inventory


class WishlistRepository:
    """Adds products to wishlists, removes them and lists them."""

    def __init__(self, db: Database):
        self.db = db

    def add_to_wishlist(self, user_id: int, inventory_id: int) -> None:
        """Put a product on the user's wishlist."""
        self.db.execute(
            "INSERT INTO wishlists (user_id, inventory_id) VALUES (?, ?)",
            user_id,
            inventory_id,
        )

    def remove_from_wishlist(self, inventory_id: int) -> None:
        """Flag every wishlist entry for this product as deleted."""
        self.db.execute(
            "UPDATE wishlists SET is_deleted = ? WHERE inventory_id = ?", True, inventory_id
        )

    def get_wishlist(self, user_id: int) -> List[Inventory]:
        """Return the products on the user's wishlist."""
        rows = self.db.rows(
            "SELECT inventories.id, inventories.category_id, inventories.product_name, "
            "inventories.size, inventories.stock, inventories.price "
            "FROM wishlists JOIN inventories ON wishlists.inventory_id = inventories.id "
            "WHERE user_id = ?",
            user_id,
        )
        return [Inventory.from_row(row) for row in rows]