"""Storage operations for the product inventory."""

from contextlib import suppress
from typing import List

from .database import Database, RepositoryError
from .records import Inventory, InventoryResponse, NewInventory

PAGE_SIZE = 5


class InventoryRepository:
    """Products, their stock and their prices."""

    def __init__(self, db: Database):
        self.db = db

    def add_inventory(self, inventory: NewInventory, url: str) -> InventoryResponse:
        """Insert a product with its image URL.

        Failures are not reported, and the response is always empty.
        """
        with suppress(RepositoryError):
            self.db.execute(
                "INSERT INTO inventories (category_id, product_name, size, stock, price, image) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                inventory.category_id,
                inventory.product_name,
                inventory.size,
                inventory.stock,
                inventory.price,
                url,
            )
        return InventoryResponse()

    def check_inventory(self, product_id: int) -> bool:
        """Tell whether a product with this id exists."""
        count = self.db.scalar("SELECT COUNT(*) FROM inventories WHERE id = ?", product_id)
        return bool(count)

    def update_inventory(self, product_id: int, stock: int) -> InventoryResponse:
        """Add to a product's stock and return the new stock level."""
        if self.db is None:
            raise RepositoryError("database connection is nil")
        self.db.execute(
            "UPDATE inventories SET stock = stock + ? WHERE id = ?", stock, product_id
        )
        new_stock = self.db.scalar("SELECT stock FROM inventories WHERE id = ?", product_id)
        return InventoryResponse(product_id=product_id, stock=int(new_stock or 0))

    def delete_inventory(self, inventory_id: str) -> None:
        """Delete the product with the given id, given as text."""
        try:
            numeric_id = int(inventory_id)
        except (TypeError, ValueError) as exc:
            raise RepositoryError("converting into integer not happened") from exc
        try:
            affected = self.db.execute("DELETE FROM inventories WHERE id = ?", numeric_id)
        except RepositoryError:
            affected = 0
        if affected < 1:
            raise RepositoryError("no records with that ID exist")

    def show_individual_product(self, product_id: str) -> Inventory:
        """Return every detail of one product, its id given as text."""
        try:
            numeric_id = int(product_id)
        except (TypeError, ValueError) as exc:
            raise RepositoryError("convertion not happened") from exc
        try:
            row = self.db.first("SELECT * FROM inventories WHERE inventories.id = ?", numeric_id)
        except RepositoryError as exc:
            raise RepositoryError("error retrieved record") from exc
        return Inventory.from_row(row) if row else Inventory()

    def list_products(self, page: int) -> List[Inventory]:
        """Return one page of products; page 0 is treated as page 1."""
        if page == 0:
            page = 1
        offset = (page - 1) * PAGE_SIZE
        rows = self.db.rows(
            "SELECT id, category_id, product_name, size, stock, price FROM inventories "
            "LIMIT ? OFFSET ?",
            PAGE_SIZE,
            offset,
        )
        return [Inventory.from_row(row) for row in rows]

    def check_stock(self, product_id: int) -> int:
        """Return the product's stock, or 0."""
        stock = self.db.scalar("SELECT stock FROM inventories WHERE id = ?", product_id)
        return int(stock) if stock is not None else 0

    def check_price(self, product_id: int) -> float:
        """Return the product's price, or 0.0."""
        price = self.db.scalar("SELECT price FROM inventories WHERE id = ?", product_id)
        return float(price) if price is not None else 0.0

    def search_products(self, key: str) -> List[Inventory]:
        """Return products whose name contains the key, ignoring case."""
        rows = self.db.rows(
            "SELECT * FROM inventories "
            "WHERE LOWER(product_name) LIKE '%' || LOWER(?) || '%'",
            key,
        )
        return [Inventory.from_row(row) for row in rows]