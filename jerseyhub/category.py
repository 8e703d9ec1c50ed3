"""Storage operations for product categories."""

from .database import Database, RepositoryError
from .records import Category


class CategoryRepository:
    """Adds, renames, checks and removes categories."""

    def __init__(self, db: Database):
        self.db = db

    def add_category(self, category: Category) -> Category:
        """Insert a category and return it as stored."""
        name = self.db.scalar(
            "INSERT INTO categories (category) VALUES (?) RETURNING category",
            category.category,
        )
        row = self.db.first(
            "SELECT p.id, p.category FROM categories p WHERE p.category = ?", name
        )
        return Category.from_row(row) if row else Category()

    def check_category(self, current: str) -> bool:
        """Tell whether a category with this name exists."""
        count = self.db.scalar("SELECT COUNT(*) FROM categories WHERE category = ?", current)
        return bool(count)

    def update_category(self, current: str, new: str) -> Category:
        """Rename a category and return the renamed record."""
        if self.db is None:
            raise RepositoryError("database connection is nil")
        self.db.execute("UPDATE categories SET category = ? WHERE category = ?", new, current)
        row = self.db.first(
            "SELECT * FROM categories WHERE category = ? ORDER BY id LIMIT 1", new
        )
        if row is None:
            raise RepositoryError("record not found")
        return Category.from_row(row)

    def delete_category(self, category_id: str) -> None:
        """Delete the category with the given id, given as text."""
        try:
            numeric_id = int(category_id)
        except (TypeError, ValueError) as exc:
            raise RepositoryError("converting into integer not happened") from exc
        try:
            affected = self.db.execute("DELETE FROM categories WHERE id = ?", numeric_id)
        except RepositoryError:
            affected = 0
        if affected < 1:
            raise RepositoryError("no records with that ID exist")