"""A small access layer over a DB-API connection."""

from typing import Any, Dict, List, Optional, Tuple


class RepositoryError(Exception):
    """Raised when a storage operation fails or finds nothing to act on."""


class Database:
    """Runs parameterised SQL (``?`` placeholders) on a DB-API connection.

    Every statement is committed once it has run, and column names in
    returned rows are lower-cased.
    """

    def __init__(self, connection):
        self.connection = connection

    def _run(self, sql: str, args: Tuple[Any, ...]) -> Tuple[int, List[Dict[str, Any]]]:
        try:
            cursor = self.connection.cursor()
            try:
                cursor.execute(sql, args)
                names = (
                    [column[0].lower() for column in cursor.description]
                    if cursor.description
                    else []
                )
                fetched = cursor.fetchall() if names else []
                count = cursor.rowcount
            finally:
                cursor.close()
            self.connection.commit()
        except Exception as exc:
            try:
                self.connection.rollback()
            except Exception:
                pass
            raise RepositoryError(str(exc)) from exc
        return count, [dict(zip(names, row)) for row in fetched]

    def execute(self, sql: str, *args: Any) -> int:
        """Run a statement and return the number of rows it affected."""
        count, _ = self._run(sql, args)
        return count

    def rows(self, sql: str, *args: Any) -> List[Dict[str, Any]]:
        """Run a query and return every row as a dict."""
        _, result = self._run(sql, args)
        return result

    def first(self, sql: str, *args: Any) -> Optional[Dict[str, Any]]:
        """Return the first row of a query, or None when there is none."""
        result = self.rows(sql, *args)
        return result[0] if result else None

    def scalar(self, sql: str, *args: Any) -> Any:
        """Return the first column of the first row, or None."""
        row = self.first(sql, *args)
        if row is None:
            return None
        return next(iter(row.values()), None)

    def column(self, sql: str, *args: Any) -> List[Any]:
        """Return the first column of every row."""
        return [next(iter(row.values())) for row in self.rows(sql, *args) if row]