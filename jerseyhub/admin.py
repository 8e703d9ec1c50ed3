"""Storage operations used by the shop's administrators."""

from typing import List

from .database import Database, RepositoryError
from .records import Admin, AdminLogin, User, UserDetailsAtAdmin

PAGE_SIZE = 5


class AdminRepository:
    """Admin accounts, user management and payment methods."""

    def __init__(self, db: Database):
        self.db = db

    def find_admin(self, login: AdminLogin) -> Admin:
        """Return the admin whose username matches the login e-mail."""
        row = self.db.first("select * from admins where username = ?", login.email)
        return Admin.from_row(row) if row else Admin()

    def get_user_by_id(self, user_id: str) -> User:
        """Return the user with the given id, given as text."""
        try:
            numeric_id = int(user_id)
        except (TypeError, ValueError) as exc:
            raise RepositoryError(f"invalid user id: {user_id!r}") from exc

        count = self.db.scalar("select count(*) from users where id = ?", numeric_id) or 0
        if count < 1:
            raise RepositoryError("user for the given id does not exist")

        row = self.db.first("select * from users where id = ?", numeric_id)
        return User.from_row(row) if row else User()

    def update_block_user_by_id(self, user: User) -> None:
        """Store the user's blocked flag; used both to block and unblock."""
        self.db.execute("update users set blocked = ? where id = ?", user.blocked, user.id)

    def get_users(self, page: int) -> List[UserDetailsAtAdmin]:
        """Return one page of users; page 0 is treated as page 1."""
        if page == 0:
            page = 1
        offset = (page - 1) * PAGE_SIZE
        rows = self.db.rows(
            "select id,name,email,phone,blocked from users limit ? offset ?",
            PAGE_SIZE,
            offset,
        )
        return [UserDetailsAtAdmin.from_row(row) for row in rows]

    def new_payment_method(self, name: str) -> None:
        """Add a payment method."""
        self.db.execute("insert into payment_methods(payment_name) values(?)", name)