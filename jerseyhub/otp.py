"""Storage look-ups used by one-time-password login."""

from .database import Database, RepositoryError
from .records import UserDetailsResponse


class OtpRepository:
    """Finds users by their phone number."""

    def __init__(self, db: Database):
        self.db = db

    def find_user_by_mobile_number(self, phone: str) -> bool:
        """Tell whether a user has this phone number; False on failure."""
        try:
            count = self.db.scalar("SELECT COUNT(*) FROM users WHERE phone = ?", phone)
        except RepositoryError:
            return False
        return (count or 0) > 0

    def user_details_using_phone(self, phone: str) -> UserDetailsResponse:
        """Return the details of the user with this phone number."""
        row = self.db.first("SELECT * FROM users WHERE phone = ?", phone)
        return UserDetailsResponse.from_row(row) if row else UserDetailsResponse()