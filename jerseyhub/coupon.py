"""Storage operations for discount coupons."""

from .database import Database, RepositoryError
from .records import Coupon


class CouponRepository:
    """Creates coupons, invalidates them and looks up their discount."""

    def __init__(self, db: Database):
        self.db = db

    def add_coupon(self, coupon: Coupon) -> None:
        """Store a new coupon."""
        self.db.execute(
            "INSERT INTO coupons (coupon, discount_rate, valid) VALUES (?, ?, ?)",
            coupon.coupon,
            coupon.discount_rate,
            coupon.valid,
        )

    def make_coupon_invalid(self, coupon_id: int) -> None:
        """Mark the coupon with the given id as no longer valid."""
        self.db.execute("UPDATE coupons SET valid = ? WHERE id = ?", False, coupon_id)

    def find_coupon_discount(self, coupon_id: int) -> int:
        """Return the coupon's discount rate, or 0 when it cannot be read."""
        try:
            row = self.db.first(
                "SELECT coupon, discount_rate, valid FROM coupons WHERE id = ?", coupon_id
            )
        except RepositoryError:
            return 0
        return Coupon.from_row(row).discount_rate if row else 0