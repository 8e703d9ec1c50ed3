"""Repository classes and records for a jersey shop's users, carts, inventory, orders, coupons, offers and wishlists."""

__version__ = "0.1.0"