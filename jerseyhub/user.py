"""Storage operations for shop customers, their addresses, carts and referrals."""

from typing import List

from .database import Database, RepositoryError
from .records import (
    Address,
    CartItem,
    NewAddress,
    UserDetails,
    UserDetailsResponse,
    UserLogin,
    UserSignInResponse,
)

REFERRAL_BONUS = 20


class UserRepository:
    """Accounts, profiles, addresses, cart contents and referral credits."""

    def __init__(self, db: Database):
        self.db = db

    def check_user_availability(self, email: str) -> bool:
        """Tell whether a user with this e-mail already exists; False on failure."""
        try:
            count = self.db.scalar("SELECT COUNT(*) FROM users WHERE email = ?", email)
        except RepositoryError:
            return False
        return (count or 0) > 0

    def user_sign_up(self, user: UserDetails, referral: str) -> UserDetailsResponse:
        """Create a user with a referral code and return the stored details."""
        row = self.db.first(
            "INSERT INTO users (name, email, password, phone, referral_code) "
            "VALUES (?, ?, ?, ?, ?) RETURNING id, name, email, phone",
            user.name,
            user.email,
            user.password,
            user.phone,
            referral,
        )
        return UserDetailsResponse.from_row(row) if row else UserDetailsResponse()

    def user_block_status(self, email: str) -> bool:
        """Tell whether the user with this e-mail is blocked."""
        blocked = self.db.scalar("SELECT blocked FROM users WHERE email = ?", email)
        return bool(blocked) if blocked is not None else False

    def find_user_by_email(self, login: UserLogin) -> UserSignInResponse:
        """Return the unblocked user with the login's e-mail."""
        try:
            row = self.db.first(
                "SELECT * FROM users WHERE email = ? AND blocked = ?", login.email, False
            )
        except RepositoryError as exc:
            raise RepositoryError("error checking user details") from exc
        return UserSignInResponse.from_row(row) if row else UserSignInResponse()

    def add_address(self, user_id: int, address: NewAddress, default: bool) -> None:
        """Store an address for the user, marking it default if asked."""
        try:
            self.db.execute(
                'INSERT INTO addresses (user_id, name, house_name, street, city, state, pin, "default") '
                "VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                user_id,
                address.name,
                address.house_name,
                address.street,
                address.city,
                address.state,
                address.pin,
                default,
            )
        except RepositoryError as exc:
            raise RepositoryError("could not add address") from exc

    def check_if_first_address(self, user_id: int) -> bool:
        """Tell whether the user already has an address; False on failure."""
        try:
            count = self.db.scalar("SELECT COUNT(*) FROM addresses WHERE user_id = ?", user_id)
        except RepositoryError:
            return False
        return (count or 0) > 0

    def get_addresses(self, user_id: int) -> List[Address]:
        """Return the user's saved addresses."""
        try:
            rows = self.db.rows("SELECT * FROM addresses WHERE user_id = ?", user_id)
        except RepositoryError as exc:
            raise RepositoryError("error in getting addresses") from exc
        return [Address.from_row(row) for row in rows]

    def get_user_details(self, user_id: int) -> UserDetailsResponse:
        """Return the user's id, name, e-mail and phone."""
        try:
            row = self.db.first(
                "SELECT id, name, email, phone FROM users WHERE id = ?", user_id
            )
        except RepositoryError as exc:
            raise RepositoryError("could not get user details") from exc
        return UserDetailsResponse.from_row(row) if row else UserDetailsResponse()

    def change_password(self, user_id: int, password: str) -> None:
        """Store a new password for the user."""
        self.db.execute("UPDATE users SET password = ? WHERE id = ?", password, user_id)

    def get_password(self, user_id: int) -> str:
        """Return the user's stored password, or an empty string."""
        stored = self.db.scalar("SELECT password FROM users WHERE id = ?", user_id)
        return stored if stored is not None else ""

    def find_id_from_phone(self, phone: str) -> int:
        """Return the id of the user with this phone number, or 0."""
        user_id = self.db.scalar("SELECT id FROM users WHERE phone = ?", phone)
        return int(user_id) if user_id is not None else 0

    def edit_name(self, user_id: int, name: str) -> None:
        """Change the user's name."""
        self.db.execute("UPDATE users SET name = ? WHERE id = ?", name, user_id)

    def edit_email(self, user_id: int, email: str) -> None:
        """Change the user's e-mail."""
        self.db.execute("UPDATE users SET email = ? WHERE id = ?", email, user_id)

    def edit_phone(self, user_id: int, phone: str) -> None:
        """Change the user's phone number."""
        self.db.execute("UPDATE users SET phone = ? WHERE id = ?", phone, user_id)

    def get_cart(self, user_id: int) -> List[CartItem]:
        """Return the products in the user's cart with quantity and total."""
        rows = self.db.rows(
            "SELECT inventories.product_name, cart_products.quantity, "
            "cart_products.total_price AS total FROM cart_products "
            "INNER JOIN inventories ON cart_products.inventory_id = inventories.id "
            "WHERE user_id = ?",
            user_id,
        )
        return [CartItem.from_row(row) for row in rows]

    def remove_from_cart(self, cart_product_id: int) -> None:
        """Remove one product entry from a cart."""
        self.db.execute("DELETE FROM cart_products WHERE id = ?", cart_product_id)

    def update_quantity_add(self, cart_id: int, inventory_id: int) -> None:
        """Raise the quantity of a product in a cart by one."""
        self.db.execute(
            "UPDATE line_items SET quantity = quantity + 1 "
            "WHERE cart_id = ? AND inventory_id = ?",
            cart_id,
            inventory_id,
        )

    def update_quantity_less(self, cart_id: int, inventory_id: int) -> None:
        """Lower the quantity of a product in a cart by one."""
        self.db.execute(
            "UPDATE line_items SET quantity = quantity - 1 "
            "WHERE cart_id = ? AND inventory_id = ?",
            cart_id,
            inventory_id,
        )

    def get_cart_id(self, user_id: int) -> int:
        """Return the user's cart id, or 0."""
        cart_id = self.db.scalar("SELECT id FROM carts WHERE user_id = ?", user_id)
        return int(cart_id) if cart_id is not None else 0

    def get_products_in_cart(self, cart_id: int) -> List[int]:
        """Return the inventory ids of the products in a cart."""
        return [
            int(value)
            for value in self.db.column(
                "SELECT inventory_id FROM line_items WHERE cart_id = ?", cart_id
            )
        ]

    def find_product_name(self, inventory_id: int) -> str:
        """Return the product's name, or an empty string."""
        name = self.db.scalar("SELECT product_name FROM inventories WHERE id = ?", inventory_id)
        return name if name is not None else ""

    def find_cart_quantity(self, cart_id: int, inventory_id: int) -> int:
        """Return how many of a product a cart holds, or 0."""
        quantity = self.db.scalar(
            "SELECT quantity FROM line_items WHERE cart_id = ? AND inventory_id = ?",
            cart_id,
            inventory_id,
        )
        return int(quantity) if quantity is not None else 0

    def find_price(self, inventory_id: int) -> float:
        """Return the product's price, or 0.0."""
        price = self.db.scalar("SELECT price FROM inventories WHERE id = ?", inventory_id)
        return float(price) if price is not None else 0.0

    def find_category(self, inventory_id: int) -> int:
        """Return the product's category id, or 0."""
        category = self.db.scalar(
            "SELECT category_id FROM inventories WHERE id = ?", inventory_id
        )
        return int(category) if category is not None else 0

    def find_offer_percentage(self, category_id: int) -> int:
        """Return the valid offer's discount for a category, or 0."""
        rate = self.db.scalar(
            "SELECT discount_rate FROM offers WHERE category_id = ? AND valid = ?",
            category_id,
            True,
        )
        return int(rate) if rate is not None else 0

    def find_user_from_reference(self, referral: str) -> int:
        """Return the id of the user owning this referral code, or 0."""
        user_id = self.db.scalar("SELECT id FROM users WHERE referral_code = ?", referral)
        return int(user_id) if user_id is not None else 0

    def credit_reference_points_to_wallet(self, user_id: int) -> None:
        """Add the referral bonus to the user's wallet."""
        self.db.execute(
            "UPDATE wallets SET amount = amount + ? WHERE user_id = ?", REFERRAL_BONUS, user_id
        )

    def get_referral_code_from_id(self, user_id: int) -> str:
        """Return the user's referral code, or an empty string."""
        code = self.db.scalar("SELECT referral_code FROM users WHERE id = ?", user_id)
        return code if code is not None else ""