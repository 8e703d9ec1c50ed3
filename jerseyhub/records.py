"""Records that the repositories read from and write to the store."""

from dataclasses import dataclass, fields
from typing import Any, Mapping


def _coerce(kind: Any, value: Any) -> Any:
    if kind in (bool, int, float, str):
        return kind(value)
    return value


def from_row(cls, row: Mapping[str, Any]):
    """Build a record of type ``cls`` from a row, ignoring unknown columns.

    Missing columns and NULL values keep the field's default.
    """
    values = {
        f.name: _coerce(f.type, row[f.name])
        for f in fields(cls)
        if f.name in row and row[f.name] is not None
    }
    return cls(**values)


class _Record:
    @classmethod
    def from_row(cls, row: Mapping[str, Any]):
        """Build a record from a row, ignoring unknown columns."""
        return from_row(cls, row)


@dataclass
class AdminLogin(_Record):
    email: str = ""
    password: str = ""


@dataclass
class Admin(_Record):
    id: int = 0
    username: str = ""
    password: str = ""


@dataclass
class User(_Record):
    id: int = 0
    name: str = ""
    email: str = ""
    password: str = ""
    phone: str = ""
    blocked: bool = False


@dataclass
class UserDetailsAtAdmin(_Record):
    id: int = 0
    name: str = ""
    email: str = ""
    phone: str = ""
    blocked: bool = False


@dataclass
class Address(_Record):
    id: int = 0
    user_id: int = 0
    name: str = ""
    house_name: str = ""
    street: str = ""
    city: str = ""
    state: str = ""
    pin: str = ""
    default: bool = False


@dataclass
class NewAddress(_Record):
    name: str = ""
    house_name: str = ""
    street: str = ""
    city: str = ""
    state: str = ""
    pin: str = ""


@dataclass
class CartItem(_Record):
    product_name: str = ""
    quantity: int = 0
    total: float = 0.0


@dataclass
class PaymentMethod(_Record):
    id: int = 0
    payment_name: str = ""


@dataclass
class Category(_Record):
    id: int = 0
    category: str = ""


@dataclass
class Coupon(_Record):
    coupon: str = ""
    discount_rate: int = 0
    valid: bool = True


@dataclass
class NewInventory(_Record):
    category_id: int = 0
    product_name: str = ""
    size: str = ""
    stock: int = 0
    price: float = 0.0


@dataclass
class InventoryResponse(_Record):
    product_id: int = 0
    stock: int = 0


@dataclass
class Inventory(_Record):
    id: int = 0
    category_id: int = 0
    product_name: str = ""
    size: str = ""
    stock: int = 0
    price: float = 0.0
    image: str = ""


@dataclass
class NewOffer(_Record):
    category_id: int = 0
    discount: int = 0


@dataclass
class Order(_Record):
    id: int = 0
    order_id: str = ""
    user_id: int = 0
    address_id: int = 0
    payment_method_id: int = 0
    final_price: float = 0.0
    order_status: str = ""
    payment_status: str = ""


@dataclass
class OrderDetails(_Record):
    order_id: int = 0
    username: str = ""
    address: str = ""
    payment_method: str = ""
    total: float = 0.0


@dataclass
class UserDetails(_Record):
    name: str = ""
    email: str = ""
    phone: str = ""
    password: str = ""


@dataclass
class UserDetailsResponse(_Record):
    id: int = 0
    name: str = ""
    email: str = ""
    phone: str = ""


@dataclass
class UserSignInResponse(_Record):
    id: int = 0
    user_id: int = 0
    name: str = ""
    email: str = ""
    phone: str = ""
    password: str = ""


@dataclass
class UserLogin(_Record):
    email: str = ""
    password: str = ""