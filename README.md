# jerseyhub

The data-access layer of an online jersey shop. It keeps the SQL for
users, addresses, carts, inventory, categories, orders, wallets, coupons,
offers, payments and wishlists in one place, behind a set of repository
classes that return plain dataclass records.

## Installing

```
pip install .
```

The package has no runtime dependencies. Install the test extra to run
the test suite:

```
pip install ".[test]"
pytest
```

## Connecting

Every repository works on a `jerseyhub.database.Database`, which wraps an
open DB-API connection. The SQL uses `?` placeholders, so the driver must
accept that parameter style; `sqlite3` does. A few statements use
`INSERT ... RETURNING`, which SQLite supports from version 3.35.

```python
import sqlite3

from jerseyhub.database import Database

db = Database(sqlite3.connect("shop.db"))
```

`Database` offers five helpers:

| Method                  | Returns                                              |
|-------------------------|------------------------------------------------------|
| `execute(sql, *args)`   | the number of rows the statement affected            |
| `rows(sql, *args)`      | every row, as a dict keyed by lower-cased column name |
| `first(sql, *args)`     | the first row, or `None`                             |
| `scalar(sql, *args)`    | the first column of the first row, or `None`         |
| `column(sql, *args)`    | the first column of every row, as a list             |

Each statement is committed once it has run. If the driver raises, the
connection is rolled back and the failure is raised again as
`jerseyhub.database.RepositoryError`.

## Repositories

| Module                | Class                 | Looks after                                   |
|-----------------------|-----------------------|-----------------------------------------------|
| `jerseyhub.admin`     | `AdminRepository`     | admin look-up, user listing, blocking users, payment methods |
| `jerseyhub.user`      | `UserRepository`      | sign-up, profile, addresses, cart, referrals  |
| `jerseyhub.otp`       | `OtpRepository`       | looking users up by phone number              |
| `jerseyhub.cart`      | `CartRepository`      | carts, line items, checkout options           |
| `jerseyhub.category`  | `CategoryRepository`  | product categories                            |
| `jerseyhub.inventory` | `InventoryRepository` | products, stock, prices, search               |
| `jerseyhub.order`     | `OrderRepository`     | orders, returns, cancellations, wallets       |
| `jerseyhub.payment`   | `PaymentRepository`   | payment status of orders                      |
| `jerseyhub.coupon`    | `CouponRepository`    | discount coupons                              |
| `jerseyhub.offer`     | `OfferRepository`     | category-wide offers                          |
| `jerseyhub.wishlist`  | `WishlistRepository`  | wishlists                                     |

Rows come back as the dataclasses in `jerseyhub.records`, such as
`Inventory`, `Order`, `Address`, `CartItem` and `UserDetailsResponse`.
Each record has a `from_row(row)` class method (also available as the
function `jerseyhub.records.from_row(cls, row)`) that builds it from a
row mapping: unknown columns are ignored, and missing columns or NULL
values keep the field's default.

## Example

```python
from jerseyhub.category import CategoryRepository
from jerseyhub.database import RepositoryError
from jerseyhub.inventory import InventoryRepository
from jerseyhub.records import Category

categories = CategoryRepository(db)
if not categories.check_category("Home Kits"):
    print(categories.add_category(Category(category="Home Kits")))

inventory = InventoryRepository(db)
for product in inventory.list_products(1):   # five products per page
    print(product)

print(inventory.check_stock(3), inventory.check_price(3))

try:
    inventory.delete_inventory("42")
except RepositoryError as error:
    print(error)                              # "no records with that ID exist"
```

## Behaviour worth knowing

- Failures are raised as `RepositoryError`. Some methods replace the
  driver's message with a fixed one, for example `"could not add address"`
  from `UserRepository.add_address` or `"error checking user details"`
  from `UserRepository.find_user_by_email`.
- Methods that take an id as text (`AdminRepository.get_user_by_id`,
  `CategoryRepository.delete_category`, `InventoryRepository.delete_inventory`,
  `InventoryRepository.show_individual_product`) raise `RepositoryError`
  when the text is not an integer.
- Yes-or-no look-ups such as `UserRepository.check_user_availability`,
  `UserRepository.check_if_first_address` and
  `OtpRepository.find_user_by_mobile_number` return `False` when the
  query fails; `CouponRepository.find_coupon_discount` returns `0`.
- Single-value look-ups return `0`, `0.0` or `""` when no row matches.
- `InventoryRepository.add_inventory` does not report failures and always
  returns an empty `InventoryResponse`; `OrderRepository.order_items`
  returns `0` when the insert fails.
- `AdminRepository.get_users` and `InventoryRepository.list_products`
  page five rows at a time; page `0` is treated as page `1`.
- `OrderRepository.credit_to_user_wallet` sets the wallet's balance to the
  given amount rather than adding to it;
  `UserRepository.credit_reference_points_to_wallet` adds a fixed bonus
  of 20.
- `PaymentRepository.update_payment_details` marks the order `PAID`; the
  payment and gateway ids it is given are not stored.

## What the package does not do

It only runs queries against tables that already exist. It does not
create or migrate the schema, hash or check passwords, send one-time
passwords, talk to a payment gateway, or serve an HTTP API, and it
installs no command-line program. Those belong to the application that
uses these repositories.