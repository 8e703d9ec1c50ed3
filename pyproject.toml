[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jerseyhub"
version = "0.1.0"
description = "Repository classes for a jersey shop: users, carts, inventory, orders, coupons, offers and wishlists over a DB-API connection."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "e-commerce",
    "shop",
    "repository",
    "inventory",
    "orders",
    "cart",
    "sql",
    "db-api",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jerseyhub"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
