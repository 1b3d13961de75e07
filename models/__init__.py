from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import BigInteger, Integer

# Use BigInteger in production but fall back to Integer for SQLite
BIGINT = BigInteger().with_variant(Integer, "sqlite")

db = SQLAlchemy()

# Re-export common models for convenience
from .shopkeeper import Shopkeeper, ShopkeeperSession  # noqa: E402,F401
from .item import Item  # noqa: E402,F401
from .order import Order  # noqa: E402,F401
