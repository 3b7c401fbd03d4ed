from sqlalchemy import (
    JSON,
    Column,
    Float,
    Integer,
    String,
    DateTime,
    func,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declarative_base
import cuid2

from catalog.config import DEFAULT_DESCRIPTION, DEFAULT_STOCK


Base = declarative_base()

# JSONB on PostgreSQL, plain JSON elsewhere
DetailsType = JSON().with_variant(JSONB(), "postgresql")


class TimestampMixin:
    """Mixin for adding timestamp fields to models"""

    created_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class User(Base, TimestampMixin):
    """Account allowed to sign in and manage products"""

    __tablename__ = "users"

    id = Column(String, primary_key=True, default=cuid2.cuid_wrapper())
    mail = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)


class Product(Base, TimestampMixin):
    """Catalog product.

    The four product variants share this table; ``number_category`` selects
    the variant and ``details`` holds its variant-specific fields.
    """

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    description = Column(String, nullable=False, default=DEFAULT_DESCRIPTION)
    category = Column(String(255), nullable=False)
    number_category = Column(Integer, nullable=False, index=True)
    price = Column(Float, nullable=False)
    stock = Column(Integer, nullable=False, default=DEFAULT_STOCK)

    details = Column(DetailsType, nullable=False, default=dict)
