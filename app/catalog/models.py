"""SQLAlchemy models for the product catalog.

Defines Product, Category and Variant tables for persistent storage.
"""

from decimal import Decimal
from typing import Optional
from uuid import uuid4

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.database import Base


class Product(Base):
    """Product entity in the catalog.

    Products are created by seed/migration processes and are read-only
    from the catalog service's point of view.

    Attributes:
        id: Surrogate identifier, ascending in insertion order.
        code: Unique human-readable product code (e.g., "PROD001").
        price: Product price as an exact decimal.
        category: The product's category. With several rows, the oldest one.
        variants: Variants ordered by identifier.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    # Relationships
    category: Mapped[Optional["Category"]] = relationship(
        "Category",
        back_populates="product",
        uselist=False,
        order_by="Category.id",
    )
    variants: Mapped[list["Variant"]] = relationship(
        "Variant",
        back_populates="product",
        order_by="Variant.id",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, code={self.code}, price={self.price})>"


class Category(Base):
    """Product category.

    Attributes:
        id: Category identifier.
        product_id: Owning product ID.
        code: Globally unique opaque code (UUID string).
        name: Display name, matched exactly by the catalog filter.
    """

    __tablename__ = "product_categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    code: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        unique=True,
        default=lambda: str(uuid4()),
    )
    name: Mapped[str] = mapped_column(String(256), nullable=False, index=True)

    product: Mapped["Product"] = relationship("Product", back_populates="category")

    def __repr__(self) -> str:
        """String representation."""
        return f"<Category(id={self.id}, name={self.name})>"


class Variant(Base):
    """Product variant (e.g., size or colour).

    A stored price of zero means the variant has no price of its own and
    inherits the parent product's price when presented.

    Attributes:
        id: Variant identifier.
        product_id: Parent product ID.
        name: Variant name.
        sku: Stock keeping unit.
        price: Variant price, zero when inherited.
    """

    __tablename__ = "product_variants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    sku: Mapped[str] = mapped_column(String(256), nullable=False)
    price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2),
        nullable=False,
        default=Decimal("0"),
    )

    product: Mapped["Product"] = relationship("Product", back_populates="variants")

    def __repr__(self) -> str:
        """String representation."""
        return f"<Variant(id={self.id}, sku={self.sku})>"
