"""SQLAlchemy models for the product catalog.

Defines Category and Product tables for persistent storage.
"""

from decimal import Decimal

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database import Base


class Category(Base):
    """Category of products.

    Attributes:
        category_id: Storage-assigned identifier (never negative).
        name: Category name.
        description: Category description.
    """

    __tablename__ = "categories"

    category_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint("category_id >= 0", name="ck_categories_category_id_non_negative"),
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Category(category_id={self.category_id}, name={self.name})>"


class Product(Base):
    """Product entity in the catalog.

    The check constraints keep the filter sentinels (-1 and '') out of
    stored data, so a sentinel can never be mistaken for a real value.

    Attributes:
        product_id: Storage-assigned identifier.
        name: Product name.
        price: Unit price, non-negative.
        category_id: Owning category.
        description: Product description.
        subcategory: Optional sub-category name, never empty.
        image_url: Product image reference.
        stock: Units in stock, non-negative.
        featured: Whether the product is featured on the storefront.
    """

    __tablename__ = "products"

    product_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("categories.category_id"),
        nullable=False,
        index=True,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    subcategory: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    image_url: Mapped[str | None] = mapped_column(String(200), nullable=True)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
        CheckConstraint("category_id >= 0", name="ck_products_category_id_non_negative"),
        CheckConstraint("subcategory <> ''", name="ck_products_subcategory_not_empty"),
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(product_id={self.product_id}, name={self.name[:30]})>"
