"""Read models returned by the catalog store.

Records are immutable snapshots of stored rows, owned by the caller.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Self


@dataclass(frozen=True)
class CategoryRecord:
    """Category as read from storage."""

    category_id: int
    name: str
    description: str | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Self:
        """Map a categories row by column name.

        Args:
            row: Row mapping with category columns.

        Returns:
            CategoryRecord instance.
        """
        return cls(
            category_id=row["category_id"],
            name=row["name"],
            description=row["description"],
        )


@dataclass(frozen=True)
class ProductRecord:
    """Product as read from storage.

    Attributes:
        product_id: Product identifier.
        name: Product name.
        price: Unit price.
        category_id: Owning category identifier.
        description: Product description.
        sub_category: Sub-category name, if any.
        stock: Units in stock.
        featured: Featured flag.
        image_url: Image reference.
    """

    product_id: int
    name: str
    price: Decimal
    category_id: int
    description: str | None = None
    sub_category: str | None = None
    stock: int = 0
    featured: bool = False
    image_url: str | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Self:
        """Map a products row by column name.

        Args:
            row: Row mapping with the full product column set.

        Returns:
            ProductRecord instance.
        """
        return cls(
            product_id=row["product_id"],
            name=row["name"],
            price=Decimal(row["price"]),
            category_id=row["category_id"],
            description=row["description"],
            sub_category=row["subcategory"],
            stock=row["stock"],
            featured=bool(row["featured"]),
            image_url=row["image_url"],
        )


@dataclass(frozen=True)
class ProductData:
    """Writable product fields, as supplied by create and update calls."""

    name: str
    price: Decimal
    category_id: int
    description: str | None = None
    sub_category: str | None = None
    stock: int = 0
    featured: bool = False
    image_url: str | None = None

    def to_values(self) -> dict[str, Any]:
        """Convert to column values.

        Returns:
            Dictionary keyed by products column name.
        """
        return {
            "name": self.name,
            "price": self.price,
            "category_id": self.category_id,
            "description": self.description,
            "subcategory": self.sub_category or None,
            "image_url": self.image_url,
            "stock": self.stock,
            "featured": self.featured,
        }


@dataclass(frozen=True)
class CategoryData:
    """Writable category fields."""

    name: str
    description: str | None = None

    def to_values(self) -> dict[str, Any]:
        """Convert to column values."""
        return {"name": self.name, "description": self.description}
