"""API schemas for the Catalog API.

Pydantic models for request/response validation and serialization.
JSON field names are camelCase.
"""

from decimal import Decimal
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from app.catalog.records import CategoryData, CategoryRecord, ProductData, ProductRecord

# Largest value the INTEGER id, category and stock columns hold.
MAX_INT = 2**31 - 1


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Category Schemas
# ============================================================================


class CategoryRequest(BaseModel):
    """Request to create or update a category."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=50, description="Category name")
    description: str | None = Field(default=None, description="Category description")

    def to_data(self) -> CategoryData:
        """Convert to writable category fields."""
        return CategoryData(name=self.name, description=self.description)


class CategoryResponse(BaseModel):
    """Category representation."""

    model_config = ConfigDict(populate_by_name=True)

    category_id: int = Field(..., alias="categoryId", description="Category identifier")
    name: str = Field(..., description="Category name")
    description: str | None = Field(default=None, description="Category description")

    @classmethod
    def from_record(cls, record: CategoryRecord) -> Self:
        """Build response from a stored category."""
        return cls(
            category_id=record.category_id,
            name=record.name,
            description=record.description,
        )


# ============================================================================
# Product Schemas
# ============================================================================


class ProductRequest(BaseModel):
    """Request to create or update a product."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=200, description="Product name")
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Unit price")
    category_id: int = Field(
        ..., ge=0, le=MAX_INT, alias="categoryId", description="Owning category"
    )
    description: str | None = Field(default=None, description="Product description")
    sub_category: str | None = Field(
        default=None,
        min_length=1,
        max_length=50,
        alias="subCategory",
        description="Sub-category name",
    )
    stock: int = Field(default=0, ge=0, le=MAX_INT, description="Units in stock")
    featured: bool = Field(default=False, description="Featured on the storefront")
    image_url: str | None = Field(
        default=None, max_length=200, alias="imageUrl", description="Image reference"
    )

    def to_data(self) -> ProductData:
        """Convert to writable product fields."""
        return ProductData(
            name=self.name,
            price=self.price,
            category_id=self.category_id,
            description=self.description,
            sub_category=self.sub_category,
            stock=self.stock,
            featured=self.featured,
            image_url=self.image_url,
        )


class ProductResponse(BaseModel):
    """Product representation."""

    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(..., alias="productId", description="Product identifier")
    name: str = Field(..., description="Product name")
    price: Decimal = Field(..., description="Unit price")
    category_id: int = Field(..., alias="categoryId", description="Owning category")
    description: str | None = Field(default=None, description="Product description")
    sub_category: str | None = Field(default=None, alias="subCategory", description="Sub-category")
    stock: int = Field(..., description="Units in stock")
    featured: bool = Field(..., description="Featured flag")
    image_url: str | None = Field(default=None, alias="imageUrl", description="Image reference")

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        """Serialize price as a JSON number."""
        return float(price)

    @classmethod
    def from_record(cls, record: ProductRecord) -> Self:
        """Build response from a stored product."""
        return cls(
            product_id=record.product_id,
            name=record.name,
            price=record.price,
            category_id=record.category_id,
            description=record.description,
            sub_category=record.sub_category,
            stock=record.stock,
            featured=record.featured,
            image_url=record.image_url,
        )
