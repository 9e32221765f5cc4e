"""Domain exceptions.

All domain-level errors raised by catalog services. The API layer
translates them into HTTP error responses.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Catalog Errors
# ============================================================================


class CatalogError(DomainError):
    """Base class for catalog-related errors."""

    pass


class CategoryNotFoundError(CatalogError):
    """Raised when a category does not exist."""

    def __init__(self, category_id: int) -> None:
        """Initialize category not found error.

        Args:
            category_id: ID of the missing category.
        """
        super().__init__(
            f"Category {category_id} not found",
            details={"category_id": category_id},
        )
        self.category_id = category_id


class ProductNotFoundError(CatalogError):
    """Raised when a product does not exist."""

    def __init__(self, product_id: int) -> None:
        """Initialize product not found error.

        Args:
            product_id: ID of the missing product.
        """
        super().__init__(
            f"Product {product_id} not found",
            details={"product_id": product_id},
        )
        self.product_id = product_id
