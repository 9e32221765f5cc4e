"""Domain layer module.

Contains domain exceptions and value objects shared by the catalog,
API and configuration layers.
"""

from app.domain.exceptions import (
    CatalogError,
    CategoryNotFoundError,
    DomainError,
    ProductNotFoundError,
)
from app.domain.value_objects import FilterEncoding

__all__ = [
    "CatalogError",
    "CategoryNotFoundError",
    "DomainError",
    "FilterEncoding",
    "ProductNotFoundError",
]
