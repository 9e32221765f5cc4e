"""Product Catalog.

Provides category and product storage, the product filter query
builder, and catalog operations.
"""

from app.catalog.filters import (
    CompiledQuery,
    FilterEncoding,
    ProductFilter,
    ProductQueryBuilder,
)
from app.catalog.models import Category, Product
from app.catalog.records import CategoryData, CategoryRecord, ProductData, ProductRecord
from app.catalog.repository import CategoryRepository, ProductRepository
from app.catalog.service import CatalogService, get_catalog_service

__all__ = [
    # Filters
    "CompiledQuery",
    "FilterEncoding",
    "ProductFilter",
    "ProductQueryBuilder",
    # Models
    "Category",
    "Product",
    # Records
    "CategoryData",
    "CategoryRecord",
    "ProductData",
    "ProductRecord",
    # Repository
    "CategoryRepository",
    "ProductRepository",
    # Service
    "CatalogService",
    "get_catalog_service",
]
