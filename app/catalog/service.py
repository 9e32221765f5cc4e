"""Catalog service for category and product operations.

High-level service that combines repository operations with
not-found semantics and logging.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog.filters import FilterEncoding, ProductFilter
from app.catalog.records import CategoryData, CategoryRecord, ProductData, ProductRecord
from app.catalog.repository import CategoryRepository, ProductRepository
from app.domain.exceptions import CategoryNotFoundError, ProductNotFoundError

logger = structlog.get_logger()


class CatalogService:
    """Service for catalog operations.

    Example usage:
        async with async_session_factory() as session:
            service = CatalogService(session)
            results = await service.search_products(
                ProductFilter.from_raw(category_id=1, max_price="20"),
            )
    """

    def __init__(
        self,
        session: AsyncSession,
        encoding: FilterEncoding | str = FilterEncoding.EXPRESSION,
    ) -> None:
        """Initialize service with database session.

        Args:
            session: Async SQLAlchemy session.
            encoding: Absent-filter encoding used for product search.
        """
        self.session = session
        self.products = ProductRepository(session, encoding)
        self.categories = CategoryRepository(session)

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    async def list_categories(self) -> list[CategoryRecord]:
        """Get all categories."""
        return await self.categories.list_all()

    async def get_category(self, category_id: int) -> CategoryRecord:
        """Get category by ID.

        Args:
            category_id: Category ID.

        Returns:
            The category.

        Raises:
            CategoryNotFoundError: If the category doesn't exist.
        """
        category = await self.categories.get_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category

    async def create_category(self, data: CategoryData) -> CategoryRecord:
        """Create a category.

        Args:
            data: Category fields.

        Returns:
            Created category.
        """
        category = await self.categories.create(data)
        await self.session.commit()
        logger.info("Category created", category_id=category.category_id, name=category.name)
        return category

    async def update_category(self, category_id: int, data: CategoryData) -> None:
        """Update a category.

        Raises:
            CategoryNotFoundError: If the category doesn't exist.
        """
        await self.get_category(category_id)
        await self.categories.update(category_id, data)
        await self.session.commit()
        logger.info("Category updated", category_id=category_id)

    async def delete_category(self, category_id: int) -> None:
        """Delete a category.

        Raises:
            CategoryNotFoundError: If the category doesn't exist.
        """
        await self.get_category(category_id)
        await self.categories.delete(category_id)
        await self.session.commit()
        logger.info("Category deleted", category_id=category_id)

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    async def list_products_by_category(self, category_id: int) -> list[ProductRecord]:
        """Get all products in a category.

        Args:
            category_id: Category ID.

        Returns:
            Products in the category (empty if none).
        """
        return await self.products.list_by_category(category_id)

    async def search_products(self, product_filter: ProductFilter) -> list[ProductRecord]:
        """Search products by any combination of filters.

        Args:
            product_filter: Filters to apply.

        Returns:
            Matching products.
        """
        results = await self.products.search(product_filter)
        logger.debug(
            "Product search",
            encoding=self.products.query_builder.encoding.value,
            result_count=len(results),
            **product_filter.to_dict(),
        )
        return results

    async def get_product(self, product_id: int) -> ProductRecord:
        """Get product by ID.

        Raises:
            ProductNotFoundError: If the product doesn't exist.
        """
        product = await self.products.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def create_product(self, data: ProductData) -> ProductRecord:
        """Create a product.

        Args:
            data: Product fields.

        Returns:
            Created product.
        """
        product = await self.products.create(data)
        await self.session.commit()
        logger.info(
            "Product created",
            product_id=product.product_id,
            category_id=product.category_id,
        )
        return product

    async def update_product(self, product_id: int, data: ProductData) -> None:
        """Update a product.

        Raises:
            ProductNotFoundError: If the product doesn't exist.
        """
        await self.get_product(product_id)
        await self.products.update(product_id, data)
        await self.session.commit()
        logger.info("Product updated", product_id=product_id)

    async def delete_product(self, product_id: int) -> None:
        """Delete a product.

        Raises:
            ProductNotFoundError: If the product doesn't exist.
        """
        await self.get_product(product_id)
        await self.products.delete(product_id)
        await self.session.commit()
        logger.info("Product deleted", product_id=product_id)


def get_catalog_service(
    session: AsyncSession,
    encoding: FilterEncoding | str | None = None,
) -> CatalogService:
    """Get catalog service instance.

    Args:
        session: Async SQLAlchemy session.
        encoding: Filter encoding, defaults to the configured one.

    Returns:
        CatalogService instance.
    """
    from app.infrastructure.config import settings

    return CatalogService(session, encoding or settings.catalog_filter_encoding)
