"""Catalog repositories for database operations.

Execute statements against storage and map each returned row to a
read-only record, preserving the order rows come back in.
"""

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog.filters import FilterEncoding, ProductFilter, ProductQueryBuilder
from app.catalog.models import Category, Product
from app.catalog.records import CategoryData, CategoryRecord, ProductData, ProductRecord

products = Product.__table__
categories = Category.__table__


class ProductRepository:
    """Repository for Product database operations.

    Example usage:
        async with get_session() as session:
            repo = ProductRepository(session)
            products = await repo.search(
                ProductFilter(category_id=1, max_price=Decimal("20")),
            )
    """

    def __init__(
        self,
        session: AsyncSession,
        encoding: FilterEncoding | str = FilterEncoding.EXPRESSION,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
            encoding: Absent-filter encoding used by search.
        """
        self.session = session
        self.query_builder = ProductQueryBuilder(encoding)

    async def search(self, product_filter: ProductFilter) -> list[ProductRecord]:
        """Find products matching every present filter.

        Args:
            product_filter: Filters to apply.

        Returns:
            Matching products in product_id order.
        """
        result = await self.session.execute(self.query_builder.build(product_filter))
        return [ProductRecord.from_row(row) for row in result.mappings()]

    async def list_by_category(self, category_id: int) -> list[ProductRecord]:
        """List all products in a category.

        Args:
            category_id: Category ID.

        Returns:
            Products in the category.
        """
        query = (
            select(products)
            .where(products.c.category_id == category_id)
            .order_by(products.c.product_id)
        )
        result = await self.session.execute(query)
        return [ProductRecord.from_row(row) for row in result.mappings()]

    async def get_by_id(self, product_id: int) -> ProductRecord | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """
        query = select(products).where(products.c.product_id == product_id)
        result = await self.session.execute(query)
        row = result.mappings().one_or_none()
        return ProductRecord.from_row(row) if row is not None else None

    async def create(self, data: ProductData) -> ProductRecord:
        """Insert a product.

        Args:
            data: Product fields.

        Returns:
            Stored product, including its generated ID.
        """
        result = await self.session.execute(insert(products).values(**data.to_values()))
        query = select(products).where(products.c.product_id == result.inserted_primary_key[0])
        created = await self.session.execute(query)
        return ProductRecord.from_row(created.mappings().one())

    async def update(self, product_id: int, data: ProductData) -> None:
        """Replace all writable fields of a product.

        Args:
            product_id: Product ID.
            data: New product fields.
        """
        await self.session.execute(
            update(products)
            .where(products.c.product_id == product_id)
            .values(**data.to_values())
        )

    async def delete(self, product_id: int) -> None:
        """Delete a product.

        Args:
            product_id: Product ID.
        """
        await self.session.execute(delete(products).where(products.c.product_id == product_id))


class CategoryRepository:
    """Repository for Category database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def list_all(self) -> list[CategoryRecord]:
        """List all categories.

        Returns:
            Categories in category_id order.
        """
        result = await self.session.execute(select(categories).order_by(categories.c.category_id))
        return [CategoryRecord.from_row(row) for row in result.mappings()]

    async def get_by_id(self, category_id: int) -> CategoryRecord | None:
        """Get category by ID.

        Args:
            category_id: Category ID.

        Returns:
            Category if found, None otherwise.
        """
        query = select(categories).where(categories.c.category_id == category_id)
        result = await self.session.execute(query)
        row = result.mappings().one_or_none()
        return CategoryRecord.from_row(row) if row is not None else None

    async def create(self, data: CategoryData) -> CategoryRecord:
        """Insert a category.

        Args:
            data: Category fields.

        Returns:
            Stored category, including its generated ID.
        """
        result = await self.session.execute(insert(categories).values(**data.to_values()))
        return CategoryRecord(
            category_id=result.inserted_primary_key[0],
            name=data.name,
            description=data.description,
        )

    async def update(self, category_id: int, data: CategoryData) -> None:
        """Replace name and description of a category.

        Args:
            category_id: Category ID.
            data: New category fields.
        """
        await self.session.execute(
            update(categories)
            .where(categories.c.category_id == category_id)
            .values(**data.to_values())
        )

    async def delete(self, category_id: int) -> None:
        """Delete a category.

        Args:
            category_id: Category ID.
        """
        await self.session.execute(delete(categories).where(categories.c.category_id == category_id))
