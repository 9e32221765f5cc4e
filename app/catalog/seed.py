"""Demo catalog data.

A small, fixed catalog used by the seeding script and handy for local
development against an empty database.
"""

from dataclasses import replace
from decimal import Decimal
from typing import Any

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog.models import Category, Product
from app.catalog.records import CategoryData, ProductData
from app.catalog.repository import CategoryRepository, ProductRepository

DEMO_CATEGORIES: list[tuple[CategoryData, list[ProductData]]] = [
    (
        CategoryData(name="Electronics", description="Explore the latest gadgets and electronic devices."),
        [
            ProductData(
                name="Smartphone",
                price=Decimal("499.99"),
                category_id=0,
                description="A powerful and feature-rich smartphone for all your communication needs.",
                sub_category="Black",
                stock=50,
                featured=False,
                image_url="smartphone.jpg",
            ),
            ProductData(
                name="Laptop",
                price=Decimal("899.99"),
                category_id=0,
                description="A high-performance laptop for work and entertainment.",
                sub_category="Gray",
                stock=30,
                featured=False,
                image_url="laptop.jpg",
            ),
            ProductData(
                name="Headphones",
                price=Decimal("99.99"),
                category_id=0,
                description="Immerse yourself in music with these high-quality headphones.",
                sub_category="White",
                stock=100,
                featured=True,
                image_url="headphones.jpg",
            ),
        ],
    ),
    (
        CategoryData(name="Fashion", description="Discover trendy clothing and accessories for men and women."),
        [
            ProductData(
                name="Men's T-Shirt",
                price=Decimal("29.99"),
                category_id=0,
                description="A comfortable and stylish t-shirt for everyday wear.",
                sub_category="Black",
                stock=50,
                featured=False,
                image_url="mens-tshirt.jpg",
            ),
            ProductData(
                name="Women's Dress",
                price=Decimal("59.99"),
                category_id=0,
                description="A beautiful and elegant dress for special occasions.",
                sub_category="Red",
                stock=20,
                featured=True,
                image_url="womens-dress.jpg",
            ),
        ],
    ),
    (
        CategoryData(name="Home & Kitchen", description="Find everything you need to decorate and equip your home."),
        [
            ProductData(
                name="Cookware Set",
                price=Decimal("149.99"),
                category_id=0,
                description="A comprehensive set of high-quality cookware for your kitchen.",
                sub_category="Silver",
                stock=40,
                featured=True,
                image_url="cookware-set.jpg",
            ),
            ProductData(
                name="Coffee Maker",
                price=Decimal("79.99"),
                category_id=0,
                description="Brew delicious coffee at home with this programmable coffee maker.",
                sub_category="Black",
                stock=25,
                featured=False,
                image_url="coffee-maker.jpg",
            ),
        ],
    ),
]


async def seed_catalog(session: AsyncSession, clear_existing: bool = True) -> dict[str, Any]:
    """Load the demo catalog.

    Args:
        session: Async SQLAlchemy session.
        clear_existing: Whether to delete existing products and categories first.

    Returns:
        Seeding result with counts.
    """
    deleted = 0
    if clear_existing:
        result = await session.execute(delete(Product))
        deleted = result.rowcount
        await session.execute(delete(Category))

    categories = CategoryRepository(session)
    products = ProductRepository(session)

    product_count = 0
    for category_data, product_rows in DEMO_CATEGORIES:
        category = await categories.create(category_data)
        for product_data in product_rows:
            await products.create(replace(product_data, category_id=category.category_id))
            product_count += 1

    await session.commit()

    return {
        "deleted": deleted,
        "categories_created": len(DEMO_CATEGORIES),
        "products_created": product_count,
    }
