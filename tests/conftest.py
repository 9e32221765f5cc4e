"""Shared fixtures for catalog tests.

Every test gets its own SQLite database file, so tests never share
storage state.
"""

import asyncio
import os
from collections.abc import AsyncGenerator, Generator
from decimal import Decimal
from pathlib import Path
from typing import Any

# Settings are read at import time; point them at SQLite before the app loads.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./.pytest_catalog.db")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app.catalog.models import Category, Product
from app.infrastructure.config import settings
from app.infrastructure.database import Base, get_session
from app.main import app


# ============================================================================
# Catalog Data
# ============================================================================


CATEGORIES: list[dict[str, Any]] = [
    {"category_id": 1, "name": "Footwear", "description": "Shoes and boots"},
    {"category_id": 2, "name": "Accessories", "description": "Hats and bags"},
    {"category_id": 3, "name": "Outdoor", "description": None},
]

# P1..P3 form the reference scenario; the rest widen the property checks.
PRODUCTS: list[dict[str, Any]] = [
    {"product_id": 1, "name": "P1", "price": Decimal("10.00"), "category_id": 1, "subcategory": "shoes"},
    {"product_id": 2, "name": "P2", "price": Decimal("50.00"), "category_id": 1, "subcategory": "shoes"},
    {"product_id": 3, "name": "P3", "price": Decimal("10.00"), "category_id": 2, "subcategory": "hats"},
    {"product_id": 4, "name": "Trail Boot", "price": Decimal("20.00"), "category_id": 1, "subcategory": "boots"},
    {"product_id": 5, "name": "Sun Hat", "price": Decimal("0.00"), "category_id": 2, "subcategory": "hats"},
    {"product_id": 6, "name": "Tote", "price": Decimal("35.50"), "category_id": 2, "subcategory": None},
    {"product_id": 7, "name": "Tent", "price": Decimal("199.99"), "category_id": 3, "subcategory": "camping"},
    {"product_id": 8, "name": "Camp Shoe", "price": Decimal("30.00"), "category_id": 3, "subcategory": "shoes"},
]


def product_rows() -> list[dict[str, Any]]:
    """Full product rows with defaults for the non-filter columns."""
    return [
        {
            "description": f"{row['name']} description",
            "image_url": f"{row['product_id']}.jpg",
            "stock": 10,
            "featured": row["product_id"] % 2 == 0,
            **row,
        }
        for row in PRODUCTS
    ]


async def create_catalog(engine: AsyncEngine) -> None:
    """Create tables and insert the test catalog."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.execute(insert(Category.__table__), CATEGORIES)
        await conn.execute(insert(Product.__table__), product_rows())


def sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path / 'catalog.db'}"


# ============================================================================
# Storage Fixtures
# ============================================================================


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Create an engine over a seeded, per-test SQLite database."""
    engine = create_async_engine(sqlite_url(tmp_path), poolclass=NullPool)
    await create_catalog(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a session bound to the test database."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest.fixture
def client(tmp_path: Path) -> Generator[TestClient, None, None]:
    """Create test client without authentication, backed by the test catalog."""
    engine = create_async_engine(sqlite_url(tmp_path), poolclass=NullPool)
    asyncio.run(create_catalog(engine))
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()
    asyncio.run(engine.dispose())


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Get admin authentication headers."""
    return {"Authorization": f"Bearer {settings.admin_api_key}"}
