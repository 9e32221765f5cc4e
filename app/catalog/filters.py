"""Product filtering.

Turns an arbitrary combination of optional filters (category, price range,
sub-category) into a single SELECT over the products table.

Two encodings are supported for "this filter was not supplied":

- ``expression``: only supplied filters become comparison nodes, and the
  nodes are AND-ed together. Nothing is emitted for an absent filter.
- ``sentinel``: every filter always becomes
  ``(column <op> :value OR :value = <sentinel>)``. An absent filter binds
  its sentinel to both placeholders, which makes the clause always true.
  Relies on the schema never storing a sentinel value.
"""

from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Self

from sqlalchemy import ColumnElement, Integer, Numeric, Select, String, and_, literal, literal_column, or_, select
from sqlalchemy.dialects import sqlite
from sqlalchemy.engine import Dialect

from app.catalog.models import Product
from app.domain.value_objects import FilterEncoding

products = Product.__table__

CATEGORY_SENTINEL = -1
PRICE_SENTINEL = Decimal("-1")
SUB_CATEGORY_SENTINEL = ""

# Price bounds bind as unconstrained NUMERIC. Binding them as the column's
# NUMERIC(10, 2) lets drivers that cast bound values round the bound first.
PRICE_BOUND_TYPE = Numeric()


@dataclass(frozen=True)
class ProductFilter:
    """Normalized product filters.

    ``None`` means the filter is absent and matches every product.

    Attributes:
        category_id: Restrict to this category.
        min_price: Inclusive lower price bound.
        max_price: Inclusive upper price bound.
        sub_category: Exact sub-category match.
    """

    category_id: int | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    sub_category: str | None = None

    @classmethod
    def from_raw(
        cls,
        category_id: int | str | None = None,
        min_price: Decimal | float | int | str | None = None,
        max_price: Decimal | float | int | str | None = None,
        sub_category: str | None = None,
    ) -> Self:
        """Build a filter from raw, possibly missing values.

        Only type conversion happens here. An empty sub-category is
        treated the same as a missing one.

        Args:
            category_id: Category identifier or None.
            min_price: Lower price bound or None.
            max_price: Upper price bound or None.
            sub_category: Sub-category name, None or empty.

        Returns:
            ProductFilter instance.
        """
        return cls(
            category_id=None if category_id is None else int(category_id),
            min_price=_to_decimal(min_price),
            max_price=_to_decimal(max_price),
            sub_category=sub_category or None,
        )

    @property
    def is_empty(self) -> bool:
        """Check if no filter is present (matches every product)."""
        return (
            self.category_id is None
            and self.min_price is None
            and self.max_price is None
            and self.sub_category is None
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert present filters to a dictionary (for logging)."""
        values = {
            "category_id": self.category_id,
            "min_price": str(self.min_price) if self.min_price is not None else None,
            "max_price": str(self.max_price) if self.max_price is not None else None,
            "sub_category": self.sub_category,
        }
        return {key: value for key, value in values.items() if value is not None}


def _to_decimal(value: Decimal | float | int | str | None) -> Decimal | None:
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    # str() first so floats keep their printed value
    return Decimal(str(value))


@dataclass(frozen=True)
class CompiledQuery:
    """Query text with its bound values in placeholder order."""

    text: str
    params: tuple[Any, ...]


class ProductQueryBuilder:
    """Builds the product search query for a ProductFilter.

    The builder is pure: the same filter always yields the same statement
    and the same bound values. It never touches the database.

    Example usage:
        builder = ProductQueryBuilder(FilterEncoding.SENTINEL)
        statement = builder.build(ProductFilter(category_id=1))
        rows = await session.execute(statement)
    """

    def __init__(self, encoding: FilterEncoding | str = FilterEncoding.EXPRESSION) -> None:
        """Initialize builder.

        Args:
            encoding: Absent-filter encoding to use.
        """
        self.encoding = FilterEncoding(encoding)

    def build(self, product_filter: ProductFilter) -> Select:
        """Build the search statement.

        Args:
            product_filter: Filters to apply.

        Returns:
            SELECT over all product columns, ordered by product_id.
        """
        query = select(products)

        if self.encoding is FilterEncoding.SENTINEL:
            query = query.where(self._sentinel_predicate(product_filter))
        else:
            conditions = self._expression_conditions(product_filter)
            if conditions:
                query = query.where(and_(*conditions))

        return query.order_by(products.c.product_id)

    def compile(
        self,
        product_filter: ProductFilter,
        dialect: Dialect | None = None,
    ) -> CompiledQuery:
        """Build and compile the search statement.

        Args:
            product_filter: Filters to apply.
            dialect: SQL dialect to compile for (defaults to SQLite).

        Returns:
            Query text and ordered bound values.
        """
        compiled = self.build(product_filter).compile(dialect=dialect or sqlite.dialect())
        if compiled.positiontup is not None:
            params = tuple(compiled.params[name] for name in compiled.positiontup)
        else:
            params = tuple(compiled.params.values())
        return CompiledQuery(text=str(compiled), params=params)

    def _expression_conditions(self, product_filter: ProductFilter) -> list[ColumnElement[bool]]:
        conditions: list[ColumnElement[bool]] = []

        if product_filter.category_id is not None:
            conditions.append(products.c.category_id == product_filter.category_id)

        if product_filter.min_price is not None:
            conditions.append(products.c.price >= literal(product_filter.min_price, PRICE_BOUND_TYPE))

        if product_filter.max_price is not None:
            conditions.append(products.c.price <= literal(product_filter.max_price, PRICE_BOUND_TYPE))

        if product_filter.sub_category is not None:
            conditions.append(products.c.subcategory == product_filter.sub_category)

        return conditions

    def _sentinel_predicate(self, product_filter: ProductFilter) -> ColumnElement[bool]:
        return and_(
            _sentinel_clause(
                products.c.category_id,
                lambda column, value: column == value,
                product_filter.category_id,
                CATEGORY_SENTINEL,
                Integer(),
                "-1",
            ),
            _sentinel_clause(
                products.c.price,
                lambda column, value: column >= value,
                product_filter.min_price,
                PRICE_SENTINEL,
                PRICE_BOUND_TYPE,
                "-1",
            ),
            _sentinel_clause(
                products.c.price,
                lambda column, value: column <= value,
                product_filter.max_price,
                PRICE_SENTINEL,
                PRICE_BOUND_TYPE,
                "-1",
            ),
            _sentinel_clause(
                products.c.subcategory,
                lambda column, value: column == value,
                product_filter.sub_category,
                SUB_CATEGORY_SENTINEL,
                String(),
                "''",
            ),
        )


def _sentinel_clause(
    column: ColumnElement[Any],
    compare: Callable[[ColumnElement[Any], ColumnElement[Any]], ColumnElement[bool]],
    value: Any,
    sentinel: Any,
    type_: Any,
    sentinel_sql: str,
) -> ColumnElement[bool]:
    """Build ``(column <op> :v OR :v = <sentinel>)``.

    Both placeholders receive the same value: the real one when the
    filter is present, the sentinel when it is absent.
    """
    bound = sentinel if value is None else value
    return or_(
        compare(column, literal(bound, type_)),
        literal(bound, type_) == literal_column(sentinel_sql),
    )
