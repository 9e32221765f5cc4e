"""Tests for product filter normalization and query building."""

from decimal import Decimal

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import asyncpg

from app.catalog.filters import (
    CATEGORY_SENTINEL,
    PRICE_SENTINEL,
    SUB_CATEGORY_SENTINEL,
    FilterEncoding,
    ProductFilter,
    ProductQueryBuilder,
)


class TestProductFilter:
    """Tests for ProductFilter normalization."""

    def test_all_absent_is_empty(self) -> None:
        """A filter built from nothing matches everything."""
        product_filter = ProductFilter.from_raw()
        assert product_filter == ProductFilter()
        assert product_filter.is_empty

    def test_values_are_converted(self) -> None:
        """Raw values are converted to their field types."""
        product_filter = ProductFilter.from_raw(
            category_id="2",
            min_price="9.5",
            max_price=20,
            sub_category="hats",
        )
        assert product_filter.category_id == 2
        assert product_filter.min_price == Decimal("9.5")
        assert product_filter.max_price == Decimal("20")
        assert product_filter.sub_category == "hats"
        assert not product_filter.is_empty

    def test_float_price_keeps_printed_value(self) -> None:
        """Float prices convert without binary noise."""
        product_filter = ProductFilter.from_raw(min_price=19.99)
        assert product_filter.min_price == Decimal("19.99")

    def test_empty_sub_category_is_absent(self) -> None:
        """An empty sub-category means no sub-category filter."""
        product_filter = ProductFilter.from_raw(sub_category="")
        assert product_filter.sub_category is None
        assert product_filter.is_empty

    def test_zero_values_are_present(self) -> None:
        """Zero is a real value, not an absent one."""
        product_filter = ProductFilter.from_raw(category_id=0, min_price=0)
        assert product_filter.category_id == 0
        assert product_filter.min_price == Decimal("0")
        assert not product_filter.is_empty

    def test_to_dict_only_present_fields(self) -> None:
        """to_dict skips absent filters."""
        product_filter = ProductFilter.from_raw(category_id=1, max_price="20")
        assert product_filter.to_dict() == {"category_id": 1, "max_price": "20"}


class TestSentinelEncoding:
    """Tests for the sentinel-predicate query."""

    @pytest.fixture
    def builder(self) -> ProductQueryBuilder:
        return ProductQueryBuilder(FilterEncoding.SENTINEL)

    def test_absent_filters_bind_sentinels(self, builder: ProductQueryBuilder) -> None:
        """Every absent filter binds its sentinel to both placeholders."""
        compiled = builder.compile(ProductFilter())
        assert compiled.params == (
            CATEGORY_SENTINEL,
            CATEGORY_SENTINEL,
            PRICE_SENTINEL,
            PRICE_SENTINEL,
            PRICE_SENTINEL,
            PRICE_SENTINEL,
            SUB_CATEGORY_SENTINEL,
            SUB_CATEGORY_SENTINEL,
        )

    def test_present_filters_bind_real_values(self, builder: ProductQueryBuilder) -> None:
        """Present filters bind their value to both placeholders."""
        compiled = builder.compile(
            ProductFilter(
                category_id=1,
                min_price=Decimal("5"),
                max_price=Decimal("20"),
                sub_category="shoes",
            )
        )
        assert compiled.params == (
            1,
            1,
            Decimal("5"),
            Decimal("5"),
            Decimal("20"),
            Decimal("20"),
            "shoes",
            "shoes",
        )

    def test_mixed_filters(self, builder: ProductQueryBuilder) -> None:
        """Present and absent filters mix freely."""
        compiled = builder.compile(ProductFilter(category_id=1, max_price=Decimal("20")))
        assert compiled.params == (
            1,
            1,
            PRICE_SENTINEL,
            PRICE_SENTINEL,
            Decimal("20"),
            Decimal("20"),
            "",
            "",
        )

    def test_query_text_is_independent_of_values(self, builder: ProductQueryBuilder) -> None:
        """One query text serves every filter combination."""
        texts = {
            builder.compile(ProductFilter()).text,
            builder.compile(ProductFilter(category_id=3)).text,
            builder.compile(ProductFilter(min_price=Decimal("1"), sub_category="hats")).text,
        }
        assert len(texts) == 1

    def test_query_shape(self, builder: ProductQueryBuilder) -> None:
        """Each clause pairs a comparison with a sentinel check."""
        text = builder.compile(ProductFilter()).text
        assert text.count("?") == 8
        assert "products.category_id = ?" in text
        assert "products.price >= ?" in text
        assert "products.price <= ?" in text
        assert "products.subcategory = ?" in text
        assert text.count("? = -1") == 3
        assert "? = ''" in text
        assert "ORDER BY products.product_id" in text


class TestExpressionEncoding:
    """Tests for the expression-tree query."""

    @pytest.fixture
    def builder(self) -> ProductQueryBuilder:
        return ProductQueryBuilder(FilterEncoding.EXPRESSION)

    def test_is_default(self) -> None:
        """Expression encoding is the default."""
        assert ProductQueryBuilder().encoding is FilterEncoding.EXPRESSION

    def test_identity_has_no_where(self, builder: ProductQueryBuilder) -> None:
        """No filters means no WHERE clause and no bound values."""
        compiled = builder.compile(ProductFilter())
        assert "WHERE" not in compiled.text
        assert compiled.params == ()

    def test_only_present_filters_are_bound(self, builder: ProductQueryBuilder) -> None:
        """Absent filters contribute nothing to the query."""
        compiled = builder.compile(ProductFilter(category_id=1, sub_category="shoes"))
        assert compiled.params == (1, "shoes")
        assert "price" not in compiled.text.split("WHERE", 1)[1]

    def test_clause_order(self, builder: ProductQueryBuilder) -> None:
        """Bound values follow category, min, max, sub-category order."""
        compiled = builder.compile(
            ProductFilter(
                category_id=2,
                min_price=Decimal("1"),
                max_price=Decimal("2"),
                sub_category="hats",
            )
        )
        assert compiled.params == (2, Decimal("1"), Decimal("2"), "hats")
        assert " AND " in compiled.text


class TestBuilderContract:
    """Properties shared by both encodings."""

    @pytest.fixture(params=list(FilterEncoding))
    def builder(self, request: pytest.FixtureRequest) -> ProductQueryBuilder:
        return ProductQueryBuilder(request.param)

    def test_builder_is_pure(self, builder: ProductQueryBuilder) -> None:
        """Same filter yields the same text and values."""
        product_filter = ProductFilter(category_id=1, min_price=Decimal("3"))
        assert builder.compile(product_filter) == builder.compile(product_filter)

    def test_inverted_range_does_not_raise(self, builder: ProductQueryBuilder) -> None:
        """min > max still builds a query."""
        compiled = builder.compile(ProductFilter(min_price=Decimal("50"), max_price=Decimal("10")))
        assert "SELECT" in compiled.text

    def test_compiles_for_other_dialects(self, builder: ProductQueryBuilder) -> None:
        """Non-positional dialects still yield every bound value."""
        compiled = builder.compile(
            ProductFilter(category_id=1),
            dialect=postgresql.dialect(),
        )
        assert 1 in compiled.params

    @pytest.mark.parametrize("bounds", [{"min_price": Decimal("10.001")}, {"max_price": Decimal("9.999")}])
    def test_price_bounds_keep_full_precision(
        self, builder: ProductQueryBuilder, bounds: dict[str, Decimal]
    ) -> None:
        """Price bounds are not cast to the column's two-decimal scale."""
        compiled = builder.compile(ProductFilter(**bounds), dialect=asyncpg.dialect())
        assert "NUMERIC(10, 2)" not in compiled.text
        assert next(iter(bounds.values())) in compiled.params

    def test_string_encoding_accepted(self) -> None:
        """Encoding can be given by its configured name."""
        assert ProductQueryBuilder("sentinel").encoding is FilterEncoding.SENTINEL

    def test_unknown_encoding_rejected(self) -> None:
        """Unknown encoding names are rejected."""
        with pytest.raises(ValueError):
            ProductQueryBuilder("bogus")
