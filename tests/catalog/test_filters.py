"""Tests for catalog filter normalization."""

from decimal import Decimal

import pytest

from app.catalog.filters import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    MIN_LIMIT,
    ProductFilter,
    clamp_limit,
    normalize,
)


class TestNormalizeDefaults:
    """Tests for missing parameters."""

    def test_no_params(self) -> None:
        """Empty input yields the default filter."""
        filters = normalize({})
        assert filters == ProductFilter(offset=0, limit=10, category=None, max_price=None)

    def test_empty_strings_are_absent(self) -> None:
        """Empty values behave like missing ones."""
        filters = normalize({"offset": "", "limit": "", "category": "", "priceLessThan": ""})
        assert filters.offset == 0
        assert filters.limit == DEFAULT_LIMIT
        assert filters.category is None
        assert filters.max_price is None

    def test_none_values_are_absent(self) -> None:
        """None values behave like missing ones."""
        filters = normalize({"offset": None, "limit": None, "category": None})
        assert filters == ProductFilter()

    def test_unknown_keys_ignored(self) -> None:
        """Unrecognized parameters do not affect the filter."""
        assert normalize({"sort": "price", "page": "3"}) == ProductFilter()


class TestNormalizeValues:
    """Tests for well-formed parameters."""

    def test_all_params(self) -> None:
        """All recognized parameters are carried over."""
        filters = normalize({
            "offset": "5",
            "limit": "20",
            "category": "Shoes",
            "priceLessThan": "150.5",
        })
        assert filters.offset == 5
        assert filters.limit == 20
        assert filters.category == "Shoes"
        assert filters.max_price == Decimal("150.5")

    def test_price_is_exact_decimal(self) -> None:
        """Price bound is parsed without float rounding."""
        filters = normalize({"priceLessThan": "0.1"})
        assert isinstance(filters.max_price, Decimal)
        assert filters.max_price == Decimal("0.1")

    def test_zero_price_is_a_filter(self) -> None:
        """A zero bound is kept, not treated as absent."""
        assert normalize({"priceLessThan": "0"}).max_price == Decimal("0")

    def test_category_copied_verbatim(self) -> None:
        """Category keeps case and surrounding spaces."""
        assert normalize({"category": " Shoes "}).category == " Shoes "

    def test_signed_integers(self) -> None:
        """Explicit plus sign is accepted."""
        filters = normalize({"offset": "+3", "limit": "+7"})
        assert filters.offset == 3
        assert filters.limit == 7


class TestNormalizeMalformed:
    """Tests for unparseable parameters falling back to defaults."""

    @pytest.mark.parametrize("value", ["abc", "1.5", " 5", "5 ", "1_0", "0x10", "--1"])
    def test_bad_offset_defaults(self, value: str) -> None:
        """Unparseable offset defaults to 0."""
        assert normalize({"offset": value}).offset == 0

    @pytest.mark.parametrize("value", ["abc", "2.0", "ten", "1e2"])
    def test_bad_limit_defaults(self, value: str) -> None:
        """Unparseable limit defaults to 10."""
        assert normalize({"limit": value}).limit == DEFAULT_LIMIT

    @pytest.mark.parametrize("value", ["abc", "1,5", "NaN", "Infinity", "-inf", "$10"])
    def test_bad_price_is_absent(self, value: str) -> None:
        """Unparseable or non-finite price bound is dropped."""
        assert normalize({"priceLessThan": value}).max_price is None

    def test_overlong_digit_strings_default(self) -> None:
        """Digit strings past the int conversion limit fall back to defaults."""
        filters = normalize({"offset": "1" * 5000, "limit": "9" * 5000})
        assert filters.offset == 0
        assert filters.limit == DEFAULT_LIMIT

    @pytest.mark.parametrize("value", ["9223372036854775808", "-9223372036854775809"])
    def test_out_of_int64_range_defaults(self, value: str) -> None:
        """Integers outside the signed 64-bit range are unparseable."""
        filters = normalize({"offset": value, "limit": value})
        assert filters.offset == 0
        assert filters.limit == DEFAULT_LIMIT

    def test_int64_max_is_accepted(self) -> None:
        """The largest 64-bit value still parses and is clamped."""
        filters = normalize({"offset": "9223372036854775807", "limit": "9223372036854775807"})
        assert filters.offset == 2**63 - 1
        assert filters.limit == MAX_LIMIT

    @pytest.mark.parametrize("value", ["١٢", "５", "+٣"])
    def test_non_ascii_digits_default(self, value: str) -> None:
        """Only ASCII digits count as integers."""
        filters = normalize({"offset": value, "limit": value})
        assert filters.offset == 0
        assert filters.limit == DEFAULT_LIMIT

    @pytest.mark.parametrize("value", ["1e999999999", "-1e309", "1E+400"])
    def test_price_beyond_double_range_is_absent(self, value: str) -> None:
        """Price bounds too large for a double are dropped."""
        assert normalize({"priceLessThan": value}).max_price is None

    def test_price_at_double_range_is_kept(self) -> None:
        """Large but representable bounds are kept exactly."""
        assert normalize({"priceLessThan": "1e308"}).max_price == Decimal("1e308")

    @pytest.mark.parametrize("value", ["1e-999999999", "-1e-400"])
    def test_price_below_double_range_is_zero(self, value: str) -> None:
        """Vanishingly small bounds read as zero."""
        assert normalize({"priceLessThan": value}).max_price == Decimal(0)

    def test_malformed_fields_are_independent(self) -> None:
        """One bad field does not discard the others."""
        filters = normalize({"offset": "x", "limit": "25", "category": "Shoes"})
        assert filters.offset == 0
        assert filters.limit == 25
        assert filters.category == "Shoes"


class TestClamping:
    """Tests for offset and limit bounds."""

    def test_limit_above_max(self) -> None:
        """Limit above the maximum is capped."""
        assert normalize({"limit": "150"}).limit == MAX_LIMIT

    def test_limit_at_bounds(self) -> None:
        """Boundary values are kept."""
        assert normalize({"limit": "100"}).limit == 100
        assert normalize({"limit": "1"}).limit == 1

    def test_negative_limit(self) -> None:
        """Negative limit snaps to the minimum."""
        assert normalize({"limit": "-10"}).limit == MIN_LIMIT

    def test_zero_limit(self) -> None:
        """Zero limit snaps to the minimum so a page is never empty by size."""
        assert normalize({"limit": "0"}).limit == MIN_LIMIT

    def test_negative_offset_clamped(self) -> None:
        """Negative offset is clamped to 0 instead of reaching the store."""
        assert normalize({"offset": "-5"}).offset == 0

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(-1000, 1), (-1, 1), (0, 1), (1, 1), (50, 50), (100, 100), (101, 100), (10**9, 100)],
    )
    def test_clamp_limit(self, value: int, expected: int) -> None:
        """clamp_limit always lands in [1, 100]."""
        assert clamp_limit(value) == expected


class TestProductFilter:
    """Tests for the filter value object."""

    def test_filter_is_immutable(self) -> None:
        """Filter fields cannot change between count and fetch."""
        filters = normalize({"category": "Shoes"})
        with pytest.raises(AttributeError):
            filters.category = "Clothing"  # type: ignore[misc]
