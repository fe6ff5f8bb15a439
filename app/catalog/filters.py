"""Catalog list filter normalization.

Turns raw, optional and possibly malformed query parameters into a
bounded ``ProductFilter``. Normalization never fails: any value that
cannot be parsed falls back to its default.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 10
MIN_LIMIT = 1
MAX_LIMIT = 100

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

# Decimal exponent beyond which a price bound no longer fits a double.
_MAX_PRICE_EXPONENT = 308


@dataclass(frozen=True)
class ProductFilter:
    """Normalized filter for listing products.

    Frozen so the same value drives both the total count and the page
    fetch.

    Attributes:
        offset: Rows to skip, never negative.
        limit: Page size, always within [MIN_LIMIT, MAX_LIMIT].
        category: Exact category name to match.
        max_price: Exclusive upper bound on product price.
    """

    offset: int = DEFAULT_OFFSET
    limit: int = DEFAULT_LIMIT
    category: str | None = None
    max_price: Decimal | None = None


def _parse_int(value: str | None) -> int | None:
    """Parse a signed 64-bit base-10 integer, or return None.

    Only ASCII digits are accepted. Out-of-range values are treated as
    unparseable rather than saturated.
    """
    if not value or not _INTEGER_PATTERN.fullmatch(value):
        return None
    try:
        parsed = int(value)
    except ValueError:
        # Longer than the interpreter's int conversion limit
        return None
    if not _INT64_MIN <= parsed <= _INT64_MAX:
        return None
    return parsed


def _parse_decimal(value: str | None) -> Decimal | None:
    """Parse a finite decimal number, or return None.

    Magnitudes too large for a double are unparseable. Magnitudes too
    small for one read as zero.
    """
    if not value:
        return None
    try:
        parsed = Decimal(value.strip())
    except InvalidOperation:
        return None
    if not parsed.is_finite():
        return None
    if parsed.is_zero():
        return parsed
    exponent = parsed.adjusted()
    if exponent > _MAX_PRICE_EXPONENT:
        return None
    if exponent < -_MAX_PRICE_EXPONENT:
        return Decimal(0)
    return parsed


def clamp_limit(limit: int) -> int:
    """Clamp a page size into [MIN_LIMIT, MAX_LIMIT]."""
    if limit > MAX_LIMIT:
        return MAX_LIMIT
    if limit < MIN_LIMIT:
        return MIN_LIMIT
    return limit


def normalize(raw: Mapping[str, str | None]) -> ProductFilter:
    """Build a ProductFilter from raw query parameters.

    Recognized keys are ``offset``, ``limit``, ``category`` and
    ``priceLessThan``; all are optional and unknown keys are ignored.

    Args:
        raw: Mapping of parameter name to raw string value.

    Returns:
        Normalized filter.
    """
    category = raw.get("category") or None

    offset = _parse_int(raw.get("offset"))
    if offset is None or offset < 0:
        offset = DEFAULT_OFFSET

    limit = _parse_int(raw.get("limit"))
    if limit is None:
        limit = DEFAULT_LIMIT

    return ProductFilter(
        offset=offset,
        limit=clamp_limit(limit),
        category=category,
        max_price=_parse_decimal(raw.get("priceLessThan")),
    )
