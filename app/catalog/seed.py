"""Sample catalog data for local runs.

Deterministic: the same products, categories and variants are written
on every run, in the same order, so product IDs ascend with the codes.
"""

from decimal import Decimal
from typing import Any

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog.models import Category, Product, Variant

# (code, price, category, [(variant name, sku suffix, price)])
# A variant price of "0" inherits the product price.
SAMPLE_CATALOG: list[tuple[str, str, str, list[tuple[str, str, str]]]] = [
    ("PROD001", "10.99", "Clothing", [
        ("Variant A", "A", "11.99"),
        ("Variant B", "B", "0"),
        ("Variant C", "C", "12.49"),
    ]),
    ("PROD002", "12.49", "Shoes", [
        ("Size 40", "40", "0"),
        ("Size 42", "42", "12.99"),
    ]),
    ("PROD003", "8.75", "Accessories", [
        ("Standard", "STD", "0"),
    ]),
    ("PROD004", "15.00", "Clothing", [
        ("Small", "S", "0"),
        ("Large", "L", "16.00"),
    ]),
    ("PROD005", "9.99", "Shoes", []),
    ("PROD006", "25.50", "Accessories", [
        ("Gold", "GLD", "29.00"),
        ("Silver", "SLV", "0"),
    ]),
    ("PROD007", "5.25", "Clothing", []),
    ("PROD008", "149.00", "Shoes", [
        ("Size 44", "44", "0"),
    ]),
]


def build_sample_products() -> list[Product]:
    """Build unsaved sample products with categories and variants.

    Returns:
        Products in code order.
    """
    products = []
    for code, price, category_name, variants in SAMPLE_CATALOG:
        product = Product(code=code, price=Decimal(price))
        product.category = Category(name=category_name)
        product.variants = [
            Variant(name=name, sku=f"SKU-{code}-{suffix}", price=Decimal(variant_price))
            for name, suffix, variant_price in variants
        ]
        products.append(product)
    return products


async def seed_catalog(
    session: AsyncSession,
    clear_existing: bool = True,
) -> dict[str, Any]:
    """Write the sample catalog.

    Args:
        session: Async SQLAlchemy session.
        clear_existing: Whether to delete existing catalog rows first.

    Returns:
        Seeding result with counts.
    """
    if clear_existing:
        await session.execute(delete(Variant))
        await session.execute(delete(Category))
        await session.execute(delete(Product))

    products = build_sample_products()
    # Add one by one so IDs are assigned in code order
    for product in products:
        session.add(product)
        await session.flush()

    result = {
        "products_created": len(products),
        "variants_created": sum(len(p.variants) for p in products),
        "categories_used": len({p.category.name for p in products}),
    }

    await session.commit()
    return result
