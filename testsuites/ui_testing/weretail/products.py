"""
Products grid and product cases.

Both take the selector of the element under test, so one factory covers
every grid on the page (featured products, new arrivals, ...).
"""

from __future__ import annotations

from types import ModuleType

from testsuites.ui_testing.framework.dom_query import DomQuery

from .homepage import HOMEPAGE_URL
from .validation import require_count, require_selector


GRID_ITEM = ".we-ProductsGrid-item"
PRODUCT_PAGES_PATH = "/content/we-retail/us/en/products/"
PRODUCT = ".we-Product"


def products_grid_test(h: ModuleType, dom: DomQuery, grid_selector: str, item_count: int):
    """Grid at `grid_selector` exists and holds exactly `item_count` products."""
    grid_selector = require_selector("grid_selector", grid_selector)
    require_count("item_count", item_count)
    return (
        h.TestCase(f"Products Grid {grid_selector}")
        .navigate_to(HOMEPAGE_URL)
        .asserts.exists(grid_selector)
        .asserts.count(f"{grid_selector} {GRID_ITEM}", item_count)
    )


def product_test(h: ModuleType, dom: DomQuery, product_selector: str):
    """Product at `product_selector` links to a product page that renders the product."""
    product_selector = require_selector("product_selector", product_selector)
    link = f"{product_selector} a"

    async def has_product_link(ctx) -> bool:
        href = await dom.locator(ctx.page, link).first.get_attribute("href")
        return bool(href) and href != "#"

    return (
        h.TestCase(f"Product {product_selector}")
        .navigate_to(HOMEPAGE_URL)
        .asserts.exists(product_selector)
        .asserts.is_true(has_product_link, f"{product_selector} links to a product")
        .click(link, expect_nav=True)
        .asserts.location(PRODUCT_PAGES_PATH, False)
        .asserts.exists(PRODUCT)
    )
