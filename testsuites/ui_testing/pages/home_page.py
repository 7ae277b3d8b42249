"""
================================================================================
We.Retail Home Page Object (Async / Playwright)
================================================================================

Page object for the We.Retail US English homepage.

Highlights:
  - Component checks go through SmartLocator (primary + fallback selectors)
  - Product grids are addressed by position, matching the page layout
    (featured products first, new arrivals second)

================================================================================
"""

from __future__ import annotations

import allure

from testsuites.ui_testing.framework.page_base import PageBase


class HomePage(PageBase):
    """We.Retail homepage (async)."""

    URL_PATH = "/content/we-retail/us/en.html"
    PAGE_TITLE = "We.Retail"

    FEATURED_PRODUCTS_GRID = 0
    NEW_ARRIVALS_GRID = 1

    @allure.step("Open We.Retail homepage")
    async def open(self) -> "HomePage":
        await self.navigate()
        await self.wait_for_page_load()
        return self

    @allure.step("Verify homepage loaded")
    async def verify_loaded(self) -> None:
        """Hard assertion: still on the homepage and the header is rendered."""
        assert self.page.url.endswith(self.URL_PATH), (
            f"Expected homepage URL, got {self.page.url}"
        )
        assert await self.is_visible("navbar", timeout=10000), "Navbar should be visible"

    async def navbar_item_count(self) -> int:
        return await self.count("navbar_items")

    async def hero_image_visible(self) -> bool:
        return await self.is_visible("hero_image")

    async def teaser_count(self) -> int:
        return await self.count("teasers")

    async def article_count(self) -> int:
        return await self.count("articles")

    async def footer_visible(self) -> bool:
        return await self.is_visible("footer")

    async def products_grid_item_count(self, grid_index: int) -> int:
        """Number of products in the grid at `grid_index` (0-based, page order)."""
        grids = await self.smart.locate("products_grid")
        grid = grids.nth(grid_index)
        items = self.smart.LOCATORS["products_grid_items"]
        for selector in items.values():
            found = await grid.locator(selector).count()
            if found:
                return found
        return 0
