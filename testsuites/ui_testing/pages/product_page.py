"""
================================================================================
We.Retail Product Page Object (Async / Playwright)
================================================================================

Product detail pages live under /content/we-retail/us/en/products/.

================================================================================
"""

from __future__ import annotations

import allure

from testsuites.ui_testing.framework.page_base import PageBase


class ProductPage(PageBase):
    """Product detail page reached from a homepage products grid."""

    URL_PATH = "/content/we-retail/us/en/products/"
    PAGE_TITLE = "Product"

    def is_current(self) -> bool:
        return self.URL_PATH in self.page.url

    @allure.step("Verify product page loaded")
    async def verify_loaded(self) -> None:
        assert self.is_current(), f"Expected a product page, got {self.page.url}"
        assert await self.is_visible("product", timeout=10000), "Product should be rendered"
