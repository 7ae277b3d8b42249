"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation relative to the configured AEM base URL
    - Smart element location
    - Screenshot and failure capture for Allure
    - Wait strategies

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

import allure
from loguru import logger
from playwright.async_api import Page

from .config_loader import ConfigLoader
from .smart_locator import SmartLocator


SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class HomePage(BasePage):
            URL_PATH = "/content/we-retail/us/en.html"

            async def hero_visible(self) -> bool:
                return await self.is_visible("hero_image")
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""

    def __init__(
        self,
        page: Page,
        base_url: str = "",
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL of the AEM instance (config `ui.base_url` if empty)
        """
        self.page = page
        if not base_url:
            base_url = ConfigLoader().get("ui.base_url")
        self.base_url = base_url.rstrip("/")
        self.smart = SmartLocator(page)

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    async def navigate(self, wait_for: str = "load") -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        with allure.step(f"Navigate to {self.URL_PATH}"):
            await self.page.goto(self.url, wait_until=wait_for)
            logger.debug(f"Navigated to: {self.url}")

    async def wait_for_page_load(
        self,
        state: str = "load",
        timeout: int = 15000,
    ) -> None:
        await self.page.wait_for_load_state(state, timeout=timeout)

    def smart_locator(
        self,
        primary: str,
        fallbacks: Optional[List[str]] = None,
        name: str = "custom_element",
    ) -> SmartLocator:
        """
        Build a SmartLocator in *element mode* with primary + fallback selectors.

        Args:
            primary: Primary selector
            fallbacks: Fallback selectors to try when primary fails
            name: Human-readable element name for logging/Allure
        """
        locators: Dict[str, str] = {"primary": primary}
        for i, fb in enumerate(fallbacks or [], start=1):
            locators[f"fallback_{i}"] = fb
        return SmartLocator(self.page, element_name=name, locators=locators)

    async def is_visible(
        self,
        element_name: str,
        timeout: int = 2000,
    ) -> bool:
        """Check if a named SmartLocator element is visible."""
        return await self.smart.is_visible(element_name, timeout)

    async def count(self, element_name: str, timeout: int = 5000) -> int:
        """Count the elements matched by a named SmartLocator element."""
        return await self.smart.count(element_name, timeout)

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach.file(
                str(filepath),
                name=name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> None:
        """Attach screenshot and current URL for a failed test."""
        with allure.step("Capture failure details"):
            await self.screenshot(f"failure_{test_name}", full_page=True)
            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )

    def get_locator_health_report(self) -> str:
        """Get smart locator health report."""
        return self.smart.get_health_report()


# Backward-compatible alias
PageBase = BasePage

__all__ = [
    "BasePage",
    "PageBase",
]
