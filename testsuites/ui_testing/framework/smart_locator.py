"""
================================================================================
Smart Locator
================================================================================

Element location with fallback strategies for We.Retail components.

AEM component markup changes between archetype versions (BEM `we-*` classes,
plain component-name classes, semantic tags). Each element therefore has a
primary selector plus fallbacks; whenever a fallback wins, it is recorded so
the primary selector can be updated.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from loguru import logger
from playwright.async_api import Locator, Page


class ElementNotFoundError(Exception):
    """Raised when all locator strategies fail to find element."""
    pass


@dataclass
class LocatorHealth:
    """
    Tracks which strategy resolved an element.

    Attributes:
        element_name: Human-readable element name
        primary_selector: The preferred selector
        used_fallback: Whether a fallback was used
        fallback_name: Name of fallback used (if any)
        fallback_selector: The fallback selector used (if any)
    """
    element_name: str
    primary_selector: str
    used_fallback: bool = False
    fallback_name: Optional[str] = None
    fallback_selector: Optional[str] = None


class SmartLocator:
    """
    Element locator with ordered fallback strategies.

    Usage:
        >>> smart = SmartLocator(page)
        >>> await smart.is_visible("hero_image")
        >>> await smart.count("navbar_items")

    Locators are defined in LOCATORS: element_name -> {strategy: selector},
    tried in insertion order.
    """

    LOCATORS: Dict[str, Dict[str, str]] = {
        # Header
        "navbar": {
            "primary": ".we-Header .navbar-center",
            "fallback_1": "nav.navbar .navbar-nav",
            "fallback_2": "header nav",
        },
        "navbar_items": {
            "primary": ".we-Header .navbar-center > li",
            "fallback_1": "nav.navbar .navbar-nav > li",
        },

        # Homepage content components
        "hero_image": {
            "primary": ".we-HeroImage",
            "fallback_1": ".hero-image",
            "fallback_2": ".heroimage",
        },
        "teasers": {
            "primary": ".we-Teaser",
            "fallback_1": ".teaser",
        },
        "site_features": {
            "primary": ".we-SiteFeatures",
            "fallback_1": ".sitefeatures",
        },
        "products_grid": {
            "primary": ".productgrid",
            "fallback_1": ".we-ProductsGrid",
        },
        "products_grid_items": {
            "primary": ".we-ProductsGrid-item",
            "fallback_1": ".productgrid .product",
        },
        "articles": {
            "primary": ".we-Article",
            "fallback_1": ".articleteaser",
        },

        # Footer
        "footer": {
            "primary": ".we-Footer",
            "fallback_1": "footer",
        },

        # Product detail page
        "product": {
            "primary": ".we-Product",
            "fallback_1": ".product-details",
        },
    }

    def __init__(
        self,
        page: Page,
        element_name: Optional[str] = None,
        locators: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize SmartLocator with Playwright page.

        Two usage styles:
        1) **Library mode**: `SmartLocator(page)` then `await smart.count("teasers")`
           using the class-level `LOCATORS` map.
        2) **Element mode**: `SmartLocator(page, element_name="X", locators={...})`
           then `await element.locate()`.
        """
        self.page = page
        self._element_name = element_name
        self._element_locators = locators
        self._health_records: List[LocatorHealth] = []
        self._fallback_used: Dict[str, LocatorHealth] = {}

    def _resolve(
        self,
        target: Optional[Union[str, Dict[str, str]]],
        element_name: Optional[str],
    ) -> tuple:
        if isinstance(target, dict):
            locators = target
            display_name = element_name or self._element_name or "custom_element"
        elif isinstance(target, str):
            locators = self.LOCATORS.get(target, {})
            display_name = target
        else:
            locators = self._element_locators or {}
            display_name = element_name or self._element_name or "custom_element"

        if not locators:
            raise ElementNotFoundError(
                f"No locators defined for element: {display_name}"
            )
        return locators, display_name

    def _record(self, display_name: str, locators: Dict[str, str], strategy_name: str, selector: str) -> None:
        health = LocatorHealth(
            element_name=display_name,
            primary_selector=locators.get("primary", selector),
            used_fallback=(strategy_name != "primary"),
            fallback_name=strategy_name if strategy_name != "primary" else None,
            fallback_selector=selector if strategy_name != "primary" else None,
        )
        self._health_records.append(health)

        if strategy_name != "primary":
            logger.warning(
                f"⚠️ Element '{display_name}' used fallback: "
                f"{strategy_name} -> {selector}"
            )
            self._fallback_used[display_name] = health
        else:
            logger.debug(f"✅ Element '{display_name}' found: {selector}")

    async def locate(
        self,
        target: Optional[Union[str, Dict[str, str]]] = None,
        timeout: int = 5000,
        element_name: Optional[str] = None,
    ) -> Locator:
        """
        Locate the first visible element using the fallback strategy.

        Args:
            target: Element key (str) in `LOCATORS`, a locator map (dict), or
                None to use the instance's stored locator map (element mode)
            timeout: Timeout in milliseconds for each attempt
            element_name: Optional human-readable name for dict targets

        Returns:
            Playwright Locator (all matches of the winning selector)

        Raises:
            ElementNotFoundError: When all strategies fail
        """
        locators, display_name = self._resolve(target, element_name)
        errors = []

        for strategy_name, selector in locators.items():
            try:
                locator = self.page.locator(selector)
                await locator.first.wait_for(state="visible", timeout=timeout)
                self._record(display_name, locators, strategy_name, selector)
                return locator
            except Exception as e:
                errors.append(f"{strategy_name}: {selector} -> {str(e)[:50]}")
                continue

        error_msg = (
            f"❌ All locators failed for '{display_name}':\n" +
            "\n".join(f"  - {err}" for err in errors)
        )
        logger.error(error_msg)
        raise ElementNotFoundError(error_msg)

    async def is_visible(
        self,
        target: Union[str, Dict[str, str]],
        timeout: int = 2000,
        element_name: Optional[str] = None,
    ) -> bool:
        """True if any strategy finds a visible element."""
        try:
            locator = await self.locate(target, timeout=timeout, element_name=element_name)
            return await locator.first.is_visible()
        except ElementNotFoundError:
            return False

    async def count(
        self,
        target: Union[str, Dict[str, str]],
        timeout: int = 5000,
        element_name: Optional[str] = None,
    ) -> int:
        """Number of elements matched by the first strategy that finds any; 0 if none."""
        try:
            locator = await self.locate(target, timeout=timeout, element_name=element_name)
        except ElementNotFoundError:
            return 0
        return await locator.count()

    def get_health_report(self) -> str:
        """
        Generate locator health report.

        Lists elements that needed a fallback (maintenance candidates).
        """
        if not self._fallback_used:
            return "✅ All elements used primary locators. No maintenance needed."

        report_lines = [
            "⚠️ Locator Health Report - Fallbacks Used:",
            "",
            "The following elements used fallback locators.",
            "Consider updating the primary selectors:",
            "",
        ]

        for element_name, health in self._fallback_used.items():
            report_lines.extend([
                f"  [{element_name}]",
                f"    Failed primary: {health.primary_selector}",
                f"    Used: {health.fallback_name} -> {health.fallback_selector}",
                "",
            ])

        return "\n".join(report_lines)


__all__ = [
    "SmartLocator",
    "ElementNotFoundError",
    "LocatorHealth",
]
