"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework for AEM acceptance suites.

Components:
    - harness: TestSuite / TestCase primitives, suite registry and runner
    - dom_query: jQuery-style selectors (:first, :eq(n)) on Playwright locators
    - smart_locator: Element location with fallback strategies
    - page_base: Base page object for common operations
    - browser_manager: Browser lifecycle management
    - config_loader / log_setup: configuration and Loguru setup

Author: Automation Team
License: MIT
================================================================================
"""

from .config_loader import ConfigLoader, ConfigurationError
from .dom_query import DomQuery, SelectorSyntaxError
from .smart_locator import SmartLocator, ElementNotFoundError
from .page_base import BasePage
from .browser_manager import BrowserManager
from .harness import SuiteRunner, TestCase, TestSuite, registry

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "DomQuery",
    "SelectorSyntaxError",
    "SmartLocator",
    "ElementNotFoundError",
    "BasePage",
    "BrowserManager",
    "SuiteRunner",
    "TestCase",
    "TestSuite",
    "registry",
]
