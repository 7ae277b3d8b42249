"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for We.Retail pages.

Each page class encapsulates:
    - The page URL
    - Component locators (via SmartLocator)
    - Verification helpers

Author: Automation Team
License: MIT
================================================================================
"""

from .home_page import HomePage
from .product_page import ProductPage

__all__ = [
    "HomePage",
    "ProductPage",
]
