"""
Navbar case for the We.Retail header.
"""

from __future__ import annotations

from types import ModuleType

from testsuites.ui_testing.framework.dom_query import DomQuery

from .homepage import HOMEPAGE_URL
from .validation import require_count


NAVBAR = ".we-Header .navbar-center"
NAVBAR_ITEMS = NAVBAR + " > li"


def navbar_test(h: ModuleType, dom: DomQuery, item_count: int):
    """Navbar is visible and has exactly `item_count` top-level entries."""
    require_count("item_count", item_count)
    return (
        h.TestCase("Navbar")
        .navigate_to(HOMEPAGE_URL)
        .asserts.visible(NAVBAR)
        .asserts.count(NAVBAR_ITEMS, item_count)
    )
