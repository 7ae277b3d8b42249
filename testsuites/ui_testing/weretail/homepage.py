"""
Homepage load case.
"""

from __future__ import annotations

from types import ModuleType

from testsuites.ui_testing.framework.dom_query import DomQuery
from testsuites.ui_testing.pages.home_page import HomePage


HOMEPAGE_URL = HomePage.URL_PATH


def homepage_load_test(h: ModuleType, dom: DomQuery):
    """Open the homepage and assert the browser stayed on it."""
    return (
        h.TestCase("Load homepage")
        .navigate_to(HOMEPAGE_URL)
        .asserts.location(HOMEPAGE_URL, True)
    )
