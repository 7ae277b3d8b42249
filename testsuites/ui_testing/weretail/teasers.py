"""
Teasers case.
"""

from __future__ import annotations

from types import ModuleType

from testsuites.ui_testing.framework.dom_query import DomQuery

from .homepage import HOMEPAGE_URL
from .validation import require_count


TEASER = ".we-Teaser"


def teasers_test(h: ModuleType, dom: DomQuery, teaser_count: int):
    require_count("teaser_count", teaser_count)
    return (
        h.TestCase("Teasers")
        .navigate_to(HOMEPAGE_URL)
        .asserts.count(TEASER, teaser_count)
    )
