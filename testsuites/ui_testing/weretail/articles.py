"""
Articles case.
"""

from __future__ import annotations

from types import ModuleType

from testsuites.ui_testing.framework.dom_query import DomQuery

from .homepage import HOMEPAGE_URL
from .validation import require_count


ARTICLE = ".we-Article"


def articles_test(h: ModuleType, dom: DomQuery, article_count: int):
    require_count("article_count", article_count)
    return (
        h.TestCase("Articles")
        .navigate_to(HOMEPAGE_URL)
        .asserts.count(ARTICLE, article_count)
    )
