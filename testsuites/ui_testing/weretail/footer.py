"""
Footer case.
"""

from __future__ import annotations

from types import ModuleType

from testsuites.ui_testing.framework.dom_query import DomQuery

from .homepage import HOMEPAGE_URL


FOOTER = ".we-Footer"


def footer_test(h: ModuleType, dom: DomQuery):
    return (
        h.TestCase("Footer")
        .navigate_to(HOMEPAGE_URL)
        .asserts.exists(FOOTER)
        .asserts.visible(FOOTER)
    )
