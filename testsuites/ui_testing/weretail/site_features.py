"""
Site features case.
"""

from __future__ import annotations

from types import ModuleType

from testsuites.ui_testing.framework.dom_query import DomQuery

from .homepage import HOMEPAGE_URL


SITE_FEATURES = ".we-SiteFeatures"


def site_features_test(h: ModuleType, dom: DomQuery):
    """Site features block exists and is not empty."""

    async def has_content(ctx) -> bool:
        text = await dom.locator(ctx.page, SITE_FEATURES + ":first").inner_text()
        return bool(text.strip())

    return (
        h.TestCase("Site Features")
        .navigate_to(HOMEPAGE_URL)
        .asserts.exists(SITE_FEATURES)
        .asserts.is_true(has_content, "site features have content")
    )
