"""
Hero image case.
"""

from __future__ import annotations

from types import ModuleType

from testsuites.ui_testing.framework.dom_query import DomQuery

from .homepage import HOMEPAGE_URL


HERO_IMAGE = ".we-HeroImage"


def hero_image_test(h: ModuleType, dom: DomQuery):
    """Hero image is rendered with an image, either as <img> or as a CSS background."""

    async def has_image(ctx) -> bool:
        hero = dom.locator(ctx.page, HERO_IMAGE + ":first")
        if await hero.locator("img").count() > 0:
            return True
        background = await hero.evaluate(
            "el => window.getComputedStyle(el).backgroundImage"
        )
        return bool(background) and background != "none"

    return (
        h.TestCase("Hero Image")
        .navigate_to(HOMEPAGE_URL)
        .asserts.exists(HERO_IMAGE)
        .asserts.visible(HERO_IMAGE)
        .asserts.is_true(has_image, "hero image has an image")
    )
