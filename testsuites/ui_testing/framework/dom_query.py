"""
================================================================================
DOM Query Helper
================================================================================

jQuery-style selector support on top of Playwright locators.

AEM test cases address components with positional pseudo-classes such as
`.productgrid:first` or `.productgrid:eq(1) .we-ProductsGrid-item:first`.
Those are not CSS, so each selector is split into segments: a CSS part plus
an optional positional filter, resolved by chaining `.locator()` with
`.first`, `.last` or `.nth()`.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Union

from loguru import logger
from playwright.async_api import Locator, Page


class SelectorSyntaxError(ValueError):
    """Raised when a jQuery-style selector cannot be parsed."""
    pass


# :first | :last | :eq(<anything>) attached to the preceding compound selector
_POSITIONAL = re.compile(r":(first|last|eq\(([^)]*)\))(?![\w-])")


@dataclass(frozen=True)
class SelectorSegment:
    """
    One step of a resolved selector.

    Attributes:
        css: Plain CSS selector, applied relative to the previous segment
        index: Positional filter; 0 for :first, -1 for :last, n for :eq(n),
            None when the segment keeps all matches
    """
    css: str
    index: Optional[int] = None


def parse_selector(selector: str) -> List[SelectorSegment]:
    """
    Split a jQuery-style selector into locator segments.

    Examples:
        >>> parse_selector(".productgrid:eq(1) .item:first")
        [SelectorSegment(css='.productgrid', index=1),
         SelectorSegment(css='.item', index=0)]
        >>> parse_selector("nav > li")
        [SelectorSegment(css='nav > li', index=None)]

    Raises:
        SelectorSyntaxError: Empty selector or malformed :eq() argument,
            or a sibling/compound step after a positional filter
    """
    if not selector or not selector.strip():
        raise SelectorSyntaxError("Selector must not be empty")

    segments: List[SelectorSegment] = []
    position = 0
    for match in _POSITIONAL.finditer(selector):
        raw = selector[position:match.start()]
        if segments and raw.strip():
            _check_continuation(raw, selector)
        css = raw.strip()
        if not css:
            raise SelectorSyntaxError(
                f"Positional filter without a selector in: {selector!r}"
            )

        if match.group(1) == "first":
            index = 0
        elif match.group(1) == "last":
            index = -1
        else:
            raw = match.group(2).strip()
            if not raw.isdigit():
                raise SelectorSyntaxError(
                    f"Invalid :eq() argument {raw!r} in: {selector!r}"
                )
            index = int(raw)

        segments.append(SelectorSegment(css=css, index=index))
        position = match.end()

    rest = selector[position:]
    if rest.strip():
        if segments:
            _check_continuation(rest, selector)
        segments.append(SelectorSegment(css=rest.strip()))

    return segments


def _check_continuation(raw: str, selector: str) -> None:
    """
    Reject steps after a positional filter that a scoped locator cannot express.

    Chained locators only search inside the matched element, so a sibling
    combinator or a compound filter on that element would silently match
    nothing.
    """
    stripped = raw.lstrip()
    if stripped[:1] in ("+", "~"):
        raise SelectorSyntaxError(
            f"Sibling combinator {stripped[0]!r} after a positional filter "
            f"is not supported in: {selector!r}"
        )
    if not raw[:1].isspace() and stripped[:1] != ">":
        raise SelectorSyntaxError(
            f"Compound selector after a positional filter is not supported "
            f"in: {selector!r}"
        )


class DomQuery:
    """
    Page-bound query helper handed to test case factories.

    Usage:
        >>> dom = DomQuery()
        >>> await dom.count(page, ".productgrid:first .we-ProductsGrid-item")
        6
    """

    def locator(self, scope: Union[Page, Locator], selector: str) -> Locator:
        """Resolve a jQuery-style selector to a Playwright Locator."""
        current: Union[Page, Locator] = scope
        for segment in parse_selector(selector):
            css = segment.css
            # Child combinator continues from the previous match
            if css.startswith(">"):
                css = f":scope {css}"
            current = current.locator(css)
            if segment.index == 0:
                current = current.first
            elif segment.index == -1:
                current = current.last
            elif segment.index is not None:
                current = current.nth(segment.index)
        return current

    async def count(self, scope: Union[Page, Locator], selector: str) -> int:
        """Number of elements matching the selector."""
        found = await self.locator(scope, selector).count()
        logger.debug(f"{selector!r} matched {found} element(s)")
        return found

    async def exists(self, scope: Union[Page, Locator], selector: str) -> bool:
        """True when at least one element matches."""
        return await self.count(scope, selector) > 0

    async def is_visible(self, scope: Union[Page, Locator], selector: str) -> bool:
        """True when the (first) matching element is visible."""
        locator = self.locator(scope, selector)
        if await locator.count() == 0:
            return False
        return await locator.first.is_visible()


__all__ = [
    "DomQuery",
    "SelectorSegment",
    "SelectorSyntaxError",
    "parse_selector",
]
