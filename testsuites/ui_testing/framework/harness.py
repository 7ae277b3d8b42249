"""
================================================================================
UI Test Harness
================================================================================

Suite and case primitives for browser-driven acceptance suites.

A TestCase is an ordered list of steps (navigate, click, wait, assert) built
with a chainable API. A TestSuite is an ordered list of cases registered
under a path in the process-wide SuiteRegistry. SuiteRunner executes a suite
case by case on a single Playwright page.

Usage:
    from testsuites.ui_testing.framework import harness as h

    case = (
        h.TestCase("Load homepage")
        .navigate_to("/content/we-retail/us/en.html")
        .asserts.location("/content/we-retail/us/en.html", True)
    )
    h.TestSuite("Homepage", path="/apps/site/tests/Homepage", register=True) \\
        .add_test_case(case)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import importlib
import pkgutil
import time
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Iterator, List, Optional, Tuple
from urllib.parse import urlsplit

import allure
from loguru import logger
from playwright.async_api import Page

from .dom_query import DomQuery


# Package scanned by load_suites()
SUITES_PACKAGE = "testsuites.ui_testing.suites"


# =============================================================================
# Errors
# =============================================================================

class HarnessError(Exception):
    """Base class for harness errors."""
    pass


class SuiteRegistrationError(HarnessError):
    """Raised when a suite cannot be registered (e.g. duplicate path)."""
    pass


class CaseAssertionError(AssertionError, HarnessError):
    """Raised by an assertion step when the page does not match."""
    pass


# =============================================================================
# Steps
# =============================================================================

@dataclass
class StepContext:
    """State shared by the steps of a running case."""
    page: Page
    dom: DomQuery
    base_url: str = ""
    navigation_timeout: int = 30000
    assert_timeout: int = 5000

    def absolute_url(self, url: str) -> str:
        if urlsplit(url).scheme:
            return url
        return f"{self.base_url.rstrip('/')}/{url.lstrip('/')}"

    def current_path(self) -> str:
        """Current page URL without scheme and host, when on the base URL."""
        current = self.page.url
        base = self.base_url.rstrip("/")
        if base and current.startswith(base):
            rest = current[len(base):]
            if not rest or rest[0] in "/?#":
                return rest or "/"
        parts = urlsplit(current)
        if parts.scheme:
            path = parts.path or "/"
            if parts.query:
                path = f"{path}?{parts.query}"
            return path
        return current


StepAction = Callable[[StepContext], Awaitable[None]]


@dataclass
class Step:
    """One executable action of a TestCase."""
    description: str
    action: StepAction

    async def run(self, ctx: StepContext) -> None:
        with allure.step(self.description):
            logger.debug(f"  step: {self.description}")
            await self.action(ctx)


# =============================================================================
# Test Case
# =============================================================================

class CaseAsserts:
    """
    Assertion namespace of a TestCase (`case.asserts.location(...)`).

    Every method appends an assertion step and returns the owning case, so
    assertions chain with the case's other modifiers.
    """

    def __init__(self, case: "TestCase"):
        self._case = case

    def location(self, url: str, exact: bool = True) -> "TestCase":
        """Assert the page location equals (exact) or contains `url`."""
        async def check(ctx: StepContext) -> None:
            current = ctx.current_path()
            ok = current == url if exact else url in current
            if not ok:
                relation = "equal" if exact else "contain"
                raise CaseAssertionError(
                    f"Location {current!r} does not {relation} {url!r}"
                )

        mode = "is" if exact else "contains"
        return self._case.add_step(f"Assert location {mode} {url}", check)

    def exists(self, selector: str, expected: bool = True) -> "TestCase":
        """Assert that `selector` matches (or, expected=False, does not match)."""
        async def check(ctx: StepContext) -> None:
            found = await ctx.dom.exists(ctx.page, selector)
            if found != expected:
                state = "exist" if expected else "be absent"
                raise CaseAssertionError(f"Expected {selector!r} to {state}")

        label = "exists" if expected else "does not exist"
        return self._case.add_step(f"Assert {selector} {label}", check)

    def visible(self, selector: str) -> "TestCase":
        """Assert that the first element matching `selector` becomes visible."""
        async def check(ctx: StepContext) -> None:
            locator = ctx.dom.locator(ctx.page, selector).first
            try:
                await locator.wait_for(state="visible", timeout=ctx.assert_timeout)
            except Exception as e:
                raise CaseAssertionError(
                    f"Expected {selector!r} to be visible: {str(e)[:120]}"
                ) from e

        return self._case.add_step(f"Assert {selector} is visible", check)

    def count(self, selector: str, expected: int) -> "TestCase":
        """Assert that exactly `expected` elements match `selector`."""
        async def check(ctx: StepContext) -> None:
            found = await ctx.dom.count(ctx.page, selector)
            if found != expected:
                raise CaseAssertionError(
                    f"Expected {expected} element(s) for {selector!r}, found {found}"
                )

        return self._case.add_step(f"Assert {selector} count is {expected}", check)

    def is_true(
        self,
        predicate: Callable[[StepContext], Awaitable[bool]],
        description: str,
    ) -> "TestCase":
        """Assert that an async predicate over the step context holds."""
        async def check(ctx: StepContext) -> None:
            if not await predicate(ctx):
                raise CaseAssertionError(f"Assertion failed: {description}")

        return self._case.add_step(f"Assert {description}", check)


class TestCase:
    """
    A named browser interaction plus its assertions.

    Modifiers append steps and return the case:
        navigate_to(url), click(selector, expect_nav), wait(ms),
        asserts.location / exists / visible / count / is_true
    """

    # Not a pytest test class
    __test__ = False

    def __init__(self, name: str):
        if not name:
            raise ValueError("TestCase name must not be empty")
        self.name = name
        self._steps: List[Step] = []
        self.asserts = CaseAsserts(self)

    def __repr__(self) -> str:
        return f"TestCase({self.name!r}, steps={len(self._steps)})"

    @property
    def steps(self) -> Tuple[Step, ...]:
        return tuple(self._steps)

    def add_step(self, description: str, action: StepAction) -> "TestCase":
        self._steps.append(Step(description, action))
        return self

    def navigate_to(self, url: str) -> "TestCase":
        """Open `url` (absolute, or a path on the base URL)."""
        async def navigate(ctx: StepContext) -> None:
            await ctx.page.goto(
                ctx.absolute_url(url),
                wait_until="load",
                timeout=ctx.navigation_timeout,
            )

        return self.add_step(f"Navigate to {url}", navigate)

    def click(self, selector: str, expect_nav: bool = False) -> "TestCase":
        """Click the first element matching `selector`."""
        async def click(ctx: StepContext) -> None:
            locator = ctx.dom.locator(ctx.page, selector).first
            if expect_nav:
                async with ctx.page.expect_navigation(
                    wait_until="load", timeout=ctx.navigation_timeout
                ):
                    await locator.click(timeout=ctx.assert_timeout)
            else:
                await locator.click(timeout=ctx.assert_timeout)

        suffix = " (expect navigation)" if expect_nav else ""
        return self.add_step(f"Click {selector}{suffix}", click)

    def wait(self, milliseconds: int) -> "TestCase":
        """Pause the case for a fixed delay."""
        async def pause(ctx: StepContext) -> None:
            await ctx.page.wait_for_timeout(milliseconds)

        return self.add_step(f"Wait {milliseconds} ms", pause)

    async def run(self, ctx: StepContext) -> None:
        """Execute all steps in order; the first failing step aborts the case."""
        for step in self._steps:
            await step.run(ctx)


# =============================================================================
# Registry
# =============================================================================

class SuiteRegistry:
    """Suites keyed by registration path, in registration order."""

    def __init__(self) -> None:
        self._suites: Dict[str, "TestSuite"] = {}

    def register(self, suite: "TestSuite") -> "TestSuite":
        if suite.path in self._suites:
            raise SuiteRegistrationError(
                f"A suite is already registered under {suite.path!r}"
            )
        self._suites[suite.path] = suite
        logger.debug(f"Registered suite '{suite.name}' at {suite.path}")
        return suite

    def get(self, path: str) -> "TestSuite":
        try:
            return self._suites[path]
        except KeyError:
            raise HarnessError(f"No suite registered under {path!r}") from None

    def __contains__(self, path: str) -> bool:
        return path in self._suites

    def __iter__(self) -> Iterator["TestSuite"]:
        return iter(list(self._suites.values()))

    def __len__(self) -> int:
        return len(self._suites)

    @property
    def paths(self) -> List[str]:
        return list(self._suites)


# Process-wide registry; suite modules register into it at import time
registry = SuiteRegistry()


# =============================================================================
# Test Suite
# =============================================================================

class TestSuite:
    """
    Named, ordered collection of TestCases.

    Args:
        name: Display name
        path: Registration path (registry key)
        register: Register into `registry` on construction
        suite_registry: Registry to use instead of the process-wide one
    """

    __test__ = False

    def __init__(
        self,
        name: str,
        path: str,
        register: bool = False,
        suite_registry: Optional[SuiteRegistry] = None,
    ):
        self.name = name
        self.path = path
        self._cases: List[TestCase] = []
        if register:
            (suite_registry if suite_registry is not None else registry).register(self)

    def __repr__(self) -> str:
        return f"TestSuite({self.name!r}, path={self.path!r}, cases={len(self._cases)})"

    def add_test_case(self, case: TestCase) -> "TestSuite":
        if not isinstance(case, TestCase):
            raise HarnessError(
                f"Suite '{self.name}' expects TestCase objects, got {type(case).__name__}"
            )
        self._cases.append(case)
        return self

    @property
    def test_cases(self) -> Tuple[TestCase, ...]:
        return tuple(self._cases)

    def __iter__(self) -> Iterator[TestCase]:
        return iter(self.test_cases)

    def __len__(self) -> int:
        return len(self._cases)


def load_suites(package: str = SUITES_PACKAGE) -> SuiteRegistry:
    """
    Import every module of `package` so their suites self-register.

    Returns the process-wide registry.
    """
    pkg = importlib.import_module(package)
    for module_info in pkgutil.iter_modules(pkg.__path__, prefix=f"{package}."):
        importlib.import_module(module_info.name)
    logger.debug(f"Loaded suites: {registry.paths}")
    return registry


# =============================================================================
# Runner
# =============================================================================

@dataclass
class CaseResult:
    name: str
    passed: bool
    duration_ms: float
    error: Optional[str] = None
    url: Optional[str] = None


@dataclass
class SuiteResult:
    suite_name: str
    path: str
    cases: List[CaseResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(case.passed for case in self.cases)

    @property
    def failures(self) -> List[CaseResult]:
        return [case for case in self.cases if not case.passed]

    def summary(self) -> Dict[str, Any]:
        return {
            "suite": self.suite_name,
            "path": self.path,
            "total": len(self.cases),
            "passed": len(self.cases) - len(self.failures),
            "failed": len(self.failures),
            "cases": [
                {
                    "name": case.name,
                    "passed": case.passed,
                    "duration_ms": round(case.duration_ms, 1),
                    "error": case.error,
                }
                for case in self.cases
            ],
        }


class SuiteRunner:
    """
    Executes a suite's cases sequentially on one page.

    A failing case is logged, its screenshot and URL are attached to Allure,
    and execution continues with the next case.
    """

    def __init__(
        self,
        page: Page,
        base_url: str,
        dom: Optional[DomQuery] = None,
        navigation_timeout: int = 30000,
        assert_timeout: int = 5000,
    ):
        self.context = StepContext(
            page=page,
            dom=dom or DomQuery(),
            base_url=base_url,
            navigation_timeout=navigation_timeout,
            assert_timeout=assert_timeout,
        )

    async def run(self, suite: TestSuite) -> SuiteResult:
        result = SuiteResult(suite_name=suite.name, path=suite.path)
        logger.info(f"Running suite '{suite.name}' ({len(suite)} cases)")

        for case in suite:
            result.cases.append(await self.run_case(case))

        logger.info(
            f"Suite '{suite.name}' finished: "
            f"{len(result.cases) - len(result.failures)}/{len(result.cases)} passed"
        )
        return result

    async def run_case(self, case: TestCase) -> CaseResult:
        started = time.perf_counter()
        try:
            # The case step has to see the exception to be reported as failed
            with allure.step(f"Case: {case.name}"):
                await case.run(self.context)
        except Exception as e:
            duration = (time.perf_counter() - started) * 1000
            logger.error(f"❌ {case.name}: {e}")
            await self._capture_failure(case)
            return CaseResult(
                name=case.name,
                passed=False,
                duration_ms=duration,
                error=f"{type(e).__name__}: {e}",
                url=self.context.page.url,
            )

        duration = (time.perf_counter() - started) * 1000
        logger.info(f"✅ {case.name} ({duration:.0f} ms)")
        return CaseResult(
            name=case.name,
            passed=True,
            duration_ms=duration,
            url=self.context.page.url,
        )

    async def _capture_failure(self, case: TestCase) -> None:
        page = self.context.page
        try:
            screenshot = await page.screenshot(full_page=True)
            allure.attach(
                screenshot,
                name=f"failure_{case.name}",
                attachment_type=allure.attachment_type.PNG,
            )
        except Exception as e:
            logger.warning(f"Failed to capture screenshot for '{case.name}': {e}")
        allure.attach(
            page.url,
            name="Current URL",
            attachment_type=allure.attachment_type.TEXT,
        )


__all__ = [
    "CaseAssertionError",
    "CaseResult",
    "HarnessError",
    "Step",
    "StepContext",
    "SuiteRegistrationError",
    "SuiteRegistry",
    "SuiteResult",
    "SuiteRunner",
    "TestCase",
    "TestSuite",
    "load_suites",
    "registry",
]
