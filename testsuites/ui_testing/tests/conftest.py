"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for live browser tests against a We.Retail AEM instance.

Key Features:
- Skips the UI tests when the configured instance is unreachable
- Browser and page lifecycle management (function-scoped)
- Page Object fixtures
- Screenshot capture on failure

================================================================================
"""

from typing import AsyncGenerator

import allure
import httpx
import pytest
from loguru import logger
from playwright.async_api import Page

from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.config_loader import ConfigLoader
from testsuites.ui_testing.framework.log_setup import init_logger
from testsuites.ui_testing.pages.home_page import HomePage
from testsuites.ui_testing.pages.product_page import ProductPage


# ================================================================================
# Environment Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def ui_config() -> ConfigLoader:
    """Shared configuration; also initializes logging for the session."""
    config = ConfigLoader()
    init_logger(config=config)
    return config


@pytest.fixture(scope="session")
def base_url(ui_config: ConfigLoader) -> str:
    return ui_config.get("ui.base_url").rstrip("/")


@pytest.fixture(scope="session")
def site_reachable(base_url: str, ui_config: ConfigLoader) -> bool:
    """
    Probe the AEM instance once per session.

    Live UI tests are skipped (not failed) when nothing answers at `ui.base_url`.
    """
    auth = None
    if ui_config.get("ui.username") and ui_config.get("ui.password"):
        auth = (str(ui_config.get("ui.username")), str(ui_config.get("ui.password")))
    try:
        response = httpx.get(
            f"{base_url}{HomePage.URL_PATH}",
            auth=auth,
            timeout=5.0,
            follow_redirects=True,
            verify=False,
        )
    except httpx.HTTPError as e:
        logger.warning(f"We.Retail instance not reachable at {base_url}: {e}")
        return False
    if response.status_code >= 400:
        logger.warning(f"We.Retail homepage returned HTTP {response.status_code}")
        return False
    return True


@pytest.fixture
def require_site(site_reachable: bool, base_url: str) -> None:
    if not site_reachable:
        pytest.skip(f"We.Retail instance not reachable at {base_url}")


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_manager(
    require_site: None,
    ui_config: ConfigLoader,
) -> AsyncGenerator[BrowserManager, None]:
    """Browser per test; suites keep state only within one page."""
    async with BrowserManager(config=ui_config) as manager:
        yield manager


@pytest.fixture
async def page(browser_manager: BrowserManager) -> AsyncGenerator[Page, None]:
    page = await browser_manager.new_page()
    yield page
    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def home_page(page: Page, base_url: str) -> HomePage:
    return HomePage(page, base_url=base_url)


@pytest.fixture
def product_page(page: Page, base_url: str) -> ProductPage:
    return ProductPage(page, base_url=base_url)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Attach the URL of the page under test when a UI test fails.

    Screenshots are taken by SuiteRunner / BasePage.capture_failure, which run
    inside the event loop; this hook only records where the browser was.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = getattr(item, "funcargs", {}).get("page")
        if page is not None:
            try:
                allure.attach(
                    page.url,
                    name="failure_url",
                    attachment_type=allure.attachment_type.TEXT,
                )
            except Exception as e:
                logger.warning(f"Failed to attach failure URL: {e}")
