"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for the Playwright smoke suite: one browser per session, a fresh
page and driver per test.

These tests launch a real browser and are skipped unless RUN_UI_TESTS=1.
Install the browsers first with `playwright install chromium`.

================================================================================
"""

import os
from typing import Generator

import allure
import pytest

from webfixture.browser import BrowserManager, PlaywrightBrowser
from webfixture.common import ConfigLoader, FixtureSettings


def pytest_collection_modifyitems(config, items):
    if os.getenv("RUN_UI_TESTS") == "1":
        return
    skip_ui = pytest.mark.skip(reason="UI tests launch a browser; set RUN_UI_TESTS=1 to run them")
    for item in items:
        if "ui_testing" in str(item.fspath):
            item.add_marker(skip_ui)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def ui_settings() -> FixtureSettings:
    """Settings from config/fixture.yaml, with a short timeout for local pages."""
    return FixtureSettings.from_loader(ConfigLoader()).with_overrides(default_timeout_ms=5000)


@pytest.fixture(scope="session")
def browser_manager(ui_settings: FixtureSettings) -> Generator[BrowserManager, None, None]:
    """
    Session-scoped browser manager fixture.

    A single browser is launched for the session; each test gets its own
    isolated context.
    """
    with BrowserManager(ui_settings) as manager:
        yield manager


@pytest.fixture
def driver(browser_manager: BrowserManager, request) -> Generator[PlaywrightBrowser, None, None]:
    """Driver on a fresh page; attaches a screenshot to the report on failure."""
    driver = browser_manager.new_driver()
    yield driver

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        allure.attach(
            driver.page.screenshot(full_page=True),
            name="failure",
            attachment_type=allure.attachment_type.PNG,
        )
    driver.page.context.close()


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
