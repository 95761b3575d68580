"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for fixture runs.

Features:
    - Single browser instance per manager
    - Context isolation per fixture
    - Configuration presets taken from FixtureSettings
    - Guaranteed teardown on every exit path

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.sync_api import (
    Browser as PlaywrightBrowserInstance,
    BrowserContext,
    Page,
    Playwright,
    sync_playwright,
)

from webfixture.common.settings import FixtureSettings

from .driver import PlaywrightBrowser


class BrowserManager:
    """
    Manages the Playwright process, browser and contexts for fixtures.

    Usage:
        with BrowserManager(settings) as manager:
            browser = manager.new_driver()
            fixture = GenericWebFixture("layoutmaps/gl_batch_list.xml", browser, settings)
    """

    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
        "args": ["--ignore-certificate-errors"],
    }

    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(self, settings: Optional[FixtureSettings] = None):
        """
        Prepare a manager; nothing is launched until `start()`.

        Args:
            settings: Fixture settings (browser type, headless, timeout)
        """
        self.settings = settings or FixtureSettings()

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[PlaywrightBrowserInstance] = None
        self._contexts: List[BrowserContext] = []

    def __enter__(self) -> "BrowserManager":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def start(self) -> None:
        """Start Playwright and launch the configured browser type."""
        self._playwright = sync_playwright().start()

        if self.settings.browser_type == "firefox":
            browser_launcher = self._playwright.firefox
        elif self.settings.browser_type == "webkit":
            browser_launcher = self._playwright.webkit
        else:
            browser_launcher = self._playwright.chromium

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.settings.headless,
        }

        try:
            self._browser = browser_launcher.launch(**launch_options)
        except Exception:
            self._playwright.stop()
            self._playwright = None
            raise

        logger.debug(
            f"Browser started: {self.settings.browser_type} "
            f"(headless={self.settings.headless})"
        )

    def close(self) -> None:
        """Close all contexts, the browser and Playwright."""
        try:
            for context in self._contexts:
                context.close()
        finally:
            self._contexts.clear()
            try:
                if self._browser:
                    self._browser.close()
            finally:
                self._browser = None
                if self._playwright:
                    self._playwright.stop()
                    self._playwright = None

        logger.debug("Browser closed")

    def new_context(self, **options: Any) -> BrowserContext:
        """Open an isolated context (own cookies and storage) on the running browser."""
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context = self._browser.new_context(**{**self.DEFAULT_CONTEXT_OPTIONS, **options})
        self._contexts.append(context)
        return context

    def new_page(self, context: Optional[BrowserContext] = None, **context_options: Any) -> Page:
        if context is None:
            context = self.new_context(**context_options)
        return context.new_page()

    def new_driver(self, **context_options: Any) -> PlaywrightBrowser:
        """Create a `Browser` driver on a fresh, isolated page."""
        page = self.new_page(**context_options)
        return PlaywrightBrowser(page, default_timeout=self.settings.default_timeout_ms)
