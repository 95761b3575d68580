# ================================================================================
# Browser Driver Module
# ================================================================================
#
# The capability boundary between the fixture core and the browser automation
# library. The core only ever talks to the `Browser` protocol; the Playwright
# implementation below is the production driver.
#
# Key Features:
#   - Locators are element ids, resolved with Playwright's `id=` engine
#   - Optional iframe scoping for UIs hosted inside a portal frame
#   - Retry with exponential backoff on mutating actions
#   - Allure step integration
#
# ================================================================================

from __future__ import annotations

import time
from dataclasses import dataclass
from functools import wraps
from typing import (
    Callable,
    Iterator,
    List,
    Optional,
    Protocol,
    Tuple,
    Type,
    Union,
    runtime_checkable,
)

import allure
from loguru import logger
from playwright.sync_api import FrameLocator, Locator, Page
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError


@runtime_checkable
class Browser(Protocol):
    """
    Driver capabilities consumed by widgets and the fixture.

    Every method takes the locator string produced by a widget. Action
    methods return True on success and let driver failures propagate;
    predicate methods return False when the element does not show up in time.
    """

    def navigate(self, url: str) -> bool: ...

    def click(self, locator: str) -> bool: ...

    def type(self, locator: str, text: str) -> bool: ...

    def type_without_clear(self, locator: str, text: str) -> bool: ...

    def clear(self, locator: str) -> bool: ...

    def get_text(self, locator: str) -> str: ...

    def get_attribute(self, locator: str, attribute: str) -> Optional[str]: ...

    def is_visible(self, locator: str) -> bool: ...

    def exists(self, locator: str) -> bool: ...

    def is_enabled(self, locator: str) -> bool: ...

    def is_checked(self, locator: str) -> bool: ...

    def wait_for_element(self, locator: str) -> bool: ...

    def wait_for_no_element(self, locator: str) -> bool: ...

    def select_option(self, locator: str, option: str) -> bool: ...

    def get_all_options(self, locator: str) -> List[str]: ...

    def get_selected_options(self, locator: str) -> List[str]: ...

    def get_cell_text(self, locator: str, row: int, column: int) -> str: ...

    def get_row_count(self, locator: str) -> int: ...

    def get_header_cell_text(self, locator: str, column: int) -> str: ...

    def get_column_index(self, locator: str, column_id: str) -> int: ...

    def click_cell(self, locator: str, row: int, column: int) -> bool: ...

    def switch_to_frame(self, frame_id: str) -> bool: ...

    def switch_to_default_content(self) -> bool: ...


@dataclass(frozen=True)
class RetryConfig:
    """
    Retry policy for driver actions.

    Attributes:
        max_attempts: Total tries, including the first
        delay_seconds: Pause before the second try
        backoff_multiplier: Factor applied to the pause after each failure
        max_delay_seconds: Upper bound for the pause
        retry_on: Exception types worth another try; anything else propagates at once
    """
    max_attempts: int = 3
    delay_seconds: float = 1.0
    backoff_multiplier: float = 2.0
    max_delay_seconds: float = 10.0
    retry_on: Tuple[Type[BaseException], ...] = (PlaywrightError,)

    def delays(self) -> Iterator[float]:
        """Pauses between consecutive attempts (max_attempts - 1 values)."""
        delay = self.delay_seconds
        for _ in range(self.max_attempts - 1):
            yield delay
            delay = min(delay * self.backoff_multiplier, self.max_delay_seconds)


def with_retry(config: Optional[RetryConfig] = None):
    """
    Decorator retrying a driver action with exponential backoff.

    Once the attempts are used up the last driver error is re-raised as is.

    Args:
        config: Retry policy (defaults to `RetryConfig()`)
    """
    policy = config or RetryConfig()

    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            pauses = policy.delays()
            attempt = 1
            while True:
                try:
                    return func(*args, **kwargs)
                except policy.retry_on as e:
                    pause = next(pauses, None)
                    if pause is None:
                        logger.error(f"{func.__name__} failed after {attempt} attempt(s): {e}")
                        raise
                    logger.warning(
                        f"{func.__name__} attempt {attempt}/{policy.max_attempts} failed: {e}; "
                        f"retrying in {pause}s"
                    )
                    time.sleep(pause)
                    attempt += 1

        return wrapper
    return decorator


class PlaywrightBrowser:
    """
    `Browser` implementation over a Playwright sync `Page`.

    Example:
        browser = PlaywrightBrowser(page)
        browser.click("GL0030_btnNew")
        browser.type("GL0030_txtDescription", "Month end")
    """

    def __init__(self, page: Page, default_timeout: int = 30000):
        """
        Args:
            page: Playwright Page object
            default_timeout: Default timeout for operations in milliseconds
        """
        self.page = page
        self.default_timeout = default_timeout
        self._frame_id: Optional[str] = None

    @property
    def frame_id(self) -> Optional[str]:
        """Id of the iframe lookups are currently scoped to, or None."""
        return self._frame_id

    def _scope(self) -> Union[Page, FrameLocator]:
        if self._frame_id:
            return self.page.frame_locator(f"id={self._frame_id}")
        return self.page

    def _get_locator(self, locator: str) -> Locator:
        return self._scope().locator(f"id={locator}")

    @allure.step("Navigate to {url}")
    def navigate(self, url: str) -> bool:
        logger.info(f"Navigating to: {url}")
        self.page.goto(url, wait_until="load", timeout=self.default_timeout)
        return True

    @allure.step("Click element: {locator}")
    @with_retry()
    def click(self, locator: str) -> bool:
        element = self._get_locator(locator)
        logger.info(f"Clicking element: {locator}")
        element.wait_for(state="visible", timeout=self.default_timeout)
        element.click(timeout=self.default_timeout)
        logger.debug(f"Successfully clicked: {locator}")
        return True

    @allure.step("Type into: {locator}")
    @with_retry()
    def type(self, locator: str, text: str) -> bool:
        element = self._get_locator(locator)
        logger.info(f"Filling input: {locator} with '{text[:50]}'")
        element.wait_for(state="visible", timeout=self.default_timeout)
        element.fill(text, timeout=self.default_timeout)
        return True

    @allure.step("Type without clearing: {locator}")
    @with_retry()
    def type_without_clear(self, locator: str, text: str) -> bool:
        element = self._get_locator(locator)
        logger.info(f"Typing into: {locator}")
        element.wait_for(state="visible", timeout=self.default_timeout)
        element.press_sequentially(text, delay=50)
        return True

    @allure.step("Clear: {locator}")
    @with_retry()
    def clear(self, locator: str) -> bool:
        element = self._get_locator(locator)
        element.wait_for(state="visible", timeout=self.default_timeout)
        element.clear(timeout=self.default_timeout)
        return True

    def get_text(self, locator: str) -> str:
        element = self._get_locator(locator)
        element.wait_for(state="visible", timeout=self.default_timeout)

        tag = element.evaluate("e => e.tagName.toLowerCase()")
        if tag in ("input", "textarea", "select"):
            text = element.input_value(timeout=self.default_timeout)
        else:
            text = element.inner_text(timeout=self.default_timeout)

        logger.debug(f"Got text from {locator}: '{text}'")
        return text

    def get_attribute(self, locator: str, attribute: str) -> Optional[str]:
        element = self._get_locator(locator)
        element.wait_for(state="attached", timeout=self.default_timeout)
        return element.get_attribute(attribute)

    def is_visible(self, locator: str) -> bool:
        try:
            self._get_locator(locator).wait_for(state="visible", timeout=5000)
            return True
        except PlaywrightTimeoutError:
            return False

    def exists(self, locator: str) -> bool:
        return self._get_locator(locator).count() > 0

    def is_enabled(self, locator: str) -> bool:
        return self._get_locator(locator).is_enabled(timeout=self.default_timeout)

    def is_checked(self, locator: str) -> bool:
        return self._get_locator(locator).is_checked(timeout=self.default_timeout)

    @allure.step("Wait for element: {locator}")
    def wait_for_element(self, locator: str) -> bool:
        logger.info(f"Waiting for {locator} to be visible")
        try:
            self._get_locator(locator).wait_for(state="visible", timeout=self.default_timeout)
            return True
        except PlaywrightTimeoutError:
            logger.warning(f"Timed out waiting for {locator}")
            return False

    @allure.step("Wait for element to disappear: {locator}")
    def wait_for_no_element(self, locator: str) -> bool:
        try:
            self._get_locator(locator).wait_for(state="hidden", timeout=self.default_timeout)
            return True
        except PlaywrightTimeoutError:
            logger.warning(f"Timed out waiting for {locator} to disappear")
            return False

    @allure.step("Select option: {option} in {locator}")
    @with_retry()
    def select_option(self, locator: str, option: str) -> bool:
        element = self._get_locator(locator)
        logger.info(f"Selecting option: {option} in {locator}")
        element.wait_for(state="visible", timeout=self.default_timeout)
        element.select_option(label=option, timeout=self.default_timeout)
        return True

    def get_all_options(self, locator: str) -> List[str]:
        return self._get_locator(locator).locator("option").all_inner_texts()

    def get_selected_options(self, locator: str) -> List[str]:
        return self._get_locator(locator).evaluate(
            "e => Array.from(e.selectedOptions).map(o => o.text)"
        )

    def get_cell_text(self, locator: str, row: int, column: int) -> str:
        cell = self._get_locator(locator).locator(
            f"tbody tr:nth-child({row}) td:nth-child({column})"
        )
        return cell.inner_text(timeout=self.default_timeout)

    def get_row_count(self, locator: str) -> int:
        return self._get_locator(locator).locator("tbody tr").count()

    def get_header_cell_text(self, locator: str, column: int) -> str:
        header = self._get_locator(locator).locator(f"thead th:nth-child({column})")
        return header.inner_text(timeout=self.default_timeout)

    def get_column_index(self, locator: str, column_id: str) -> int:
        """1-based position of the header cell with the given id, or 0 if none matches."""
        table = self._get_locator(locator)
        table.wait_for(state="attached", timeout=self.default_timeout)
        header_ids = table.locator("thead th").evaluate_all("hs => hs.map(h => h.id)")
        for index, header_id in enumerate(header_ids, start=1):
            if header_id and header_id.lower() == column_id.lower():
                return index
        logger.debug(f"No header with id '{column_id}' in {locator} ({len(header_ids)} columns)")
        return 0

    @allure.step("Click cell ({row}, {column}) in {locator}")
    @with_retry()
    def click_cell(self, locator: str, row: int, column: int) -> bool:
        cell = self._get_locator(locator).locator(
            f"tbody tr:nth-child({row}) td:nth-child({column})"
        )
        cell.click(timeout=self.default_timeout)
        return True

    @allure.step("Switch to frame: {frame_id}")
    def switch_to_frame(self, frame_id: str) -> bool:
        self.page.locator(f"id={frame_id}").wait_for(
            state="attached", timeout=self.default_timeout
        )
        self._frame_id = frame_id
        logger.debug(f"Lookups now scoped to frame: {frame_id}")
        return True

    def switch_to_default_content(self) -> bool:
        self._frame_id = None
        return True


__all__ = [
    "Browser",
    "PlaywrightBrowser",
    "RetryConfig",
    "with_retry",
]
