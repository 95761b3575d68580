"""
Browser driver boundary and the Playwright implementation behind it.
"""

from .browser_manager import BrowserManager
from .driver import Browser, PlaywrightBrowser, RetryConfig, with_retry

__all__ = [
    "Browser",
    "BrowserManager",
    "PlaywrightBrowser",
    "RetryConfig",
    "with_retry",
]
