"""
Fixture settings.

Explicit settings object handed to a fixture at construction time. It
carries the sign-in defaults (user, password, company, session date) and
browser options that would otherwise live in process-wide constants.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Optional

from .config_loader import ConfigLoader


SESSION_DATE_FORMAT = "%m/%d/%Y"


def _today() -> str:
    return date.today().strftime(SESSION_DATE_FORMAT)


@dataclass(frozen=True)
class FixtureSettings:
    """
    Run-time settings for one fixture instance.

    Attributes:
        base_url: Application root, e.g. "https://erp.example.com"
        default_user: User id used when a test signs in without one
        default_password: Password paired with `default_user`
        default_company: Company/tenant selected at sign-in
        default_session_date: Session date as MM/dd/yyyy (defaults to today)
        browser_type: 'chromium', 'firefox' or 'webkit'
        headless: Run the browser without a window
        default_timeout_ms: Driver wait timeout in milliseconds
        layout_map_dir: Directory relative layout map paths resolve against
    """
    base_url: str = "http://localhost:3000"
    default_user: str = "ADMIN"
    default_password: str = "ADMIN"
    default_company: str = "SAMINC"
    default_session_date: str = field(default_factory=_today)
    browser_type: str = "chromium"
    headless: bool = True
    default_timeout_ms: int = 30000
    layout_map_dir: Optional[str] = None

    @classmethod
    def from_loader(cls, loader: ConfigLoader) -> "FixtureSettings":
        """Build settings from a `ConfigLoader`, falling back to the defaults."""
        defaults = cls()
        return cls(
            base_url=loader.get("fixture.base_url", defaults.base_url).rstrip("/"),
            default_user=loader.get("fixture.default_user", defaults.default_user),
            default_password=loader.get("fixture.default_password", defaults.default_password),
            default_company=loader.get("fixture.default_company", defaults.default_company),
            default_session_date=loader.get(
                "fixture.default_session_date", defaults.default_session_date
            ),
            browser_type=loader.get("browser.type", defaults.browser_type),
            headless=loader.get("browser.headless", defaults.headless),
            default_timeout_ms=loader.get("browser.timeout_ms", defaults.default_timeout_ms),
            layout_map_dir=loader.get("fixture.layout_map_dir", defaults.layout_map_dir),
        )

    def with_overrides(self, **changes) -> "FixtureSettings":
        return replace(self, **changes)
