"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Explicit session handle (no thread-local lookup)
    - Navigation relative to the configured base URL
    - Screenshot capture with Allure attachment

Page objects keep no element state: every action re-resolves its locators
against the live page.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from loguru import logger
from playwright.sync_api import Page

from basesetup.helpers import GeneralHelper, NavigationHelper
from basesetup.managers import Session
from basesetup.reporting import attach_png

# Default output directory for screenshots
SCREENSHOT_DIR = Path("reports") / "screenshots"


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/"

            def login(self, username: str, password: str) -> None:
                ...
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""

    def __init__(
        self,
        session: Session,
        base_url: str = "",
        screenshot_dir: Union[str, Path] = SCREENSHOT_DIR,
    ):
        """
        Initialize page object.

        Args:
            session: Session owned by the calling thread
            base_url: Base URL for the application
            screenshot_dir: Default output directory for screenshot()
        """
        self.session = session
        self.base_url = base_url.rstrip("/")
        self.screenshot_dir = Path(screenshot_dir)
        self.general = GeneralHelper(session.page)
        self.navigation = NavigationHelper(session.page)

    @property
    def page(self) -> Page:
        return self.session.page

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    def open(self) -> "BasePage":
        """Navigate to this page (best effort)."""
        self.navigation.go_to(self.url)
        return self

    def current_url(self) -> str:
        return self.navigation.get_current_url()

    def screenshot(
        self,
        name: str,
        directory: Optional[Union[str, Path]] = None,
        full_page: bool = False,
    ) -> Path:
        """
        Take screenshot, save it and attach it to Allure.

        Args:
            name: Screenshot name (without extension)
            directory: Output directory (defaults to screenshot_dir)
            full_page: Capture full scrollable page

        Returns:
            Path to saved screenshot
        """
        directory = Path(directory) if directory is not None else self.screenshot_dir
        directory.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = directory / f"{name}_{timestamp}.png"

        data = self.page.screenshot(path=str(filepath), full_page=full_page)
        attach_png(data, name=name)

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath


__all__ = [
    "BasePage",
]
