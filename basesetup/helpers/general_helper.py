"""
================================================================================
General Helper
================================================================================

Common element interactions. Each method performs exactly one driver action,
logs the outcome and returns a safe default on failure.

Author: Automation Team
License: MIT
================================================================================
"""

from typing import Optional

import allure
from loguru import logger
from playwright.sync_api import Locator, Page

from basesetup.helpers.best_effort import best_effort


class GeneralHelper:
    """
    Click, type, hover and read elements.

    Example:
        helper = GeneralHelper(page)
        helper.fill_input(locators.username_input(), "standard_user")
        helper.click(locators.login_button())
    """

    def __init__(self, page: Page):
        self.page = page

    @best_effort("click element")
    @allure.step("Click element")
    def click(self, locator: Locator) -> None:
        logger.info(f"🖱️ Clicking element: {locator}")
        locator.click()

    @best_effort("type into input")
    @allure.step("Fill input")
    def fill_input(self, locator: Locator, text: str) -> None:
        logger.info(f"⌨️ Typing '{text}' into {locator}")
        locator.fill(text)

    @best_effort("get text", default="")
    @allure.step("Get text")
    def get_text(self, locator: Locator) -> str:
        """Text content of the element, "" on failure."""
        logger.info(f"📋 Getting text from {locator}")
        return locator.text_content() or ""

    @best_effort("clear text")
    @allure.step("Clear input")
    def clear_text(self, locator: Locator) -> None:
        logger.info(f"🧹 Clearing text from {locator}")
        locator.clear()

    @best_effort("check visibility", default=False)
    def is_visible(self, locator: Locator) -> bool:
        visible = locator.is_visible()
        logger.info(f"👀 Checking visibility of {locator}: {visible}")
        return visible

    @best_effort("hover over element")
    @allure.step("Hover element")
    def hover(self, locator: Locator) -> None:
        logger.info(f"🎯 Hovering over {locator}")
        locator.hover()

    @best_effort("wait for visibility")
    def wait_for_visibility(self, locator: Locator, timeout: int) -> None:
        """
        Wait for an element to become visible.

        Args:
            locator: Element to wait for
            timeout: Timeout in milliseconds
        """
        logger.info(f"⏳ Waiting for visibility of {locator} for {timeout} ms")
        locator.wait_for(state="visible", timeout=timeout)

    @best_effort("double-click element")
    @allure.step("Double-click element")
    def double_click(self, locator: Locator) -> None:
        logger.info(f"🖱️🖱️ Double-clicking {locator}")
        locator.dblclick()

    @best_effort("check element text", default=False)
    def contains_text(self, locator: Locator, text: str) -> bool:
        element_text: Optional[str] = locator.text_content()
        contains = element_text is not None and text in element_text
        logger.info(f"🔍 Checking if '{element_text}' contains '{text}': {contains}")
        return contains

    @best_effort("press key")
    @allure.step("Press key: {key}")
    def press_key(self, key: str, locator: Optional[Locator] = None) -> None:
        """
        Press a keyboard key, optionally on a focused element.

        Args:
            key: Key to press (e.g., "Enter", "Tab", "Escape")
            locator: Element to press the key on; page keyboard when None
        """
        if locator is not None:
            locator.press(key)
        else:
            self.page.keyboard.press(key)
        logger.debug(f"Pressed key: {key}")


__all__ = [
    "GeneralHelper",
]
