"""Checkbox interactions."""

import allure
from loguru import logger
from playwright.sync_api import Locator

from basesetup.helpers.best_effort import best_effort


class CheckboxHelper:
    """Check, uncheck and inspect checkboxes without raising."""

    @best_effort("check checkbox")
    @allure.step("Check checkbox")
    def check(self, locator: Locator) -> None:
        """Check the checkbox unless it is already checked."""
        if not locator.is_checked():
            locator.check()
            logger.info(f"✅ Checked the checkbox: {locator}")
        else:
            logger.info(f"ℹ️ Checkbox is already checked: {locator}")

    @best_effort("uncheck checkbox")
    @allure.step("Uncheck checkbox")
    def uncheck(self, locator: Locator) -> None:
        """Uncheck the checkbox unless it is already unchecked."""
        if locator.is_checked():
            locator.uncheck()
            logger.info(f"✅ Unchecked the checkbox: {locator}")
        else:
            logger.info(f"ℹ️ Checkbox is already unchecked: {locator}")

    @best_effort("toggle checkbox")
    @allure.step("Toggle checkbox")
    def toggle_checkbox(self, locator: Locator) -> None:
        locator.click()
        logger.info(f"🔄 Toggled the checkbox: {locator}")

    @best_effort("ensure checkbox is checked")
    def check_with_verification(self, locator: Locator) -> None:
        if not locator.is_checked():
            locator.check()
            if locator.is_checked():
                logger.info(f"✅ Checkbox successfully checked: {locator}")
            else:
                logger.warning(f"⚠️ Failed to check the checkbox: {locator}")

    @best_effort("ensure checkbox is unchecked")
    def uncheck_with_verification(self, locator: Locator) -> None:
        if locator.is_checked():
            locator.uncheck()
            if not locator.is_checked():
                logger.info(f"✅ Checkbox successfully unchecked: {locator}")
            else:
                logger.warning(f"⚠️ Failed to uncheck the checkbox: {locator}")

    @best_effort("read checkbox status", default=False)
    def is_checked(self, locator: Locator) -> bool:
        checked = locator.is_checked()
        logger.info(f"📌 Checkbox checked status [{locator}]: {checked}")
        return checked


__all__ = [
    "CheckboxHelper",
]
