"""
================================================================================
Login Page Object
================================================================================

Business-level login actions built from LoginLocators and GeneralHelper.

NOTE:
  Locators target the demo store configured as baseUrl (placeholder-based
  inputs, #login-button). Point baseUrl at another app and adjust
  LoginLocators accordingly.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from basesetup.locators import LoginLocators
from basesetup.pages.base_page import BasePage


class LoginPage(BasePage):
    """Login page object."""

    URL_PATH = "/"
    HOME_PATH = "/inventory"
    PAGE_TITLE = "Swag Labs"

    @property
    def locators(self) -> LoginLocators:
        # Bound to the session's current page; nothing is cached between calls
        return LoginLocators(self.page)

    @allure.step("Enter username {username}")
    def enter_username(self, username: str) -> None:
        self.general.fill_input(self.locators.username_input(), username)

    @allure.step("Enter password")
    def enter_password(self, password: str) -> None:
        self.general.fill_input(self.locators.password_input(), password)

    @allure.step("Click login")
    def click_login(self) -> None:
        self.general.click(self.locators.login_button())

    def login(self, username: str, password: str) -> None:
        """Fill in the credentials and submit."""
        logger.info(f"Logging in as {username}")
        self.enter_username(username)
        self.enter_password(password)
        self.click_login()

    def is_error_displayed(self, message: str) -> bool:
        """Whether an error with exactly this text is visible."""
        return self.general.is_visible(self.locators.error_message_by_text(message))

    def is_on_home_page(self) -> bool:
        return self.HOME_PATH in self.current_url()


__all__ = [
    "LoginPage",
]
