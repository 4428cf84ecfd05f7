"""Locators for the login feature."""

from typing import Optional

from playwright.sync_api import Locator

from basesetup.locators.base_locators import BaseLocators


class LoginLocators(BaseLocators):
    """Login form elements."""

    def username_input(self) -> Optional[Locator]:
        return self.by_placeholder("Username")

    def password_input(self) -> Optional[Locator]:
        return self.by_placeholder("Password")

    def login_button(self) -> Optional[Locator]:
        return self.by_id("login-button")

    def error_message_by_text(self, message: str) -> Optional[Locator]:
        return self.by_text(message)

    def inventory_container(self) -> Optional[Locator]:
        """Product list shown after a successful login."""
        return self.by_id("inventory_container")


__all__ = [
    "LoginLocators",
]
