"""Browser navigation helpers."""

import allure
from loguru import logger
from playwright.sync_api import Page

from basesetup.helpers.best_effort import best_effort


class NavigationHelper:
    """Navigate, reload and move through history."""

    def __init__(self, page: Page):
        self.page = page

    @best_effort("navigate")
    @allure.step("Navigate to {url}")
    def go_to(self, url: str) -> None:
        logger.info(f"🌍 Navigating to {url}")
        self.page.goto(url)

    @best_effort("refresh the page")
    @allure.step("Refresh page")
    def refresh(self) -> None:
        logger.info("🔄 Refreshing the page")
        self.page.reload()

    @best_effort("go back in history")
    @allure.step("Go back")
    def go_back(self) -> None:
        logger.info("⬅️ Going back in browser history")
        self.page.go_back()

    @best_effort("go forward in history")
    @allure.step("Go forward")
    def go_forward(self) -> None:
        logger.info("➡️ Going forward in browser history")
        self.page.go_forward()

    @best_effort("get current URL", default="")
    def get_current_url(self) -> str:
        current_url = self.page.url
        logger.info(f"🔗 Current URL: {current_url}")
        return current_url


__all__ = [
    "NavigationHelper",
]
