"""Iframe helpers."""

from typing import Optional

from loguru import logger
from playwright.sync_api import FrameLocator, Page

from basesetup.helpers.best_effort import best_effort


class FrameHelper:
    """Build frame locators by name/id, index or selector."""

    def __init__(self, page: Page):
        self.page = page

    @best_effort("switch to frame")
    def switch_to_frame(self, name_or_id: str) -> Optional[FrameLocator]:
        logger.info(f"🔄 Switching to frame by name/ID: {name_or_id}")
        return self.page.frame_locator(f"iframe[name='{name_or_id}'], iframe[id='{name_or_id}']")

    @best_effort("switch to frame by index")
    def switch_to_frame_by_index(self, index: int) -> Optional[FrameLocator]:
        """Frame at 0-based position among the page's iframes."""
        logger.info(f"🔄 Switching to frame by index: {index}")
        return self.page.frame_locator("iframe").nth(index)

    @best_effort("switch to frame by selector")
    def switch_to_frame_by_selector(self, selector: str) -> Optional[FrameLocator]:
        logger.info(f"🔄 Switching to frame by selector: {selector}")
        return self.page.frame_locator(selector)

    @best_effort("switch to default content")
    def switch_to_default_content(self) -> None:
        logger.info("🔄 Switching back to default content.")
        self.page.bring_to_front()


__all__ = [
    "FrameHelper",
]
