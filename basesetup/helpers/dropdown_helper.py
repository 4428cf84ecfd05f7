"""
Dropdown (<select>) interactions.

The three select methods converge on the same selected option when given
equivalent selectors (label, value attribute or position).
"""

from typing import List, Optional

import allure
from loguru import logger
from playwright.sync_api import Locator

from basesetup.helpers.best_effort import best_effort


class DropdownHelper:
    """Select and read options of a <select> element."""

    @best_effort("select option by text")
    @allure.step("Select option by text: {text}")
    def select_by_text(self, locator: Locator, text: str) -> None:
        logger.info(f"🔽 Selecting '{text}' from dropdown {locator}")
        locator.select_option(label=text)
        logger.info(f"✅ Successfully selected '{text}'")

    @best_effort("select option by value")
    @allure.step("Select option by value: {value}")
    def select_by_value(self, locator: Locator, value: str) -> None:
        logger.info(f"🔽 Selecting value '{value}' from dropdown {locator}")
        locator.select_option(value=value)
        logger.info(f"✅ Successfully selected value '{value}'")

    @best_effort("select option by index")
    @allure.step("Select option by index: {index}")
    def select_by_index(self, locator: Locator, index: int) -> None:
        """Select by 0-based position."""
        logger.info(f"🔽 Selecting index '{index}' from dropdown {locator}")
        locator.select_option(index=index)
        logger.info(f"✅ Successfully selected index '{index}'")

    @best_effort("get selected option")
    def get_selected_option(self, locator: Locator) -> Optional[str]:
        """Visible text of the selected option, None on failure."""
        selected = locator.evaluate("el => el.options[el.selectedIndex].text")
        logger.info(f"📌 Selected option: {selected}")
        return selected

    @best_effort("retrieve dropdown options", default=[])
    def get_all_options(self, locator: Locator) -> List[str]:
        options = locator.locator("option").all_text_contents()
        logger.info(f"📌 Dropdown options: {options}")
        return options

    @best_effort("check option availability", default=False)
    def is_option_available(self, locator: Locator, option: str) -> bool:
        available = option in self.get_all_options(locator)
        logger.info(f"🔎 Checking if option '{option}' is available: {available}")
        return available


__all__ = [
    "DropdownHelper",
]
