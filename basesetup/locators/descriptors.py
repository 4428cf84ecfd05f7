"""
================================================================================
Locator Descriptors
================================================================================

Symbolic element descriptions resolved lazily against the live page.

    - Strategy: how the value is interpreted (id, css, xpath, ...)
    - Role: closed set of ARIA roles accepted by get_by_role()
    - LocatorDescriptor: strategy + value (+ accessible name for roles)

Descriptors are validated when they are built, so an unknown role name fails
immediately instead of surfacing as a lookup failure later.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from basesetup.exceptions import InvalidLocatorError


class Strategy(str, Enum):
    """Supported locator strategies."""

    ID = "id"
    CSS = "css"
    XPATH = "xpath"
    TEXT = "text"
    ROLE = "role"
    PLACEHOLDER = "placeholder"
    TEST_ID = "test_id"


class Role(str, Enum):
    """ARIA roles understood by Playwright's get_by_role()."""

    ALERT = "alert"
    ALERTDIALOG = "alertdialog"
    APPLICATION = "application"
    ARTICLE = "article"
    BANNER = "banner"
    BLOCKQUOTE = "blockquote"
    BUTTON = "button"
    CAPTION = "caption"
    CELL = "cell"
    CHECKBOX = "checkbox"
    CODE = "code"
    COLUMNHEADER = "columnheader"
    COMBOBOX = "combobox"
    COMPLEMENTARY = "complementary"
    CONTENTINFO = "contentinfo"
    DEFINITION = "definition"
    DELETION = "deletion"
    DIALOG = "dialog"
    DIRECTORY = "directory"
    DOCUMENT = "document"
    EMPHASIS = "emphasis"
    FEED = "feed"
    FIGURE = "figure"
    FORM = "form"
    GENERIC = "generic"
    GRID = "grid"
    GRIDCELL = "gridcell"
    GROUP = "group"
    HEADING = "heading"
    IMG = "img"
    INSERTION = "insertion"
    LINK = "link"
    LIST = "list"
    LISTBOX = "listbox"
    LISTITEM = "listitem"
    LOG = "log"
    MAIN = "main"
    MARQUEE = "marquee"
    MATH = "math"
    METER = "meter"
    MENU = "menu"
    MENUBAR = "menubar"
    MENUITEM = "menuitem"
    MENUITEMCHECKBOX = "menuitemcheckbox"
    MENUITEMRADIO = "menuitemradio"
    NAVIGATION = "navigation"
    NONE = "none"
    NOTE = "note"
    OPTION = "option"
    PARAGRAPH = "paragraph"
    PRESENTATION = "presentation"
    PROGRESSBAR = "progressbar"
    RADIO = "radio"
    RADIOGROUP = "radiogroup"
    REGION = "region"
    ROW = "row"
    ROWGROUP = "rowgroup"
    ROWHEADER = "rowheader"
    SCROLLBAR = "scrollbar"
    SEARCH = "search"
    SEARCHBOX = "searchbox"
    SEPARATOR = "separator"
    SLIDER = "slider"
    SPINBUTTON = "spinbutton"
    STATUS = "status"
    STRONG = "strong"
    SUBSCRIPT = "subscript"
    SUPERSCRIPT = "superscript"
    SWITCH = "switch"
    TAB = "tab"
    TABLE = "table"
    TABLIST = "tablist"
    TABPANEL = "tabpanel"
    TERM = "term"
    TEXTBOX = "textbox"
    TIME = "time"
    TIMER = "timer"
    TOOLBAR = "toolbar"
    TOOLTIP = "tooltip"
    TREE = "tree"
    TREEGRID = "treegrid"
    TREEITEM = "treeitem"

    @classmethod
    def parse(cls, name: Union[str, "Role"]) -> "Role":
        """
        Map a free-text role name to a Role, case-insensitively.

        Raises:
            InvalidLocatorError: Unknown role name
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise InvalidLocatorError(f"Unknown ARIA role: '{name}'") from None


@dataclass(frozen=True)
class LocatorDescriptor:
    """
    Symbolic specification of an element.

    Attributes:
        strategy: How `value` is interpreted
        value: Selector, id, text, role name, placeholder or test id
        name: Accessible name qualifier (role strategy only)
    """
    strategy: Strategy
    value: str
    name: Optional[str] = None

    def __post_init__(self):
        try:
            strategy = Strategy(self.strategy)
        except ValueError:
            raise InvalidLocatorError(f"Unknown locator strategy: '{self.strategy}'") from None
        object.__setattr__(self, "strategy", strategy)

        if strategy is Strategy.ROLE:
            object.__setattr__(self, "value", Role.parse(self.value).value)
        elif self.name:
            raise InvalidLocatorError("Only role locators accept a name qualifier")

    @classmethod
    def by_id(cls, element_id: str) -> "LocatorDescriptor":
        return cls(Strategy.ID, element_id)

    @classmethod
    def by_css(cls, selector: str) -> "LocatorDescriptor":
        return cls(Strategy.CSS, selector)

    @classmethod
    def by_xpath(cls, xpath: str) -> "LocatorDescriptor":
        return cls(Strategy.XPATH, xpath)

    @classmethod
    def by_text(cls, text: str) -> "LocatorDescriptor":
        return cls(Strategy.TEXT, text)

    @classmethod
    def by_role(cls, role: Union[str, Role], name: Optional[str] = None) -> "LocatorDescriptor":
        return cls(Strategy.ROLE, Role.parse(role).value, name or None)

    @classmethod
    def by_placeholder(cls, placeholder: str) -> "LocatorDescriptor":
        return cls(Strategy.PLACEHOLDER, placeholder)

    @classmethod
    def by_test_id(cls, test_id: str) -> "LocatorDescriptor":
        return cls(Strategy.TEST_ID, test_id)

    @property
    def role(self) -> Optional[Role]:
        """The parsed role for role descriptors."""
        return Role(self.value) if self.strategy is Strategy.ROLE else None

    def describe(self) -> str:
        """Human-readable description used in log messages."""
        if self.strategy is Strategy.ID:
            return f"ID: #{self.value}"
        if self.strategy is Strategy.CSS:
            return f"CSS Selector: {self.value}"
        if self.strategy is Strategy.XPATH:
            return f"XPath: {self.value}"
        if self.strategy is Strategy.TEXT:
            return f"Text: {self.value}"
        if self.strategy is Strategy.ROLE:
            return f"Role: {self.value} (Name: {self.name})"
        if self.strategy is Strategy.PLACEHOLDER:
            return f"Placeholder: {self.value}"
        return f"Test ID: {self.value}"


__all__ = [
    "Strategy",
    "Role",
    "LocatorDescriptor",
]
