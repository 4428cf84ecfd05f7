"""
Fake Playwright objects for unit tests.

Only the calls the framework makes are implemented. Each fake records what
happened so tests can assert on driver interactions without a browser.
"""

from typing import Any, List, Optional, Sequence, Tuple, Union


class FakeLocator:
    """Stand-in for playwright Locator (single element or empty match)."""

    def __init__(
        self,
        count: int = 1,
        text: str = "",
        visible: bool = True,
        checked: bool = False,
        enabled: bool = True,
        attributes: Optional[dict] = None,
        error: Optional[Exception] = None,
    ):
        self._count = count
        self.text = text
        self.visible = visible
        self.checked = checked
        self.enabled = enabled
        self.attributes = attributes or {}
        self.error = error
        self.actions: List[Tuple[str, Any]] = []

    def _guard(self) -> None:
        if self.error is not None:
            raise self.error

    def count(self) -> int:
        self._guard()
        return self._count

    def click(self) -> None:
        self._guard()
        self.actions.append(("click", None))
        self.checked = not self.checked

    def dblclick(self) -> None:
        self._guard()
        self.actions.append(("dblclick", None))

    def fill(self, value: str) -> None:
        self._guard()
        self.actions.append(("fill", value))
        self.text = value

    def clear(self) -> None:
        self._guard()
        self.actions.append(("clear", None))
        self.text = ""

    def hover(self) -> None:
        self._guard()
        self.actions.append(("hover", None))

    def press(self, key: str) -> None:
        self._guard()
        self.actions.append(("press", key))

    def text_content(self) -> str:
        self._guard()
        return self.text

    def inner_text(self) -> str:
        self._guard()
        return self.text

    def is_visible(self) -> bool:
        self._guard()
        return self.visible

    def is_enabled(self) -> bool:
        self._guard()
        return self.enabled

    def is_checked(self) -> bool:
        self._guard()
        return self.checked

    def check(self) -> None:
        self._guard()
        self.actions.append(("check", None))
        self.checked = True

    def uncheck(self) -> None:
        self._guard()
        self.actions.append(("uncheck", None))
        self.checked = False

    def get_attribute(self, name: str) -> Optional[str]:
        self._guard()
        return self.attributes.get(name)

    def wait_for(self, state: str = "visible", timeout: Optional[int] = None) -> None:
        self._guard()
        self.actions.append(("wait_for", state))


class FakeCollection:
    """Result of `locator(selector)` on a table/row: a list of elements."""

    def __init__(self, items: Sequence[FakeLocator]):
        self.items = list(items)

    def all(self) -> List[FakeLocator]:
        return list(self.items)

    def count(self) -> int:
        return len(self.items)

    def all_inner_texts(self) -> List[str]:
        return [item.inner_text() for item in self.items]

    def all_text_contents(self) -> List[str]:
        return [item.text_content() for item in self.items]


class FakeRow(FakeLocator):
    def __init__(self, cells: Sequence[str]):
        super().__init__()
        self.cells = [FakeLocator(text=text) for text in cells]

    def locator(self, selector: str) -> FakeCollection:
        return FakeCollection(self.cells)


class FakeTable(FakeLocator):
    """A table whose rows are lists of cell texts."""

    def __init__(self, rows: Sequence[Sequence[str]]):
        super().__init__()
        self.rows = [FakeRow(cells) for cells in rows]

    def locator(self, selector: str) -> FakeCollection:
        if selector == "tr":
            return FakeCollection(self.rows)
        return FakeCollection([cell for row in self.rows for cell in row.cells])


class FakeSelect(FakeLocator):
    """A <select> with (value, label) options."""

    def __init__(self, options: Sequence[Tuple[str, str]]):
        super().__init__()
        self.options = list(options)
        self.selected_index = 0

    def select_option(self, value=None, label=None, index=None) -> List[str]:
        for i, (option_value, option_label) in enumerate(self.options):
            if (value is not None and option_value == value) or \
                    (label is not None and option_label == label) or \
                    (index is not None and i == index):
                self.selected_index = i
                return [option_value]
        raise RuntimeError("No option matched")

    def evaluate(self, expression: str) -> str:
        return self.options[self.selected_index][1]

    def locator(self, selector: str) -> FakeCollection:
        return FakeCollection([FakeLocator(text=label) for _, label in self.options])


class FakeFrameLocator:
    """Stand-in for playwright FrameLocator; records nth() calls."""

    def __init__(self, selector: str, index: Optional[int] = None):
        self.selector = selector
        self.index = index

    def nth(self, index: int) -> "FakeFrameLocator":
        return FakeFrameLocator(self.selector, index)


class FakeKeyboard:
    def __init__(self):
        self.pressed: List[str] = []

    def press(self, key: str) -> None:
        self.pressed.append(key)


class FakeDialog:
    def __init__(self, message: str):
        self.message = message
        self.accepted: Optional[bool] = None
        self.prompt_text: Optional[str] = None

    def accept(self, prompt_text: Optional[str] = None) -> None:
        self.accepted = True
        self.prompt_text = prompt_text

    def dismiss(self) -> None:
        self.accepted = False


class FakePage:
    """
    Stand-in for playwright Page.

    `results` drives locator lookups: each built locator consumes the next
    entry (an int match count or an Exception raised on count()); the last
    entry repeats.
    """

    def __init__(self, results: Optional[Sequence[Union[int, Exception]]] = None, url: str = "about:blank"):
        self._results = list(results if results is not None else [1])
        self.lookups: List[tuple] = []
        self.url = url
        self.goto_error: Optional[Exception] = None
        self.close_error: Optional[Exception] = None
        self.screenshot_error: Optional[Exception] = None
        self.frame_error: Optional[Exception] = None
        self.frame_selectors: List[str] = []
        self.closed = False
        self.default_timeout: Optional[int] = None
        self.visited: List[str] = []
        self.handlers: List[tuple] = []
        self.screenshots = 0
        self.keyboard = FakeKeyboard()

    def _next(self, lookup: tuple) -> FakeLocator:
        self.lookups.append(lookup)
        result = self._results.pop(0) if len(self._results) > 1 else self._results[0]
        if isinstance(result, Exception):
            return FakeLocator(error=result)
        return FakeLocator(count=result)

    # Locator factories
    def locator(self, selector: str) -> FakeLocator:
        return self._next(("locator", selector))

    def get_by_text(self, text: str) -> FakeLocator:
        return self._next(("text", text))

    def get_by_role(self, role: str, name: Optional[str] = None) -> FakeLocator:
        return self._next(("role", role, name))

    def get_by_placeholder(self, placeholder: str) -> FakeLocator:
        return self._next(("placeholder", placeholder))

    def get_by_test_id(self, test_id: str) -> FakeLocator:
        return self._next(("test_id", test_id))

    def wait_for_selector(self, selector: str, timeout: Optional[int] = None) -> None:
        if self._results[0] == 0:
            raise TimeoutError(f"Timeout {timeout}ms exceeded waiting for {selector}")

    # Page-level actions
    def goto(self, url: str) -> None:
        if self.goto_error is not None:
            raise self.goto_error
        self.visited.append(url)
        self.url = url

    def reload(self) -> None:
        self.visited.append("reload")

    def go_back(self) -> None:
        self.visited.append("back")

    def go_forward(self) -> None:
        self.visited.append("forward")

    def frame_locator(self, selector: str) -> FakeFrameLocator:
        if self.frame_error is not None:
            raise self.frame_error
        self.frame_selectors.append(selector)
        return FakeFrameLocator(selector)

    def bring_to_front(self) -> None:
        pass

    def set_default_timeout(self, timeout: int) -> None:
        self.default_timeout = timeout

    def once(self, event: str, handler) -> None:
        self.handlers.append((event, handler))

    def fire_dialog(self, message: str) -> FakeDialog:
        """Deliver a dialog to the registered one-shot handlers."""
        dialog = FakeDialog(message)
        handlers, self.handlers = self.handlers, []
        for event, handler in handlers:
            if event == "dialog":
                handler(dialog)
        return dialog

    def screenshot(self, path: Optional[str] = None, full_page: bool = False) -> bytes:
        if self.screenshot_error is not None:
            raise self.screenshot_error
        self.screenshots += 1
        return b"\x89PNG fake"

    def close(self) -> None:
        if self.close_error is not None:
            raise self.close_error
        self.closed = True


class FakeContext:
    def __init__(self):
        self.pages: List[FakePage] = []
        self.closed = False
        self.close_error: Optional[Exception] = None

    def new_page(self) -> FakePage:
        page = FakePage()
        self.pages.append(page)
        return page

    def close(self) -> None:
        if self.close_error is not None:
            raise self.close_error
        self.closed = True


class FakeBrowser:
    def __init__(self, launch_options: dict):
        self.launch_options = launch_options
        self.contexts: List[FakeContext] = []
        self.closed = False

    def new_context(self) -> FakeContext:
        context = FakeContext()
        self.contexts.append(context)
        return context

    def close(self) -> None:
        self.closed = True


class FakeBrowserType:
    def __init__(self, name: str, error: Optional[Exception] = None):
        self.name = name
        self.error = error
        self.launched: List[FakeBrowser] = []

    def launch(self, **options) -> FakeBrowser:
        if self.error is not None:
            raise self.error
        browser = FakeBrowser(options)
        self.launched.append(browser)
        return browser


class FakePlaywright:
    def __init__(self, launch_error: Optional[Exception] = None):
        self.chromium = FakeBrowserType("chromium", launch_error)
        self.firefox = FakeBrowserType("firefox", launch_error)
        self.webkit = FakeBrowserType("webkit", launch_error)
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


class FakePlaywrightFactory:
    """Callable replacing sync_playwright(); counts how often it starts."""

    def __init__(self, launch_error: Optional[Exception] = None):
        self.launch_error = launch_error
        self.instances: List[FakePlaywright] = []

    def __call__(self) -> "FakePlaywrightFactory":
        return self

    def start(self) -> FakePlaywright:
        playwright = FakePlaywright(self.launch_error)
        self.instances.append(playwright)
        return playwright

    @property
    def launches(self) -> int:
        return sum(
            len(browser_type.launched)
            for pw in self.instances
            for browser_type in (pw.chromium, pw.firefox, pw.webkit)
        )
