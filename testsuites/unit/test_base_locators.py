import pytest
from loguru import logger

from basesetup.exceptions import ElementNotFoundError, InvalidLocatorError
from basesetup.locators import (
    BaseLocators,
    FailureReason,
    LocatorDescriptor,
    LoginLocators,
    RetryConfig,
    Role,
    Strategy,
)
from testsuites.unit.fakes import FakePage


@pytest.fixture
def sleeps(monkeypatch):
    calls = []
    monkeypatch.setattr("basesetup.locators.base_locators.time.sleep", calls.append)
    return calls


def test_missing_element_takes_two_attempts_one_delay(sleeps):
    page = FakePage(results=[0])
    result = BaseLocators(page).resolve(LocatorDescriptor.by_id("ghost"))

    assert not result.found
    assert result.attempts == 2
    assert result.reason is FailureReason.NOT_FOUND
    assert sleeps == [1.0]
    assert page.lookups == [("locator", "#ghost"), ("locator", "#ghost")]


@pytest.mark.parametrize(
    "method, args, lookup",
    [
        ("by_id", ("user",), ("locator", "#user")),
        ("by_css", (".btn",), ("locator", ".btn")),
        ("by_xpath", ("//div",), ("locator", "xpath=//div")),
        ("by_text", ("Login",), ("text", "Login")),
        ("by_role", ("button", "Submit"), ("role", "button", "Submit")),
        ("by_placeholder", ("Username",), ("placeholder", "Username")),
        ("by_test_id", ("cart",), ("test_id", "cart")),
    ],
)
def test_every_strategy_returns_none_when_absent(sleeps, method, args, lookup):
    page = FakePage(results=[0])
    assert getattr(BaseLocators(page), method)(*args) is None
    assert page.lookups == [lookup, lookup]


def test_element_appearing_on_retry_is_returned(sleeps):
    page = FakePage(results=[0, 1])
    result = BaseLocators(page).resolve(LocatorDescriptor.by_css("#late"))

    assert result.found
    assert result.attempts == 2
    assert result.reason is None
    assert result.unwrap() is result.locator


def test_first_attempt_success_does_not_sleep(sleeps):
    page = FakePage(results=[3])
    assert BaseLocators(page).by_text("Products") is not None
    assert sleeps == []


def test_driver_error_is_reported_not_raised(sleeps):
    page = FakePage(results=[RuntimeError("Target closed")])
    result = BaseLocators(page).resolve(LocatorDescriptor.by_placeholder("Password"))

    assert not result.found
    assert result.reason is FailureReason.DRIVER_ERROR
    assert "Target closed" in result.error
    with pytest.raises(ElementNotFoundError, match="driver_error"):
        result.unwrap()


def test_custom_retry_budget(sleeps):
    page = FakePage(results=[0])
    locators = BaseLocators(page, retry=RetryConfig(max_attempts=4, delay_seconds=0.25))
    assert locators.resolve(LocatorDescriptor.by_id("x")).attempts == 4
    assert sleeps == [0.25, 0.25, 0.25]


def test_role_parsing_is_case_insensitive(sleeps):
    page = FakePage(results=[1])
    assert BaseLocators(page).by_role("  BUTTON ", name="Login") is not None
    assert page.lookups == [("role", "button", "Login")]

    descriptor = LocatorDescriptor.by_role("CheckBox")
    assert descriptor.role is Role.CHECKBOX
    assert descriptor.describe() == "Role: checkbox (Name: None)"


def test_unknown_role_fails_before_lookup(sleeps):
    page = FakePage(results=[1])
    with pytest.raises(InvalidLocatorError, match="fancybutton"):
        BaseLocators(page).by_role("fancybutton")
    assert page.lookups == []
    assert sleeps == []


def test_descriptor_validation():
    with pytest.raises(InvalidLocatorError):
        LocatorDescriptor("magic", "x")
    with pytest.raises(InvalidLocatorError):
        LocatorDescriptor(Strategy.CSS, ".a", name="not allowed")

    assert LocatorDescriptor("id", "x").strategy is Strategy.ID
    assert LocatorDescriptor.by_test_id("cart").describe() == "Test ID: cart"


def test_wait_for_locator():
    assert BaseLocators(FakePage(results=[1])).wait_for_locator("#ready", 500) is not None
    assert BaseLocators(FakePage(results=[0])).wait_for_locator("#never", 500) is None


def test_login_locators(sleeps):
    page = FakePage(results=[1])
    locators = LoginLocators(page)

    assert locators.username_input() is not None
    assert locators.login_button() is not None
    assert page.lookups == [("placeholder", "Username"), ("locator", "#login-button")]


def test_each_attempt_is_logged(sleeps):
    messages = []
    handler_id = logger.add(messages.append, format="{message}", level="INFO")
    try:
        BaseLocators(FakePage(results=[0])).by_id("ghost")
    finally:
        logger.remove(handler_id)

    lookups = [m for m in messages if "Locating element by ID: #ghost" in m]
    assert len(lookups) == 2
    assert "(attempt 2/2)" in lookups[1]
