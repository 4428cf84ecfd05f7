"""
================================================================================
Assertion Helper
================================================================================

Logged assertions for step definitions.

Unlike the interaction helpers, these never swallow: every failure is logged
and re-raised as AssertionError so the scenario fails.

Author: Automation Team
License: MIT
================================================================================
"""

from typing import Any, Optional

from loguru import logger
from playwright.sync_api import Locator


def _fail(log_message: str, message: str) -> None:
    logger.error(f"❌ Assertion Failed: {log_message}")
    raise AssertionError(message)


def assert_equals(expected: Any, actual: Any, message: str = "") -> None:
    if expected != actual:
        _fail(f"Expected = {expected}, Actual = {actual}. {message}",
              message or f"Expected {expected!r} but got {actual!r}")
    logger.info(f"✅ Assertion Passed: Expected = {expected}, Actual = {actual}")


def assert_true(condition: bool, message: str = "") -> None:
    if not condition:
        _fail(message, message or "Expected condition to be true")
    logger.info(f"✅ Assertion Passed: {message}")


def assert_false(condition: bool, message: str = "") -> None:
    if condition:
        _fail(message, message or "Expected condition to be false")
    logger.info(f"✅ Assertion Passed: {message}")


def assert_element_visible(locator: Optional[Locator], message: str = "") -> None:
    """Fails for an absent locator as well as for a hidden element."""
    if locator is None or not locator.is_visible():
        _fail(f"Element not visible - {message}", message or "Element is not visible")
    logger.info(f"✅ Assertion Passed: Element is visible - {message}")


def assert_element_not_visible(locator: Optional[Locator], message: str = "") -> None:
    if locator is not None and locator.is_visible():
        _fail(f"Element is visible - {message}", message or "Element is visible")
    logger.info(f"✅ Assertion Passed: Element is not visible - {message}")


def assert_element_text(locator: Locator, expected: str) -> None:
    actual_text = (locator.text_content() or "").strip()
    if actual_text != expected:
        _fail(f"Expected = '{expected}', Actual = '{actual_text}'",
              "Element text does not match.")
    logger.info(
        f"✅ Assertion Passed: Element text matches. "
        f"Expected = '{expected}', Actual = '{actual_text}'"
    )


def assert_element_attribute(locator: Locator, attribute: str, expected_value: str) -> None:
    actual_value = locator.get_attribute(attribute)
    if actual_value != expected_value:
        _fail(f"Attribute '{attribute}' Expected = '{expected_value}', Actual = '{actual_value}'",
              "Attribute value does not match.")
    logger.info(
        f"✅ Assertion Passed: Attribute '{attribute}' matches. "
        f"Expected = '{expected_value}', Actual = '{actual_value}'"
    )


def assert_page_title(actual_title: str, expected_title: str) -> None:
    if actual_title != expected_title:
        _fail(f"Expected Title = '{expected_title}', Actual Title = '{actual_title}'",
              "Page title does not match.")
    logger.info(
        f"✅ Assertion Passed: Page title matches. "
        f"Expected = '{expected_title}', Actual = '{actual_title}'"
    )


def assert_url_contains(actual_url: str, fragment: str) -> None:
    if fragment not in (actual_url or ""):
        _fail(f"URL '{actual_url}' does not contain '{fragment}'",
              f"Expected URL to contain '{fragment}' but was '{actual_url}'")
    logger.info(f"✅ Assertion Passed: URL '{actual_url}' contains '{fragment}'")


def assert_element_enabled(locator: Locator, message: str = "") -> None:
    if not locator.is_enabled():
        _fail(f"Element is disabled - {message}", message or "Element is disabled")
    logger.info(f"✅ Assertion Passed: Element is enabled - {message}")


def assert_element_disabled(locator: Locator, message: str = "") -> None:
    if locator.is_enabled():
        _fail(f"Element is enabled - {message}", message or "Element is enabled")
    logger.info(f"✅ Assertion Passed: Element is disabled - {message}")


__all__ = [
    "assert_equals",
    "assert_true",
    "assert_false",
    "assert_element_visible",
    "assert_element_not_visible",
    "assert_element_text",
    "assert_element_attribute",
    "assert_page_title",
    "assert_url_contains",
    "assert_element_enabled",
    "assert_element_disabled",
]
