"""
================================================================================
Base Locators with Retry
================================================================================

Locator factory shared by every feature's locator class.

Features:
    - One method per strategy (id, css, xpath, text, role, placeholder, test id)
    - Bounded retries with a fixed delay around each lookup
    - Zero matches counts as a failed attempt
    - Result object that tells "not found" apart from driver errors

Resolution is never cached: every call queries the live page, so locators
stay valid across navigations.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

from loguru import logger
from playwright.sync_api import Locator, Page

from basesetup.exceptions import ElementNotFoundError
from basesetup.locators.descriptors import LocatorDescriptor, Role, Strategy


class RetryConfig:
    """Configuration for locator retry behavior."""

    def __init__(self, max_attempts: int = 2, delay_seconds: float = 1.0):
        """
        Initialize retry configuration.

        Args:
            max_attempts: Maximum number of lookup attempts
            delay_seconds: Fixed delay between attempts
        """
        self.max_attempts = max_attempts
        self.delay_seconds = delay_seconds


class FailureReason(str, Enum):
    """Why a locator could not be resolved."""

    NOT_FOUND = "not_found"
    DRIVER_ERROR = "driver_error"


@dataclass
class LocatorResult:
    """
    Outcome of a locator lookup.

    Attributes:
        description: What was looked up (for logging/reporting)
        locator: Resolved locator, None when the lookup failed
        attempts: Number of attempts made
        reason: Failure reason of the last attempt (None on success)
        error: Driver error message of the last attempt, if any
    """
    description: str
    locator: Optional[Locator] = None
    attempts: int = 0
    reason: Optional[FailureReason] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.locator is not None

    def unwrap(self) -> Locator:
        """Return the locator or raise ElementNotFoundError."""
        if self.locator is None:
            raise ElementNotFoundError(
                f"Unable to locate {self.description} after {self.attempts} attempt(s) "
                f"({self.reason.value if self.reason else 'unknown'})"
            )
        return self.locator


class BaseLocators:
    """
    Locator factory bound to a page.

    Usage:
        class LoginLocators(BaseLocators):
            def login_button(self) -> Optional[Locator]:
                return self.by_id("login-button")

    Every `by_*` method returns None (and logs) when the element could not be
    found within the retry budget. Callers must guard before use.
    """

    DEFAULT_RETRY = RetryConfig()

    def __init__(self, page: Page, retry: Optional[RetryConfig] = None):
        """
        Args:
            page: Playwright Page to resolve against
            retry: Retry budget (defaults to 2 attempts, 1s apart)
        """
        self.page = page
        self.retry = retry or self.DEFAULT_RETRY

    # =========================================================================
    # Resolution
    # =========================================================================

    def resolve(self, descriptor: LocatorDescriptor) -> LocatorResult:
        """
        Resolve a descriptor with retries.

        Args:
            descriptor: What to look up

        Returns:
            LocatorResult; never raises for missing elements or driver errors
        """
        return self._retry_locator(descriptor.describe(), lambda: self._build(descriptor))

    def _build(self, descriptor: LocatorDescriptor) -> Locator:
        """Translate a descriptor into a (lazy) Playwright locator."""
        strategy = descriptor.strategy
        if strategy is Strategy.ID:
            return self.page.locator(f"#{descriptor.value}")
        if strategy is Strategy.CSS:
            return self.page.locator(descriptor.value)
        if strategy is Strategy.XPATH:
            return self.page.locator(f"xpath={descriptor.value}")
        if strategy is Strategy.TEXT:
            return self.page.get_by_text(descriptor.value)
        if strategy is Strategy.ROLE:
            if descriptor.name:
                return self.page.get_by_role(descriptor.value, name=descriptor.name)
            return self.page.get_by_role(descriptor.value)
        if strategy is Strategy.PLACEHOLDER:
            return self.page.get_by_placeholder(descriptor.value)
        return self.page.get_by_test_id(descriptor.value)

    def _retry_locator(
        self,
        description: str,
        locator_factory: Callable[[], Locator],
    ) -> LocatorResult:
        """
        Generic retry wrapper.

        An attempt succeeds only if the locator matches at least one element
        at check time. The delay is applied between attempts, not after the
        last one.
        """
        result = LocatorResult(description=description)
        max_attempts = max(1, self.retry.max_attempts)

        for attempt in range(1, max_attempts + 1):
            result.attempts = attempt
            logger.info(f"🔍 Locating element by {description} (attempt {attempt}/{max_attempts})")
            try:
                locator = locator_factory()
                if locator.count() > 0:
                    result.locator = locator
                    result.reason = None
                    result.error = None
                    return result
                result.reason = FailureReason.NOT_FOUND
                result.error = None
                logger.warning(
                    f"⚠️ Attempt {attempt}/{max_attempts} failed for {description} | "
                    f"Error: Element not found"
                )
            except Exception as e:
                result.reason = FailureReason.DRIVER_ERROR
                result.error = str(e)
                logger.warning(
                    f"⚠️ Attempt {attempt}/{max_attempts} failed for {description} | "
                    f"Error: {e}"
                )

            if attempt < max_attempts:
                time.sleep(self.retry.delay_seconds)

        logger.error(f"❌ Final failure: Unable to locate {description}")
        return result

    # =========================================================================
    # Strategy shortcuts
    # =========================================================================

    def by_id(self, element_id: str) -> Optional[Locator]:
        """Find element by ID."""
        return self.resolve(LocatorDescriptor.by_id(element_id)).locator

    def by_css(self, selector: str) -> Optional[Locator]:
        """Find element by CSS selector."""
        return self.resolve(LocatorDescriptor.by_css(selector)).locator

    def by_xpath(self, xpath: str) -> Optional[Locator]:
        """Find element by XPath."""
        return self.resolve(LocatorDescriptor.by_xpath(xpath)).locator

    def by_text(self, text: str) -> Optional[Locator]:
        """Find element by visible text."""
        return self.resolve(LocatorDescriptor.by_text(text)).locator

    def by_role(self, role: Union[str, Role], name: Optional[str] = None) -> Optional[Locator]:
        """
        Find element by ARIA role with an optional accessible name.

        Raises:
            InvalidLocatorError: Unknown role name (caller bug, not retried)
        """
        return self.resolve(LocatorDescriptor.by_role(role, name)).locator

    def by_placeholder(self, placeholder: str) -> Optional[Locator]:
        """Find element by placeholder text."""
        return self.resolve(LocatorDescriptor.by_placeholder(placeholder)).locator

    def by_test_id(self, test_id: str) -> Optional[Locator]:
        """Find element by test id attribute."""
        return self.resolve(LocatorDescriptor.by_test_id(test_id)).locator

    def wait_for_locator(self, selector: str, timeout_ms: int) -> Optional[Locator]:
        """
        Wait for a selector to appear.

        Args:
            selector: Playwright selector
            timeout_ms: Timeout in milliseconds

        Returns:
            Locator for the selector, or None on timeout
        """
        try:
            logger.info(f"⏳ Waiting for locator: {selector} (Timeout: {timeout_ms}ms)")
            self.page.wait_for_selector(selector, timeout=timeout_ms)
            return self.page.locator(selector)
        except Exception as e:
            logger.error(f"❌ Locator {selector} not found within timeout: {e}")
            return None


__all__ = [
    "BaseLocators",
    "RetryConfig",
    "FailureReason",
    "LocatorResult",
]
