"""
================================================================================
Locators
================================================================================

Locator factory with retry semantics and per-feature locator classes.

Components:
    - descriptors: Strategy / Role enumerations and LocatorDescriptor
    - base_locators: BaseLocators with bounded retries and LocatorResult
    - login_locators: Login form locators

Author: Automation Team
License: MIT
================================================================================
"""

from .descriptors import LocatorDescriptor, Role, Strategy
from .base_locators import BaseLocators, FailureReason, LocatorResult, RetryConfig
from .login_locators import LoginLocators

__all__ = [
    "BaseLocators",
    "FailureReason",
    "LocatorDescriptor",
    "LocatorResult",
    "LoginLocators",
    "RetryConfig",
    "Role",
    "Strategy",
]
