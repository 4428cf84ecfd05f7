"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for application pages.

Each page class encapsulates:
    - Feature locators (resolved on every call)
    - Page-specific business actions

Author: Automation Team
License: MIT
================================================================================
"""

from .base_page import BasePage
from .login_page import LoginPage

__all__ = [
    "BasePage",
    "LoginPage",
]
