"""
================================================================================
Interaction Helpers
================================================================================

Thin wrappers around Playwright element and page operations.

Policy:
    - Interaction helpers log and swallow errors, returning a safe default
      ("", False, None, [] or -1)
    - assertion_helper logs and re-raises, so failed checks fail the test

Author: Automation Team
License: MIT
================================================================================
"""

from . import assertion_helper
from .alert_helper import AlertHelper
from .best_effort import best_effort
from .checkbox_helper import CheckboxHelper
from .dropdown_helper import DropdownHelper
from .frame_helper import FrameHelper
from .general_helper import GeneralHelper
from .navigation_helper import NavigationHelper
from .table_helper import TableHelper

__all__ = [
    "AlertHelper",
    "CheckboxHelper",
    "DropdownHelper",
    "FrameHelper",
    "GeneralHelper",
    "NavigationHelper",
    "TableHelper",
    "assertion_helper",
    "best_effort",
]
