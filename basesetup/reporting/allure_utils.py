"""
================================================================================
Allure Report Utilities
================================================================================

Attachment helpers used by page objects and scenario hooks.

================================================================================
"""

import allure


def attach_png(data: bytes, name: str = "Screenshot") -> None:
    """
    Attach a PNG image to the Allure report.

    Args:
        data: Image bytes
        name: Attachment name
    """
    allure.attach(
        data,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )


__all__ = [
    "attach_png",
]
