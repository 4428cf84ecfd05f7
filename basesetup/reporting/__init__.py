"""Allure reporting helpers."""

from .allure_utils import attach_png

__all__ = [
    "attach_png",
]
