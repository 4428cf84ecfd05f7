"""Shared logging setup."""

from .global_config import get_logger, init_logger, reset_logger

__all__ = [
    "init_logger",
    "reset_logger",
    "get_logger",
]
