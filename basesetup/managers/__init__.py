"""Browser engine and per-thread session lifecycle."""

from .session_manager import Session, SessionManager

__all__ = [
    "Session",
    "SessionManager",
]
