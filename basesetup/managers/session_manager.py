"""
================================================================================
Session Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - Single shared browser engine per process (lazy, double-checked lock)
    - One isolated context/page pair per worker thread
    - Explicit Session handles passed to page objects
    - Best-effort teardown that never masks test results

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from loguru import logger
from playwright.sync_api import Browser, BrowserContext, Page, Playwright, sync_playwright

from basesetup.config import SUPPORTED_BROWSERS, FrameworkConfig
from basesetup.exceptions import BrowserInitError


@dataclass
class Session:
    """
    One thread's browsing session.

    Attributes:
        thread_id: Identity of the owning thread
        engine: Shared browser (process lifetime)
        context: Isolated browser context owned by the thread
        page: Page inside `context`
        created_at: Creation timestamp
    """
    thread_id: int
    engine: Browser
    context: BrowserContext
    page: Page
    created_at: datetime = field(default_factory=datetime.now)


class SessionManager:
    """
    Owns the browser engine and the per-thread sessions.

    Usage:
        with SessionManager(config) as manager:
            session = manager.new_session()
            session.page.goto(config.base_url)
            manager.release()

    A thread must only touch its own session; the engine is the only shared
    resource and is never mutated after launch except by shutdown().
    """

    LAUNCH_ARGS: List[str] = ["--disable-gpu", "--no-sandbox"]

    def __init__(
        self,
        config: FrameworkConfig,
        playwright_factory: Callable[[], Any] = sync_playwright,
    ):
        """
        Initialize session manager.

        Args:
            config: Loaded framework configuration
            playwright_factory: Returns a Playwright context manager
                (sync_playwright); replaceable in tests
        """
        self.config = config
        self._playwright_factory = playwright_factory
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._sessions: Dict[int, Session] = {}
        self._init_lock = threading.Lock()

    def __enter__(self) -> "SessionManager":
        self.acquire_engine()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()

    # =========================================================================
    # Engine
    # =========================================================================

    @property
    def is_running(self) -> bool:
        """Whether the shared engine is launched."""
        return self._browser is not None

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser

    def acquire_engine(self) -> Browser:
        """
        Launch the shared browser if needed and return it.

        Idempotent: concurrent and repeated calls create exactly one engine.

        Raises:
            BrowserInitError: Unsupported browser type or launch failure
        """
        if self._browser is not None:
            return self._browser

        with self._init_lock:
            if self._browser is None:
                self._browser = self._launch()
        return self._browser

    def _launch(self) -> Browser:
        browser_type = self.config.browser.lower()
        if browser_type not in SUPPORTED_BROWSERS:
            logger.error(f"❌ Unsupported browser: {browser_type}")
            raise BrowserInitError(f"Unsupported browser: {browser_type}")

        playwright = None
        try:
            playwright = self._playwright_factory().start()
            launcher = getattr(playwright, browser_type)
            browser = launcher.launch(
                headless=self.config.headless,
                slow_mo=self.config.slow_mo,
                args=list(self.LAUNCH_ARGS),
            )
        except Exception as e:
            logger.error(f"❌ Failed to initialize Playwright: {e}")
            if playwright is not None:
                try:
                    playwright.stop()
                except Exception as stop_error:
                    logger.warning(f"⚠️ Error while stopping Playwright: {stop_error}")
            raise BrowserInitError("Playwright initialization failed") from e

        self._playwright = playwright
        logger.info(
            f"🎭 Playwright Initialized | Browser: {browser_type} | "
            f"Headless: {self.config.headless}"
        )
        return browser

    # =========================================================================
    # Sessions
    # =========================================================================

    @staticmethod
    def _thread_key(thread_id: Optional[int]) -> int:
        return threading.get_ident() if thread_id is None else thread_id

    def new_session(self, thread_id: Optional[int] = None) -> Session:
        """
        Create a fresh context and page for a thread.

        Any previous session handle for the thread is replaced without being
        closed.

        Args:
            thread_id: Owning thread (defaults to the calling thread)
        """
        key = self._thread_key(thread_id)
        if self._browser is None:
            logger.warning("⚠️ Browser not initialized. Initializing now...")
        browser = self.acquire_engine()

        context = browser.new_context()
        logger.info(f"🌐 New BrowserContext created for thread: {key}")

        page = context.new_page()
        page.set_default_timeout(self.config.default_timeout)
        logger.info(f"📄 New Page created for thread: {key}")

        session = Session(thread_id=key, engine=browser, context=context, page=page)
        self._sessions[key] = session
        return session

    def current_session(self, thread_id: Optional[int] = None) -> Session:
        """
        Return the thread's session, creating one if absent.
        """
        key = self._thread_key(thread_id)
        session = self._sessions.get(key)
        if session is None:
            logger.warning(f"⚠️ No active Page found for thread {key}. Creating a new one.")
            return self.new_session(key)
        return session

    def has_session(self, thread_id: Optional[int] = None) -> bool:
        """Whether the thread currently owns a session."""
        return self._thread_key(thread_id) in self._sessions

    def release(self, thread_id: Optional[int] = None) -> None:
        """
        Close page then context for one thread.

        Errors are logged, never raised; other threads are untouched.
        """
        key = self._thread_key(thread_id)
        session = self._sessions.pop(key, None)
        if session is None:
            return

        try:
            session.page.close()
            logger.info(f"❌ Page closed for thread: {key}")
        except Exception as e:
            logger.error(f"⚠️ Error while closing page for thread {key}: {e}")

        try:
            session.context.close()
            logger.info(f"❌ BrowserContext closed for thread: {key}")
        except Exception as e:
            logger.error(f"⚠️ Error while closing context for thread {key}: {e}")

    def shutdown(self) -> None:
        """
        Release every session, then the browser and Playwright.

        Safe to call when already shut down.
        """
        for key in list(self._sessions):
            self.release(key)

        with self._init_lock:
            if self._browser is not None:
                try:
                    self._browser.close()
                    logger.info("❌ Browser closed")
                except Exception as e:
                    logger.error(f"⚠️ Error while closing browser: {e}")
                self._browser = None

            if self._playwright is not None:
                try:
                    self._playwright.stop()
                    logger.info("❌ Playwright instance closed")
                except Exception as e:
                    logger.error(f"⚠️ Error while closing Playwright: {e}")
                self._playwright = None


__all__ = [
    "Session",
    "SessionManager",
]
