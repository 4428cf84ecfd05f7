"""
================================================================================
Scenario Lifecycle Hooks
================================================================================

Before/after logic run around every BDD scenario.

    before: acquire (or reuse) the engine, open a fresh session and navigate
            to the configured base URL. Navigation failures are logged only;
            the scenario continues on whatever page is loaded.
    after:  on failure, capture one screenshot and attach it to the report
            under "Failure Screenshot"; always release the thread's session.

The hooks are framework-agnostic; testsuites/ui_testing/conftest.py wires
them into pytest fixtures.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from loguru import logger

from basesetup.config import FrameworkConfig
from basesetup.managers import Session, SessionManager
from basesetup.reporting import attach_png

FAILURE_SCREENSHOT_LABEL = "Failure Screenshot"


def _safe_filename(name: str) -> str:
    return re.sub(r"[^A-Za-z0-9_.-]+", "_", name).strip("_") or "scenario"


class ScenarioHooks:
    """
    Scenario setup and teardown.

    Usage:
        hooks = ScenarioHooks(manager, config)
        session = hooks.before("Successful login")
        ...
        hooks.after("Successful login", failed=False)
    """

    def __init__(
        self,
        manager: SessionManager,
        config: FrameworkConfig,
        attach: Callable[[bytes, str], None] = attach_png,
    ):
        """
        Args:
            manager: Session manager owning the engine
            config: Loaded configuration (base URL, screenshot directory)
            attach: Report attachment function (bytes, name)
        """
        self.manager = manager
        self.config = config
        self._attach = attach

    def before(self, scenario_name: str, thread_id: Optional[int] = None) -> Session:
        """
        Prepare a fresh session for a scenario.

        Raises:
            BrowserInitError: The engine could not be launched
        """
        logger.info(f"🚀 Starting Scenario: {scenario_name}")

        self.manager.acquire_engine()
        session = self.manager.new_session(thread_id)

        base_url = self.config.base_url
        if not base_url:
            logger.warning("⚠️ Base URL is not set in the configuration.")
            return session

        logger.info(f"🌍 Navigating to base URL: {base_url}")
        try:
            session.page.goto(base_url)
        except Exception as e:
            logger.error(f"❌ Failed to navigate to Base URL: {base_url} | Error: {e}")
        return session

    def after(
        self,
        scenario_name: str,
        failed: bool,
        thread_id: Optional[int] = None,
    ) -> None:
        """Capture a failure screenshot if needed, then release the session."""
        if failed:
            logger.error(f"❌ Scenario Failed: {scenario_name}")
            if self.manager.has_session(thread_id):
                self.take_screenshot(scenario_name, self.manager.current_session(thread_id))
            else:
                logger.warning("⚠️ No active page found to take a screenshot.")
        else:
            logger.info(f"✅ Scenario Passed: {scenario_name}")

        self.manager.release(thread_id)
        logger.info(f"🛑 Closed browser context after scenario: {scenario_name}")

    def take_screenshot(self, scenario_name: str, session: Session) -> Optional[bytes]:
        """
        Capture the page, save it under screenshot_dir and attach it.

        Returns:
            PNG bytes, or None if the capture failed
        """
        page = session.page
        try:
            logger.info(f"📸 Capturing screenshot on failure. Current URL: {page.url}")
            directory = Path(self.config.screenshot_dir)
            directory.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            path = directory / f"{_safe_filename(scenario_name)}_{timestamp}.png"

            screenshot = page.screenshot(path=str(path))
            self._attach(screenshot, FAILURE_SCREENSHOT_LABEL)
            logger.info(f"✅ Screenshot captured for failed scenario: {scenario_name}")
            return screenshot
        except Exception as e:
            logger.error(f"❌ Failed to capture screenshot: {e}")
            return None


__all__ = [
    "ScenarioHooks",
    "FAILURE_SCREENSHOT_LABEL",
]
