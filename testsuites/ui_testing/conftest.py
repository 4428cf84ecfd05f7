"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Wires the framework into pytest / pytest-bdd:

- Session-scoped SessionManager (one engine per worker process)
- ScenarioHooks around every scenario via the `browser_session` fixture
- Failure detection through a makereport hookwrapper
- Page Object fixtures

================================================================================
"""

from typing import Dict, Generator

import pytest

from basesetup.config import FrameworkConfig
from basesetup.hooks import ScenarioHooks
from basesetup.managers import Session, SessionManager
from basesetup.pages import LoginPage


phase_report_key = pytest.StashKey[Dict[str, pytest.TestReport]]()


# ================================================================================
# Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Keep each phase's report on the item so fixtures can see the outcome."""
    outcome = yield
    report = outcome.get_result()
    item.stash.setdefault(phase_report_key, {})[report.when] = report


def _scenario_name(request: pytest.FixtureRequest) -> str:
    scenario = getattr(getattr(request.node, "function", None), "__scenario__", None)
    return getattr(scenario, "name", None) or request.node.name


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def session_manager(framework_config: FrameworkConfig) -> Generator[SessionManager, None, None]:
    """
    Session-scoped manager owning the single browser engine.

    Shut down once the whole test session is finished.
    """
    manager = SessionManager(framework_config)
    yield manager
    manager.shutdown()


@pytest.fixture(scope="session")
def scenario_hooks(session_manager: SessionManager, framework_config: FrameworkConfig) -> ScenarioHooks:
    return ScenarioHooks(session_manager, framework_config)


@pytest.fixture
def browser_session(
    request: pytest.FixtureRequest,
    scenario_hooks: ScenarioHooks,
) -> Generator[Session, None, None]:
    """
    Fresh session opened on the base URL for one scenario.

    On teardown a failed scenario gets a screenshot attached; the session is
    always released.
    """
    name = _scenario_name(request)
    session = scenario_hooks.before(name)
    yield session

    reports = request.node.stash.get(phase_report_key, {})
    failed = any(report.failed for report in reports.values())
    scenario_hooks.after(name, failed=failed)


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(browser_session: Session, framework_config: FrameworkConfig) -> LoginPage:
    """
    Provides LoginPage bound to the scenario's session.
    """
    return LoginPage(
        browser_session,
        framework_config.base_url,
        screenshot_dir=framework_config.screenshot_dir,
    )
