"""
================================================================================
Base Setup
================================================================================

Playwright-based UI automation scaffold.

Modules:
    - config: Environment-selected YAML configuration
    - managers: Browser engine and per-thread session lifecycle
    - locators: Locator factory with retry semantics
    - helpers: Best-effort interaction helpers (alerts, tables, dropdowns...)
    - pages: Page Object Model implementations
    - hooks: Scenario lifecycle (setup, failure screenshot, teardown)

Example:
    from basesetup.config import load_config
    from basesetup.managers import SessionManager
    from basesetup.pages import LoginPage

    config = load_config("dev")
    with SessionManager(config) as manager:
        session = manager.new_session()
        LoginPage(session, config.base_url).login("standard_user", "secret_sauce")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "config",
    "managers",
    "locators",
    "helpers",
    "pages",
    "hooks",
    "reporting",
]
