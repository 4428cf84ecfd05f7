"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers and tags tests by directory.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Test type markers
    config.addinivalue_line(
        "markers", "unit: Framework unit tests (no browser required)"
    )
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end scenarios driving a real browser"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: UI-specific tests"
    )


def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Adds directory-based markers so suites can be selected with -m.
    """
    for item in items:
        # Auto-add 'unit' marker to tests in unit directory
        if "unit" in item.path.parts:
            item.add_marker(pytest.mark.unit)

        # Auto-add 'ui' marker to tests in ui_testing directory
        if "ui_testing" in item.path.parts:
            item.add_marker(pytest.mark.ui)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Playwright Base Setup - UI Automation Framework",
        "=" * 60,
        "",
    ]
