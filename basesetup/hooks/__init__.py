"""Scenario lifecycle hooks."""

from .scenario_hooks import FAILURE_SCREENSHOT_LABEL, ScenarioHooks

__all__ = [
    "ScenarioHooks",
    "FAILURE_SCREENSHOT_LABEL",
]
