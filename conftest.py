"""
Repository-level pytest configuration.

Why this exists:
  - Select the configuration environment (`--env`, else ENV, else dev)
  - Load the configuration once per test session and configure logging
  - Keep behavior explicit and discoverable

Important:
  Credentials in the feature files belong to the public demo store.
  Real projects should load secrets from a secure secret manager in CI/CD.
"""

from __future__ import annotations

import pytest

from basesetup.common import init_logger
from basesetup.config import FrameworkConfig, load_config


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default=None,
        help="Configuration environment (config/config-<env>.yaml). Defaults to $ENV or 'dev'.",
    )


@pytest.fixture(scope="session")
def framework_config(request) -> FrameworkConfig:
    """
    Configuration for the whole test session.

    A missing configuration file aborts the run (ConfigurationError).
    """
    config = load_config(request.config.getoption("--env"))
    init_logger(config)
    return config
