"""Shared pytest fixtures for unit tests."""

from typing import Generator

import pytest

from configuration import AppConfig, configuration


@pytest.fixture(name="minimal_config")
def minimal_config_fixture() -> Generator[AppConfig, None, None]:
    """Load minimal configuration into the configuration singleton.

    The configuration is unloaded again when the test finishes so other
    tests can check the behaviour without configuration.
    """
    configuration.init_from_dict(
        {
            "name": "test",
            "justification": {"line_width": 80},
            "quota": {"daily_word_limit": 80000, "lock_shards": 4},
        }
    )
    yield configuration
    # pylint: disable=protected-access
    configuration._configuration = None
