"""Integration tests for configuration loading and handling."""

import pytest
from configuration import LogicError, configuration


def test_default_configuration() -> None:
    """Test that exception is raised when configuration is not loaded."""
    cfg = configuration
    assert cfg is not None
    with pytest.raises(LogicError, match="logic error: configuration is not loaded"):
        configuration.configuration  # pylint: disable=pointless-statement


def test_loading_proper_configuration(configuration_filename: str) -> None:
    """Test the configuration loading."""
    cfg = configuration
    cfg.load_configuration(configuration_filename)

    # check if configuration is loaded
    assert cfg.is_loaded()

    # check 'configuration' section
    name = cfg.configuration.name
    assert name == "foo bar baz"

    # check 'service' section
    svc_config = cfg.service_configuration
    assert svc_config.host == "localhost"
    assert svc_config.port == 3000
    assert svc_config.workers == 1
    assert svc_config.color_log is True
    assert svc_config.access_log is True

    # check 'service.cors' section
    cors_config = cfg.service_configuration.cors
    assert cors_config.allow_origins == ["foo_origin", "bar_origin"]
    assert cors_config.allow_credentials is False
    assert cors_config.allow_methods == ["GET", "POST"]
    assert cors_config.allow_headers == ["Authorization", "Content-Type"]

    # check 'justification' section
    assert cfg.justification_configuration.line_width == 80

    # check 'quota' section
    assert cfg.quota_configuration.daily_word_limit == 80000
    assert cfg.quota_configuration.lock_shards == 8


def test_loading_sample_configuration() -> None:
    """Test that the sample configuration shipped with the service is valid."""
    configuration.load_configuration("justify-service.yaml")
    assert configuration.configuration.name == "Justify service"
    assert configuration.quota_configuration.daily_word_limit == 80000
