"""Unit tests for ServiceConfiguration model."""

import pytest

from pydantic import ValidationError

from models.config import CORSConfiguration, ServiceConfiguration


def test_service_configuration_constructor() -> None:
    """
    Verify that the ServiceConfiguration constructor sets default
    values for all fields.
    """
    s = ServiceConfiguration()
    assert s is not None

    assert s.host == "localhost"
    assert s.port == 3000
    assert s.workers == 1
    assert s.color_log is True
    assert s.access_log is True
    assert s.environment == "development"
    assert s.is_production is False
    assert s.cors == CORSConfiguration()


def test_service_configuration_production() -> None:
    """Test the production runtime mode."""
    s = ServiceConfiguration(environment="production")
    assert s.is_production is True


def test_service_configuration_unknown_environment() -> None:
    """Test that only known runtime modes are accepted."""
    with pytest.raises(ValidationError):
        ServiceConfiguration(environment="staging")


def test_service_configuration_port_value() -> None:
    """Test the ServiceConfiguration port value validation."""
    with pytest.raises(ValidationError, match="Input should be greater than 0"):
        ServiceConfiguration(port=-1)

    with pytest.raises(ValueError, match="Port value should be less than 65536"):
        ServiceConfiguration(port=100000)


def test_service_configuration_port_from_string() -> None:
    """Test that port read from environment variable is converted."""
    s = ServiceConfiguration(port="8080")
    assert s.port == 8080


def test_service_configuration_workers_value() -> None:
    """Test the ServiceConfiguration workers value validation."""
    with pytest.raises(ValidationError, match="Input should be greater than 0"):
        ServiceConfiguration(workers=-1)
