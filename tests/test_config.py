import pytest

from wheelpaths import config
from wheelpaths.errors import ConfigurationError
from wheelpaths.units import Units


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("WHEELPATHS_UNITS", "WHEELPATHS_WHEELBASE_WIDTH", "WHEELPATHS_WHEELBASE_LENGTH",
                 "WHEELPATHS_HOST", "WHEELPATHS_PORT"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    assert config.get_units() is Units.FEET
    geometry = config.get_default_geometry()
    assert geometry.wheelbase_width == 2.0
    assert geometry.wheelbase_length == 2.0
    assert config.get_bind_address() == ("0.0.0.0", 8000)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("WHEELPATHS_UNITS", "Meters")
    monkeypatch.setenv("WHEELPATHS_WHEELBASE_WIDTH", "0.6")
    monkeypatch.setenv("WHEELPATHS_WHEELBASE_LENGTH", "0.7")
    monkeypatch.setenv("WHEELPATHS_HOST", "127.0.0.1")
    monkeypatch.setenv("WHEELPATHS_PORT", "9001")

    assert config.get_units() is Units.METERS
    assert config.get_default_geometry().wheelbase_width == 0.6
    assert config.get_default_geometry().wheelbase_length == 0.7
    assert config.get_bind_address() == ("127.0.0.1", 9001)


@pytest.mark.parametrize("name, value, getter", [
    ("WHEELPATHS_UNITS", "furlongs", config.get_units),
    ("WHEELPATHS_WHEELBASE_WIDTH", "wide", config.get_default_geometry),
    ("WHEELPATHS_PORT", "http", config.get_bind_address),
    ("WHEELPATHS_PORT", "70000", config.get_bind_address),
])
def test_malformed_values_fail(monkeypatch, name, value, getter):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError):
        getter()
