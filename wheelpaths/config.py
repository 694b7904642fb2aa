"""
Centralized configuration for the trajectory service.

Settings come from environment variables and are read on every call, so a
change takes effect on the next request:

- WHEELPATHS_UNITS: feet, meters or inches (default feet)
- WHEELPATHS_WHEELBASE_WIDTH / WHEELPATHS_WHEELBASE_LENGTH: default drivetrain
  geometry in that unit (default 2.0 each)
- WHEELPATHS_HOST / WHEELPATHS_PORT: server bind address (default 0.0.0.0:8000)
"""

import os

from .errors import ConfigurationError
from .trajectory import DrivetrainGeometry
from .units import Units

DEFAULT_UNITS = Units.FEET
DEFAULT_WHEELBASE = 2.0
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}")


def get_units() -> Units:
    """Return the configured session unit."""
    raw = os.environ.get("WHEELPATHS_UNITS")
    if not raw:
        return DEFAULT_UNITS
    unit = Units.parse(raw)
    if unit is None:
        raise ConfigurationError(f"WHEELPATHS_UNITS must be one of feet, meters, inches; got {raw!r}")
    return unit


def get_default_geometry() -> DrivetrainGeometry:
    """Return the drivetrain geometry used when a request doesn't carry one."""
    return DrivetrainGeometry(
        wheelbase_width=_env_float("WHEELPATHS_WHEELBASE_WIDTH", DEFAULT_WHEELBASE),
        wheelbase_length=_env_float("WHEELPATHS_WHEELBASE_LENGTH", DEFAULT_WHEELBASE),
    )


def get_bind_address() -> tuple[str, int]:
    """Return (host, port) for the server."""
    host = os.environ.get("WHEELPATHS_HOST") or DEFAULT_HOST
    raw_port = os.environ.get("WHEELPATHS_PORT")
    if not raw_port:
        return host, DEFAULT_PORT
    try:
        port = int(raw_port)
    except ValueError:
        raise ConfigurationError(f"WHEELPATHS_PORT must be an integer, got {raw_port!r}")
    if not 0 < port < 65536:
        raise ConfigurationError(f"WHEELPATHS_PORT out of range: {port}")
    return host, port
