"""
Error types raised by the trajectory core.
"""


class WheelpathsError(Exception):
    """Base class for all wheelpaths errors."""


class InvalidInputError(WheelpathsError, ValueError):
    """Malformed center trajectory (non-finite values, non-increasing time)."""


class ConfigurationError(InvalidInputError):
    """Drivetrain geometry, unit or environment settings that cannot be used."""
