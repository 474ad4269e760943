"""
radargraph exception hierarchy.

Only the configuration layer raises. The rendering core handles degenerate
input (no parameters, short value lists, oversized labels) without raising.
"""

from typing import Any, Dict, Optional


class RadarGraphError(Exception):
    """Base exception for radargraph errors.

    Attributes:
        user_message: Safe, user-facing error message.
        context: Dictionary of debug information.
    """

    def __init__(
        self,
        message: str,
        *,
        user_message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.user_message = user_message or message
        self.context = context or {}


class ConfigError(RadarGraphError):
    """Configuration load/validation errors."""

    pass


class ChartFileError(ConfigError):
    """Chart definition file cannot be read or has the wrong structure."""

    pass
