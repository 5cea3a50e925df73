"""Ping utility used by the API health-check."""

from investsim import __version__

SERVICE_NAME = "investsim"


def get_ping_message() -> str:
    """Return a static ping message."""
    return "pong"


def get_service_info() -> tuple[str, str]:
    """Name and version reported alongside the ping."""
    return SERVICE_NAME, __version__
