"""Ping utility used by the API health-check."""

from sipcalc.config import SERVICE_NAME


def get_ping_message() -> str:
    """Return a static ping message."""
    return "pong"


def get_service_name() -> str:
    return SERVICE_NAME
