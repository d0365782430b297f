"""Ping utility used by the API health-check."""

from stepup_sip.config import Settings
from stepup_sip.schemas.ping import PingResponse


def get_ping_message() -> str:
    """Return a static ping message."""
    return "pong"


def build_ping_response(settings: Settings) -> PingResponse:
    return PingResponse(message=get_ping_message(), service=settings.app_name)
