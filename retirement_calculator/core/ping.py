"""Health-check payload."""

from retirement_calculator import __version__
from retirement_calculator.schemas.ping import PingResponse


def get_ping() -> PingResponse:
    """Report that the API is up and which build is serving it."""
    return PingResponse(message="pong", version=__version__)
