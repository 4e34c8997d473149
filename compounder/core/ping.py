"""Health-check payload for the API."""

from compounder import __version__
from compounder.schemas.ping import PingResponse

SERVICE_NAME = "compounder"


def get_ping_response() -> PingResponse:
    return PingResponse(message="pong", service=SERVICE_NAME, version=__version__)
