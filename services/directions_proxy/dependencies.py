from libs.core.application.contracts import DirectionsGateway
from services.directions_proxy.infrastructure.naver_directions import (
    NaverDirectionsClient,
)
from services.directions_proxy.settings import load_settings

settings = load_settings()

directions_client: DirectionsGateway = NaverDirectionsClient(
    client_id=settings.client_id,
    client_secret=settings.client_secret,
    base_url=settings.base_url,
    timeout_sec=settings.timeout_sec,
)


def get_directions_client() -> DirectionsGateway:
    return directions_client
