import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from libs.core.application.contracts import DirectionsUnavailableError
from services.directions_proxy.dependencies import get_directions_client

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/directions", response_model=None)
def get_directions(
    start: str,
    goal: str,
    option: str | None = None,
) -> JSONResponse:
    try:
        payload = get_directions_client().get_directions(
            start=start,
            goal=goal,
            option=option,
        )
    except DirectionsUnavailableError as error:
        logger.error("Error fetching directions: %s", error)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch directions"},
        )
    return JSONResponse(content=payload)
