from fastapi import APIRouter
from fastapi.responses import HTMLResponse, Response
from pydantic import BaseModel, Field

from libs.core.domain.entities import AlertStage, DashboardState
from services.dashboard.dependencies import get_dashboard_service
from services.dashboard.presentation.http.ui_page import (
    build_placeholder_svg,
    build_ui_html,
)

router = APIRouter()


class ZoomRequest(BaseModel):
    zoom_pct: int = Field(ge=10, le=100)


class VolumeRequest(BaseModel):
    volume: float = Field(ge=0.0, le=1.0)


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/ready")
def ready() -> dict[str, str]:
    return {"status": "ready"}


@router.get("/version")
def version() -> dict[str, str]:
    return {"version": "0.1.0"}


@router.get("/", response_class=HTMLResponse)
def ui_index() -> str:
    return build_ui_html()


@router.get("/favicon.ico")
def favicon() -> Response:
    return Response(status_code=204)


@router.get("/placeholder.svg")
def placeholder_image() -> Response:
    return Response(content=build_placeholder_svg(), media_type="image/svg+xml")


@router.get("/v1/dashboard/state")
def get_dashboard_state() -> dict[str, object]:
    return _state_to_dict(get_dashboard_service().snapshot())


@router.post("/v1/dashboard/run/toggle")
def toggle_run() -> dict[str, object]:
    return _state_to_dict(get_dashboard_service().toggle_run())


@router.post("/v1/dashboard/stream/toggle")
def toggle_stream_visibility() -> dict[str, object]:
    return _state_to_dict(get_dashboard_service().toggle_stream_visibility())


@router.post("/v1/dashboard/zoom")
def set_zoom(payload: ZoomRequest) -> dict[str, object]:
    return _state_to_dict(get_dashboard_service().set_zoom(payload.zoom_pct))


@router.post("/v1/dashboard/volume/alarm")
def set_alarm_volume(payload: VolumeRequest) -> dict[str, object]:
    return _state_to_dict(get_dashboard_service().set_alarm_volume(payload.volume))


@router.post("/v1/dashboard/volume/voice")
def set_voice_volume(payload: VolumeRequest) -> dict[str, object]:
    return _state_to_dict(get_dashboard_service().set_voice_volume(payload.volume))


@router.post("/v1/dashboard/image/error")
def report_image_error() -> dict[str, object]:
    return _state_to_dict(get_dashboard_service().image_error())


def _state_to_dict(state: DashboardState) -> dict[str, object]:
    session = state.session
    alert: dict[str, object] | None = None
    if session is not None:
        alert = {
            "session_id": session.session_id,
            "kind": session.kind.value,
            "message": session.message,
            "stage": session.stage.value,
        }
    return {
        "running": state.running,
        "image_src": state.view.image_src,
        "stream_visible": state.view.stream_visible,
        "zoom_pct": state.view.zoom_pct,
        "alarm_volume": state.view.alarm_volume,
        "voice_volume": state.view.voice_volume,
        "popup_message": state.view.popup_message,
        "show_map": state.view.show_map,
        "stage": session.stage.value if session is not None else AlertStage.IDLE.value,
        "alert": alert,
    }
