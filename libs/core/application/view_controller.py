"""View transitions owned by the dashboard controls."""

from __future__ import annotations

from dataclasses import replace

from libs.core.domain.entities import (
    DashboardState,
    StartPolling,
    StopPolling,
    Transition,
    ViewState,
)

MIN_ZOOM_PCT = 10
MAX_ZOOM_PCT = 100
MIN_VOLUME = 0.0
MAX_VOLUME = 1.0


def initial_state(placeholder_url: str) -> DashboardState:
    return DashboardState(running=False, view=ViewState(image_src=placeholder_url))


def toggle_run(
    state: DashboardState,
    stream_url: str,
    placeholder_url: str,
) -> Transition:
    """Start or stop the run.

    Stopping drops any active session; completions of its cues are then
    ignored as stale.
    """
    if state.running:
        view = replace(
            state.view,
            image_src=placeholder_url,
            popup_message="",
            show_map=False,
        )
        return Transition(
            state=replace(state, running=False, session=None, view=view),
            effects=(StopPolling(),),
        )

    view = replace(state.view, image_src=stream_url)
    return Transition(
        state=replace(state, running=True, view=view),
        effects=(StartPolling(),),
    )


def toggle_stream_visibility(state: DashboardState) -> Transition:
    view = replace(state.view, stream_visible=not state.view.stream_visible)
    return Transition(state=replace(state, view=view))


def set_zoom(state: DashboardState, zoom_pct: int) -> Transition:
    clamped = min(max(int(zoom_pct), MIN_ZOOM_PCT), MAX_ZOOM_PCT)
    return Transition(state=replace(state, view=replace(state.view, zoom_pct=clamped)))


def set_alarm_volume(state: DashboardState, volume: float) -> Transition:
    view = replace(state.view, alarm_volume=_clamp_volume(volume))
    return Transition(state=replace(state, view=view))


def set_voice_volume(state: DashboardState, volume: float) -> Transition:
    view = replace(state.view, voice_volume=_clamp_volume(volume))
    return Transition(state=replace(state, view=view))


def image_error(state: DashboardState, placeholder_url: str) -> Transition:
    if state.view.image_src == placeholder_url:
        return Transition(state=state)
    view = replace(state.view, image_src=placeholder_url)
    return Transition(state=replace(state, view=view))


def _clamp_volume(volume: float) -> float:
    return min(max(float(volume), MIN_VOLUME), MAX_VOLUME)
