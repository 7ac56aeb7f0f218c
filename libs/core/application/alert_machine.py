"""Alert state machine: classification in, session and cue effects out."""

from __future__ import annotations

from dataclasses import replace
from uuid import uuid4

from libs.core.domain.entities import (
    AlertKind,
    AlertSession,
    AlertStage,
    Cue,
    DashboardState,
    PlayCue,
    Transition,
)

DROWSY_CLASSIFICATION = 0
SUSPICIOUS_CLASSIFICATION = 1

ALERT_MESSAGES = {
    AlertKind.DROWSY: "Drowsy driving detected. Open a window for fresh air.",
    AlertKind.SUSPICIOUS: "Possible drowsy driving. Please stay alert.",
}

VOICE_CUES = {
    AlertKind.DROWSY: Cue.DROWSY_VOICE,
    AlertKind.SUSPICIOUS: Cue.SUSPICIOUS_VOICE,
}


def classify(prediction: object) -> AlertKind | None:
    # bool is an int subclass; True must not read as 1
    if isinstance(prediction, bool) or not isinstance(prediction, int):
        return None
    if prediction == DROWSY_CLASSIFICATION:
        return AlertKind.DROWSY
    if prediction == SUSPICIOUS_CLASSIFICATION:
        return AlertKind.SUSPICIOUS
    return None


def can_poll(state: DashboardState) -> bool:
    """Single guard for poll ticks and classification handling."""
    return state.running and state.session is None


def on_classification(state: DashboardState, prediction: object) -> Transition:
    if not can_poll(state):
        return Transition(state=state)

    kind = classify(prediction)
    if kind is None:
        return Transition(state=state)

    session = AlertSession(
        session_id=str(uuid4()),
        kind=kind,
        message=ALERT_MESSAGES[kind],
        stage=AlertStage.ALARM_PLAYING,
    )
    view = replace(state.view, popup_message=session.message, show_map=True)
    return Transition(
        state=replace(state, session=session, view=view),
        effects=(
            PlayCue(
                session_id=session.session_id,
                cue=Cue.ALARM,
                volume=state.view.alarm_volume,
            ),
        ),
    )


def on_alarm_finished(state: DashboardState, session_id: str) -> Transition:
    session = state.session
    if (
        session is None
        or session.session_id != session_id
        or session.stage is not AlertStage.ALARM_PLAYING
    ):
        return Transition(state=state)

    voice_session = replace(session, stage=AlertStage.VOICE_PLAYING)
    return Transition(
        state=replace(state, session=voice_session),
        effects=(
            PlayCue(
                session_id=session_id,
                cue=VOICE_CUES[session.kind],
                volume=state.view.voice_volume,
            ),
        ),
    )


def on_voice_finished(state: DashboardState, session_id: str) -> Transition:
    session = state.session
    if (
        session is None
        or session.session_id != session_id
        or session.stage is not AlertStage.VOICE_PLAYING
    ):
        return Transition(state=state)

    # show_map stays set until the run is stopped
    view = replace(state.view, popup_message="")
    return Transition(state=replace(state, session=None, view=view))
