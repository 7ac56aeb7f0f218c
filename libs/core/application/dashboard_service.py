from __future__ import annotations

import logging
import threading
from typing import Callable, Mapping

from libs.core.application import alert_machine, view_controller
from libs.core.application.contracts import (
    AlertPlayer,
    PredictionFetchError,
    PredictionSource,
    Ticker,
)
from libs.core.domain.entities import (
    AlertSession,
    Cue,
    DashboardState,
    Effect,
    PlayCue,
    StartPolling,
    StopPolling,
    Transition,
)

logger = logging.getLogger(__name__)


class DashboardService:
    """Application service holding dashboard state and executing effects."""

    def __init__(
        self,
        prediction_source: PredictionSource,
        ticker: Ticker,
        players: Mapping[Cue, AlertPlayer],
        stream_url: str,
        placeholder_url: str,
    ) -> None:
        missing = [cue.value for cue in Cue if cue not in players]
        if missing:
            raise ValueError(f"players missing for cues: {', '.join(missing)}")

        self._source = prediction_source
        self._ticker = ticker
        self._players = dict(players)
        self._stream_url = stream_url
        self._placeholder_url = placeholder_url
        self._lock = threading.RLock()
        self._state = view_controller.initial_state(placeholder_url)

    def snapshot(self) -> DashboardState:
        with self._lock:
            return self._state

    def tick(self) -> AlertSession | None:
        """Run one poll tick; returns the session it started, if any."""
        with self._lock:
            if not alert_machine.can_poll(self._state):
                return None

        try:
            prediction = self._source.fetch_prediction()
        except PredictionFetchError as error:
            logger.warning("Error fetching prediction: %s", error)
            return None

        logger.info("Prediction value: %s", prediction)
        with self._lock:
            previous = self._state.session
            transition = alert_machine.on_classification(self._state, prediction)
            # players may complete synchronously, so read the session first
            session = transition.state.session
            self._apply(transition)
            if session is not None and session is not previous:
                logger.info(
                    "Alert started: %s (%s)", session.kind.value, session.message
                )
                return session
            return None

    def toggle_run(self) -> DashboardState:
        with self._lock:
            self._apply(
                view_controller.toggle_run(
                    self._state,
                    stream_url=self._stream_url,
                    placeholder_url=self._placeholder_url,
                )
            )
            logger.info("Run %s", "started" if self._state.running else "stopped")
            return self._state

    def toggle_stream_visibility(self) -> DashboardState:
        return self._update(view_controller.toggle_stream_visibility)

    def set_zoom(self, zoom_pct: int) -> DashboardState:
        return self._update(lambda state: view_controller.set_zoom(state, zoom_pct))

    def set_alarm_volume(self, volume: float) -> DashboardState:
        return self._update(
            lambda state: view_controller.set_alarm_volume(state, volume)
        )

    def set_voice_volume(self, volume: float) -> DashboardState:
        return self._update(
            lambda state: view_controller.set_voice_volume(state, volume)
        )

    def image_error(self) -> DashboardState:
        return self._update(
            lambda state: view_controller.image_error(state, self._placeholder_url)
        )

    def shutdown(self) -> None:
        self._ticker.stop()

    def _update(
        self,
        transition: Callable[[DashboardState], Transition],
    ) -> DashboardState:
        with self._lock:
            self._apply(transition(self._state))
            return self._state

    def _apply(self, transition: Transition) -> None:
        self._state = transition.state
        for effect in transition.effects:
            self._execute(effect)

    def _execute(self, effect: Effect) -> None:
        if isinstance(effect, PlayCue):
            player = self._players[effect.cue]
            player.play(effect.volume, self._completion_callback(effect))
        elif isinstance(effect, StartPolling):
            self._ticker.start(self.tick)
        elif isinstance(effect, StopPolling):
            self._ticker.stop()

    def _completion_callback(self, effect: PlayCue) -> Callable[[], None]:
        def _on_complete() -> None:
            if effect.cue is Cue.ALARM:
                self._on_alarm_finished(effect.session_id)
            else:
                self._on_voice_finished(effect.session_id)

        return _on_complete

    def _on_alarm_finished(self, session_id: str) -> None:
        with self._lock:
            self._apply(alert_machine.on_alarm_finished(self._state, session_id))

    def _on_voice_finished(self, session_id: str) -> None:
        with self._lock:
            had_session = self._state.session is not None
            self._apply(alert_machine.on_voice_finished(self._state, session_id))
            if had_session and self._state.session is None:
                logger.info("Alert finished: session %s", session_id)
