"""Fakes shared by dashboard tests."""

from typing import Callable

import pytest

from libs.core.application.contracts import PredictionFetchError
from libs.core.application.dashboard_service import DashboardService
from libs.core.domain.entities import Cue

STREAM_URL = "http://camera.test/video_feed"
PLACEHOLDER_URL = "/placeholder.svg"


class FakePlayer:
    """Records play calls; completion is triggered by the test."""

    def __init__(self) -> None:
        self.volumes: list[float] = []
        self._pending: list[Callable[[], None]] = []

    @property
    def pending(self) -> int:
        return len(self._pending)

    def play(self, volume: float, on_complete: Callable[[], None]) -> None:
        self.volumes.append(volume)
        self._pending.append(on_complete)

    def finish(self) -> None:
        self._pending.pop(0)()


class ScriptedSource:
    """Classification source indexed by the current tick position."""

    def __init__(self, values: list[object] | None = None) -> None:
        self.values = list(values or [])
        self.position = 0
        self.calls = 0
        self.fail = False

    def fetch_prediction(self) -> object:
        self.calls += 1
        if self.fail:
            raise PredictionFetchError("connection refused")
        return self.values[self.position]


class FakeTicker:
    def __init__(self) -> None:
        self.on_tick: Callable[[], None] | None = None
        self.starts = 0
        self.stops = 0
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self, on_tick: Callable[[], None]) -> None:
        self.on_tick = on_tick
        self.starts += 1
        self._running = True

    def stop(self) -> None:
        self.stops += 1
        self._running = False


@pytest.fixture
def players() -> dict[Cue, FakePlayer]:
    return {cue: FakePlayer() for cue in Cue}


@pytest.fixture
def source() -> ScriptedSource:
    return ScriptedSource()


@pytest.fixture
def ticker() -> FakeTicker:
    return FakeTicker()


@pytest.fixture
def service(
    players: dict[Cue, FakePlayer],
    source: ScriptedSource,
    ticker: FakeTicker,
) -> DashboardService:
    return DashboardService(
        prediction_source=source,
        ticker=ticker,
        players=players,
        stream_url=STREAM_URL,
        placeholder_url=PLACEHOLDER_URL,
    )
