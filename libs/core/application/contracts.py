from typing import Any, Callable, Protocol


class PredictionFetchError(Exception):
    """Prediction endpoint could not be read for this tick."""


class DirectionsUnavailableError(Exception):
    """Directions provider request failed."""


class PredictionSource(Protocol):
    """Source of the latest predictor classification."""

    def fetch_prediction(self) -> object: ...


class AlertPlayer(Protocol):
    """Single sound resource with completion notification."""

    def play(self, volume: float, on_complete: Callable[[], None]) -> None: ...


class Ticker(Protocol):
    """Fixed-interval scheduler driving poll ticks."""

    @property
    def running(self) -> bool: ...

    def start(self, on_tick: Callable[[], None]) -> None: ...

    def stop(self) -> None: ...


class DirectionsGateway(Protocol):
    """Directions provider contract."""

    def get_directions(
        self,
        start: str,
        goal: str,
        option: str | None = None,
    ) -> Any: ...
