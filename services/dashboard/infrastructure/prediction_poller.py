"""Prediction endpoint client and the fixed-interval poll thread."""

from __future__ import annotations

import json
import logging
import threading
from typing import Callable
from urllib import request
from urllib.error import HTTPError, URLError

from libs.core.application.contracts import PredictionFetchError

logger = logging.getLogger(__name__)


class PredictionClient:
    """Reads the latest classification from the prediction endpoint."""

    def __init__(self, prediction_url: str, timeout_sec: float = 2.0) -> None:
        self._url = prediction_url
        self._timeout_sec = timeout_sec

    def fetch_prediction(self) -> object:
        req = request.Request(
            url=self._url,
            headers={"Accept": "application/json"},
            method="GET",
        )
        try:
            with request.urlopen(req, timeout=self._timeout_sec) as response:
                payload = json.loads(response.read().decode("utf-8"))
        except (HTTPError, URLError, OSError, ValueError) as error:
            raise PredictionFetchError(str(error)) from error

        if not isinstance(payload, dict):
            raise PredictionFetchError("prediction payload is not a JSON object")
        return payload.get("prediction")


class PredictionPoller:
    """Calls the tick callback once per interval until stopped."""

    def __init__(self, interval_sec: float = 1.0) -> None:
        self._interval_sec = interval_sec
        self._lock = threading.Lock()
        self._stop_event: threading.Event | None = None

    @property
    def running(self) -> bool:
        with self._lock:
            return self._stop_event is not None and not self._stop_event.is_set()

    def start(self, on_tick: Callable[[], None]) -> None:
        with self._lock:
            if self._stop_event is not None and not self._stop_event.is_set():
                return
            stop_event = threading.Event()
            self._stop_event = stop_event

        thread = threading.Thread(
            target=self._run,
            args=(stop_event, on_tick),
            name="prediction-poller",
            daemon=True,
        )
        thread.start()
        logger.info("Prediction polling started (every %.2fs)", self._interval_sec)

    def stop(self) -> None:
        # no join: stop may be requested from inside a tick
        with self._lock:
            if self._stop_event is None or self._stop_event.is_set():
                return
            self._stop_event.set()
        logger.info("Prediction polling stopped")

    def _run(self, stop_event: threading.Event, on_tick: Callable[[], None]) -> None:
        while not stop_event.wait(self._interval_sec):
            on_tick()
