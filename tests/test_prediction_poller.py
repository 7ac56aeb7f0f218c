"""Prediction client and poll thread tests."""

import io
import threading
import time
from email.message import Message
from urllib import request
from urllib.error import HTTPError, URLError

import pytest

from libs.core.application.contracts import PredictionFetchError
from services.dashboard.infrastructure.prediction_poller import (
    PredictionClient,
    PredictionPoller,
)

PREDICTION_URL = "http://camera.test/prediction"


def _serve(monkeypatch: pytest.MonkeyPatch, body: bytes) -> list[request.Request]:
    captured: list[request.Request] = []

    def _fake_urlopen(req: request.Request, timeout: float) -> io.BytesIO:
        captured.append(req)
        return io.BytesIO(body)

    monkeypatch.setattr(request, "urlopen", _fake_urlopen)
    return captured


def test_fetch_returns_prediction_field(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _serve(monkeypatch, b'{"prediction": 1, "confidence": 0.93}')

    value = PredictionClient(PREDICTION_URL).fetch_prediction()

    assert value == 1
    assert captured[0].full_url == PREDICTION_URL
    assert captured[0].get_method() == "GET"


def test_fetch_without_prediction_field_returns_none(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _serve(monkeypatch, b'{"status": "warming up"}')

    assert PredictionClient(PREDICTION_URL).fetch_prediction() is None


@pytest.mark.parametrize("body", [b"not json", b"[0, 1]", b""])
def test_fetch_rejects_malformed_body(
    monkeypatch: pytest.MonkeyPatch,
    body: bytes,
) -> None:
    _serve(monkeypatch, body)

    with pytest.raises(PredictionFetchError):
        PredictionClient(PREDICTION_URL).fetch_prediction()


def test_fetch_wraps_http_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_urlopen(req: request.Request, timeout: float) -> io.BytesIO:
        raise HTTPError(req.full_url, 500, "Internal Server Error", Message(), None)

    monkeypatch.setattr(request, "urlopen", _fake_urlopen)

    with pytest.raises(PredictionFetchError, match="500"):
        PredictionClient(PREDICTION_URL).fetch_prediction()


def test_fetch_wraps_transport_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_urlopen(req: request.Request, timeout: float) -> io.BytesIO:
        raise URLError("timed out")

    monkeypatch.setattr(request, "urlopen", _fake_urlopen)

    with pytest.raises(PredictionFetchError):
        PredictionClient(PREDICTION_URL).fetch_prediction()


def test_poller_ticks_until_stopped() -> None:
    poller = PredictionPoller(interval_sec=0.01)
    ticks: list[int] = []
    reached = threading.Event()

    def _on_tick() -> None:
        ticks.append(len(ticks))
        if len(ticks) >= 3:
            reached.set()

    poller.start(_on_tick)
    assert poller.running is True
    assert reached.wait(timeout=2.0)

    poller.stop()
    assert poller.running is False


def test_poller_start_twice_keeps_single_loop() -> None:
    poller = PredictionPoller(interval_sec=0.05)
    first = threading.Event()
    second_calls: list[int] = []

    poller.start(first.set)
    poller.start(lambda: second_calls.append(1))
    assert first.wait(timeout=2.0)
    poller.stop()

    assert second_calls == []


def test_poller_stop_from_inside_tick() -> None:
    poller = PredictionPoller(interval_sec=0.01)
    calls: list[int] = []
    done = threading.Event()

    def _on_tick() -> None:
        calls.append(1)
        poller.stop()
        done.set()

    poller.start(_on_tick)
    assert done.wait(timeout=2.0)
    time.sleep(0.1)

    assert calls == [1]
    assert poller.running is False
