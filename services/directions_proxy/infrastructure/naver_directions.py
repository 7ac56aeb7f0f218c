"""Naver Cloud directions client with server-side credentials."""

from __future__ import annotations

import json
from typing import Any
from urllib import request
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode

from libs.core.application.contracts import DirectionsUnavailableError

API_KEY_ID_HEADER = "X-NCP-APIGW-API-KEY-ID"
API_KEY_HEADER = "X-NCP-APIGW-API-KEY"


class NaverDirectionsClient:
    """Forwards driving-direction queries to the Naver directions API."""

    def __init__(
        self,
        client_id: str | None,
        client_secret: str | None,
        base_url: str,
        timeout_sec: float = 10.0,
    ) -> None:
        self._client_id = client_id
        self._client_secret = client_secret
        self._base_url = base_url
        self._timeout_sec = timeout_sec

    def get_directions(
        self,
        start: str,
        goal: str,
        option: str | None = None,
    ) -> Any:
        if not self._client_id or not self._client_secret:
            raise DirectionsUnavailableError("directions API credentials are not set")

        params = {"start": start, "goal": goal}
        if option:
            params["option"] = option
        req = request.Request(
            url=f"{self._base_url}?{urlencode(params, safe=',')}",
            headers={
                API_KEY_ID_HEADER: self._client_id,
                API_KEY_HEADER: self._client_secret,
                "Accept": "application/json",
            },
            method="GET",
        )
        try:
            with request.urlopen(req, timeout=self._timeout_sec) as response:
                payload = json.loads(response.read().decode("utf-8"))
        except (HTTPError, URLError, OSError, ValueError) as error:
            raise DirectionsUnavailableError(str(error)) from error

        return payload
