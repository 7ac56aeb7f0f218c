from __future__ import annotations

import argparse
import threading
import time
from dataclasses import dataclass, field

import uvicorn
from fastapi import FastAPI
from fastapi.responses import Response

_FEED_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="640" height="480">'
    '<rect width="640" height="480" fill="#1d3557"/>'
    '<text x="320" y="245" fill="white" font-size="28" text-anchor="middle">'
    "replay feed</text></svg>"
)


@dataclass
class ReplayContext:
    """Scripted classification sequence served by the fake predictor."""

    sequence: list[int]
    mode: str
    loop: bool
    started_at: float = field(default_factory=time.monotonic)
    served: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock)

    def next_value(self) -> int | None:
        with self.lock:
            if self.mode == "clock":
                index = int(time.monotonic() - self.started_at)
            else:
                index = self.served
                self.served += 1
        if self.loop:
            return self.sequence[index % len(self.sequence)]
        if index < len(self.sequence):
            return self.sequence[index]
        return None


def parse_sequence(raw: str) -> list[int]:
    values = [item.strip() for item in raw.split(",") if item.strip()]
    if not values:
        raise ValueError("sequence is empty")
    return [int(item) for item in values]


def build_app(context: ReplayContext) -> FastAPI:
    app = FastAPI(title="Prediction Replay")

    @app.get("/prediction")
    def prediction() -> dict[str, int | None]:
        value = context.next_value()
        print(f"[PREDICTION] {value}")
        return {"prediction": value}

    @app.get("/video_feed")
    def video_feed() -> Response:
        return Response(content=_FEED_SVG, media_type="image/svg+xml")

    return app


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Serve a scripted prediction endpoint for local dashboard runs",
    )
    parser.add_argument(
        "--sequence",
        default="2,2,0,0,1",
        help="Comma separated classifications (0 drowsy, 1 suspicious)",
    )
    parser.add_argument(
        "--mode",
        choices=("request", "clock"),
        default="clock",
        help="Advance per request or per elapsed second",
    )
    parser.add_argument("--loop", action="store_true")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    try:
        sequence = parse_sequence(args.sequence)
    except ValueError as error:
        raise SystemExit(f"invalid sequence: {error}") from error

    context = ReplayContext(sequence=sequence, mode=args.mode, loop=args.loop)
    print(f"[INFO] serving {len(sequence)} predictions, mode={args.mode}")
    print(f"Prediction URL: http://{args.host}:{args.port}/prediction")
    uvicorn.run(build_app(context), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
