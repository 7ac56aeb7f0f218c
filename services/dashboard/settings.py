"""Dashboard service configuration loaded from the environment."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_VIDEO_FEED_URL = "http://192.168.0.252:8000/video_feed"
DEFAULT_PREDICTION_URL = "http://192.168.0.252:8000/prediction"
DEFAULT_PLACEHOLDER_URL = "/placeholder.svg"
DEFAULT_SOUNDS_DIR = Path("assets") / "sounds"


@dataclass
class DashboardSettings:
    """Runtime settings for the dashboard service."""

    video_feed_url: str
    prediction_url: str
    placeholder_url: str
    poll_interval_sec: float
    prediction_timeout_sec: float
    alarm_sound_path: Path
    drowsy_voice_path: Path
    suspicious_voice_path: Path
    cue_fallback_sec: float
    host: str
    port: int
    log_level: str
    log_dir: str | None


def load_settings() -> DashboardSettings:
    load_dotenv()
    return DashboardSettings(
        video_feed_url=os.environ.get("VIDEO_FEED_URL", DEFAULT_VIDEO_FEED_URL),
        prediction_url=os.environ.get("PREDICTION_URL", DEFAULT_PREDICTION_URL),
        placeholder_url=os.environ.get("PLACEHOLDER_URL", DEFAULT_PLACEHOLDER_URL),
        poll_interval_sec=float(os.environ.get("POLL_INTERVAL_SEC", "1.0")),
        prediction_timeout_sec=float(os.environ.get("PREDICTION_TIMEOUT_SEC", "2.0")),
        alarm_sound_path=Path(
            os.environ.get("ALARM_SOUND_PATH", str(DEFAULT_SOUNDS_DIR / "alarm.wav"))
        ),
        drowsy_voice_path=Path(
            os.environ.get(
                "DROWSY_VOICE_PATH", str(DEFAULT_SOUNDS_DIR / "drowsy_voice.wav")
            )
        ),
        suspicious_voice_path=Path(
            os.environ.get(
                "SUSPICIOUS_VOICE_PATH",
                str(DEFAULT_SOUNDS_DIR / "suspicious_voice.wav"),
            )
        ),
        cue_fallback_sec=float(os.environ.get("CUE_FALLBACK_SEC", "3.0")),
        host=os.environ.get("DASHBOARD_HOST", "0.0.0.0"),
        port=int(os.environ.get("DASHBOARD_PORT", "8080")),
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
        log_dir=os.environ.get("LOG_DIR") or None,
    )
