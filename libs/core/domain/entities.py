from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class AlertKind(str, Enum):
    """Alert kind derived from the predictor classification."""

    DROWSY = "drowsy"
    SUSPICIOUS = "suspicious"


class AlertStage(str, Enum):
    """Playback stage of an alert session."""

    ALARM_PLAYING = "alarm_playing"
    VOICE_PLAYING = "voice_playing"
    IDLE = "idle"


class Cue(str, Enum):
    """Sound resources used by alerts."""

    ALARM = "alarm"
    DROWSY_VOICE = "drowsy_voice"
    SUSPICIOUS_VOICE = "suspicious_voice"


@dataclass(frozen=True)
class AlertSession:
    """One active alert cycle: alarm cue, then voice cue."""

    session_id: str
    kind: AlertKind
    message: str
    stage: AlertStage


@dataclass(frozen=True)
class ViewState:
    """UI-only state of the dashboard."""

    image_src: str
    stream_visible: bool = True
    zoom_pct: int = 50
    alarm_volume: float = 0.5
    voice_volume: float = 0.5
    popup_message: str = ""
    show_map: bool = False


@dataclass(frozen=True)
class DashboardState:
    """Complete dashboard state record."""

    running: bool
    view: ViewState
    session: Optional[AlertSession] = None


@dataclass(frozen=True)
class PlayCue:
    """Start a cue at the given volume on behalf of a session."""

    session_id: str
    cue: Cue
    volume: float


@dataclass(frozen=True)
class StartPolling:
    pass


@dataclass(frozen=True)
class StopPolling:
    pass


Effect = Union[PlayCue, StartPolling, StopPolling]


@dataclass(frozen=True)
class Transition:
    """New state plus the side effects the caller has to execute."""

    state: DashboardState
    effects: tuple[Effect, ...] = ()
