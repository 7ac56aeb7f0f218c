from libs.core.application.dashboard_service import DashboardService
from libs.core.domain.entities import Cue
from libs.infra.audio.pygame_player import PygameAlertPlayer
from services.dashboard.infrastructure.prediction_poller import (
    PredictionClient,
    PredictionPoller,
)
from services.dashboard.settings import DashboardSettings, load_settings

settings = load_settings()


def build_dashboard_service(config: DashboardSettings) -> DashboardService:
    return DashboardService(
        prediction_source=PredictionClient(
            prediction_url=config.prediction_url,
            timeout_sec=config.prediction_timeout_sec,
        ),
        ticker=PredictionPoller(interval_sec=config.poll_interval_sec),
        players={
            Cue.ALARM: PygameAlertPlayer(
                config.alarm_sound_path, fallback_sec=config.cue_fallback_sec
            ),
            Cue.DROWSY_VOICE: PygameAlertPlayer(
                config.drowsy_voice_path, fallback_sec=config.cue_fallback_sec
            ),
            Cue.SUSPICIOUS_VOICE: PygameAlertPlayer(
                config.suspicious_voice_path, fallback_sec=config.cue_fallback_sec
            ),
        },
        stream_url=config.video_feed_url,
        placeholder_url=config.placeholder_url,
    )


dashboard_service = build_dashboard_service(settings)


def get_dashboard_service() -> DashboardService:
    return dashboard_service
