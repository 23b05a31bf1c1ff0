import logging
from dataclasses import dataclass

from PyQt6.QtCore import QSettings

logger = logging.getLogger(__name__)

ORGANIZATION = "LinguaAR"
APPLICATION = "LinguaAR"

DEEPL_FREE_API_URL = "https://api-free.deepl.com/v2/translate"
SPEECH_BACKENDS = ("auto", "pyttsx3", "log")


def default_settings() -> QSettings:
    return QSettings(ORGANIZATION, APPLICATION)


def _as_bool(value, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).lower() == "true"


def _as_float(value, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning("Invalid numeric setting %r, using %s", value, default)
        return default


@dataclass
class AppConfig:
    """Runtime options for a session"""
    pause_detection_when_focused: bool = True
    auto_play_on_focus: bool = False
    speech_rate: float = 0.5  # 0.0 (slow) to 1.0 (fast)
    speech_backend: str = "auto"
    probability_threshold: float = 0.5
    min_time_between_updates: float = 0.1  # seconds
    legacy_translation_enabled: bool = False
    deepl_api_key: str = ""
    deepl_api_url: str = DEEPL_FREE_API_URL
    request_timeout: float = 10.0

    def __post_init__(self):
        self.speech_rate = min(max(self.speech_rate, 0.0), 1.0)
        if self.speech_backend not in SPEECH_BACKENDS:
            logger.warning("Unknown speech backend '%s', falling back to auto", self.speech_backend)
            self.speech_backend = "auto"

    @classmethod
    def load(cls, settings: QSettings) -> "AppConfig":
        """Read options from QSettings, keeping defaults for missing keys"""
        defaults = cls()
        return cls(
            pause_detection_when_focused=_as_bool(
                settings.value("app/pause_detection_when_focused"), defaults.pause_detection_when_focused),
            auto_play_on_focus=_as_bool(settings.value("app/auto_play_on_focus"), defaults.auto_play_on_focus),
            speech_rate=_as_float(settings.value("app/speech_rate", defaults.speech_rate), defaults.speech_rate),
            speech_backend=str(settings.value("app/speech_backend", defaults.speech_backend)),
            probability_threshold=_as_float(
                settings.value("app/probability_threshold", defaults.probability_threshold),
                defaults.probability_threshold),
            min_time_between_updates=_as_float(
                settings.value("app/min_time_between_updates", defaults.min_time_between_updates),
                defaults.min_time_between_updates),
            legacy_translation_enabled=_as_bool(
                settings.value("app/legacy_translation_enabled"), defaults.legacy_translation_enabled),
            deepl_api_key=str(settings.value("app/deepl_api_key", defaults.deepl_api_key)),
            deepl_api_url=str(settings.value("app/deepl_api_url", defaults.deepl_api_url)),
            request_timeout=_as_float(
                settings.value("app/request_timeout", defaults.request_timeout), defaults.request_timeout),
        )

    def save(self, settings: QSettings):
        settings.setValue("app/pause_detection_when_focused",
                          "true" if self.pause_detection_when_focused else "false")
        settings.setValue("app/auto_play_on_focus", "true" if self.auto_play_on_focus else "false")
        settings.setValue("app/speech_rate", self.speech_rate)
        settings.setValue("app/speech_backend", self.speech_backend)
        settings.setValue("app/probability_threshold", self.probability_threshold)
        settings.setValue("app/min_time_between_updates", self.min_time_between_updates)
        settings.setValue("app/legacy_translation_enabled",
                          "true" if self.legacy_translation_enabled else "false")
        settings.setValue("app/deepl_api_key", self.deepl_api_key)
        settings.setValue("app/deepl_api_url", self.deepl_api_url)
        settings.setValue("app/request_timeout", self.request_timeout)
        settings.sync()
