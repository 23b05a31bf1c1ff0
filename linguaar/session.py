import logging
from typing import Iterable, Optional

from PyQt6.QtCore import QObject, QSettings

from .config import AppConfig, default_settings
from .deepl_client import LegacyTranslator
from .detection_controller import DetectionController
from .example_sentences import ExampleSentencesDatabase
from .language_settings import LanguageSettings
from .models import Detection, TargetLanguage
from .overlay_board import OverlayBoard
from .panels import ActionMenuPanel, ExampleSentencesPanel
from .selection_manager import ObjectSelectionManager
from .speech import SpeechManager, SpeechProvider, create_speech_provider
from .translation_database import TranslationDatabase
from .translation_service import TranslationService

logger = logging.getLogger(__name__)


class LinguaSession(QObject):
    """Builds one instance of every component and wires their signals"""

    def __init__(self, settings: Optional[QSettings] = None, config: Optional[AppConfig] = None,
                 database: Optional[TranslationDatabase] = None,
                 examples: Optional[ExampleSentencesDatabase] = None,
                 speech_provider: Optional[SpeechProvider] = None,
                 use_offline_table: bool = True, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.settings = settings if settings is not None else default_settings()
        self.config = config if config is not None else AppConfig.load(self.settings)

        self.language = LanguageSettings(self.settings, self)
        self.language.initialize()

        if use_offline_table:
            self.database = database if database is not None else TranslationDatabase.with_defaults()
        else:
            self.database = None
        self.legacy = LegacyTranslator(
            api_key=self.config.deepl_api_key,
            api_url=self.config.deepl_api_url,
            timeout=self.config.request_timeout,
            enabled=self.config.legacy_translation_enabled,
            parent=self,
        )

        self.translations = TranslationService(self.database, self.language, self.legacy)

        self.board = OverlayBoard(self)
        self.detection = DetectionController(
            self.board,
            self.translations,
            probability_threshold=self.config.probability_threshold,
            min_time_between_updates=self.config.min_time_between_updates,
            parent=self,
        )
        self.selection = ObjectSelectionManager(
            detection=self.detection,
            pause_detection_when_focused=self.config.pause_detection_when_focused,
            parent=self,
        )
        self.selection.attach(self.board)
        self.detection.overlays_released.connect(self.selection.release_focus)

        provider = speech_provider or create_speech_provider(self.config.speech_backend)
        self.speech = SpeechManager(
            provider,
            self.language,
            speech_rate=self.config.speech_rate,
            auto_play_on_focus=self.config.auto_play_on_focus,
            parent=self,
        )
        self.selection.object_focused.connect(self.speech.on_object_focused)

        self.example_sentences = examples if examples is not None else ExampleSentencesDatabase()
        self.examples_panel = ExampleSentencesPanel(self.example_sentences, self)
        self.action_menu = ActionMenuPanel(self.selection, self.speech, self.examples_panel, parent=self)

        logger.info("Session ready: %s translations, language %s",
                    len(self.database) if self.database is not None else "no offline",
                    self.language.current_language.name)

    def process_frame(self, detections: Iterable[Detection]) -> int:
        return self.detection.process_detections(list(detections))

    def set_language(self, language: TargetLanguage) -> bool:
        return self.language.set_language(language)

    def shutdown(self):
        self.selection.unfocus()
        self.speech.stop()
        self.speech.dispose()
