import logging
from typing import Optional

from PyQt6.QtCore import QObject, QSettings, pyqtSignal

from .models import TargetLanguage

logger = logging.getLogger(__name__)

LANGUAGE_PREFERENCE_KEY = "LinguaAR_TargetLanguage"
DEFAULT_LANGUAGE = TargetLanguage.ITALIAN

_DISPLAY_NAMES = {
    TargetLanguage.ENGLISH: "English",
    TargetLanguage.FRENCH: "Français",
    TargetLanguage.GERMAN: "Deutsch",
    TargetLanguage.ITALIAN: "Italiano",
}

_FLAGS = {
    TargetLanguage.ENGLISH: "\U0001F1EC\U0001F1E7",
    TargetLanguage.FRENCH: "\U0001F1EB\U0001F1F7",
    TargetLanguage.GERMAN: "\U0001F1E9\U0001F1EA",
    TargetLanguage.ITALIAN: "\U0001F1EE\U0001F1F9",
}

_ISO_CODES = {
    TargetLanguage.ENGLISH: "en",
    TargetLanguage.FRENCH: "fr",
    TargetLanguage.GERMAN: "de",
    TargetLanguage.ITALIAN: "it",
}

_SPEECH_LOCALES = {
    TargetLanguage.ENGLISH: "en-US",
    TargetLanguage.FRENCH: "fr-FR",
    TargetLanguage.GERMAN: "de-DE",
    TargetLanguage.ITALIAN: "it-IT",
}


class LanguageSettings(QObject):
    """Process-wide target language, persisted as an ordinal in QSettings"""

    language_changed = pyqtSignal(object)  # TargetLanguage

    def __init__(self, settings: QSettings, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.settings = settings
        self._current_language = DEFAULT_LANGUAGE

    def initialize(self):
        """Load the stored preference, keeping the default when absent or invalid"""
        if self.settings.contains(LANGUAGE_PREFERENCE_KEY):
            stored = self.settings.value(LANGUAGE_PREFERENCE_KEY)
            try:
                self._current_language = TargetLanguage(int(stored))
            except (TypeError, ValueError):
                logger.warning("Ignoring invalid stored language preference %r", stored)
        logger.info("Language settings initialized with %s", self._current_language.name)

    @property
    def current_language(self) -> TargetLanguage:
        return self._current_language

    @current_language.setter
    def current_language(self, language: TargetLanguage):
        self.set_language(language)

    def set_language(self, language: TargetLanguage) -> bool:
        """Switch language; persists and notifies only when the value changes"""
        if not isinstance(language, TargetLanguage):
            raise TypeError(f"Expected TargetLanguage, got {type(language).__name__}")
        if language == self._current_language:
            return False

        self._current_language = language
        self._save()
        logger.info("Language changed to %s", language.name)
        self.language_changed.emit(language)
        return True

    def _save(self):
        self.settings.setValue(LANGUAGE_PREFERENCE_KEY, self._current_language.value)
        self.settings.sync()

    # ----- code tables -----

    @staticmethod
    def display_name(language: TargetLanguage) -> str:
        return _DISPLAY_NAMES.get(language, language.name.title())

    @staticmethod
    def flag(language: TargetLanguage) -> str:
        return _FLAGS.get(language, "")

    @staticmethod
    def language_code(language: TargetLanguage) -> str:
        """ISO 639-1 code"""
        return _ISO_CODES.get(language, "en")

    @staticmethod
    def deepl_code(language: TargetLanguage) -> str:
        return _ISO_CODES.get(language, "en").upper()

    @staticmethod
    def speech_locale(language: TargetLanguage) -> str:
        """ll-CC locale passed to the speech backend"""
        return _SPEECH_LOCALES.get(language, "en-US")
