import logging
from typing import Callable, Optional

from .deepl_client import LegacyTranslator
from .language_settings import LanguageSettings
from .translation_database import TranslationDatabase

logger = logging.getLogger(__name__)


class TranslationService:
    """Resolves a category to a display string for the current language.

    Source precedence:
      1. the offline TranslationDatabase, whenever one is configured;
      2. the legacy network translator, only without an offline table and
         only while it is enabled;
      3. otherwise no translation (None).
    Offline results are delivered synchronously, network results later.
    """

    def __init__(self, database: Optional[TranslationDatabase], language: LanguageSettings,
                 legacy: Optional[LegacyTranslator] = None):
        self.database = database
        self.language = language
        self.legacy = legacy
        if self.legacy is not None:
            self.legacy.target_lang = LanguageSettings.deepl_code(language.current_language)
            language.language_changed.connect(self._on_language_changed)

    def _on_language_changed(self, language):
        if self.legacy is not None:
            self.legacy.target_lang = LanguageSettings.deepl_code(language)

    def uses_network(self) -> bool:
        return self.database is None and self.legacy is not None and self.legacy.enabled

    def translate(self, category: str) -> Optional[str]:
        """Synchronous offline lookup; None when no offline table is configured"""
        if self.database is None:
            return None
        return self.database.lookup(category, self.language.current_language)

    def resolve(self, category: str, on_ready: Callable[[Optional[str]], None]):
        if self.database is not None:
            on_ready(self.database.lookup(category, self.language.current_language))
            return

        if self.uses_network():
            def _on_error(error: str):
                logger.warning(f"Translation failed: {error}")
                on_ready(None)

            self.legacy.translate_text(category, on_ready, _on_error)
            return

        on_ready(None)
