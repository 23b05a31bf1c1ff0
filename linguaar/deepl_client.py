"""Legacy network translation through the DeepL HTTP API.

Deprecated: the offline TranslationDatabase covers every category the
detector reports. This path is only consulted when no offline table is
configured (see TranslationService).
"""
import logging
from typing import Callable, Optional

import requests
from PyQt6.QtCore import QObject, QThread, pyqtSignal

from .config import DEEPL_FREE_API_URL

logger = logging.getLogger(__name__)


class TranslationRequestError(Exception):
    """The translation provider failed; the message is the provider's error string"""


def request_translation(text: str, target_lang: str, api_key: str,
                        api_url: str = DEEPL_FREE_API_URL, timeout: float = 10.0) -> str:
    """POST one text to the provider and return the first translation"""
    form = {
        "auth_key": api_key,
        "text": text,
        "target_lang": target_lang,
    }
    try:
        response = requests.post(api_url, data=form, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"DeepL API Error: {e}")
        raise TranslationRequestError(str(e)) from e

    try:
        payload = response.json()
    except ValueError as e:
        logger.error(f"Failed to parse DeepL response: {e}")
        raise TranslationRequestError("Failed to parse response") from e

    translations = payload.get("translations") if isinstance(payload, dict) else None
    if not translations:
        raise TranslationRequestError("No translation found")

    translated = translations[0].get("text")
    if translated is None:
        raise TranslationRequestError("No translation found")
    return translated


class DeepLTranslationWorker(QThread):
    """Worker thread for a single network translation"""

    translated = pyqtSignal(str)
    failed = pyqtSignal(str)

    def __init__(self, text: str, target_lang: str, api_key: str,
                 api_url: str = DEEPL_FREE_API_URL, timeout: float = 10.0):
        super().__init__()
        self.text = text
        self.target_lang = target_lang
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout

    def run(self):
        try:
            result = request_translation(self.text, self.target_lang, self.api_key,
                                         self.api_url, self.timeout)
        except TranslationRequestError as e:
            self.failed.emit(str(e))
            return
        self.translated.emit(result)


class LegacyTranslator(QObject):
    """Fire-and-forget network translation with success/error callbacks"""

    def __init__(self, api_key: str = "", target_lang: str = "IT",
                 api_url: str = DEEPL_FREE_API_URL, timeout: float = 10.0,
                 enabled: bool = False, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.api_key = api_key
        self.target_lang = target_lang
        self.api_url = api_url
        self.timeout = timeout
        self.enabled = enabled
        self._workers = []

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        logger.info("Network translation %s", "enabled" if self.enabled else "disabled")
        return self.enabled

    def set_enabled(self, enabled: bool):
        self.enabled = enabled

    def has_api_key(self) -> bool:
        return bool(self.api_key) and self.api_key != "YOUR_DEEPL_API_KEY_HERE"

    def create_worker(self, text: str) -> DeepLTranslationWorker:
        return DeepLTranslationWorker(text, self.target_lang, self.api_key, self.api_url, self.timeout)

    def translate_text(self, text: str, on_success: Callable[[str], None],
                       on_error: Optional[Callable[[str], None]] = None):
        if not self.enabled:
            on_success(text)
            return

        if not self.has_api_key():
            logger.warning("DeepL API key not set!")
            if on_error:
                on_error("API key not configured")
            return

        worker = self.create_worker(text)
        worker.translated.connect(on_success)
        if on_error:
            worker.failed.connect(on_error)
        # keep a reference until the thread is done
        self._workers.append(worker)
        worker.finished.connect(lambda w=worker: self._release(w))
        worker.start()

    def _release(self, worker: DeepLTranslationWorker):
        if worker in self._workers:
            self._workers.remove(worker)
        worker.deleteLater()

    def pending(self) -> int:
        return len(self._workers)
