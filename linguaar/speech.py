import logging
import sys
from typing import List, Optional

import pyttsx3
from PyQt6.QtCore import QObject, QThread, pyqtSignal

from .language_settings import LanguageSettings
from .models import DetectedObjectData

logger = logging.getLogger(__name__)

# pyttsx3 speaks in words per minute; rate 0.5 maps to its usual 160 wpm
MIN_WORDS_PER_MINUTE = 80
MAX_WORDS_PER_MINUTE = 240


def words_per_minute(rate: float) -> int:
    rate = min(max(rate, 0.0), 1.0)
    return int(round(MIN_WORDS_PER_MINUTE + rate * (MAX_WORDS_PER_MINUTE - MIN_WORDS_PER_MINUTE)))


class SpeechProvider(QObject):
    """Capability interface for a text-to-speech backend.

    speak() returns immediately; the outcome is reported through
    speech_finished / speech_failed.
    """

    speech_finished = pyqtSignal()
    speech_failed = pyqtSignal(str)

    name = "base"

    def speak(self, text: str, language_code: str, rate: float):
        raise NotImplementedError

    def stop(self):
        raise NotImplementedError

    def is_speaking(self) -> bool:
        raise NotImplementedError

    def dispose(self):
        pass


class LoggingSpeechProvider(SpeechProvider):
    """Headless backend: logs instead of speaking"""

    name = "log"

    def speak(self, text: str, language_code: str, rate: float):
        logger.info("Speaking: '%s' (Language: %s, Rate: %s)", text, language_code, rate)
        self.speech_finished.emit()

    def stop(self):
        logger.info("Speech stopped")

    def is_speaking(self) -> bool:
        return False


class SpeechWorker(QThread):
    """Worker thread running one blocking pyttsx3 utterance"""

    done = pyqtSignal()
    error = pyqtSignal(str)

    def __init__(self, text: str, language_code: str, rate: float):
        super().__init__()
        self.text = text
        self.language_code = language_code
        self.rate = rate
        self.engine = None

    def run(self):
        try:
            self.engine = pyttsx3.init()
            self.engine.setProperty('rate', words_per_minute(self.rate))
            voice_id = self._find_voice(self.engine, self.language_code)
            if voice_id:
                self.engine.setProperty('voice', voice_id)
            else:
                logger.debug("No voice for %s, using the default voice", self.language_code)
            self.engine.say(self.text)
            self.engine.runAndWait()
        except Exception as e:
            logger.error(f"Failed to speak: {e}")
            self.error.emit(str(e))
            return
        self.done.emit()

    def stop_speaking(self):
        if self.engine is not None:
            self.engine.stop()

    @staticmethod
    def _find_voice(engine, language_code: str) -> Optional[str]:
        """Match a voice on the ll-CC locale, then on the bare language"""
        wanted = language_code.lower().replace("_", "-")
        primary = wanted.split("-")[0]
        fallback = None
        for voice in engine.getProperty('voices') or []:
            languages = []
            for lang in getattr(voice, 'languages', None) or []:
                if isinstance(lang, bytes):
                    lang = lang.decode("utf-8", errors="ignore")
                languages.append(str(lang).lower().strip("\x05\x00 ").replace("_", "-"))
            if wanted in languages:
                return voice.id
            if fallback is None and any(lang.split("-")[0] == primary for lang in languages):
                fallback = voice.id
        return fallback


class Pyttsx3SpeechProvider(SpeechProvider):
    """Desktop backend (SAPI5, NSSpeechSynthesizer, eSpeak) through pyttsx3"""

    name = "pyttsx3"

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._workers: List[SpeechWorker] = []

    def create_worker(self, text: str, language_code: str, rate: float) -> SpeechWorker:
        return SpeechWorker(text, language_code, rate)

    def speak(self, text: str, language_code: str, rate: float):
        self.stop()
        worker = self.create_worker(text, language_code, rate)
        worker.done.connect(self.speech_finished)
        worker.error.connect(self.speech_failed)
        # keep a reference until the thread is done, even after stop()
        self._workers.append(worker)
        worker.finished.connect(lambda w=worker: self._release(w))
        worker.start()

    def _release(self, worker: SpeechWorker):
        if worker in self._workers:
            self._workers.remove(worker)
            worker.deleteLater()

    def stop(self):
        for worker in self._workers:
            if worker.isRunning():
                worker.stop_speaking()

    def is_speaking(self) -> bool:
        return any(worker.isRunning() for worker in self._workers)

    def pending(self) -> int:
        return len(self._workers)

    def dispose(self):
        self.stop()
        for worker in list(self._workers):
            worker.wait()
            self._release(worker)


def create_speech_provider(backend: str = "auto", platform: str = sys.platform) -> SpeechProvider:
    """Pick the backend for the running platform"""
    if backend == "log":
        provider = LoggingSpeechProvider()
    elif backend == "pyttsx3":
        provider = Pyttsx3SpeechProvider()
    elif platform.startswith(("win32", "darwin", "linux")):
        provider = Pyttsx3SpeechProvider()
    else:
        provider = LoggingSpeechProvider()
    logger.info("Initialized %s speech provider for %s", provider.name, platform)
    return provider


class SpeechManager(QObject):
    """Speaks text in the current target language"""

    speech_finished = pyqtSignal()
    speech_failed = pyqtSignal(str)

    def __init__(self, provider: SpeechProvider, language: Optional[LanguageSettings] = None,
                 speech_rate: float = 0.5, auto_play_on_focus: bool = False,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        self.provider = provider
        self.language = language
        self.speech_rate = speech_rate
        self.auto_play_on_focus = auto_play_on_focus
        provider.speech_finished.connect(self.speech_finished)
        provider.speech_failed.connect(self._on_failed)

    def language_code(self) -> str:
        if self.language is None:
            return "en-US"
        return LanguageSettings.speech_locale(self.language.current_language)

    def speak(self, text: Optional[str]) -> bool:
        if not text:
            logger.warning("Cannot speak empty text")
            return False
        code = self.language_code()
        logger.info("Speaking '%s' in %s", text, code)
        self.provider.speak(text, code, self.speech_rate)
        return True

    def stop(self):
        self.provider.stop()

    def is_speaking(self) -> bool:
        return self.provider.is_speaking()

    def dispose(self):
        self.provider.dispose()

    def on_object_focused(self, data: DetectedObjectData):
        if self.auto_play_on_focus and data.translation:
            self.speak(data.translation)

    def _on_failed(self, error: str):
        logger.warning("Speech playback failed: %s", error)
        self.speech_failed.emit(error)
