import pytest
from PyQt6.QtCore import QCoreApplication, QSettings

from linguaar.language_settings import LanguageSettings
from linguaar.models import Detection, ScreenRect
from linguaar.speech import SpeechProvider


@pytest.fixture(scope="session")
def qapp():
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication(["linguaar-tests"])
    return app


@pytest.fixture
def settings_path(tmp_path):
    return str(tmp_path / "linguaar.ini")


@pytest.fixture
def settings(qapp, settings_path):
    return QSettings(settings_path, QSettings.Format.IniFormat)


@pytest.fixture
def language(settings):
    lang = LanguageSettings(settings)
    lang.initialize()
    return lang


class FakeSpeechProvider(SpeechProvider):
    name = "fake"

    def __init__(self):
        super().__init__()
        self.spoken = []
        self.stopped = 0
        self.disposed = False
        self.fail_with = None

    def speak(self, text, language_code, rate):
        self.spoken.append((text, language_code, rate))
        if self.fail_with:
            self.speech_failed.emit(self.fail_with)
        else:
            self.speech_finished.emit()

    def stop(self):
        self.stopped += 1

    def is_speaking(self):
        return False

    def dispose(self):
        self.disposed = True


class FakeDetection:
    def __init__(self):
        self.calls = []

    def pause_detection_only(self):
        self.calls.append("pause")

    def enable_detection(self):
        self.calls.append("enable")


@pytest.fixture
def speech_provider(qapp):
    return FakeSpeechProvider()


@pytest.fixture
def fake_detection():
    return FakeDetection()


def make_detection(category, confidence=0.9, x=10, y=20, width=100, height=50):
    return Detection(category=category, confidence=confidence, rect=ScreenRect(x, y, width, height))
