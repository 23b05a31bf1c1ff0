import threading
import time

import pytest

from linguaar.models import DetectedObjectData, TargetLanguage
from linguaar.speech import (
    LoggingSpeechProvider,
    Pyttsx3SpeechProvider,
    SpeechManager,
    SpeechWorker,
    create_speech_provider,
    words_per_minute,
)


def test_speak_uses_current_locale_and_rate(language, speech_provider):
    manager = SpeechManager(speech_provider, language, speech_rate=0.7)
    assert manager.speak("Gatto") is True
    language.set_language(TargetLanguage.FRENCH)
    manager.speak("Chat")
    assert speech_provider.spoken == [("Gatto", "it-IT", 0.7), ("Chat", "fr-FR", 0.7)]


@pytest.mark.parametrize("text", ["", None])
def test_empty_text_is_rejected(language, speech_provider, text):
    manager = SpeechManager(speech_provider, language)
    assert manager.speak(text) is False
    assert speech_provider.spoken == []


def test_without_language_settings_defaults_to_english(speech_provider):
    manager = SpeechManager(speech_provider)
    manager.speak("Cat")
    assert speech_provider.spoken[0][1] == "en-US"


def test_failure_is_forwarded(language, speech_provider):
    manager = SpeechManager(speech_provider, language)
    errors = []
    manager.speech_failed.connect(errors.append)
    speech_provider.fail_with = "no voice"
    manager.speak("Gatto")
    assert errors == ["no voice"]


def test_auto_play_on_focus(language, speech_provider):
    data = DetectedObjectData("cat", "Gatto", 0.8, (0.0, 0.0))
    SpeechManager(speech_provider, language).on_object_focused(data)
    assert speech_provider.spoken == []

    SpeechManager(speech_provider, language, auto_play_on_focus=True).on_object_focused(data)
    assert [s[0] for s in speech_provider.spoken] == ["Gatto"]


def test_stop_and_dispose_delegate(speech_provider):
    manager = SpeechManager(speech_provider)
    manager.stop()
    manager.dispose()
    assert speech_provider.stopped == 1
    assert speech_provider.disposed
    assert manager.is_speaking() is False


def test_logging_provider_reports_finished(qapp):
    provider = LoggingSpeechProvider()
    finished = []
    provider.speech_finished.connect(lambda: finished.append(True))
    provider.speak("Gatto", "it-IT", 0.5)
    assert finished == [True]
    assert provider.is_speaking() is False


def test_provider_selection(qapp):
    assert isinstance(create_speech_provider("log"), LoggingSpeechProvider)
    assert isinstance(create_speech_provider("pyttsx3"), Pyttsx3SpeechProvider)
    assert isinstance(create_speech_provider("auto", platform="linux"), Pyttsx3SpeechProvider)
    assert isinstance(create_speech_provider("auto", platform="emscripten"), LoggingSpeechProvider)


def test_words_per_minute_range():
    assert words_per_minute(0.0) == 80
    assert words_per_minute(0.5) == 160
    assert words_per_minute(2.0) == 240


class FakeVoice:
    def __init__(self, voice_id, languages):
        self.id = voice_id
        self.languages = languages


class FakeEngine:
    def __init__(self, voices):
        self.voices = voices
        self.properties = {}
        self.said = []

    def getProperty(self, name):
        return self.voices if name == "voices" else self.properties.get(name)

    def setProperty(self, name, value):
        self.properties[name] = value

    def say(self, text):
        self.said.append(text)

    def runAndWait(self):
        pass

    def stop(self):
        pass


def test_voice_matching():
    engine = FakeEngine([
        FakeVoice("english", ["en-us"]),
        FakeVoice("italian-generic", [b"\x05it"]),
        FakeVoice("italian-it", ["it_IT"]),
    ])
    assert SpeechWorker._find_voice(engine, "it-IT") == "italian-it"
    assert SpeechWorker._find_voice(engine, "en-GB") == "english"
    assert SpeechWorker._find_voice(engine, "de-DE") is None


def test_worker_run_speaks(qapp, monkeypatch):
    engine = FakeEngine([FakeVoice("italian", ["it-IT"])])
    monkeypatch.setattr("linguaar.speech.pyttsx3.init", lambda: engine)
    worker = SpeechWorker("Gatto", "it-IT", 0.5)
    done = []
    worker.done.connect(lambda: done.append(True))
    worker.run()
    assert engine.said == ["Gatto"]
    assert engine.properties == {"rate": 160, "voice": "italian"}
    assert done == [True]


def test_worker_reports_engine_errors(qapp, monkeypatch):
    def broken_init():
        raise RuntimeError("eSpeak not installed")

    monkeypatch.setattr("linguaar.speech.pyttsx3.init", broken_init)
    worker = SpeechWorker("Gatto", "it-IT", 0.5)
    errors = []
    worker.error.connect(errors.append)
    worker.run()
    assert errors == ["eSpeak not installed"]


class GatedWorker(SpeechWorker):
    """Worker that keeps 'speaking' until the test opens the gate"""

    def __init__(self, gate, *args):
        super().__init__(*args)
        self.gate = gate

    def run(self):
        self.gate.wait(5)
        self.done.emit()

    def stop_speaking(self):
        pass


@pytest.fixture
def gated_provider(qapp, monkeypatch):
    gate = threading.Event()
    provider = Pyttsx3SpeechProvider()
    monkeypatch.setattr(provider, "create_worker", lambda *args: GatedWorker(gate, *args))
    yield provider, gate
    gate.set()
    provider.dispose()


def test_running_workers_stay_referenced_until_finished(qapp, gated_provider):
    provider, gate = gated_provider
    finished = []
    provider.speech_finished.connect(lambda: finished.append(True))

    provider.speak("Gatto", "it-IT", 0.5)
    provider.speak("Katze", "de-DE", 0.5)
    assert provider.pending() == 2
    assert provider.is_speaking()

    gate.set()
    deadline = time.monotonic() + 5
    while provider.pending() and time.monotonic() < deadline:
        qapp.processEvents()
        time.sleep(0.01)

    assert provider.pending() == 0
    assert not provider.is_speaking()
    assert finished == [True, True]


def test_dispose_waits_for_running_workers(qapp, gated_provider):
    provider, gate = gated_provider
    provider.speak("Gatto", "it-IT", 0.5)
    gate.set()
    provider.dispose()
    assert provider.pending() == 0
    assert not provider.is_speaking()
