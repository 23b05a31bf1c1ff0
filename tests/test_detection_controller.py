import time

import pytest

from conftest import make_detection
from linguaar.detection_controller import PALETTE, DetectionController
from linguaar.models import SelectionState, TargetLanguage
from linguaar.overlay_board import OverlayBoard
from linguaar.selection_manager import ObjectSelectionManager
from linguaar.translation_database import TranslationDatabase
from linguaar.translation_service import TranslationService


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def controller(qapp, language, clock):
    database = TranslationDatabase.from_rows([
        ("chair", "Chair", "Chaise", "Stuhl", "Sedia"),
        ("cat", "Cat", "Chat", "Katze", "Gatto"),
    ])
    service = TranslationService(database, language)
    return DetectionController(OverlayBoard(), service, probability_threshold=0.5,
                               min_time_between_updates=0.1, clock=clock)


def test_renders_labelled_overlays(controller):
    found = []
    controller.object_found.connect(lambda category, pos: found.append((category, pos)))

    count = controller.process_detections([
        make_detection("chair", 0.912),
        make_detection("fire_hydrant", 0.6, x=300),
    ])

    assert count == 2
    texts = [o.text for o in controller.board.visible_overlays()]
    assert texts == ["chair: 0.91\nSedia", "fire_hydrant: 0.60\nFire hydrant"]
    first = controller.board.visible_overlays()[0]
    assert first.category == "chair"
    assert first.translation == "Sedia"
    assert first.color == PALETTE[0]
    assert [c for c, _ in found] == ["chair", "fire_hydrant"]


def test_low_confidence_is_dropped(controller):
    assert controller.process_detections([make_detection("cat", 0.2)]) == 0
    assert controller.board.visible_overlays() == []


def test_throttle_and_none(controller, clock):
    assert controller.process_detections([make_detection("cat")]) == 1
    clock.now += 0.05
    assert controller.process_detections([make_detection("chair")]) == 0
    assert controller.board.visible_overlays()[0].category == "cat"
    clock.now += 0.1
    assert controller.process_detections(None) == 0
    assert controller.board.visible_overlays()[0].category == "cat"


def test_new_frame_replaces_previous_overlays(controller, clock):
    controller.process_detections([make_detection("cat"), make_detection("chair")])
    clock.now += 1
    controller.process_detections([make_detection("chair")])
    assert [o.category for o in controller.board.visible_overlays()] == ["chair"]


def test_paused_ignores_frames_but_keeps_overlays(controller, clock):
    controller.process_detections([make_detection("cat")])
    controller.pause_detection_only()
    clock.now += 1
    assert controller.process_detections([make_detection("chair")]) == 0
    assert [o.category for o in controller.board.visible_overlays()] == ["cat"]

    controller.enable_detection()
    assert controller.process_detections([make_detection("chair")]) == 1


def test_disable_clears_and_toggle_flips(controller):
    states = []
    controller.detection_state_changed.connect(states.append)
    controller.process_detections([make_detection("cat")])

    controller.disable_detection()
    assert controller.is_paused
    assert controller.board.visible_overlays() == []

    assert controller.toggle_detection() is True
    assert not controller.is_paused
    assert states == [True, False]


def test_translation_follows_current_language(controller, language, clock):
    language.set_language(TargetLanguage.GERMAN)
    controller.process_detections([make_detection("cat")])
    assert controller.board.visible_overlays()[0].translation == "Katze"


def test_focus_pauses_pipeline_end_to_end(controller, clock):
    selection = ObjectSelectionManager(detection=controller)
    selection.attach(controller.board)
    controller.process_detections([make_detection("cat"), make_detection("chair")])

    cat = controller.board.find("cat")
    cat.click()
    assert controller.is_paused
    assert controller.board.visible_overlays() == [cat]

    clock.now += 1
    assert controller.process_detections([make_detection("chair")]) == 0
    assert cat.state == SelectionState.FOCUSED

    selection.unfocus()
    assert not controller.is_paused
    assert all(o.state == SelectionState.NORMAL for o in controller.board.active_overlays())


def test_disable_while_focused_releases_focus_and_stays_paused(controller, clock):
    selection = ObjectSelectionManager(detection=controller)
    selection.attach(controller.board)
    controller.overlays_released.connect(selection.release_focus)
    unfocused = []
    selection.object_unfocused.connect(lambda: unfocused.append(True))

    controller.process_detections([make_detection("cat"), make_detection("chair")])
    controller.board.find("cat").click()
    controller.disable_detection()

    assert not selection.has_focused_object
    assert unfocused == [True]
    assert controller.is_paused
    assert controller.board.visible_overlays() == []

    # a later unfocus must not resume the disabled pipeline
    selection.unfocus()
    assert controller.is_paused
    assert controller.toggle_detection() is True


class DeferredTranslations:
    """Network-style source: results arrive when the test delivers them"""

    def __init__(self):
        self.pending = []

    def uses_network(self):
        return True

    def resolve(self, category, on_ready):
        self.pending.append((category, on_ready))

    def deliver(self, category, text):
        for i, (pending_category, on_ready) in enumerate(self.pending):
            if pending_category == category:
                del self.pending[i]
                on_ready(text)
                return


@pytest.fixture
def deferred(qapp, clock):
    translations = DeferredTranslations()
    controller = DetectionController(OverlayBoard(), translations, min_time_between_updates=0.1, clock=clock)
    return controller, translations


def test_late_translation_does_not_reveal_overlays_while_focused(deferred):
    controller, translations = deferred
    selection = ObjectSelectionManager(detection=controller)
    selection.attach(controller.board)

    controller.process_detections([make_detection("cat"), make_detection("chair", x=300)])
    assert controller.board.visible_overlays() == []
    translations.deliver("cat", "Gatto")
    cat = controller.board.find("cat")
    cat.click()

    translations.deliver("chair", "Sedia")
    assert controller.board.visible_overlays() == [cat]
    assert controller.board.find("chair") is None


def test_translation_for_replaced_frame_is_dropped(deferred, clock):
    controller, translations = deferred
    controller.process_detections([make_detection("cat")])
    clock.now += 1
    controller.process_detections([make_detection("chair")])

    translations.deliver("cat", "Gatto")
    translations.deliver("chair", "Sedia")
    assert [o.category for o in controller.board.visible_overlays()] == ["chair"]


def test_object_found_only_reported_for_offline_results(deferred, controller):
    network_controller, translations = deferred
    found = []
    network_controller.object_found.connect(lambda category, pos: found.append(category))
    controller.object_found.connect(lambda category, pos: found.append("offline " + category))

    network_controller.process_detections([make_detection("cat")])
    translations.deliver("cat", "Gatto")
    controller.process_detections([make_detection("cat")])

    assert found == ["offline cat"]


def wait_until(qapp, predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while not predicate() and time.monotonic() < deadline:
        qapp.processEvents()
        time.sleep(0.01)
    return predicate()


def test_timed_pause_resumes_by_itself(qapp, controller):
    states = []
    controller.detection_state_changed.connect(states.append)

    assert controller.pause_detection_for(0.05) is True
    assert controller.is_paused
    assert controller.pause_detection_for(0.05) is False

    assert wait_until(qapp, lambda: not controller.is_paused)
    assert states == [True, False]


def test_timed_pause_does_not_override_disable(qapp, controller):
    controller.pause_detection_for(0.05)
    controller.disable_detection()

    deadline = time.monotonic() + 0.2
    while time.monotonic() < deadline:
        qapp.processEvents()
        time.sleep(0.01)
    assert controller.is_paused
