import logging
import time
from typing import Callable, Iterable, List, Optional

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .models import Detection
from .overlay_board import Color, OverlayBoard
from .translation_service import TranslationService

logger = logging.getLogger(__name__)

PALETTE: List[Color] = [
    (1.0, 0.0, 0.0, 0.5),
    (0.0, 1.0, 0.0, 0.5),
    (0.0, 0.0, 1.0, 0.5),
    (1.0, 1.0, 0.0, 0.5),
    (0.0, 1.0, 1.0, 0.5),
    (1.0, 0.0, 1.0, 0.5),
]


class DetectionController(QObject):
    """Turns per-frame detections into labelled overlays on the board.

    Every frame gets a new frame number; translations that arrive after the
    frame was replaced, or while detection is paused, are dropped.
    """

    object_found = pyqtSignal(str, object)  # category, (x, y)
    detection_state_changed = pyqtSignal(bool)  # paused
    overlays_released = pyqtSignal()  # emitted right before the board is cleared

    def __init__(self, board: OverlayBoard, translations: TranslationService,
                 probability_threshold: float = 0.5, min_time_between_updates: float = 0.1,
                 clock: Callable[[], float] = time.monotonic, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.board = board
        self.translations = translations
        self.probability_threshold = probability_threshold
        self.min_time_between_updates = min_time_between_updates
        self.clock = clock
        self._paused = False
        self._timed_pause = False
        self._frame = 0
        self._last_update_time: Optional[float] = None

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def frame(self) -> int:
        return self._frame

    def process_detections(self, detections: Optional[Iterable[Detection]]) -> int:
        """Render one frame of detections; returns the number of overlays requested"""
        if self._paused:
            return 0

        now = self.clock()
        if self._last_update_time is not None and now - self._last_update_time < self.min_time_between_updates:
            return 0
        self._last_update_time = now

        if detections is None:
            return 0

        self._clear_board()
        frame = self._frame
        # network results arrive later; only offline results report positions
        report_found = not self.translations.uses_network()

        rendered = 0
        for i, detection in enumerate(detections):
            if detection.confidence < self.probability_threshold:
                continue

            label = f"{detection.category}: {detection.confidence:.2f}"
            color = PALETTE[i % len(PALETTE)]

            def _render(translated, detection=detection, label=label, color=color):
                if frame != self._frame or self._paused:
                    logger.debug("Dropping late translation for '%s'", detection.category)
                    return
                self.board.render_overlay(detection.rect, color, label, translated,
                                          category=detection.category,
                                          confidence=detection.confidence)

            self.translations.resolve(detection.category, _render)
            if report_found:
                self.object_found.emit(detection.category, (detection.rect.x, detection.rect.y))
            rendered += 1

        logger.debug("Processed frame %d: %d detections rendered", frame, rendered)
        return rendered

    def _clear_board(self):
        self._frame += 1
        self.overlays_released.emit()
        self.board.clear_all()

    def pause_detection_only(self):
        """Stop processing frames but keep the current overlays (focus mode)"""
        self._timed_pause = False
        self._set_paused(True)

    def pause_detection_for(self, seconds: float) -> bool:
        """Pause for a while, then resume unless detection was changed meanwhile"""
        if self._paused:
            return False
        self._set_paused(True)
        self._timed_pause = True
        QTimer.singleShot(int(seconds * 1000), self._end_timed_pause)
        return True

    def _end_timed_pause(self):
        if self._timed_pause:
            self._timed_pause = False
            self._set_paused(False)

    def enable_detection(self):
        self._timed_pause = False
        self._set_paused(False)

    def disable_detection(self):
        self._timed_pause = False
        self._set_paused(True)
        self._clear_board()

    def toggle_detection(self) -> bool:
        if self._paused:
            self.enable_detection()
        else:
            self.disable_detection()
        return not self._paused

    def _set_paused(self, paused: bool):
        if paused == self._paused:
            return
        self._paused = paused
        logger.info("Object detection %s", "disabled" if paused else "enabled")
        self.detection_state_changed.emit(paused)
