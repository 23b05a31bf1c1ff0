import logging
from datetime import datetime
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from .models import DetectedObjectData, SelectionState
from .overlay_board import DetectionOverlay, OverlayBoard

logger = logging.getLogger(__name__)


class ObjectSelectionManager(QObject):
    """Tracks the single focused overlay.

    States are Unfocused and Focused(snapshot, overlay). Focusing pauses the
    detection controller (without clearing overlays) and hides every other
    overlay; unfocusing undoes both. Every exit from Focused, including
    cancel gestures, goes through unfocus().
    """

    object_focused = pyqtSignal(object)  # DetectedObjectData
    object_unfocused = pyqtSignal()

    def __init__(self, board: Optional[OverlayBoard] = None, detection=None,
                 pause_detection_when_focused: bool = True, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.board = board
        self.detection = detection
        self.pause_detection_when_focused = pause_detection_when_focused
        self.focused_object: Optional[DetectedObjectData] = None
        self._focused_overlay: Optional[DetectionOverlay] = None
        self._paused_for_focus = False

    def attach(self, board: OverlayBoard):
        """Route overlay taps on the board to focus()"""
        self.board = board
        board.overlay_clicked.connect(self.focus)

    @property
    def has_focused_object(self) -> bool:
        return self.focused_object is not None

    @property
    def focused_overlay(self) -> Optional[DetectionOverlay]:
        return self._focused_overlay

    def focus(self, overlay: Optional[DetectionOverlay]):
        """Focus an overlay; focusing the already focused one deselects it"""
        if overlay is None:
            logger.warning("Attempted to focus a null object")
            return

        if overlay is self._focused_overlay:
            self.unfocus()
            return

        if self._focused_overlay is not None:
            self._focused_overlay.set_state(SelectionState.NORMAL)

        self._focused_overlay = overlay
        overlay.set_state(SelectionState.FOCUSED)

        self.focused_object = DetectedObjectData(
            category=overlay.category,
            translation=overlay.translation,
            confidence=overlay.confidence,
            screen_position=overlay.screen_position,
            detection_time=datetime.now(),
        )

        display_text = f"{overlay.category}: {overlay.confidence:.2f}"
        if overlay.translation:
            display_text += f"\n{overlay.translation}"
        overlay.set_text(display_text)

        if self.board is not None:
            self.board.hide_all_except(overlay.overlay_id)

        if self.pause_detection_when_focused and self.detection is not None:
            self.detection.pause_detection_only()
            self._paused_for_focus = True

        logger.info("Focused on: %s (%s)", self.focused_object.category, self.focused_object.translation)
        self.object_focused.emit(self.focused_object)

    def unfocus(self):
        """Clear the focus and resume detection; no-op when nothing is focused"""
        if not self.has_focused_object:
            return

        if self._focused_overlay is not None:
            self._focused_overlay.set_state(SelectionState.NORMAL)

        self.focused_object = None
        self._focused_overlay = None

        if self.board is not None:
            self.board.show_all()

        if self._paused_for_focus and self.detection is not None:
            self.detection.enable_detection()
        self._paused_for_focus = False

        logger.info("Unfocused object")
        self.object_unfocused.emit()

    def release_focus(self):
        """The focused overlay was taken off the board; unfocus without resuming detection"""
        self._paused_for_focus = False
        self.unfocus()

    def cancel(self):
        """Escape key / secondary input"""
        self.unfocus()
