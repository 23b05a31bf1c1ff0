import itertools
import logging
from typing import List, Optional, Tuple

from PyQt6.QtCore import QObject, pyqtSignal

from .models import ScreenRect, SelectionState

logger = logging.getLogger(__name__)

Color = Tuple[float, float, float, float]

NORMAL_COLOR: Color = (1.0, 1.0, 1.0, 0.5)
FOCUSED_COLOR: Color = (0.0, 0.8, 1.0, 0.9)  # cyan highlight
SAVED_COLOR: Color = (0.2, 1.0, 0.2, 0.7)
FOCUSED_SCALE = 1.15


class DetectionOverlay(QObject):
    """One rectangle on screen plus the detection metadata attached to it"""

    clicked = pyqtSignal(object)

    def __init__(self, overlay_id: int, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.overlay_id = overlay_id
        self.rect = ScreenRect(0, 0, 0, 0)
        self.color: Color = NORMAL_COLOR
        self.display_color: Color = NORMAL_COLOR
        self.scale = 1.0
        self.text = ""
        self.category = ""
        self.translation: Optional[str] = None
        self.confidence = 0.0
        self.screen_position = (0.0, 0.0)
        self.visible = False
        self.state = SelectionState.NORMAL

    def set_detection_data(self, category: str, translation: Optional[str], confidence: float,
                           screen_position: Tuple[float, float]):
        self.category = category
        self.translation = translation
        self.confidence = confidence
        self.screen_position = screen_position

    def set_color(self, color: Color):
        self.color = color
        if self.state == SelectionState.NORMAL:
            self.display_color = color

    def set_text(self, text: str):
        self.text = text

    def set_state(self, state: SelectionState):
        if state == self.state:
            return
        self.state = state
        if state == SelectionState.NORMAL:
            self.display_color = self.color
            self.scale = 1.0
        elif state == SelectionState.FOCUSED:
            self.display_color = FOCUSED_COLOR
            self.scale = FOCUSED_SCALE
        elif state == SelectionState.SAVED:
            self.display_color = SAVED_COLOR

    def click(self):
        logger.debug("Overlay clicked: %s (%s)", self.category, self.translation)
        self.clicked.emit(self)

    def __repr__(self):
        return f"DetectionOverlay(id={self.overlay_id}, category={self.category!r}, state={self.state.name})"


class OverlayBoard(QObject):
    """In-memory set of overlay handles; a view paints whatever is visible.

    Handles are pooled: clear_all() hides every overlay and the next
    render_overlay() calls reuse them in order.
    """

    overlays_changed = pyqtSignal()
    overlay_clicked = pyqtSignal(object)

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._overlays: List[DetectionOverlay] = []
        self._open_indices: List[int] = []
        self._ids = itertools.count(1)

    def render_overlay(self, rect: ScreenRect, color: Color, primary_text: str,
                       secondary_text: Optional[str] = None, category: Optional[str] = None,
                       confidence: float = 0.0) -> DetectionOverlay:
        if not self._open_indices:
            overlay = DetectionOverlay(next(self._ids), self)
            overlay.clicked.connect(self.overlay_clicked)
            self._overlays.append(overlay)
            self._open_indices.append(len(self._overlays) - 1)

        overlay = self._overlays[self._open_indices.pop(0)]
        overlay.rect = rect
        overlay.set_state(SelectionState.NORMAL)
        overlay.set_color(color)
        overlay.set_detection_data(category or "", secondary_text, confidence, rect.bottom_center())

        display_text = primary_text
        if secondary_text:
            display_text += f"\n{secondary_text}"
        overlay.set_text(display_text)
        overlay.visible = True

        self.overlays_changed.emit()
        return overlay

    def hide_all_except(self, overlay_id: int):
        for overlay in self._overlays:
            if overlay.overlay_id != overlay_id:
                overlay.visible = False
        self.overlays_changed.emit()

    def show_all(self):
        """Reveal overlays hidden by hide_all_except; released ones stay hidden"""
        for index, overlay in enumerate(self._overlays):
            if index not in self._open_indices:
                overlay.visible = True
        self.overlays_changed.emit()

    def clear_all(self):
        for index, overlay in enumerate(self._overlays):
            overlay.visible = False
            overlay.set_state(SelectionState.NORMAL)
            if index not in self._open_indices:
                self._open_indices.append(index)
        self.overlays_changed.emit()

    def active_overlays(self) -> List[DetectionOverlay]:
        return [o for i, o in enumerate(self._overlays) if i not in self._open_indices]

    def visible_overlays(self) -> List[DetectionOverlay]:
        return [o for o in self._overlays if o.visible]

    def find(self, category: str) -> Optional[DetectionOverlay]:
        for overlay in self.active_overlays():
            if overlay.category == category:
                return overlay
        return None
