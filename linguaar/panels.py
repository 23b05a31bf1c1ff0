"""Headless presenters for the panels shown around a focused object.

They only listen to ObjectSelectionManager signals and talk back to it
through its public focus/unfocus entry points; a view renders their state.
"""
import logging
from typing import List, Optional, Tuple

from PyQt6.QtCore import QObject, pyqtSignal

from .example_sentences import ExampleSentencesDatabase
from .models import DetectedObjectData
from .selection_manager import ObjectSelectionManager
from .speech import SpeechManager

logger = logging.getLogger(__name__)


class ExampleSentencesPanel(QObject):
    visibility_changed = pyqtSignal(bool)

    def __init__(self, database: Optional[ExampleSentencesDatabase], parent: Optional[QObject] = None):
        super().__init__(parent)
        self.database = database
        self.visible = False
        self.title = ""
        self.lines: List[str] = []
        self.message = ""

    def show_examples(self, category: str, translation: Optional[str] = None):
        logger.debug("show_examples called for '%s'", category)
        self.title = f"{category} → {translation}" if translation else category
        self.lines = []
        self.message = ""

        if self.database is None:
            logger.error("Example sentences database is not assigned")
            self.message = "No examples available"
        else:
            examples = self.database.get_examples(category)
            if not examples:
                self.message = f"No examples found for '{category}'"
            for example in examples:
                self.lines.append(f"{example.english}\n{example.translated}")

        self._set_visible(True)

    def hide(self):
        self._set_visible(False)

    def _set_visible(self, visible: bool):
        if visible == self.visible:
            return
        self.visible = visible
        self.visibility_changed.emit(visible)


class ActionMenuPanel(QObject):
    """Action menu for the focused object: pronounce, examples, close"""

    visibility_changed = pyqtSignal(bool)

    def __init__(self, selection: ObjectSelectionManager, speech: Optional[SpeechManager] = None,
                 examples: Optional[ExampleSentencesPanel] = None,
                 canvas_size: Tuple[float, float] = (1080.0, 1920.0),
                 panel_size: Tuple[float, float] = (400.0, 200.0),
                 offset: Tuple[float, float] = (0.0, 120.0),
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        self.selection = selection
        self.speech = speech
        self.examples = examples
        self.canvas_size = canvas_size
        self.panel_size = panel_size
        self.offset = offset
        self.current_object: Optional[DetectedObjectData] = None
        self.visible = False
        self.title = ""
        self.info = ""
        self.position = (0.0, 0.0)

        selection.object_focused.connect(self.show_menu)
        selection.object_unfocused.connect(self.hide_menu)

    def show_menu(self, data: DetectedObjectData):
        self.current_object = data
        self.title = data.category
        if data.translation:
            self.title += f" → {data.translation}"
        self.info = f"Confidence: {data.confidence:.2f}"
        self.position = self._position_for(data.screen_position)
        self._set_visible(True)

    def hide_menu(self):
        self.current_object = None
        self._set_visible(False)
        if self.examples is not None:
            self.examples.hide()

    def _position_for(self, anchor: Tuple[float, float]) -> Tuple[float, float]:
        """Place the menu below the rectangle, clamped so it stays on the canvas"""
        x = anchor[0] + self.offset[0]
        y = anchor[1] + self.offset[1]
        half_w = self.panel_size[0] / 2.0
        half_h = self.panel_size[1] / 2.0
        canvas_w, canvas_h = self.canvas_size
        x = min(max(x, half_w), max(canvas_w - half_w, half_w))
        y = min(max(y, half_h), max(canvas_h - half_h, half_h))
        return (x, y)

    def _set_visible(self, visible: bool):
        if visible == self.visible:
            return
        self.visible = visible
        self.visibility_changed.emit(visible)

    # ----- actions -----

    def pronounce(self) -> bool:
        if self.current_object is None:
            return False
        if self.speech is None:
            logger.warning("Speech manager not available")
            return False
        return self.speech.speak(self.current_object.translation)

    def show_examples(self) -> bool:
        if self.current_object is None or self.examples is None:
            return False
        self.examples.show_examples(self.current_object.category, self.current_object.translation)
        return True

    def close(self):
        self.selection.unfocus()
