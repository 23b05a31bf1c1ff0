from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple


class TargetLanguage(Enum):
    """Supported target languages; the value is the persisted ordinal"""
    ENGLISH = 0
    FRENCH = 1
    GERMAN = 2
    ITALIAN = 3


class SelectionState(Enum):
    NORMAL = "normal"
    FOCUSED = "focused"
    SAVED = "saved"


@dataclass(frozen=True)
class ScreenRect:
    """Screen-space rectangle, origin top-left, y growing downwards"""
    x: float
    y: float
    width: float
    height: float

    def bottom_center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2.0, self.y + self.height)


@dataclass(frozen=True)
class Detection:
    """One already-parsed detection from the external pipeline"""
    category: str
    confidence: float
    rect: ScreenRect


@dataclass(frozen=True)
class MultiLanguageTranslation:
    """Display strings for every supported language"""
    english: str
    french: str
    german: str
    italian: str

    def __post_init__(self):
        for lang in ("english", "french", "german", "italian"):
            value = getattr(self, lang)
            if value is None:
                raise ValueError(f"Missing {lang} translation")
            if not isinstance(value, str):
                raise TypeError(f"{lang} translation must be a string, got {type(value).__name__}")

    def get(self, language: TargetLanguage) -> str:
        if language == TargetLanguage.FRENCH:
            return self.french
        if language == TargetLanguage.GERMAN:
            return self.german
        if language == TargetLanguage.ITALIAN:
            return self.italian
        return self.english


@dataclass(frozen=True)
class TranslationEntry:
    category: str
    translations: MultiLanguageTranslation


@dataclass
class DetectedObjectData:
    """Snapshot of the focused object, captured at focus time"""
    category: str
    translation: Optional[str]
    confidence: float
    screen_position: Tuple[float, float]
    detection_time: datetime = field(default_factory=datetime.now)
