import logging
from typing import Dict, Iterable, List, Optional, Set

from .default_translations import DEFAULT_TRANSLATIONS
from .models import MultiLanguageTranslation, TargetLanguage, TranslationEntry

logger = logging.getLogger(__name__)


def format_category_name(category: str) -> str:
    """Readable label for a raw category: underscores to spaces, first letter upper-cased"""
    if not category:
        return category
    formatted = category.replace("_", " ")
    return formatted[0].upper() + formatted[1:]


class TranslationDatabase:
    """Offline multi-language translations keyed by detector category.

    Entries are kept in insertion order; lookups go through a dictionary
    index which is rebuilt lazily whenever it is marked dirty.
    """

    def __init__(self, entries: Optional[Iterable[TranslationEntry]] = None):
        self._entries: List[TranslationEntry] = []
        self._index: Dict[str, MultiLanguageTranslation] = {}
        self._index_dirty = True
        for entry in entries or ():
            self._insert_entry(entry)

    @classmethod
    def from_rows(cls, rows) -> "TranslationDatabase":
        """Build a table from (category, english, french, german, italian) rows"""
        database = cls()
        for row in rows:
            database.insert(*row)
        database.rebuild_index()
        return database

    @classmethod
    def with_defaults(cls) -> "TranslationDatabase":
        return cls.from_rows(DEFAULT_TRANSLATIONS)

    # ----- mutation -----

    def insert(self, category: str, english: str, french: str, german: str, italian: str) -> bool:
        """Add one entry. Returns False (and keeps the first entry) for duplicates."""
        translations = MultiLanguageTranslation(english=english, french=french, german=german, italian=italian)
        return self._insert_entry(TranslationEntry(category=category, translations=translations))

    def _insert_entry(self, entry: TranslationEntry) -> bool:
        if not entry.category:
            logger.warning("Rejected translation entry with empty category")
            return False
        if any(existing.category == entry.category for existing in self._entries):
            logger.warning("Duplicate translation entry for '%s', keeping the first one", entry.category)
            return False
        self._entries.append(entry)
        self._index_dirty = True
        return True

    def clear(self):
        """Drop every entry and invalidate the index"""
        self._entries.clear()
        self._index = {}
        self._index_dirty = True

    def rebuild_index(self):
        """Rebuild the lookup index from the entry list"""
        index = {}
        for entry in self._entries:
            if not entry.category:
                continue
            if entry.category in index:
                logger.warning("Duplicate entry for '%s' while indexing, skipping", entry.category)
                continue
            index[entry.category] = entry.translations
        self._index = index
        self._index_dirty = False
        logger.debug("Indexed %d translations", len(index))

    def _ensure_index(self) -> Dict[str, MultiLanguageTranslation]:
        if self._index_dirty:
            self.rebuild_index()
        return self._index

    @property
    def index_dirty(self) -> bool:
        return self._index_dirty

    # ----- queries -----

    def lookup(self, category: str, language: TargetLanguage) -> str:
        """Translated display string, or the formatted category when there is no entry"""
        translations = self._ensure_index().get(category)
        if translations is None:
            logger.info("No translation found for '%s', using formatted name", category)
            return format_category_name(category)
        return translations.get(language)

    def has(self, category: str) -> bool:
        return category in self._ensure_index()

    def all_categories(self) -> Set[str]:
        return set(self._ensure_index().keys())

    def sorted_categories(self) -> List[str]:
        return sorted(self._ensure_index().keys())

    def entry(self, category: str) -> Optional[MultiLanguageTranslation]:
        return self._ensure_index().get(category)

    def validate(self) -> dict:
        """Count empty and duplicate categories in the raw entry list"""
        seen = set()
        empty = 0
        duplicates = []
        for entry in self._entries:
            if not entry.category:
                empty += 1
                continue
            if entry.category in seen:
                duplicates.append(entry.category)
            else:
                seen.add(entry.category)
        report = {"total": len(self._entries), "empty": empty, "duplicates": duplicates}
        logger.info("Validation complete: %d total, %d empty, %d duplicates",
                    report["total"], empty, len(duplicates))
        return report

    def __len__(self):
        return len(self._ensure_index())

    def __contains__(self, category):
        return self.has(category)
