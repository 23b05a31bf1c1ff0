import json
import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class SentenceExample:
    english: str
    translated: str
    source: str = "Tatoeba"


class ExampleSentencesDatabase:
    """Example sentences per object category"""

    def __init__(self, rng: Optional[random.Random] = None):
        self._word_examples: List[tuple] = []  # (category, [SentenceExample])
        self._cache: Optional[Dict[str, List[SentenceExample]]] = None
        self.rng = rng or random.Random()

    @classmethod
    def load_json(cls, path) -> "ExampleSentencesDatabase":
        """Load {"category": [{"english": ..., "translated": ..., "source": ...}]}"""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        database = cls()
        for category, rows in data.items():
            database.add_examples(category, [SentenceExample(**row) for row in rows])
        logger.info("Loaded example sentences for %d words from %s", len(data), path)
        return database

    def add_examples(self, category: str, examples: List[SentenceExample]):
        """Append examples, merging into an existing category"""
        for existing_category, existing in self._word_examples:
            if existing_category == category:
                existing.extend(examples)
                break
        else:
            self._word_examples.append((category, list(examples)))
        self.clear_cache()

    def _build_cache(self) -> Dict[str, List[SentenceExample]]:
        self._cache = {category: examples for category, examples in self._word_examples if category}
        logger.debug("Cached examples for %d words", len(self._cache))
        return self._cache

    def clear_cache(self):
        self._cache = None

    def get_examples(self, category: str) -> List[SentenceExample]:
        cache = self._cache if self._cache is not None else self._build_cache()
        return list(cache.get(category, []))

    def has_examples(self, category: str) -> bool:
        return len(self.get_examples(category)) > 0

    def get_random_example(self, category: str) -> Optional[SentenceExample]:
        examples = self.get_examples(category)
        if not examples:
            return None
        return self.rng.choice(examples)
