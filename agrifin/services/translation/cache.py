"""
Translation Cache

Process-lifetime store of successful translations, keyed by
(original text, target language).

Rules:
1. Keys match exactly - case and whitespace sensitive
2. Entries are only created from successful translations
3. Append-only: no eviction, no expiry, no overwrite
4. The first successful writer for a key wins

One instance is built at application start and owned by the
TranslationService; nothing reaches it through module globals.
"""

from typing import Optional

from agrifin.models.translation import CacheKey, Language


class TranslationCache:
    """In-memory, append-only translation cache."""

    def __init__(self):
        self._entries: dict[CacheKey, str] = {}
        self._hits = 0
        self._misses = 0

    @staticmethod
    def make_key(text: str, target_language: Language) -> CacheKey:
        return CacheKey(text=text, target_language=Language(target_language))

    def get(self, text: str, target_language: Language) -> Optional[str]:
        """Return the cached translation, or None. Counts hits/misses."""
        value = self._entries.get(self.make_key(text, target_language))
        if value is None:
            self._misses += 1
        else:
            self._hits += 1
        return value

    def store(self, text: str, target_language: Language, translated: str) -> str:
        """
        Record a successful translation.

        An existing entry is never replaced. Returns the value held for
        the key after the call, which is the earlier value when another
        writer got there first.
        """
        if not translated:
            raise ValueError("Only non-empty translations can be cached")
        return self._entries.setdefault(self.make_key(text, target_language), translated)

    def contains(self, text: str, target_language: Language) -> bool:
        return self.make_key(text, target_language) in self._entries

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def misses(self) -> int:
        return self._misses

    def snapshot(self) -> dict[CacheKey, str]:
        """Copy of the current entries, for diagnostics."""
        return dict(self._entries)

    def stats(self) -> dict[str, int]:
        return {
            "entries": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
        }
