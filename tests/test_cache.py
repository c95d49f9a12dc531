"""Tests for TranslationCache."""

import pytest

from agrifin.models.translation import CacheKey, Language
from agrifin.services.translation import TranslationCache


class TestTranslationCache:

    def test_starts_empty(self):
        cache = TranslationCache()
        assert len(cache) == 0
        assert cache.get("hello", Language.HINDI) is None

    def test_store_and_get(self):
        cache = TranslationCache()
        stored = cache.store("hello", Language.HINDI, "नमस्ते")

        assert stored == "नमस्ते"
        assert cache.get("hello", Language.HINDI) == "नमस्ते"
        assert cache.contains("hello", "hi")
        assert CacheKey("hello", Language.HINDI) in cache

    def test_first_writer_wins(self):
        """A populated key is never overwritten."""
        cache = TranslationCache()
        cache.store("hello", Language.HINDI, "नमस्ते")

        held = cache.store("hello", Language.HINDI, "हैलो")

        assert held == "नमस्ते"
        assert cache.get("hello", Language.HINDI) == "नमस्ते"
        assert len(cache) == 1

    def test_empty_translation_is_rejected(self):
        cache = TranslationCache()
        with pytest.raises(ValueError):
            cache.store("hello", Language.HINDI, "")
        assert len(cache) == 0

    def test_keys_are_exact(self):
        cache = TranslationCache()
        cache.store("Hello", Language.HINDI, "नमस्ते")

        assert cache.get("hello", Language.HINDI) is None
        assert cache.get("Hello ", Language.HINDI) is None
        assert cache.get("Hello", Language.ENGLISH) is None

    def test_string_language_matches_enum(self):
        cache = TranslationCache()
        cache.store("hello", "hi", "नमस्ते")

        assert cache.get("hello", Language.HINDI) == "नमस्ते"

    def test_hit_and_miss_counters(self):
        cache = TranslationCache()
        cache.get("water", Language.HINDI)
        cache.store("water", Language.HINDI, "पानी")
        cache.get("water", Language.HINDI)
        cache.get("water", Language.HINDI)

        assert cache.stats() == {"entries": 1, "hits": 2, "misses": 1}

    def test_snapshot_is_a_copy(self):
        cache = TranslationCache()
        cache.store("water", Language.HINDI, "पानी")

        snapshot = cache.snapshot()
        snapshot.clear()

        assert len(cache) == 1
