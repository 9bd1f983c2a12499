"""
Vocabulary Store Tests

Tests builtin/custom lookup, custom ingestion (validation, partial
acceptance, no dedup), clearing, and CSV import.
"""

from __future__ import annotations

import pytest

from complexifier.lexicon import VOCABULARY, Candidate
from complexifier.vocabulary import (
    VocabularyStore,
    VocabularyValidationError,
    parse_vocabulary_csv,
)


# ============================================================
# LOOKUP
# ============================================================

class TestLookup:

    def test_builtin_lookup(self):
        store = VocabularyStore()
        words = [c.word for c in store.lookup("hot")]
        assert words == ["scalding", "sweltering", "torrid", "scorching"]

    def test_lookup_case_insensitive(self):
        store = VocabularyStore()
        assert store.lookup("HOT") == store.lookup("hot")
        assert store.has("Hot") is True

    def test_unknown_word(self):
        store = VocabularyStore()
        assert store.lookup("coffee") == []
        assert store.has("coffee") is False

    def test_builtin_is_read_only(self):
        with pytest.raises(TypeError):
            VOCABULARY["hot"] = ()

    def test_builtin_candidates_have_examples(self):
        for candidates in VOCABULARY.values():
            for candidate in candidates:
                assert candidate.examples, candidate.word

    def test_custom_builtin_map(self):
        store = VocabularyStore(builtin={"Big": [Candidate("enormous")]})
        assert [c.word for c in store.lookup("big")] == ["enormous"]
        assert store.builtin_words() == ["big"]

    def test_words_in_text(self):
        store = VocabularyStore()
        words = store.words_in_text("The HOT, cold and hot coffee was (big).")
        assert words == ["hot", "cold", "big"]


# ============================================================
# CUSTOM INGESTION
# ============================================================

class TestAddCustom:

    @pytest.mark.asyncio
    async def test_custom_appended_after_builtin(self):
        store = VocabularyStore()
        count = await store.add_custom([{"word": "Hot", "synonym": "blazing"}])
        assert count == 1
        words = [c.word for c in store.lookup("hot")]
        assert words[-1] == "blazing"
        assert len(words) == 5

    @pytest.mark.asyncio
    async def test_defaults(self):
        store = VocabularyStore()
        await store.add_custom([{"word": "coffee", "synonym": "espresso"}])
        candidate = store.lookup("coffee")[0]
        assert candidate.definition == ""
        assert candidate.examples == ()
        assert candidate.pos == "unknown"
        assert candidate.domain == "general"

    @pytest.mark.asyncio
    async def test_examples_kept(self):
        store = VocabularyStore()
        await store.add_custom([{
            "word": "coffee",
            "synonym": "espresso",
            "definition": "strong coffee",
            "examples": ["An espresso after lunch."],
        }])
        candidate = store.lookup("coffee")[0]
        assert candidate.definition == "strong coffee"
        assert candidate.examples == ("An espresso after lunch.",)

    @pytest.mark.asyncio
    async def test_duplicates_accumulate(self):
        store = VocabularyStore()
        entry = {"word": "coffee", "synonym": "espresso"}
        await store.add_custom([entry])
        await store.add_custom([entry])
        assert [c.word for c in store.lookup("coffee")] == ["espresso", "espresso"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("entry", [
        {"synonym": "espresso"},
        {"word": "coffee"},
        {"word": "  ", "synonym": "espresso"},
        {"word": "coffee", "synonym": ""},
        "coffee,espresso",
    ])
    async def test_invalid_entry_rejected(self, entry):
        store = VocabularyStore()
        with pytest.raises(VocabularyValidationError):
            await store.add_custom([entry])
        assert store.custom_words() == []

    @pytest.mark.asyncio
    async def test_partial_batch_not_rolled_back(self):
        store = VocabularyStore()
        entries = [
            {"word": "coffee", "synonym": "espresso"},
            {"word": "tea"},
            {"word": "milk", "synonym": "cream"},
        ]
        with pytest.raises(VocabularyValidationError) as exc_info:
            await store.add_custom(entries)
        assert exc_info.value.index == 1
        assert exc_info.value.accepted == 1
        assert store.custom_words() == ["coffee"]
        assert store.has("milk") is False

    @pytest.mark.asyncio
    async def test_on_added_hook(self):
        store = VocabularyStore()
        seen = []

        async def hook(synonym):
            seen.append(synonym)

        await store.add_custom(
            [{"word": "a", "synonym": "x"}, {"word": "b", "synonym": "y"}],
            on_added=hook,
        )
        assert seen == ["x", "y"]

    @pytest.mark.asyncio
    async def test_reader_snapshot_unaffected_by_later_write(self):
        store = VocabularyStore()
        await store.add_custom([{"word": "coffee", "synonym": "espresso"}])
        before = store.lookup("coffee")
        await store.add_custom([{"word": "coffee", "synonym": "latte"}])
        assert [c.word for c in before] == ["espresso"]

    @pytest.mark.asyncio
    async def test_clear_custom(self):
        store = VocabularyStore()
        await store.add_custom([{"word": "hot", "synonym": "blazing"}])
        await store.clear_custom()
        assert store.custom_words() == []
        assert store.custom_size == 0
        assert len(store.lookup("hot")) == 4


# ============================================================
# CSV IMPORT
# ============================================================

class TestParseCsv:

    def test_basic(self):
        records = parse_vocabulary_csv("Word,Synonym,Definition\nHot,Scalding,very hot\n")
        assert records == [{
            "word": "hot",
            "synonym": "Scalding",
            "definition": "very hot",
            "examples": [],
        }]

    def test_header_aliases(self):
        records = parse_vocabulary_csv("simple,complex,def\nbig,enormous,huge\n")
        assert records[0]["word"] == "big"
        assert records[0]["synonym"] == "enormous"
        assert records[0]["definition"] == "huge"

    def test_replacement_alias_without_definition(self):
        records = parse_vocabulary_csv("word,replacement\nfast,rapid")
        assert records == [{"word": "fast", "synonym": "rapid", "definition": "", "examples": []}]

    def test_quoted_values(self):
        text = 'Word,Synonym,Definition\nhot,scalding,"burning, extremely hot"\n'
        assert parse_vocabulary_csv(text)[0]["definition"] == "burning, extremely hot"

    def test_rows_missing_fields_skipped(self):
        text = "Word,Synonym\nhot,scalding\n,orphan\ncold,\nbig,enormous\n"
        records = parse_vocabulary_csv(text)
        assert [r["word"] for r in records] == ["hot", "big"]

    def test_missing_columns(self):
        with pytest.raises(VocabularyValidationError, match="Word"):
            parse_vocabulary_csv("Term,Meaning\nhot,scalding\n")

    def test_header_only(self):
        assert parse_vocabulary_csv("Word,Synonym\n") == []
