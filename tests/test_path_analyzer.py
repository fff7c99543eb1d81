"""Tests for the path analyzer pipeline and its configuration."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from catalogsearch_core.analyzers import (
    ENGLISH_STOP_WORDS,
    PathAnalyzerConfig,
    PathTokenizerAnalyzer,
    Token,
    TokenStream,
    get_analyzer,
)


def terms(analyzer, text, field="path"):
    return analyzer.analyze(field, text).get_texts()


class TestPathTokenizerAnalyzer:

    def test_full_pipeline(self):
        analyzer = PathTokenizerAnalyzer()
        tokens = analyzer.analyze("path", "The/Cat/and/THE/Dog").to_list()
        assert tokens == [
            Token(text="cat", start_offset=4, end_offset=7, position=0),
            Token(text="dog", start_offset=16, end_offset=19, position=1),
        ]

    def test_default_stopwords(self):
        assert terms(PathTokenizerAnalyzer(), "the/cat/and/the/dog") == ["cat", "dog"]

    def test_empty_segments_kept_by_default(self):
        assert terms(PathTokenizerAnalyzer(), "/Models//Data/") == ["", "models", "", "data", ""]

    def test_custom_stopwords_with_empty_string(self):
        assert terms(PathTokenizerAnalyzer(stopwords={""}), "/a/") == ["a"]

    def test_custom_stopwords_replace_default(self):
        analyzer = PathTokenizerAnalyzer(stopwords={"folder"})
        assert terms(analyzer, "the/folder/item") == ["the", "item"]

    def test_lowercasing_is_per_codepoint(self):
        assert terms(PathTokenizerAnalyzer(), "ΟΔΟΣ/ΑΣ/İD") == ["οδοσ", "ασ", "id"]

    def test_stopwords_match_after_lowercasing(self):
        # Upper-case stopwords never match lowercased segments
        analyzer = PathTokenizerAnalyzer(stopwords={"Folder"})
        assert terms(analyzer, "Folder/item") == ["folder", "item"]

    def test_none_stopwords_falls_back_to_default(self):
        assert PathTokenizerAnalyzer(None).stopwords is PathTokenizerAnalyzer.STOP_WORDS_SET

    def test_stopwords_are_owned_copy(self):
        words = {"cat"}
        analyzer = PathTokenizerAnalyzer(words)
        words.add("dog")
        assert analyzer.stopwords == frozenset({"cat"})
        assert terms(analyzer, "cat/dog") == ["dog"]

    def test_field_name_does_not_change_result(self):
        analyzer = PathTokenizerAnalyzer()
        assert terms(analyzer, "A/the/B", field="path") == terms(analyzer, "A/the/B", field=None)
        assert terms(analyzer, "A/the/B", field="label") == ["b"]

    def test_empty_and_none_input(self):
        analyzer = PathTokenizerAnalyzer()
        assert terms(analyzer, "") == []
        assert terms(analyzer, None) == []

    def test_non_text_rejected(self):
        with pytest.raises(TypeError):
            PathTokenizerAnalyzer().analyze("path", 42)

    def test_deterministic(self):
        analyzer = PathTokenizerAnalyzer()
        text = "Catalogue/The Folder/of/Models/Item"
        assert analyzer.analyze("path", text).to_list() == analyzer.analyze("path", text).to_list()

    def test_each_call_returns_fresh_stream(self):
        analyzer = PathTokenizerAnalyzer()
        first = analyzer.analyze("path", "x/y")
        assert isinstance(first, TokenStream)
        assert first.get_texts() == ["x", "y"]
        assert first.get_texts() == []
        assert terms(analyzer, "x/y") == ["x", "y"]

    def test_get_terms(self):
        assert PathTokenizerAnalyzer().get_terms("path", "Data/of/Model") == ["data", "model"]

    def test_concurrent_use(self):
        analyzer = PathTokenizerAnalyzer()
        paths = [f"Folder{i}/the/Item{i}" for i in range(50)]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda p: terms(analyzer, p), paths))
        assert results == [[f"folder{i}", f"item{i}"] for i in range(50)]

    def test_registered_as_path(self):
        assert isinstance(get_analyzer("path"), PathTokenizerAnalyzer)
        assert get_analyzer("path").get_terms("path", "the/Item") == ["item"]


class TestPathAnalyzerConfig:

    def test_default_config(self):
        analyzer = PathTokenizerAnalyzer.from_config()
        assert analyzer.stopwords == ENGLISH_STOP_WORDS

    def test_explicit_stopwords(self):
        analyzer = PathTokenizerAnalyzer.from_config(PathAnalyzerConfig(stopwords={"item"}))
        assert terms(analyzer, "the/item") == ["the"]

    def test_extend_default(self):
        config = PathAnalyzerConfig(stopwords={"item"}, extend_default=True)
        analyzer = PathTokenizerAnalyzer.from_config(config)
        assert terms(analyzer, "the/item/model") == ["model"]

    def test_stopwords_file(self, tmp_path):
        path = tmp_path / "stop.txt"
        path.write_text("item\n# comment\nversion\n", encoding="utf-8")
        config = PathAnalyzerConfig(stopwords={"model"}, stopwords_path=str(path))
        analyzer = PathTokenizerAnalyzer.from_config(config)
        assert analyzer.stopwords == frozenset({"model", "item", "version"})
        assert terms(analyzer, "Model/Item/Version/the") == ["the"]

    def test_dict_round_trip(self):
        config = PathAnalyzerConfig(stopwords={"b", "a"}, stopwords_path="words.txt", extend_default=True)
        data = config.to_dict()
        assert data == {"stopwords": ["a", "b"], "stopwords_path": "words.txt", "extend_default": True}
        assert PathAnalyzerConfig.from_dict(data) == config

    def test_from_empty_dict(self):
        assert PathAnalyzerConfig.from_dict({}) == PathAnalyzerConfig()
