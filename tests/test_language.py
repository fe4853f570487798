"""Tests for packaged stopword lists and Snowball stemmers."""

import pytest

from bm25_ranker import language
from bm25_ranker.language import (
    Language,
    get_stemmer,
    is_stopword,
    language_analyzer,
    load_stopwords,
)


class TestLanguage:
    def test_codes(self):
        assert [lang.code for lang in Language] == ["en", "fr", "es", "de", "it", "nl"]

    @pytest.mark.parametrize("code,expected", [("en", Language.ENGLISH), ("FR", Language.FRENCH), ("nl", Language.DUTCH)])
    def test_from_code(self, code, expected):
        assert Language.from_code(code) is expected

    @pytest.mark.parametrize("code", ["xx", "", None])
    def test_unknown_code(self, code):
        with pytest.raises(ValueError):
            Language.from_code(code)


class TestStopwords:
    @pytest.mark.parametrize(
        "lang,words",
        [
            (Language.ENGLISH, ["the", "above", "i", "is"]),
            (Language.DUTCH, ["de", "het"]),
            (Language.ITALIAN, ["alla", "anno"]),
            (Language.SPANISH, ["aún", "cosas"]),
            (Language.FRENCH, ["autres", "la"]),
            (Language.GERMAN, ["anderen", "dann"]),
        ],
    )
    def test_common_stopwords_present(self, lang, words):
        stopwords = load_stopwords(lang)
        for word in words:
            assert word in stopwords

    def test_content_words_absent(self):
        content = ["computer", "science", "python", "java", "love", "programming"]
        for word in content:
            assert word not in load_stopwords(Language.ENGLISH)

    def test_loaded_once(self):
        assert load_stopwords(Language.GERMAN) is load_stopwords(Language.GERMAN)

    def test_immutable(self):
        assert isinstance(load_stopwords(Language.ENGLISH), frozenset)

    def test_is_stopword(self):
        assert is_stopword("The")
        assert is_stopword("het", Language.DUTCH)
        assert not is_stopword("java")

    def test_comment_and_blank_lines_skipped(self, monkeypatch):
        text = "# header\n  # indented comment\n\n  The \nAND\n"
        monkeypatch.setattr(language, "files", lambda package: _TextResources(text))

        assert load_stopwords.__wrapped__(Language.ENGLISH) == frozenset({"the", "and"})

    def test_missing_resource_warns(self, monkeypatch):
        monkeypatch.setattr(language, "files", lambda package: _MissingResources())

        with pytest.warns(UserWarning, match="not found"):
            stopwords = load_stopwords.__wrapped__(Language.ENGLISH)
        assert stopwords == frozenset()


class _MissingResources:
    def __truediv__(self, name):
        return self

    def read_text(self, encoding=None):
        raise FileNotFoundError("gone")


class TestStemmer:
    @pytest.fixture
    def stem(self):
        return get_stemmer(Language.ENGLISH)

    @pytest.mark.parametrize(
        "word,expected",
        [
            ("running", "run"),
            ("programming", "program"),
            ("programs", "program"),
            ("searching", "search"),
            ("architectures", "architectur"),
        ],
    )
    def test_english(self, stem, word, expected):
        assert stem(word) == expected

    def test_short_words(self, stem):
        assert stem("a") == "a"
        assert stem("is") == "is"

    def test_already_stemmed(self, stem):
        assert stem("run") == "run"
        assert stem("cat") == "cat"

    @pytest.mark.parametrize("lang", list(Language))
    def test_every_language_has_stemmer(self, lang):
        stem = get_stemmer(lang)
        assert isinstance(stem("test"), str)

    def test_failure_returns_input(self, monkeypatch):
        class BrokenStemmer:
            def __init__(self, name):
                pass

            def stem(self, word):
                raise RuntimeError("boom")

        monkeypatch.setattr(language, "SnowballStemmer", BrokenStemmer)
        stem = get_stemmer.__wrapped__(Language.ENGLISH)

        assert stem("running") == "running"


class TestLanguageAnalyzer:
    def test_english(self):
        analyze = language_analyzer(Language.ENGLISH)
        assert analyze("The programs are running") == ["program", "run"]

    def test_without_stemming(self):
        analyze = language_analyzer(Language.ENGLISH, stem=False)
        assert analyze("The programs are running") == ["programs", "running"]

    def test_dutch_stopwords(self):
        analyze = language_analyzer(Language.DUTCH, stem=False)
        assert analyze("De kat en het huis") == ["kat", "huis"]


class _TextResources:
    def __init__(self, text):
        self.text = text

    def __truediv__(self, name):
        return self

    def read_text(self, encoding=None):
        return self.text
