"""
Per-language stopword lists and stemmers.

Each supported language maps to a pair of capabilities:
    - a stopword set, read from ``resources/stopwords-<code>.txt``
    - a Snowball stemmer (via NLTK)

Stopword lists are loaded on first use and cached for the life of the
process. Both capabilities plug into ``Tokenizer``; the BM25 core never
depends on a specific language.
"""

from __future__ import annotations

from enum import Enum
from functools import cache
from importlib.resources import files
import logging
import warnings

from nltk.stem.snowball import SnowballStemmer

from bm25_ranker.tokenizer import Stemmer, Tokenizer

logger = logging.getLogger(__name__)


class Language(Enum):
    """Supported languages, keyed by ISO 639-1 code."""

    ENGLISH = "en"
    FRENCH = "fr"
    SPANISH = "es"
    GERMAN = "de"
    ITALIAN = "it"
    DUTCH = "nl"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> "Language":
        try:
            return cls(code.lower())
        except (AttributeError, ValueError):
            supported = ", ".join(lang.value for lang in cls)
            raise ValueError(f"Unsupported language {code!r}; expected one of: {supported}.") from None


# NLTK names its Snowball stemmers by English language name.
_SNOWBALL_NAMES = {
    Language.ENGLISH: "english",
    Language.FRENCH: "french",
    Language.SPANISH: "spanish",
    Language.GERMAN: "german",
    Language.ITALIAN: "italian",
    Language.DUTCH: "dutch",
}


@cache
def load_stopwords(language: Language) -> frozenset[str]:
    """Stopword set for a language, read once from the packaged word list."""
    filename = f"stopwords-{language.code}.txt"
    resource = files("bm25_ranker") / "resources" / filename
    try:
        text = resource.read_text(encoding="utf-8")
    except FileNotFoundError:
        warnings.warn(f"Stopword list {filename} not found. Using an empty stopword set.")
        return frozenset()

    words = frozenset(
        word.lower() for word in (line.strip() for line in text.splitlines()) if word and not word.startswith("#")
    )
    logger.debug("Loaded %d stopwords from %s", len(words), filename)
    return words


def is_stopword(term: str, language: Language = Language.ENGLISH) -> bool:
    """Check if a term is a stopword in the given language."""
    return term.lower() in load_stopwords(language)


@cache
def get_stemmer(language: Language) -> Stemmer:
    """
    Snowball stemming function for a language.

    The returned function never raises: if the underlying stemmer fails on a
    token, the token is returned unchanged.
    """
    snowball = SnowballStemmer(_SNOWBALL_NAMES[language])

    def stem(word: str) -> str:
        try:
            return snowball.stem(word)
        except Exception:
            logger.debug("Stemmer %s failed on %r; keeping the token", language.code, word, exc_info=True)
            return word

    stem.__name__ = f"stem_{language.code}"
    return stem


def language_analyzer(language: Language, stem: bool = True) -> Tokenizer:
    """Tokenizer wired to a language's stopwords and, optionally, its stemmer."""
    return Tokenizer(
        stopwords=load_stopwords(language),
        stemmer=get_stemmer(language) if stem else None,
    )


__all__ = [
    "Language",
    "get_stemmer",
    "is_stopword",
    "language_analyzer",
    "load_stopwords",
]
