"""
Tokenization shared by indexing and querying.

Pipeline:
    1. Lowercase
    2. Split on runs of whitespace (empty fragments dropped)
    3. Drop stopwords (optional)
    4. Stem (optional)

The same Tokenizer instance must process both the corpus and every query,
otherwise query terms silently stop matching indexed terms.
"""

from __future__ import annotations

from collections.abc import Callable, Collection

from bm25_ranker.errors import InvalidParameters

Stemmer = Callable[[str], str]


def tokenize(text: str) -> list[str]:
    """Lowercase the text and split it on whitespace."""
    return text.lower().split()


class Tokenizer:
    """
    Whitespace tokenizer with optional stopword removal and stemming.

    Args:
        stopwords (Collection[str] | None): Terms to drop, matched case-insensitively. Checked
            before stemming.
        stemmer (Callable[[str], str] | None): Maps a token to its root form.

    Examples:
        >>> Tokenizer(stopwords={"i"})("I love Java")
        ['love', 'java']
    """

    def __init__(
        self,
        stopwords: Collection[str] | None = None,
        stemmer: Stemmer | None = None,
    ):
        if isinstance(stopwords, (str, bytes)):
            raise InvalidParameters("stopwords must be a collection of terms, not a single string.")
        self.stopwords = frozenset(word.lower() for word in stopwords) if stopwords else frozenset()
        self.stemmer = stemmer

    def __call__(self, text: str) -> list[str]:
        tokens = tokenize(text)
        if self.stopwords:
            tokens = [t for t in tokens if t not in self.stopwords]
        if self.stemmer is not None:
            stem = self.stemmer
            tokens = [s for s in (stem(t) for t in tokens) if s]
        return tokens

    def __repr__(self) -> str:
        return f"Tokenizer(stopwords={len(self.stopwords)} terms, stemmer={self.stemmer!r})"


__all__ = ["Stemmer", "Tokenizer", "tokenize"]
