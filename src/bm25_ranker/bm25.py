"""
Okapi BM25 search over a fixed in-memory corpus.

Scoring:
    - IDF: log((N - df + 0.5) / (df + 0.5) + 1)
    - Length norm: 1 - b + b * (dl / avgdl)
    - Term score: idf * tf * (k1 + 1) / (tf + k1 * norm)
    - Document score: sum over the distinct query terms

Usage:
    from bm25_ranker import BM25

    bm25 = BM25(["I love programming", "I love Java"])
    for hit in bm25.search("love java"):
        print(hit.index, hit.score)
"""

from __future__ import annotations

from collections.abc import Collection, Sequence
import logging
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

from bm25_ranker.corpus import Corpus
from bm25_ranker.errors import InvalidQuery
from bm25_ranker.idf import IDFTable
from bm25_ranker.language import Language, get_stemmer, load_stopwords
from bm25_ranker.parameters import DEFAULT_B, DEFAULT_K1, ScoringParameters
from bm25_ranker.ranking_utils import (
    DEFAULT_NUM_WORKERS,
    batch_rank_parallel,
    select_top_k,
)
from bm25_ranker.tokenizer import Stemmer, Tokenizer

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = logging.getLogger(__name__)


class SearchResult(NamedTuple):
    """A ranked document: its position in the corpus and its BM25 score."""

    index: int
    score: float


class BM25:
    """
    Classic BM25 ranking over raw text documents.

    The corpus, tokenizer, parameters and IDF table are fixed at construction
    and never mutated, so one instance can serve concurrent searches.

    Args:
        corpus (Sequence[str]): Documents to index. Must be non-empty.
        k1 (float): Term frequency saturation parameter. Must be > 0.
        b (float): Length normalization parameter. Must be >= 0.
        stopwords (Collection[str] | None): Terms dropped from documents and
            queries. ``None`` uses the English stopword list; pass an empty
            collection to keep every token.
        stemmer (Callable[[str], str] | None): Applied to each token after
            stopword removal.

    Raises:
        InvalidCorpus: If the corpus is empty or not a sequence of strings.
        InvalidParameters: If k1 <= 0, b < 0, or stopwords is a single string.
    """

    def __init__(
        self,
        corpus: Sequence[str],
        k1: float = DEFAULT_K1,
        b: float = DEFAULT_B,
        stopwords: Collection[str] | None = None,
        stemmer: Stemmer | None = None,
    ):
        params = ScoringParameters(k1=k1, b=b)
        if stopwords is None:
            stopwords = load_stopwords(Language.ENGLISH)
        tokenizer = Tokenizer(stopwords=stopwords, stemmer=stemmer)
        index = Corpus(corpus, tokenizer=tokenizer)
        idf = IDFTable(index)

        dl = index.document_length.astype(np.float64)
        avg_dl = index.average_document_length or 1.0
        doc_norm = 1.0 - params.b + params.b * (dl / avg_dl)
        doc_norm.flags.writeable = False

        self.params = params
        self.tokenizer = tokenizer
        self.corpus = index
        self.idf = idf
        self._doc_norm = doc_norm

    @classmethod
    def for_language(
        cls,
        corpus: Sequence[str],
        language: Language | str,
        k1: float = DEFAULT_K1,
        b: float = DEFAULT_B,
        stem: bool = True,
    ) -> "BM25":
        """Build an index using a language's stopword list and Snowball stemmer."""
        if not isinstance(language, Language):
            language = Language.from_code(language)
        return cls(
            corpus,
            k1=k1,
            b=b,
            stopwords=load_stopwords(language),
            stemmer=get_stemmer(language) if stem else None,
        )

    @property
    def k1(self) -> float:
        return self.params.k1

    @property
    def b(self) -> float:
        return self.params.b

    def __len__(self) -> int:
        return len(self.corpus)

    # -------------------------------------------------------------------------
    # Scoring
    # -------------------------------------------------------------------------

    @staticmethod
    def query_terms(tokens: Sequence[str]) -> list[str]:
        """Distinct query terms in a fixed order, so repetition and word order don't change sums."""
        return sorted(set(tokens))

    def score_term(self, term: str, index: int) -> float:
        """BM25 score of one normalized term in one document."""
        tf = self.corpus.term_frequency[index].get(term, 0)
        if tf == 0:
            return 0.0
        idf = self.idf.get(term)
        if idf == 0.0:
            return 0.0
        numerator = idf * tf * (self.k1 + 1.0)
        denominator = tf + self.k1 * self._doc_norm[index]
        return float(numerator / denominator)

    def score(self, query: Sequence[str], index: int) -> float:
        """BM25 score of one document for a tokenized query."""
        total = 0.0
        for term in self.query_terms(query):
            total += self.score_term(term, index)
        return total

    def get_scores(self, query: Sequence[str]) -> NDArray[np.float64]:
        """BM25 scores of every document for a tokenized query."""
        scores = np.zeros(len(self.corpus), dtype=np.float64)
        k1 = self.k1
        for term in self.query_terms(query):
            term_id = self.corpus.get_term_id(term)
            if term_id is None:
                continue
            idf = self.idf.array[term_id]
            if idf == 0.0:
                continue
            row = self.corpus.tf_matrix[term_id]
            docs = row.indices
            tf = row.data
            numerator = idf * tf * (k1 + 1.0)
            denominator = tf + k1 * self._doc_norm[docs]
            scores[docs] += numerator / denominator
        return scores

    # -------------------------------------------------------------------------
    # Ranking
    # -------------------------------------------------------------------------

    def tokenize_query(self, query: str) -> list[str]:
        """Tokenize a query exactly as the corpus was tokenized."""
        if not isinstance(query, str):
            raise InvalidQuery("Query must be a string.")
        if not query.strip():
            raise InvalidQuery("Query must not be empty.")
        tokens = self.tokenizer(query)
        if not tokens:
            raise InvalidQuery(f"Query {query!r} has no searchable terms.")
        return tokens

    def rank(
        self,
        query: Sequence[str],
        top_k: int | None = None,
    ) -> tuple[NDArray[np.int64], NDArray[np.float64]]:
        """Rank all documents for a tokenized query; returns (indices, scores)."""
        if not query:
            raise InvalidQuery("Query must contain at least one term.")
        scores = self.get_scores(query)
        return select_top_k(scores, top_k)

    def search(self, query: str, top_k: int | None = None) -> list[SearchResult]:
        """
        Rank every document in the corpus against a query string.

        Documents matching no query term are included with a score of 0.0.
        Results are ordered by score descending, then by document index.

        Raises:
            InvalidQuery: If the query is empty or has no terms after tokenization.
            InvalidParameters: If top_k is not a positive integer or None.
        """
        tokens = self.tokenize_query(query)
        logger.debug("Searching %d documents for %d query terms", len(self.corpus), len(set(tokens)))
        indices, scores = self.rank(tokens, top_k)
        return [SearchResult(int(i), float(s)) for i, s in zip(indices, scores)]

    def batch_search(
        self,
        queries: Sequence[str],
        top_k: int | None = None,
        num_workers: int = DEFAULT_NUM_WORKERS,
    ) -> list[list[SearchResult]]:
        """Run ``search`` for each query, in parallel for large batches."""

        def search_one(query: str) -> list[SearchResult]:
            return self.search(query, top_k)

        return batch_rank_parallel(search_one, queries, num_workers=num_workers)


__all__ = ["BM25", "SearchResult"]
