"""Inverse document frequency table for BM25."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from bm25_ranker.corpus import Corpus

logger = logging.getLogger(__name__)


def compute_idf(df: NDArray[np.float64], n: int) -> NDArray[np.float64]:
    """
    Classic BM25 IDF:
        idf(t) = log((N - df(t) + 0.5) / (df(t) + 0.5) + 1)
    """
    return np.log((n - df + 0.5) / (df + 0.5) + 1.0)


class IDFTable:
    """
    One IDF weight per indexed term, computed once from a corpus.

    Terms that never occur in the corpus are absent from the table. Lookups
    for them return 0.0, the same weight a term with exactly zero IDF gets,
    but ``in`` still tells the two apart.

    Attributes:
        weights (Mapping[str, float]): Read-only term to IDF mapping.
        array (NDArray[np.float64]): IDF values aligned with ``corpus.vocabulary`` ids.
    """

    def __init__(self, corpus: Corpus):
        df = np.zeros(len(corpus.vocabulary), dtype=np.float64)
        for term, term_id in corpus.vocabulary.items():
            df[term_id] = corpus.document_frequency[term]
        idf = compute_idf(df, corpus.document_count)
        idf.flags.writeable = False

        self.array: NDArray[np.float64] = idf
        self.weights: Mapping[str, float] = MappingProxyType(
            {term: float(idf[term_id]) for term, term_id in corpus.vocabulary.items()}
        )
        logger.debug("Computed IDF for %d terms over %d documents", len(self.weights), corpus.document_count)

    def __len__(self) -> int:
        return len(self.weights)

    def __contains__(self, term: object) -> bool:
        return term in self.weights

    def __getitem__(self, term: str) -> float:
        return self.weights[term]

    def get(self, term: str, default: float = 0.0) -> float:
        return self.weights.get(term, default)


__all__ = ["IDFTable", "compute_idf"]
