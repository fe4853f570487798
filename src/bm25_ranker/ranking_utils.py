"""
Shared utilities for ranking BM25 scores.

This module provides:
1. Deterministic ordering - score descending, ties by ascending document index
2. Top-k selection on top of that ordering
3. Parallel batch ranking - ThreadPoolExecutor for query parallelism

Usage:
    from bm25_ranker.ranking_utils import (
        rank_order,
        select_top_k,
        batch_rank_parallel,
    )
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Callable, Sequence, TypeVar

import numpy as np

from bm25_ranker.errors import InvalidParameters

if TYPE_CHECKING:
    from numpy.typing import NDArray


# =============================================================================
# Configuration
# =============================================================================

# Default number of workers for parallel query processing
DEFAULT_NUM_WORKERS = 8

# Minimum queries before enabling parallelism
MIN_QUERIES_FOR_PARALLEL = 10

Q = TypeVar("Q")
R = TypeVar("R")


# =============================================================================
# Ordering
# =============================================================================


def validate_top_k(top_k: int | None) -> None:
    if top_k is None:
        return
    if isinstance(top_k, bool) or not isinstance(top_k, (int, np.integer)) or top_k <= 0:
        raise InvalidParameters(f"top_k must be a positive integer or None, got {top_k!r}.")


def rank_order(scores: NDArray[np.float64]) -> NDArray[np.int64]:
    """
    Document indices sorted by score descending.

    Equal scores keep ascending index order (stable sort on negated scores),
    so the ranking is reproducible.
    """
    return np.argsort(-scores, kind="stable").astype(np.int64)


def select_top_k(
    scores: NDArray[np.float64],
    top_k: int | None,
) -> tuple[NDArray[np.int64], NDArray[np.float64]]:
    """
    Select top-k documents.

    Args:
        scores: Score array for all documents (N,)
        top_k: Number of top results (None for all)

    Returns:
        (sorted_indices, sorted_scores) in descending order
    """
    validate_top_k(top_k)
    sorted_indices = rank_order(scores)
    if top_k is not None:
        sorted_indices = sorted_indices[:top_k]
    return sorted_indices, scores[sorted_indices]


# =============================================================================
# Parallel Batch Ranking
# =============================================================================


def batch_rank_parallel(
    rank_single: Callable[[Q], R],
    queries: Sequence[Q],
    num_workers: int = DEFAULT_NUM_WORKERS,
    min_queries_for_parallel: int = MIN_QUERIES_FOR_PARALLEL,
) -> list[R]:
    """
    Apply a single-query ranker to a batch of queries.

    Results come back in input order. Small batches run sequentially.

    Args:
        rank_single: Ranks one query
        queries: Queries to rank
        num_workers: Number of parallel workers
        min_queries_for_parallel: Minimum queries before enabling parallelism
    """
    if not queries:
        return []

    # For small batches, run sequentially
    if len(queries) < min_queries_for_parallel or num_workers <= 1:
        return [rank_single(query) for query in queries]

    # For larger batches, parallelize
    with ThreadPoolExecutor(max_workers=num_workers) as executor:
        results = list(executor.map(rank_single, queries))

    return results


__all__ = [
    "batch_rank_parallel",
    "rank_order",
    "select_top_k",
    "validate_top_k",
    "DEFAULT_NUM_WORKERS",
    "MIN_QUERIES_FOR_PARALLEL",
]
