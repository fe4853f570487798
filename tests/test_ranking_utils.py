import threading

import numpy as np
import pytest

from bm25_ranker import InvalidParameters
from bm25_ranker.ranking_utils import batch_rank_parallel, rank_order, select_top_k


class TestRankOrder:
    def test_descending(self):
        scores = np.array([0.1, 0.5, 0.3])
        assert rank_order(scores).tolist() == [1, 2, 0]

    def test_ties_keep_index_order(self):
        scores = np.array([0.0, 1.0, 0.0, 1.0, 0.0])
        assert rank_order(scores).tolist() == [1, 3, 0, 2, 4]

    def test_negative_scores_last(self):
        scores = np.array([-0.5, 0.0, 0.2])
        assert rank_order(scores).tolist() == [2, 1, 0]


class TestSelectTopK:
    def test_all(self):
        indices, scores = select_top_k(np.array([0.2, 0.9, 0.5]), None)

        assert indices.tolist() == [1, 2, 0]
        assert scores.tolist() == [0.9, 0.5, 0.2]

    def test_top_k(self):
        indices, scores = select_top_k(np.array([0.2, 0.9, 0.5]), 2)

        assert indices.tolist() == [1, 2]
        assert scores.tolist() == [0.9, 0.5]

    @pytest.mark.parametrize("top_k", [0, -3, 2.0, "2"])
    def test_invalid(self, top_k):
        with pytest.raises(InvalidParameters):
            select_top_k(np.array([0.2, 0.9]), top_k)


class TestBatchRankParallel:
    def test_preserves_order(self):
        queries = list(range(50))
        assert batch_rank_parallel(lambda q: q * 2, queries, num_workers=4) == [q * 2 for q in queries]

    def test_small_batch_runs_inline(self):
        main = threading.get_ident()
        threads = batch_rank_parallel(lambda q: threading.get_ident(), [1, 2, 3])

        assert threads == [main, main, main]

    def test_empty(self):
        assert batch_rank_parallel(lambda q: q, []) == []
