"""Validation errors raised by the BM25 engine."""


class BM25Error(ValueError):
    """Base class for invalid input to the BM25 engine."""


class InvalidCorpus(BM25Error):
    """The corpus is missing, empty, or contains non-string documents."""


class InvalidParameters(BM25Error):
    """k1, b or top_k is outside its valid range."""


class InvalidQuery(BM25Error):
    """The query is missing, empty, or has no terms after tokenization."""


__all__ = ["BM25Error", "InvalidCorpus", "InvalidParameters", "InvalidQuery"]
