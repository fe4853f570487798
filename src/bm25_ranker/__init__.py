"""BM25 ranking of a fixed collection of short text documents."""

from bm25_ranker.bm25 import BM25, SearchResult
from bm25_ranker.corpus import Corpus
from bm25_ranker.errors import BM25Error, InvalidCorpus, InvalidParameters, InvalidQuery
from bm25_ranker.idf import IDFTable, compute_idf
from bm25_ranker.language import (
    Language,
    get_stemmer,
    is_stopword,
    language_analyzer,
    load_stopwords,
)
from bm25_ranker.parameters import DEFAULT_B, DEFAULT_K1, ScoringParameters
from bm25_ranker.tokenizer import Tokenizer, tokenize

__all__ = [
    "BM25",
    "SearchResult",
    "Corpus",
    "IDFTable",
    "compute_idf",
    "Tokenizer",
    "tokenize",
    "Language",
    "get_stemmer",
    "is_stopword",
    "language_analyzer",
    "load_stopwords",
    "ScoringParameters",
    "DEFAULT_K1",
    "DEFAULT_B",
    "BM25Error",
    "InvalidCorpus",
    "InvalidParameters",
    "InvalidQuery",
]
