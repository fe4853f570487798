from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping

import numpy as np
from scipy.sparse import csr_matrix

from bm25_ranker.errors import InvalidCorpus
from bm25_ranker.tokenizer import tokenize

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = logging.getLogger(__name__)


def _readonly(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


class Corpus:
    """
    Immutable index over a fixed collection of raw text documents.

    Every statistic is computed once, in a single pass over the tokenized
    documents, before the constructor returns.

    Args:
        documents (Sequence[str]): Raw document texts. Must be non-empty.
        tokenizer (Callable[[str], list[str]] | None): Tokenizer applied to each
            document. Defaults to plain lowercase/whitespace ``tokenize``.

    Attributes:
        documents (tuple[str, ...]): The raw documents.
        document_count (int): Total number of documents in the corpus.
        term_frequency (tuple[Counter[str], ...]): Term counts per document.
        postings (Mapping[str, frozenset[int]]): Documents containing each term.
        document_frequency (Mapping[str, int]): Number of documents per term.
        document_length (NDArray[np.int64]): Token count per document.
        average_document_length (float): Mean token count.
        vocabulary (Mapping[str, int]): Term to row id in ``tf_matrix``.
        tf_matrix (csr_matrix): Term-document counts, shape (vocab_size, N).
    """

    def __init__(
        self,
        documents: Sequence[str],
        tokenizer: Callable[[str], list[str]] | None = None,
    ):
        if documents is None or isinstance(documents, (str, bytes)):
            raise InvalidCorpus("Corpus must be a sequence of documents.")
        documents = tuple(documents)
        if not documents:
            raise InvalidCorpus("Corpus must contain at least one document.")
        for idx, doc in enumerate(documents):
            if not isinstance(doc, str):
                raise InvalidCorpus(f"Document {idx} is {type(doc).__name__}, expected str.")

        tokenizer = tokenizer or tokenize
        term_frequency: list[Counter[str]] = []
        postings: dict[str, set[int]] = {}
        lengths: list[int] = []
        for idx, doc in enumerate(documents):
            tokens = tokenizer(doc)
            counts = Counter(tokens)
            term_frequency.append(counts)
            lengths.append(len(tokens))
            for term in counts:
                postings.setdefault(term, set()).add(idx)

        vocabulary = {term: term_id for term_id, term in enumerate(postings)}
        rows, cols, data = [], [], []
        for idx, counts in enumerate(term_frequency):
            for term, count in counts.items():
                rows.append(vocabulary[term])
                cols.append(idx)
                data.append(count)
        tf_matrix = csr_matrix(
            (np.array(data, dtype=np.float64), (np.array(rows, dtype=np.int64), np.array(cols, dtype=np.int64))),
            shape=(len(vocabulary), len(documents)),
        )

        document_length = np.array(lengths, dtype=np.int64)

        self.documents = documents
        self.document_count = len(documents)
        self.term_frequency = tuple(term_frequency)
        self.postings: Mapping[str, frozenset[int]] = MappingProxyType(
            {term: frozenset(docs) for term, docs in postings.items()}
        )
        self.document_frequency: Mapping[str, int] = MappingProxyType(
            {term: len(docs) for term, docs in postings.items()}
        )
        self.document_length: NDArray[np.int64] = _readonly(document_length)
        self.average_document_length = float(np.mean(document_length))
        self.vocabulary: Mapping[str, int] = MappingProxyType(vocabulary)
        self.tf_matrix = tf_matrix

        logger.debug(
            "Indexed %d documents, %d terms, avgdl=%.3f",
            self.document_count,
            len(vocabulary),
            self.average_document_length,
        )

    def __len__(self) -> int:
        return self.document_count

    def __getitem__(self, index: int) -> str:
        return self.documents[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.documents)

    def __contains__(self, term: object) -> bool:
        return term in self.vocabulary

    def get_term_id(self, term: str) -> int | None:
        return self.vocabulary.get(term)

    def term_counts(self, term: str) -> NDArray[np.float64]:
        """Occurrences of a term in every document (zeros for unknown terms)."""
        term_id = self.vocabulary.get(term)
        if term_id is None:
            return np.zeros(self.document_count, dtype=np.float64)
        return self.tf_matrix[term_id].toarray().ravel()
