"""BM25 scoring parameters."""

from __future__ import annotations

from dataclasses import dataclass
import math

from bm25_ranker.errors import InvalidParameters

DEFAULT_K1 = 1.5  # TF saturation
DEFAULT_B = 0.75  # Length normalization


def _as_float(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameters(f"{name} must be a number, got {type(value).__name__}.")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameters(f"{name} must be finite, got {value}.")
    return value


@dataclass(frozen=True)
class ScoringParameters:
    """
    BM25 parameters, fixed for the lifetime of an index.

    Args:
        k1 (float): Term frequency saturation. Must be > 0.
        b (float): Document length normalization. Must be >= 0.
    """

    k1: float = DEFAULT_K1
    b: float = DEFAULT_B

    def __post_init__(self) -> None:
        k1 = _as_float("k1", self.k1)
        b = _as_float("b", self.b)
        if k1 <= 0:
            raise InvalidParameters(f"k1 must be positive, got {k1}.")
        if b < 0:
            raise InvalidParameters(f"b must be non-negative, got {b}.")
        object.__setattr__(self, "k1", k1)
        object.__setattr__(self, "b", b)
