"""Core immutable data structures shared by classifiers and evaluation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

NEGATIVE = 0
POSITIVE = 1
DEFAULT_LABEL = NEGATIVE
LABELS: tuple[int, ...] = (NEGATIVE, POSITIVE)


class FeatureLengthError(ValueError):
    """Raised when a record does not match the feature count a model was trained on."""


@dataclass(frozen=True)
class Record:
    """Fixed-length numeric feature vector paired with a binary label."""

    features: tuple[float, ...]
    label: int

    @classmethod
    def of(cls, features: Iterable[float], label: int) -> Record:
        label = int(label)
        if label not in LABELS:
            raise ValueError(f"label must be 0 or 1, got {label}")
        return cls(features=tuple(float(value) for value in features), label=label)

    def __len__(self) -> int:
        return len(self.features)


@dataclass(frozen=True)
class ConfusionMatrix:
    """Outcome counts of a single evaluation pass."""

    tp: int = 0
    tn: int = 0
    fp: int = 0
    fn: int = 0
    total: int = 0

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.tp, self.tn, self.fp, self.fn)


@dataclass(frozen=True)
class Metrics:
    """Scores derived from a confusion matrix."""

    accuracy: float
    precision: float
    recall: float
    f1: float


@dataclass(frozen=True)
class Evaluation:
    """Metrics together with the confusion matrix they were derived from."""

    metrics: Metrics
    confusion: ConfusionMatrix


__all__ = [
    "ConfusionMatrix",
    "DEFAULT_LABEL",
    "Evaluation",
    "FeatureLengthError",
    "LABELS",
    "Metrics",
    "NEGATIVE",
    "POSITIVE",
    "Record",
]
