"""Gaussian Naive Bayes over continuous features."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from ..types import DEFAULT_LABEL, Record

LOGGER = logging.getLogger(__name__)

VARIANCE_EPSILON = 1e-9
LIKELIHOOD_EPSILON = 1e-10


@dataclass(frozen=True)
class ClassStats:
    """Per-class feature statistics gathered during training."""

    mean: np.ndarray
    variance: np.ndarray
    prior: float


class GaussianNaiveBayesClassifier:
    """Bayes' rule with independent normal likelihoods per feature.

    Records passed to ``predict`` must have the feature count seen during
    training; other lengths are undefined behaviour.
    """

    def __init__(self, *, name: str = "naive_bayes") -> None:
        self.name = name
        self._stats: dict[int, ClassStats] = {}

    def train(self, records: Sequence[Record]) -> None:
        if not records:
            return
        by_label: dict[int, list[tuple[float, ...]]] = {}
        for record in records:
            by_label.setdefault(record.label, []).append(record.features)

        total = len(records)
        stats: dict[int, ClassStats] = {}
        for label in sorted(by_label):
            matrix = np.array(by_label[label], dtype=np.float64)
            count = matrix.shape[0]
            mean = matrix.mean(axis=0)
            squares = ((matrix - mean) ** 2).sum(axis=0)
            variance = squares / max(count - 1, 1) + VARIANCE_EPSILON
            stats[label] = ClassStats(mean=mean, variance=variance, prior=count / total)

        self._stats = stats
        LOGGER.debug(
            "Trained %s on %d records across %d classes",
            self.name,
            total,
            len(stats),
        )

    def priors(self) -> dict[int, float]:
        return {label: stats.prior for label, stats in self._stats.items()}

    def class_stats(self, label: int) -> ClassStats:
        try:
            return self._stats[label]
        except KeyError as exc:
            raise KeyError(f"Class {label} was not seen during training.") from exc

    def log_posteriors(self, record: Record) -> dict[int, float]:
        """Unnormalised log-posterior for every trained class."""
        values = np.asarray(record.features, dtype=np.float64)
        scores: dict[int, float] = {}
        for label, stats in self._stats.items():
            likelihood = _gaussian_density(values, stats.mean, stats.variance)
            scores[label] = math.log(stats.prior) + float(
                np.log(likelihood + LIKELIHOOD_EPSILON).sum()
            )
        return scores

    def predict(self, record: Record) -> int:
        best_label = DEFAULT_LABEL
        best_score = -math.inf
        for label, score in self.log_posteriors(record).items():
            if score > best_score:
                best_label = label
                best_score = score
        return best_label

    def is_trained(self) -> bool:
        return bool(self._stats)


def _gaussian_density(x: np.ndarray, mean: np.ndarray, variance: np.ndarray) -> np.ndarray:
    exponent = -((x - mean) ** 2) / (2.0 * variance)
    return np.exp(exponent) / np.sqrt(2.0 * math.pi * variance)


__all__ = ["ClassStats", "GaussianNaiveBayesClassifier"]
