"""Logistic regression fitted with per-record stochastic gradient descent."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
from scipy.special import expit

from ..types import DEFAULT_LABEL, NEGATIVE, POSITIVE, FeatureLengthError, Record

LOGGER = logging.getLogger(__name__)

DECISION_THRESHOLD = 0.5


class LogisticRegressionClassifier:
    """Linear separator with a bias term, trained one record at a time.

    Weights are updated immediately after each record, so later records in an
    epoch see the effect of earlier ones. Records are visited in the order
    given.
    """

    def __init__(
        self,
        learning_rate: float = 0.01,
        epochs: int = 1000,
        *,
        name: str = "logistic_regression",
    ) -> None:
        if learning_rate <= 0:
            raise ValueError("learning_rate must be positive")
        if epochs < 0:
            raise ValueError("epochs cannot be negative")
        self.name = name
        self.learning_rate = float(learning_rate)
        self.epochs = int(epochs)
        self._weights: np.ndarray | None = None

    @property
    def weights(self) -> np.ndarray | None:
        """Bias followed by one weight per feature; None until trained."""
        return None if self._weights is None else self._weights.copy()

    def train(self, records: Sequence[Record]) -> None:
        if not records:
            return
        inputs = np.array([_with_bias(record.features) for record in records], dtype=np.float64)
        targets = np.array([record.label for record in records], dtype=np.float64)
        weights = np.zeros(inputs.shape[1], dtype=np.float64)

        for _ in range(self.epochs):
            for row, target in zip(inputs, targets):
                probability = expit(float(row @ weights))
                error = target - probability
                weights += self.learning_rate * error * row

        self._weights = weights
        LOGGER.debug(
            "Trained %s on %d records for %d epochs",
            self.name,
            len(records),
            self.epochs,
        )

    def predict_probability(self, record: Record) -> float:
        """Return P(label == 1); 0.0 when untrained."""
        if self._weights is None:
            return 0.0
        expected = self._weights.shape[0] - 1
        if len(record.features) != expected:
            raise FeatureLengthError(
                f"{self.name} expects {expected} features, got {len(record.features)}"
            )
        return float(expit(float(np.asarray(_with_bias(record.features)) @ self._weights)))

    def predict(self, record: Record) -> int:
        if self._weights is None:
            return DEFAULT_LABEL
        if self.predict_probability(record) >= DECISION_THRESHOLD:
            return POSITIVE
        return NEGATIVE

    def is_trained(self) -> bool:
        return self._weights is not None


def _with_bias(features: Sequence[float]) -> list[float]:
    return [1.0, *features]


__all__ = ["LogisticRegressionClassifier"]
