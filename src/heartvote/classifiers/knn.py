"""k-nearest-neighbours classifier with Euclidean distance."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np

from ..types import DEFAULT_LABEL, Record
from .voting import majority_vote

LOGGER = logging.getLogger(__name__)

# Distance reported for records whose feature count differs from the query.
UNREACHABLE = math.inf


class KNearestNeighborsClassifier:
    """Lazy learner: training stores the data, prediction scans all of it."""

    def __init__(self, k: int = 5, *, name: str = "knn") -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        self.name = name
        self.k = int(k)
        self._records: tuple[Record, ...] = ()

    def train(self, records: Sequence[Record]) -> None:
        if not records:
            return
        self._records = tuple(records)
        LOGGER.debug("Stored %d training records for %s", len(self._records), self.name)

    def neighbours(self, record: Record) -> list[tuple[float, int]]:
        """Return ``(distance, label)`` for the k closest stored records, nearest first."""
        query = np.asarray(record.features, dtype=np.float64)
        distances = [
            (euclidean_distance(query, stored.features), stored.label) for stored in self._records
        ]
        # list.sort is stable, so equidistant records keep their training order.
        distances.sort(key=lambda pair: pair[0])
        return distances[: self.k]

    def predict(self, record: Record) -> int:
        if not self._records:
            return DEFAULT_LABEL
        return majority_vote(label for _distance, label in self.neighbours(record))

    def is_trained(self) -> bool:
        return bool(self._records)


def euclidean_distance(a: Sequence[float] | np.ndarray, b: Sequence[float] | np.ndarray) -> float:
    """Euclidean distance, or ``inf`` when the vectors differ in length."""
    left = np.asarray(a, dtype=np.float64)
    right = np.asarray(b, dtype=np.float64)
    if left.shape != right.shape:
        return UNREACHABLE
    return float(np.sqrt(((left - right) ** 2).sum()))


__all__ = ["KNearestNeighborsClassifier", "euclidean_distance"]
