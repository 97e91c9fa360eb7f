"""Train/test partitioning and feature standardisation."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
from sklearn.model_selection import train_test_split as _sk_train_test_split
from sklearn.preprocessing import StandardScaler

from .types import Record

LOGGER = logging.getLogger(__name__)


def train_test_split(
    records: Sequence[Record],
    test_size: float,
    *,
    seed: int | None = None,
) -> tuple[list[Record], list[Record]]:
    """Shuffle ``records`` and split off ``test_size`` of them as the test set."""

    if not 0.0 < test_size < 1.0:
        raise ValueError("test_size must be between 0 and 1 (exclusive)")
    if len(records) < 2:
        raise ValueError("At least two records are required to split.")

    train, test = _sk_train_test_split(
        list(records),
        test_size=test_size,
        random_state=seed,
        shuffle=True,
    )
    LOGGER.info("Split %d records into %d train / %d test", len(records), len(train), len(test))
    return list(train), list(test)


def standardize(
    train: Sequence[Record],
    test: Sequence[Record],
) -> tuple[list[Record], list[Record]]:
    """Scale features to zero mean and unit variance using training statistics only."""

    if not train:
        return list(train), list(test)
    scaler = StandardScaler()
    scaler.fit(_matrix(train))
    return _rescale(scaler, train), _rescale(scaler, test)


def _matrix(records: Sequence[Record]) -> np.ndarray:
    return np.array([record.features for record in records], dtype=np.float64)


def _rescale(scaler: StandardScaler, records: Sequence[Record]) -> list[Record]:
    if not records:
        return []
    scaled = scaler.transform(_matrix(records))
    return [
        Record(features=tuple(float(value) for value in row), label=record.label)
        for row, record in zip(scaled, records)
    ]


__all__ = ["standardize", "train_test_split"]
