"""CART-style binary decision tree driven by Gini impurity."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from ..types import DEFAULT_LABEL, FeatureLengthError, Record
from .voting import majority_vote

LOGGER = logging.getLogger(__name__)

LEAF_EMPTY = "empty"
LEAF_PURE = "pure"
LEAF_LIMIT = "limit"
LEAF_NO_SPLIT = "no_split"


@dataclass(frozen=True)
class Leaf:
    """Terminal node; ``reason`` records which stopping rule produced it."""

    label: int
    reason: str


@dataclass(frozen=True)
class Split:
    """Internal node: values <= threshold go left, the rest go right."""

    feature_index: int
    threshold: float
    left: Node
    right: Node


Node = Leaf | Split


def gini_impurity(labels: Iterable[int]) -> float:
    """Return ``1 - sum(p_c ** 2)`` over the classes present; 0.0 for no labels."""
    values = np.asarray(list(labels))
    if values.size == 0:
        return 0.0
    _classes, counts = np.unique(values, return_counts=True)
    proportions = counts / values.size
    return float(1.0 - (proportions**2).sum())


class DecisionTreeClassifier:
    """Greedy recursive partitioning with depth and minimum-split limits."""

    def __init__(
        self,
        max_depth: int = 10,
        min_samples_split: int = 2,
        *,
        name: str = "decision_tree",
    ) -> None:
        if max_depth < 0:
            raise ValueError("max_depth cannot be negative")
        if min_samples_split < 1:
            raise ValueError("min_samples_split must be at least 1")
        self.name = name
        self.max_depth = int(max_depth)
        self.min_samples_split = int(min_samples_split)
        self._root: Node | None = None
        self._n_features = 0

    @property
    def root(self) -> Node | None:
        return self._root

    def train(self, records: Sequence[Record]) -> None:
        if not records:
            return
        features = np.array([record.features for record in records], dtype=np.float64)
        labels = np.array([record.label for record in records], dtype=np.int64)
        self._n_features = features.shape[1]
        self._root = self._build(features, labels, depth=0)
        LOGGER.debug(
            "Trained %s on %d records: depth=%d leaves=%d",
            self.name,
            len(records),
            self.depth(),
            self.leaf_count(),
        )

    def predict(self, record: Record) -> int:
        node = self._root
        if node is None:
            return DEFAULT_LABEL
        if len(record.features) != self._n_features:
            raise FeatureLengthError(
                f"{self.name} expects {self._n_features} features, got {len(record.features)}"
            )
        while isinstance(node, Split):
            if record.features[node.feature_index] <= node.threshold:
                node = node.left
            else:
                node = node.right
        return node.label

    def is_trained(self) -> bool:
        return self._root is not None

    def depth(self) -> int:
        """Number of split levels; a single leaf has depth 0."""
        return _depth(self._root)

    def leaf_count(self) -> int:
        return _leaf_count(self._root)

    def _build(self, features: np.ndarray, labels: np.ndarray, depth: int) -> Node:
        if labels.size == 0:
            return Leaf(DEFAULT_LABEL, LEAF_EMPTY)
        first = int(labels[0])
        if np.all(labels == first):
            return Leaf(first, LEAF_PURE)
        if depth >= self.max_depth or labels.size < self.min_samples_split:
            return Leaf(majority_vote(labels.tolist()), LEAF_LIMIT)

        best = find_best_split(features, labels)
        if best is None:
            return Leaf(majority_vote(labels.tolist()), LEAF_NO_SPLIT)

        feature_index, threshold = best
        mask = features[:, feature_index] <= threshold
        return Split(
            feature_index=feature_index,
            threshold=threshold,
            left=self._build(features[mask], labels[mask], depth + 1),
            right=self._build(features[~mask], labels[~mask], depth + 1),
        )


def find_best_split(features: np.ndarray, labels: np.ndarray) -> tuple[int, float] | None:
    """Return the ``(feature_index, threshold)`` with the lowest weighted Gini.

    Candidate thresholds are midpoints between adjacent distinct values.
    Features and thresholds are scanned in ascending order and only a strictly
    lower impurity replaces the incumbent, so the first candidate wins ties.
    """

    total = labels.size
    best_impurity = np.inf
    best: tuple[int, float] | None = None
    if total == 0:
        return None

    for feature_index in range(features.shape[1]):
        column = features[:, feature_index]
        distinct = np.unique(column)
        for threshold in (distinct[:-1] + distinct[1:]) / 2.0:
            mask = column <= threshold
            left = labels[mask]
            right = labels[~mask]
            if left.size == 0 or right.size == 0:
                continue
            impurity = (left.size / total) * gini_impurity(left) + (
                right.size / total
            ) * gini_impurity(right)
            if impurity < best_impurity:
                best_impurity = impurity
                best = (feature_index, float(threshold))
    return best


def _depth(node: Node | None) -> int:
    if not isinstance(node, Split):
        return 0
    return 1 + max(_depth(node.left), _depth(node.right))


def _leaf_count(node: Node | None) -> int:
    if node is None:
        return 0
    if isinstance(node, Leaf):
        return 1
    return _leaf_count(node.left) + _leaf_count(node.right)


__all__ = [
    "DecisionTreeClassifier",
    "Leaf",
    "Node",
    "Split",
    "find_best_split",
    "gini_impurity",
]
