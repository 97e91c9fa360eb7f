"""Classifier protocol definitions."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from ..types import Record


@runtime_checkable
class Classifier(Protocol):
    """Common interface shared by all classifiers and the voting ensemble."""

    name: str

    def train(self, records: Sequence[Record]) -> None:
        """Replace any prior state with a model fitted to ``records``.

        An empty collection is a no-op.
        """

    def predict(self, record: Record) -> int:
        """Return the predicted label, or 0 when the classifier is untrained."""

    def is_trained(self) -> bool:
        """Return True once ``train`` has completed on a non-empty collection."""


__all__ = ["Classifier"]
