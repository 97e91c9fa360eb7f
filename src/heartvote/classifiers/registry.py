"""Classifier registry utilities."""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Sequence

from ..types import Record
from .base import Classifier

LOGGER = logging.getLogger(__name__)


class ClassifierRegistry:
    """Ordered, uniquely named lineup of classifiers compared side by side."""

    def __init__(self) -> None:
        self._entries: OrderedDict[str, Classifier] = OrderedDict()

    def register(self, classifier: Classifier) -> None:
        if classifier.name in self._entries:
            raise ValueError(f"Classifier '{classifier.name}' is already registered.")
        self._entries[classifier.name] = classifier

    def get(self, name: str) -> Classifier:
        try:
            return self._entries[name]
        except KeyError as exc:
            raise KeyError(f"Classifier '{name}' is not registered.") from exc

    def entries(self) -> list[tuple[str, Classifier]]:
        return list(self._entries.items())

    def names(self) -> list[str]:
        return list(self._entries)

    def train_all(self, records: Sequence[Record]) -> None:
        for name, classifier in self._entries.items():
            LOGGER.info("Training %s", name)
            classifier.train(records)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["ClassifierRegistry"]
