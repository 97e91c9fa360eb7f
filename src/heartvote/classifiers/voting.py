"""Majority voting shared by the ensemble, k-NN and decision tree leaves."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence

from ..types import DEFAULT_LABEL, Record
from .base import Classifier

LOGGER = logging.getLogger(__name__)


def majority_vote(labels: Iterable[int]) -> int:
    """Return the most frequent label.

    Ties go to the tied label that occurs first in ``labels``; an empty input
    yields the default label.
    """

    counts = Counter(labels)
    if not counts:
        return DEFAULT_LABEL
    # Counter keeps insertion order and most_common() sorts stably.
    label, _count = counts.most_common(1)[0]
    return int(label)


class VotingClassifier:
    """Hard-voting ensemble over an ordered collection of classifiers."""

    def __init__(self, members: Iterable[Classifier], *, name: str = "voting") -> None:
        self.name = name
        self._members: tuple[Classifier, ...] = tuple(members)
        if not self._members:
            raise ValueError("VotingClassifier requires at least one member.")

    @property
    def members(self) -> tuple[Classifier, ...]:
        return self._members

    def train(self, records: Sequence[Record]) -> None:
        if not records:
            return
        for member in self._members:
            member.train(records)
        LOGGER.debug(
            "Trained %s (%d members) on %d records",
            self.name,
            len(self._members),
            len(records),
        )

    def votes(self, record: Record) -> list[int]:
        return [member.predict(record) for member in self._members]

    def predict(self, record: Record) -> int:
        return majority_vote(self.votes(record))

    def is_trained(self) -> bool:
        return all(member.is_trained() for member in self._members)


__all__ = ["VotingClassifier", "majority_vote"]
