"""Scoring of trained classifiers against held-out records."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .classifiers.base import Classifier
from .types import NEGATIVE, POSITIVE, ConfusionMatrix, Evaluation, Metrics, Record

LOGGER = logging.getLogger(__name__)


def confusion_matrix(classifier: Classifier, records: Iterable[Record]) -> ConfusionMatrix:
    """Predict every record once and bucket the outcomes."""

    tp = tn = fp = fn = total = 0
    for record in records:
        prediction = classifier.predict(record)
        total += 1
        if prediction == POSITIVE and record.label == POSITIVE:
            tp += 1
        elif prediction == NEGATIVE and record.label == NEGATIVE:
            tn += 1
        elif prediction == POSITIVE and record.label == NEGATIVE:
            fp += 1
        elif prediction == NEGATIVE and record.label == POSITIVE:
            fn += 1
        else:
            LOGGER.warning("%s produced out-of-range label %r", classifier.name, prediction)
    return ConfusionMatrix(tp=tp, tn=tn, fp=fp, fn=fn, total=total)


def metrics_from_confusion(confusion: ConfusionMatrix) -> Metrics:
    """Derive accuracy, precision, recall and F1; undefined ratios report 0.0."""

    accuracy = _ratio(confusion.tp + confusion.tn, confusion.total)
    precision = _ratio(confusion.tp, confusion.tp + confusion.fp)
    recall = _ratio(confusion.tp, confusion.tp + confusion.fn)
    if precision + recall > 0:
        f1 = 2.0 * precision * recall / (precision + recall)
    else:
        f1 = 0.0
    return Metrics(accuracy=accuracy, precision=precision, recall=recall, f1=f1)


def evaluate(classifier: Classifier, records: Iterable[Record]) -> Evaluation:
    confusion = confusion_matrix(classifier, records)
    metrics = metrics_from_confusion(confusion)
    LOGGER.info(
        "%s: accuracy=%.4f precision=%.4f recall=%.4f f1=%.4f",
        classifier.name,
        metrics.accuracy,
        metrics.precision,
        metrics.recall,
        metrics.f1,
    )
    return Evaluation(metrics=metrics, confusion=confusion)


def _ratio(numerator: int, denominator: int) -> float:
    if denominator <= 0:
        return 0.0
    return numerator / denominator


__all__ = ["confusion_matrix", "evaluate", "metrics_from_confusion"]
