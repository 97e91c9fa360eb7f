from __future__ import annotations

import logging
import math

import pytest

from heartvote.classifiers.naive_bayes import GaussianNaiveBayesClassifier
from heartvote.types import Record


def _two_clusters() -> list[Record]:
    return [
        Record.of([1.0, 10.0], 0),
        Record.of([1.5, 11.0], 0),
        Record.of([0.5, 9.0], 0),
        Record.of([8.0, 2.0], 1),
        Record.of([9.0, 1.0], 1),
        Record.of([8.5, 3.0], 1),
        Record.of([9.5, 2.5], 1),
    ]


def test_untrained_predicts_zero() -> None:
    classifier = GaussianNaiveBayesClassifier()
    assert classifier.is_trained() is False
    assert classifier.predict(Record.of([1.0, 2.0], 1)) == 0


def test_priors_sum_to_one() -> None:
    classifier = GaussianNaiveBayesClassifier()
    classifier.train(_two_clusters())

    priors = classifier.priors()
    assert set(priors) == {0, 1}
    assert priors[0] == pytest.approx(3 / 7)
    assert sum(priors.values()) == pytest.approx(1.0)


def test_predicts_nearest_cluster() -> None:
    classifier = GaussianNaiveBayesClassifier()
    classifier.train(_two_clusters())

    assert classifier.predict(Record.of([1.2, 10.5], 1)) == 0
    assert classifier.predict(Record.of([8.8, 2.2], 0)) == 1


def test_uses_sample_variance_with_epsilon() -> None:
    classifier = GaussianNaiveBayesClassifier()
    classifier.train([Record.of([1.0], 0), Record.of([3.0], 0), Record.of([5.0], 1)])

    stats = classifier.class_stats(0)
    assert stats.mean.tolist() == pytest.approx([2.0])
    assert stats.variance.tolist() == pytest.approx([2.0 + 1e-9])
    # single-record class keeps only the epsilon
    assert classifier.class_stats(1).variance[0] == pytest.approx(1e-9)


def test_constant_feature_does_not_break_prediction() -> None:
    classifier = GaussianNaiveBayesClassifier()
    classifier.train(
        [
            Record.of([1.0, 4.0], 0),
            Record.of([1.0, 5.0], 0),
            Record.of([1.0, 20.0], 1),
            Record.of([1.0, 21.0], 1),
        ]
    )
    scores = classifier.log_posteriors(Record.of([1.0, 4.5], 0))
    assert all(math.isfinite(score) for score in scores.values())
    assert classifier.predict(Record.of([1.0, 4.5], 1)) == 0


def test_single_class_training_always_predicts_that_class() -> None:
    classifier = GaussianNaiveBayesClassifier()
    classifier.train([Record.of([1.0], 1), Record.of([2.0], 1)])

    assert classifier.priors() == pytest.approx({1: 1.0})
    assert classifier.predict(Record.of([-50.0], 0)) == 1
    assert classifier.predict(Record.of([50.0], 0)) == 1


def test_unknown_class_stats_raise() -> None:
    classifier = GaussianNaiveBayesClassifier()
    classifier.train([Record.of([1.0], 1), Record.of([2.0], 1)])
    with pytest.raises(KeyError):
        classifier.class_stats(0)


def test_empty_training_is_noop() -> None:
    classifier = GaussianNaiveBayesClassifier()
    classifier.train([])
    assert classifier.is_trained() is False
    classifier.train(_two_clusters())
    classifier.train([])
    assert set(classifier.priors()) == {0, 1}


def test_retraining_replaces_classes() -> None:
    classifier = GaussianNaiveBayesClassifier()
    classifier.train(_two_clusters())
    classifier.train([Record.of([1.0], 0), Record.of([2.0], 0)])
    assert set(classifier.priors()) == {0}


def test_exact_posterior_tie_resolves_to_lower_label() -> None:
    classifier = GaussianNaiveBayesClassifier()
    classifier.train(
        [
            Record.of([0.0], 0),
            Record.of([2.0], 0),
            Record.of([4.0], 1),
            Record.of([6.0], 1),
        ]
    )
    query = Record.of([3.0], 1)

    scores = classifier.log_posteriors(query)
    assert scores[0] == pytest.approx(scores[1])
    assert classifier.predict(query) == 0


def test_training_logs_record_and_class_counts(caplog: pytest.LogCaptureFixture) -> None:
    classifier = GaussianNaiveBayesClassifier()
    with caplog.at_level(logging.DEBUG, logger="heartvote.classifiers.naive_bayes"):
        classifier.train(_two_clusters())
    assert "Trained naive_bayes on 7 records across 2 classes" in caplog.text
