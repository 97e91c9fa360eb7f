from __future__ import annotations

import dataclasses

import pytest

from heartvote.classifiers import VotingClassifier
from heartvote.config import Config, DataConfig, ModelsConfig, NaiveBayesConfig
from heartvote.pipeline import (
    DECISION_TREE,
    KNN,
    LOGISTIC_REGRESSION,
    NAIVE_BAYES,
    VOTING,
    build_models,
    build_registry,
    run_experiment,
)
from heartvote.types import Record


def _records(count: int = 40) -> list[Record]:
    # positives sit well clear of negatives on the first feature
    half = count // 2
    return [
        Record.of([float(i if i < half else i + 100), float((i * 7) % 5)], 1 if i >= half else 0)
        for i in range(count)
    ]


def _fast_config(**data_overrides) -> Config:
    config = Config(data=DataConfig(test_size=0.25, seed=5, **data_overrides))
    models = dataclasses.replace(
        config.models,
        logistic_regression=dataclasses.replace(config.models.logistic_regression, epochs=20),
        knn=dataclasses.replace(config.models.knn, k=3),
    )
    return dataclasses.replace(config, models=models)


def test_build_registry_default_lineup() -> None:
    registry = build_registry(ModelsConfig())

    assert registry.names() == [LOGISTIC_REGRESSION, NAIVE_BAYES, KNN, DECISION_TREE, VOTING]
    ensemble = registry.get(VOTING)
    assert isinstance(ensemble, VotingClassifier)
    assert [member.name for member in ensemble.members] == registry.names()[:4]
    standalone = {id(classifier) for _, classifier in registry.entries()}
    assert not any(id(member) in standalone for member in ensemble.members)


def test_disabled_models_are_left_out() -> None:
    models = dataclasses.replace(ModelsConfig(), naive_bayes=NaiveBayesConfig(enabled=False))
    expected = [LOGISTIC_REGRESSION, KNN, DECISION_TREE]
    assert [model.name for model in build_models(models)] == expected
    assert build_registry(models, ensemble=False).names() == expected


def test_run_experiment_evaluates_every_model() -> None:
    result = run_experiment(_fast_config(), _records())

    assert result.train_size + result.test_size == 40
    assert result.test_size == 10
    assert [name for name, _ in result.evaluations] == [
        LOGISTIC_REGRESSION,
        NAIVE_BAYES,
        KNN,
        DECISION_TREE,
        VOTING,
    ]
    for _name, evaluation in result.evaluations:
        assert evaluation.confusion.total == result.test_size
        assert 0.0 <= evaluation.metrics.accuracy <= 1.0
    assert result.get(DECISION_TREE).metrics.accuracy == pytest.approx(1.0)


def test_run_experiment_with_standardisation() -> None:
    result = run_experiment(_fast_config(standardize=True), _records())
    assert result.get(KNN).confusion.total == result.test_size


def test_run_experiment_requires_data() -> None:
    with pytest.raises(ValueError):
        run_experiment(Config())


def test_get_unknown_evaluation() -> None:
    result = run_experiment(_fast_config(), _records())
    with pytest.raises(KeyError):
        result.get("SVM")


def test_run_experiment_trains_lineup_through_registry(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("INFO", logger="heartvote.classifiers.registry"):
        run_experiment(_fast_config(), _records())
    trained = [r.getMessage() for r in caplog.records if r.name == "heartvote.classifiers.registry"]
    lineup = (LOGISTIC_REGRESSION, NAIVE_BAYES, KNN, DECISION_TREE, VOTING)
    assert trained == [f"Training {name}" for name in lineup]
