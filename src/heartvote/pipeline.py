"""Train-and-compare workflow over the configured classifier lineup."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .classifiers import (
    Classifier,
    ClassifierRegistry,
    DecisionTreeClassifier,
    GaussianNaiveBayesClassifier,
    KNearestNeighborsClassifier,
    LogisticRegressionClassifier,
    VotingClassifier,
)
from .config import Config, ModelsConfig
from .evaluation import evaluate
from .loader import load_records
from .preprocessing import standardize, train_test_split
from .types import Evaluation, Record

LOGGER = logging.getLogger(__name__)

LOGISTIC_REGRESSION = "Logistic Regression"
NAIVE_BAYES = "Gaussian Naive Bayes"
KNN = "KNN"
DECISION_TREE = "Decision Tree"
VOTING = "Voting Classifier"


@dataclass(frozen=True)
class ExperimentResult:
    """Outcome of one train/evaluate run."""

    train_size: int
    test_size: int
    evaluations: list[tuple[str, Evaluation]]

    def get(self, name: str) -> Evaluation:
        for entry_name, evaluation in self.evaluations:
            if entry_name == name:
                return evaluation
        raise KeyError(f"No evaluation recorded for '{name}'.")


def build_models(models: ModelsConfig) -> list[Classifier]:
    """Fresh, untrained instances of every enabled model, in lineup order."""

    lineup: list[Classifier] = []
    if models.logistic_regression.enabled:
        lineup.append(
            LogisticRegressionClassifier(
                models.logistic_regression.learning_rate,
                models.logistic_regression.epochs,
                name=LOGISTIC_REGRESSION,
            )
        )
    if models.naive_bayes.enabled:
        lineup.append(GaussianNaiveBayesClassifier(name=NAIVE_BAYES))
    if models.knn.enabled:
        lineup.append(KNearestNeighborsClassifier(models.knn.k, name=KNN))
    if models.decision_tree.enabled:
        lineup.append(
            DecisionTreeClassifier(
                models.decision_tree.max_depth,
                models.decision_tree.min_samples_split,
                name=DECISION_TREE,
            )
        )
    return lineup


def build_registry(models: ModelsConfig, *, ensemble: bool = True) -> ClassifierRegistry:
    """Register each enabled model plus an ensemble over independent copies."""

    registry = ClassifierRegistry()
    for classifier in build_models(models):
        registry.register(classifier)
    if ensemble:
        registry.register(VotingClassifier(build_models(models), name=VOTING))
    return registry


def run_experiment(config: Config, records: Sequence[Record] | None = None) -> ExperimentResult:
    """Split, train every registered classifier and evaluate it on the test split."""

    if records is None:
        if config.data.path is None:
            raise ValueError("No data path configured and no records supplied.")
        records = load_records(config.data.path)

    train, test = train_test_split(records, config.data.test_size, seed=config.data.seed)
    if config.data.standardize:
        train, test = standardize(train, test)
        LOGGER.info("Standardised features using training statistics")

    registry = build_registry(config.models, ensemble=config.ensemble)
    LOGGER.info("Training %d classifier(s) on %d records", len(registry), len(train))
    registry.train_all(train)
    evaluations = [(name, evaluate(classifier, test)) for name, classifier in registry.entries()]

    return ExperimentResult(train_size=len(train), test_size=len(test), evaluations=evaluations)


__all__ = [
    "DECISION_TREE",
    "ExperimentResult",
    "KNN",
    "LOGISTIC_REGRESSION",
    "NAIVE_BAYES",
    "VOTING",
    "build_models",
    "build_registry",
    "run_experiment",
]
