"""Classifier implementations and infrastructure."""

from .base import Classifier
from .decision_tree import DecisionTreeClassifier
from .knn import KNearestNeighborsClassifier
from .logistic import LogisticRegressionClassifier
from .naive_bayes import GaussianNaiveBayesClassifier
from .registry import ClassifierRegistry
from .voting import VotingClassifier, majority_vote

__all__ = [
    "Classifier",
    "ClassifierRegistry",
    "DecisionTreeClassifier",
    "GaussianNaiveBayesClassifier",
    "KNearestNeighborsClassifier",
    "LogisticRegressionClassifier",
    "VotingClassifier",
    "majority_vote",
]
