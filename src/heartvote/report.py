"""Plain-text rendering of evaluation results."""

from __future__ import annotations

from collections.abc import Sequence

from .types import ConfusionMatrix, Evaluation

NAME_WIDTH = 25
METRIC_NAMES: tuple[str, ...] = ("accuracy", "precision", "recall", "f1")


def format_comparison_table(results: Sequence[tuple[str, Evaluation]]) -> str:
    """Markdown-style table with one row per model."""

    header = f"| {'Model':<{NAME_WIDTH}} | Accuracy | Precision | Recall   | F1-Score |"
    rule = f"|{'-' * (NAME_WIDTH + 2)}|----------|-----------|----------|----------|"
    lines = [header, rule]
    for name, evaluation in results:
        m = evaluation.metrics
        lines.append(
            f"| {name:<{NAME_WIDTH}} | {m.accuracy:<8.4f} | {m.precision:<9.4f} "
            f"| {m.recall:<8.4f} | {m.f1:<8.4f} |"
        )
    lines.append(rule)
    return "\n".join(lines)


def format_confusion_matrix(name: str, confusion: ConfusionMatrix) -> str:
    """2x2 block with actual classes as rows and predictions as columns."""

    width = max(len(str(value)) for value in (*confusion.as_tuple(), "Pred 0", "Pred 1"))
    return "\n".join(
        [
            f"Confusion matrix: {name}",
            f"{'':<10} {'Pred 0':>{width}} {'Pred 1':>{width}}",
            f"{'Actual 0':<10} {confusion.tn:>{width}} {confusion.fp:>{width}}",
            f"{'Actual 1':<10} {confusion.fn:>{width}} {confusion.tp:>{width}}",
        ]
    )


def format_metrics_chart(results: Sequence[tuple[str, Evaluation]], width: int = 40) -> str:
    """Horizontal bar chart of every metric, grouped by metric."""

    if width < 1:
        raise ValueError("width must be positive")
    label_width = max((len(name) for name, _ in results), default=0)
    lines: list[str] = []
    for metric in METRIC_NAMES:
        lines.append(f"{metric.capitalize()}:")
        for name, evaluation in results:
            value = getattr(evaluation.metrics, metric)
            filled = round(max(0.0, min(1.0, value)) * width)
            bar = "#" * filled + "." * (width - filled)
            lines.append(f"  {name:<{label_width}} {bar} {value:.4f}")
    return "\n".join(lines)


__all__ = ["format_comparison_table", "format_confusion_matrix", "format_metrics_chart"]
