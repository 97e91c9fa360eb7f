from __future__ import annotations

from pathlib import Path

import pytest

HEALTHY_ROW = "{age},1.0,3.0,130.0,{chol},0.0,0.0,{thalach},0.0,{oldpeak},1.0,0.0,3.0,0"
DISEASED_ROW = "{age},1.0,4.0,145.0,{chol},1.0,2.0,{thalach},1.0,{oldpeak},2.0,2.0,7.0,{num}"


def cleveland_lines(count: int = 60, *, missing_every: int = 0) -> list[str]:
    """Return deterministic Cleveland-format rows with a clear class boundary.

    Diseased patients have lower max heart rate and higher ST depression.
    When ``missing_every`` is set, every n-th row carries a '?' in ``ca``.
    """

    lines: list[str] = []
    for index in range(count):
        diseased = index % 2 == 1
        template = DISEASED_ROW if diseased else HEALTHY_ROW
        line = template.format(
            age=float(50 + index % 5),
            chol=float(220 + index % 7),
            thalach=float(115 + index % 15) if diseased else float(165 + index % 15),
            oldpeak=round(2.0 + (index % 5) * 0.3, 1) if diseased else round((index % 4) * 0.2, 1),
            num=1 + index % 4,
        )
        if missing_every and index % missing_every == 0:
            fields = line.split(",")
            fields[11] = "?"
            line = ",".join(fields)
        lines.append(line)
    return lines


def write_cleveland_file(path: Path, count: int = 60, *, missing_every: int = 0) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(cleveland_lines(count, missing_every=missing_every)) + "\n")
    return path


def write_config(path: Path, data_path: Path | None = None, *, epochs: int = 50) -> Path:
    lines = []
    if data_path is not None:
        lines += ["data:", f"  path: {data_path}", "  test_size: 0.25", "  seed: 7"]
    lines += [
        "models:",
        "  logistic_regression:",
        "    learning_rate: 0.01",
        f"    epochs: {epochs}",
        "  knn:",
        "    k: 3",
        "  decision_tree:",
        "    max_depth: 4",
        "    min_samples_split: 2",
        "ensemble: true",
        "logging:",
        "  level: warning",
        "",
    ]
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


@pytest.fixture()
def cleveland_file(tmp_path: Path) -> Path:
    return write_cleveland_file(tmp_path / "processed.cleveland.data", missing_every=10)
