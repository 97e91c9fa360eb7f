"""Ingestion of the UCI Cleveland heart-disease data file."""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from .types import NEGATIVE, POSITIVE, Record

LOGGER = logging.getLogger(__name__)

COLUMNS: tuple[str, ...] = (
    "age",
    "sex",
    "cp",
    "trestbps",
    "chol",
    "fbs",
    "restecg",
    "thalach",
    "exang",
    "oldpeak",
    "slope",
    "ca",
    "thal",
    "num",
)
FEATURE_COLUMNS: tuple[str, ...] = COLUMNS[:-1]
MISSING_MARKER = "?"
# Only these two categorical columns carry missing codes in the source data.
NULLABLE_COLUMNS: frozenset[str] = frozenset({"ca", "thal"})


class DatasetError(RuntimeError):
    """Raised when the data file cannot be read or parsed."""


def load_records(path: Path | str) -> list[Record]:
    """Read, clean and binarise every row of a Cleveland-format file."""

    file_path = Path(path).expanduser()
    if not file_path.is_file():
        raise DatasetError(f"Data file does not exist: {file_path}")

    with file_path.open("r", encoding="utf-8", newline="") as handle:
        records = list(parse_rows(csv.reader(handle), source=str(file_path)))

    LOGGER.info("Loaded %d records from %s", len(records), file_path)
    return records


def parse_rows(rows: Iterable[list[str]], *, source: str = "<rows>") -> Iterator[Record]:
    """Yield a Record per usable row, skipping rows with missing codes."""

    skipped = 0
    for line_number, row in enumerate(rows, start=1):
        if not row or all(not cell.strip() for cell in row):
            continue
        if len(row) != len(COLUMNS):
            raise DatasetError(
                f"{source}:{line_number}: expected {len(COLUMNS)} columns, got {len(row)}"
            )
        record = _convert(row, source=source, line_number=line_number)
        if record is None:
            skipped += 1
            LOGGER.debug("%s:%d: skipping row with missing values", source, line_number)
            continue
        yield record
    if skipped:
        LOGGER.info("Skipped %d row(s) with missing values in %s", skipped, source)


def _convert(row: list[str], *, source: str, line_number: int) -> Record | None:
    values: dict[str, float] = {}
    for name, cell in zip(COLUMNS, row):
        text = cell.strip()
        if text == MISSING_MARKER and name in NULLABLE_COLUMNS:
            return None
        try:
            values[name] = float(text)
        except ValueError as exc:
            raise DatasetError(
                f"{source}:{line_number}: column '{name}' is not numeric: {text!r}"
            ) from exc

    label = POSITIVE if values["num"] > 0 else NEGATIVE
    return Record(features=tuple(values[name] for name in FEATURE_COLUMNS), label=label)


__all__ = ["COLUMNS", "DatasetError", "FEATURE_COLUMNS", "load_records", "parse_rows"]
