from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from heartvote.cli import app
from tests.integration.conftest import write_cleveland_file, write_config

runner = CliRunner()


def test_run_prints_comparison(tmp_path: Path) -> None:
    data = write_cleveland_file(tmp_path / "cleveland.data", count=40)
    config_path = write_config(tmp_path / "config.yaml", data, epochs=5)

    result = runner.invoke(app, ["-c", str(config_path), "run"])

    assert result.exit_code == 0, result.output
    assert "| Model" in result.stdout
    assert "Voting Classifier" in result.stdout
    assert "Confusion matrix: Decision Tree" in result.stdout
    assert "Train records: 30" in result.stdout


def test_run_accepts_data_argument_and_overrides(tmp_path: Path) -> None:
    data = write_cleveland_file(tmp_path / "cleveland.data", count=40)
    config_path = write_config(tmp_path / "config.yaml", epochs=5)

    result = runner.invoke(
        app,
        [
            "-c",
            str(config_path),
            "run",
            str(data),
            "--test-size",
            "0.5",
            "--seed",
            "1",
            "--standardize",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Test records: 20" in result.stdout


def test_run_without_data_path_fails(tmp_path: Path) -> None:
    config_path = write_config(tmp_path / "config.yaml", epochs=5)
    result = runner.invoke(app, ["-c", str(config_path), "run"])
    assert result.exit_code == 2


def test_run_with_invalid_test_size_fails(tmp_path: Path) -> None:
    data = write_cleveland_file(tmp_path / "cleveland.data", count=10)
    config_path = write_config(tmp_path / "config.yaml", epochs=5)
    result = runner.invoke(app, ["-c", str(config_path), "run", str(data), "--test-size", "1.5"])
    assert result.exit_code == 2


def test_run_with_missing_data_file_fails(tmp_path: Path) -> None:
    config_path = write_config(tmp_path / "config.yaml", epochs=5)
    result = runner.invoke(app, ["-c", str(config_path), "run", str(tmp_path / "absent.data")])
    assert result.exit_code == 1


def test_missing_config_file_exits_with_config_error(tmp_path: Path) -> None:
    result = runner.invoke(app, ["-c", str(tmp_path / "nope.yaml"), "describe", "x.data"])
    assert result.exit_code == 2


def test_describe_summarises_dataset(tmp_path: Path) -> None:
    data = write_cleveland_file(tmp_path / "cleveland.data", count=20, missing_every=5)
    config_path = write_config(tmp_path / "config.yaml")

    result = runner.invoke(app, ["-c", str(config_path), "describe", str(data)])

    assert result.exit_code == 0, result.output
    assert "Records: 16" in result.stdout
    assert "Features: 13" in result.stdout
    assert "  0: 8" in result.stdout
    assert "  1: 8" in result.stdout
