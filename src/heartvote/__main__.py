"""heartvote module entrypoint."""

from __future__ import annotations

from .cli import app


def main() -> None:
    """Entry point used by `python -m heartvote` and the console script."""
    app(prog_name="heartvote")


if __name__ == "__main__":  # pragma: no cover - module execution guard
    main()
