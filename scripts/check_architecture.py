#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/mapping_loader"


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    for name in ("schemas.py", "mappings.py", "descriptors.py", "converters.py"):
        _assert_no_imports(
            PACKAGE / name,
            [
                "import typer",
                "from typer",
                "mapping_loader.application",
                "mapping_loader.adapters",
                "mapping_loader.cli",
            ],
        )

    for path in (PACKAGE / "application").glob("*.py"):
        _assert_no_imports(path, ["import typer", "from typer", "mapping_loader.cli"])

    for path in (PACKAGE / "adapters").glob("*.py"):
        _assert_no_imports(path, ["import typer", "mapping_loader.application"])

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
