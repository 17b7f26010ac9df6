"""IO helpers for tree documents and rendered HTML output."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import yaml


def read_yaml(path: Path) -> Any:
    """Load a YAML document; an empty file reads as an empty mapping."""
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    return {} if data is None else data


def write_html(path: Path, html_text: str) -> Path:
    """Write rendered HTML with a trailing newline, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html_text + "\n", encoding="utf-8")
    return path


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = ["read_yaml", "warn", "write_html"]
