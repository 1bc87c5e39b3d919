"""Reading page/settings documents and writing rendered output."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import yaml

JSON_SUFFIXES = frozenset({".json"})


def read_document(path: Path) -> Any:
    """Parse ``path`` as JSON when its suffix says so, otherwise as YAML.

    YAML is a superset of JSON, but JSON files go through :mod:`json` so that
    syntax errors are reported the way JSON tooling reports them.
    """
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in JSON_SUFFIXES:
        return json.loads(text)
    return yaml.safe_load(text)


def write_text(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = ["read_document", "warn", "write_text"]
