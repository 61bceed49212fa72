"""Command line utilities for the plant finder."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

__all__ = ["emit_json"]


def emit_json(payload: Any, output: Path | None = None) -> None:
    """Print ``payload`` as JSON or write it to ``output``."""
    text = json.dumps(payload, indent=2)
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding="utf-8")
    else:
        print(text)
