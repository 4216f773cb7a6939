# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Load compiler diagnostics from JSON or JSON Lines.

The build pipeline that discovers diagnostics is external; it hands them over
either as a JSON array of objects or as one JSON object per line::

    {"compiler_name": "Elixir", "severity": "warning", "message": "unused var",
     "file": "/proj/lib/x.ex", "position": [10, 3]}
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from diagsarif.core.exceptions import InputError
from diagsarif.models.diagnostic import Diagnostic

logger = logging.getLogger(__name__)


def _decode_records(text: str) -> list[Any]:
    stripped = text.strip()
    if not stripped:
        return []

    if stripped.startswith("["):
        try:
            records = json.loads(stripped)
        except json.JSONDecodeError as exc:
            raise InputError(f"Invalid diagnostics JSON: {exc}") from exc
        return records

    records = []
    for lineno, line in enumerate(stripped.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            records.append(json.loads(line))
        except json.JSONDecodeError as exc:
            raise InputError(f"Invalid diagnostics JSON on line {lineno}: {exc}") from exc
    return records


def parse_diagnostics(data: str | bytes) -> list[Diagnostic]:
    """Parse and validate diagnostics.

    Raises:
        InputError: On malformed JSON or a record that is not a valid diagnostic.
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="replace")

    diagnostics: list[Diagnostic] = []
    for i, record in enumerate(_decode_records(data)):
        if not isinstance(record, dict):
            raise InputError(f"Diagnostic #{i} must be a JSON object, got {type(record).__name__}")
        try:
            diagnostics.append(Diagnostic.model_validate(record))
        except ValidationError as exc:
            raise InputError(f"Diagnostic #{i} is invalid: {exc}") from exc

    logger.debug("Parsed %d diagnostic(s)", len(diagnostics))
    return diagnostics


def load_diagnostics(path: Path | None = None) -> list[Diagnostic]:
    """Read diagnostics from ``path``, or from stdin when ``path`` is None or ``-``."""
    if path is None or str(path) == "-":
        return parse_diagnostics(sys.stdin.buffer.read())
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise InputError(f"Cannot read diagnostics from {path}: {exc}") from exc
    return parse_diagnostics(data)
