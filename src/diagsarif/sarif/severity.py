# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Diagnostic severity to SARIF ``kind`` and ``level`` mapping."""

from __future__ import annotations

from diagsarif.core.constants import Severity
from diagsarif.core.exceptions import SeverityMappingError

SEVERITY_TO_SARIF_KIND: dict[Severity, str] = {
    Severity.ERROR: "fail",
    Severity.WARNING: "fail",
    Severity.HINT: "fail",
    Severity.INFORMATION: "informational",
}

SEVERITY_TO_SARIF_LEVEL: dict[Severity, str] = {
    Severity.ERROR: "error",
    Severity.WARNING: "warning",
    Severity.HINT: "note",
    Severity.INFORMATION: "none",
}

for _table in (SEVERITY_TO_SARIF_KIND, SEVERITY_TO_SARIF_LEVEL):
    _missing = set(Severity) - set(_table)
    if _missing:
        raise RuntimeError(f"SARIF severity table is missing {sorted(_missing)}")


def _lookup(table: dict[Severity, str], severity: object) -> str:
    if not isinstance(severity, Severity):
        msg = f"Unknown severity: {severity!r}. Expected one of: {', '.join(Severity)}"
        raise SeverityMappingError(msg)
    return table[severity]


def sarif_kind(severity: Severity) -> str:
    """Return the SARIF result ``kind`` for a diagnostic severity."""
    return _lookup(SEVERITY_TO_SARIF_KIND, severity)


def sarif_level(severity: Severity) -> str:
    """Return the SARIF result ``level`` for a diagnostic severity."""
    return _lookup(SEVERITY_TO_SARIF_LEVEL, severity)


def classify(severity: Severity) -> tuple[str, str]:
    """Return ``(kind, level)`` for a diagnostic severity.

    Raises:
        SeverityMappingError: If ``severity`` is not a :class:`Severity` member.
    """
    return sarif_kind(severity), sarif_level(severity)
