# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Per-diagnostic SARIF results and per-tool runs."""

from __future__ import annotations

from collections.abc import Iterable

from diagsarif.models.diagnostic import Diagnostic
from diagsarif.models.sarif import (
    SarifArtifactLocation,
    SarifDriver,
    SarifLocation,
    SarifMessage,
    SarifPhysicalLocation,
    SarifRegion,
    SarifResult,
    SarifRun,
    SarifTool,
)
from diagsarif.sarif.paths import relative_uri
from diagsarif.sarif.position import normalize_position
from diagsarif.sarif.severity import classify


def message_text(message: str | bytes) -> str:
    """Return ``message`` as valid Unicode, replacing anything undecodable with U+FFFD."""
    if isinstance(message, bytes):
        return message.decode("utf-8", errors="replace")
    # Re-pairs valid surrogate pairs and replaces lone surrogates.
    return message.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


def build_location(diagnostic: Diagnostic, root: str) -> SarifLocation:
    start_line, start_col, end_line, end_col = normalize_position(diagnostic.position)
    return SarifLocation(
        physicalLocation=SarifPhysicalLocation(
            artifactLocation=SarifArtifactLocation(uri=relative_uri(diagnostic.file, root)),
            region=SarifRegion(
                startLine=start_line,
                startColumn=start_col,
                endLine=end_line,
                endColumn=end_col,
            ),
        )
    )


def build_result(diagnostic: Diagnostic, root: str) -> SarifResult:
    """Map one diagnostic to one SARIF result with exactly one location."""
    kind, level = classify(diagnostic.severity)
    return SarifResult(
        message=SarifMessage(text=message_text(diagnostic.message)),
        kind=kind,
        level=level,
        locations=[build_location(diagnostic, root)],
    )


def group_by_compiler(
    diagnostics: Iterable[Diagnostic],
) -> list[tuple[str, list[Diagnostic]]]:
    """Group diagnostics by ``compiler_name`` in a single pass.

    Groups appear in first-occurrence order and each group keeps the input
    order of its diagnostics.
    """
    groups: list[tuple[str, list[Diagnostic]]] = []
    index: dict[str, list[Diagnostic]] = {}
    for diagnostic in diagnostics:
        members = index.get(diagnostic.compiler_name)
        if members is None:
            members = []
            index[diagnostic.compiler_name] = members
            groups.append((diagnostic.compiler_name, members))
        members.append(diagnostic)
    return groups


def build_run(name: str, diagnostics: Iterable[Diagnostic], root: str) -> SarifRun:
    return SarifRun(
        tool=SarifTool(driver=SarifDriver(name=name)),
        results=[build_result(d, root) for d in diagnostics],
    )


def build_runs(diagnostics: Iterable[Diagnostic], root: str) -> list[SarifRun]:
    """Build one run per producing tool."""
    return [build_run(name, members, root) for name, members in group_by_compiler(diagnostics)]
