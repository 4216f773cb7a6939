# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF document assembly and encoding."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from diagsarif.models.diagnostic import Diagnostic, RenderOptions
from diagsarif.models.sarif import SarifDriver, SarifReport, SarifRun, SarifTool
from diagsarif.sarif.builder import build_runs
from diagsarif.sarif.paths import check_root

logger = logging.getLogger(__name__)


def empty_run(tool_name: str) -> SarifRun:
    """A run with no results, for consumers that reject an empty ``runs`` list."""
    return SarifRun(tool=SarifTool(driver=SarifDriver(name=tool_name)), results=[])


def build_report(diagnostics: Sequence[Diagnostic], options: RenderOptions) -> SarifReport:
    """Assemble the SARIF report for ``diagnostics``.

    Raises:
        ConfigurationError: If ``options.root`` is missing or not absolute.
        SeverityMappingError: If a diagnostic carries an unknown severity.
        PositionError: If a diagnostic position cannot be normalized.
    """
    root = check_root(options.root)

    if not diagnostics:
        logger.debug("No diagnostics, emitting placeholder run %r", options.empty_run_tool_name)
        return SarifReport(runs=[empty_run(options.empty_run_tool_name)])

    runs = build_runs(diagnostics, root)
    logger.debug("Built %d run(s) from %d diagnostic(s)", len(runs), len(diagnostics))
    return SarifReport(runs=runs)


def encode_report(report: SarifReport, *, pretty: bool = False) -> bytes:
    return report.model_dump_json(by_alias=True, indent=2 if pretty else None).encode("utf-8")


def render(
    diagnostics: Sequence[Diagnostic],
    options: RenderOptions | None = None,
    **overrides: object,
) -> bytes:
    """Render ``diagnostics`` as a UTF-8 encoded SARIF 2.1.0 document.

    ``overrides`` are applied on top of ``options``, so
    ``render(diags, root="/proj", pretty=True)`` works without building a
    :class:`RenderOptions` by hand.
    """
    options = options or RenderOptions()
    if overrides:
        options = RenderOptions.model_validate({**options.model_dump(), **overrides})
    report = build_report(diagnostics, options)
    return encode_report(report, pretty=options.pretty)
