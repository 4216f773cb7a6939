# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Standardized exit codes for CI/CD pipeline integrations.

Exit codes:
    0 = CLEAN, no errors or warnings
    1 = ERRORS, at least one error diagnostic
    2 = CONVERSION_ERROR, the SARIF document could not be produced
    3 = WARNINGS, warnings but no errors
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

from diagsarif.core.constants import Severity
from diagsarif.models.diagnostic import Diagnostic


class CIExitCode(IntEnum):
    """Exit codes used by diagsarif in CI mode."""

    CLEAN = 0
    ERRORS = 1
    CONVERSION_ERROR = 2
    WARNINGS = 3


def diagnostics_to_exit_code(diagnostics: Iterable[Diagnostic]) -> CIExitCode:
    """Return the CI exit code for the worst severity among ``diagnostics``.

    Hints and informational diagnostics never fail a build.
    """
    severities = {d.severity for d in diagnostics}
    if Severity.ERROR in severities:
        return CIExitCode.ERRORS
    if Severity.WARNING in severities:
        return CIExitCode.WARNINGS
    return CIExitCode.CLEAN
