# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""diagsarif - Compiler diagnostics to SARIF 2.1.0 converter."""

__version__ = "0.1.0"

from diagsarif.core.constants import Severity
from diagsarif.models.diagnostic import Diagnostic, RenderOptions
from diagsarif.sarif.document import build_report, render

__all__ = [
    "Diagnostic",
    "RenderOptions",
    "Severity",
    "__version__",
    "build_report",
    "render",
]
