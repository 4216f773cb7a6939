# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Diagnostic to SARIF 2.1.0 conversion."""

from diagsarif.sarif.builder import build_result, build_run, build_runs, group_by_compiler
from diagsarif.sarif.document import build_report, encode_report, render
from diagsarif.sarif.paths import relative_uri
from diagsarif.sarif.position import normalize_position
from diagsarif.sarif.severity import classify, sarif_kind, sarif_level

__all__ = [
    "build_report",
    "build_result",
    "build_run",
    "build_runs",
    "classify",
    "encode_report",
    "group_by_compiler",
    "normalize_position",
    "relative_uri",
    "render",
    "sarif_kind",
    "sarif_level",
]
