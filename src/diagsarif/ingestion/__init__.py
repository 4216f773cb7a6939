# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Diagnostic ingestion from the external build pipeline."""

from diagsarif.ingestion.loader import load_diagnostics, parse_diagnostics

__all__ = ["load_diagnostics", "parse_diagnostics"]
