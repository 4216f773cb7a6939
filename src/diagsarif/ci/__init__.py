# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CI/CD integration module for diagsarif."""

from diagsarif.ci.exit_codes import CIExitCode, diagnostics_to_exit_code

__all__ = ["CIExitCode", "diagnostics_to_exit_code"]
