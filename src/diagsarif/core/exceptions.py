# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for diagsarif."""


class DiagSarifError(Exception):
    """Base exception for all diagsarif errors."""


class ConfigurationError(DiagSarifError):
    """Invalid or missing configuration."""


class SeverityMappingError(DiagSarifError):
    """A severity outside the known set reached the SARIF mapper."""


class PositionError(DiagSarifError):
    """A diagnostic position could not be normalized into a region."""


class InputError(DiagSarifError):
    """Diagnostic input could not be parsed or validated."""
