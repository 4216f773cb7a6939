# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Domain models for diagsarif."""

from diagsarif.models.diagnostic import Diagnostic, Position, RenderOptions
from diagsarif.models.sarif import (
    SarifArtifactLocation,
    SarifDriver,
    SarifLocation,
    SarifMessage,
    SarifPhysicalLocation,
    SarifRegion,
    SarifReport,
    SarifResult,
    SarifRun,
    SarifTool,
)

__all__ = [
    "Diagnostic",
    "Position",
    "RenderOptions",
    "SarifArtifactLocation",
    "SarifDriver",
    "SarifLocation",
    "SarifMessage",
    "SarifPhysicalLocation",
    "SarifRegion",
    "SarifReport",
    "SarifResult",
    "SarifRun",
    "SarifTool",
]
