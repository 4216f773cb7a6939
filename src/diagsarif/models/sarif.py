# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF 2.1.0 output models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from diagsarif.core.constants import SARIF_SCHEMA, SARIF_VERSION


class SarifMessage(BaseModel):
    text: str


class SarifArtifactLocation(BaseModel):
    uri: str


class SarifRegion(BaseModel):
    startLine: int = Field(ge=1)
    startColumn: int = Field(ge=1)
    endLine: int = Field(ge=1)
    endColumn: int = Field(ge=1)


class SarifPhysicalLocation(BaseModel):
    artifactLocation: SarifArtifactLocation
    region: SarifRegion


class SarifLocation(BaseModel):
    physicalLocation: SarifPhysicalLocation


class SarifDriver(BaseModel):
    name: str
    # Rule metadata is never populated.
    rules: list[dict[str, object]] = Field(default_factory=list)


class SarifTool(BaseModel):
    driver: SarifDriver


class SarifResult(BaseModel):
    message: SarifMessage
    kind: str
    level: str
    locations: list[SarifLocation] = Field(min_length=1, max_length=1)


class SarifRun(BaseModel):
    tool: SarifTool
    results: list[SarifResult] = Field(default_factory=list)


class SarifReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    version: str = SARIF_VERSION
    schema_uri: str = Field(default=SARIF_SCHEMA, alias="$schema")
    runs: list[SarifRun] = Field(min_length=1)
