# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Compiler diagnostic input models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from diagsarif.core.constants import DEFAULT_EMPTY_RUN_TOOL_NAME, Severity

# Strict so that strings, bools and floats are rejected rather than coerced.
Position = (
    StrictInt
    | tuple[StrictInt, StrictInt]
    | tuple[StrictInt, StrictInt, StrictInt, StrictInt]
    | None
)


class Diagnostic(BaseModel):
    """A single compiler or build finding."""

    model_config = ConfigDict(frozen=True)

    compiler_name: str = Field(description="Producer identifier, e.g. Elixir or ExUnit")
    message: str | bytes
    severity: Severity
    file: str = Field(description="Absolute path of the source file")
    position: Position = Field(
        default=None,
        description="Absent, a line, a (line, column) pair or a full (l, c, l, c) range",
    )


class RenderOptions(BaseModel):
    """Options for a single SARIF rendering call."""

    model_config = ConfigDict(extra="forbid")

    root: str | None = None
    pretty: bool = False
    empty_run_tool_name: str = DEFAULT_EMPTY_RUN_TOOL_NAME
