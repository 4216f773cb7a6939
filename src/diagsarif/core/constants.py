# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations and fixed SARIF constants."""

from enum import StrEnum


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    HINT = "hint"
    INFORMATION = "information"


SARIF_VERSION = "2.1.0"
SARIF_SCHEMA = (
    "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/master/Schemata/"
    f"sarif-schema-{SARIF_VERSION}.json"
)

# Driver name of the synthetic run emitted when there are no diagnostics.
DEFAULT_EMPTY_RUN_TOOL_NAME = "Elixir"
