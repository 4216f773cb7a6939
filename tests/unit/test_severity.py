# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for the severity to SARIF kind/level mapping."""

from __future__ import annotations

import pytest

from diagsarif.core.constants import Severity
from diagsarif.core.exceptions import SeverityMappingError
from diagsarif.sarif.severity import (
    SEVERITY_TO_SARIF_KIND,
    SEVERITY_TO_SARIF_LEVEL,
    classify,
    sarif_kind,
    sarif_level,
)


class TestClassify:
    """Every severity maps to the documented (kind, level) pair."""

    @pytest.mark.parametrize(
        ("severity", "expected"),
        [
            (Severity.ERROR, ("fail", "error")),
            (Severity.WARNING, ("fail", "warning")),
            (Severity.HINT, ("fail", "note")),
            (Severity.INFORMATION, ("informational", "none")),
        ],
    )
    def test_table(self, severity: Severity, expected: tuple[str, str]):
        assert classify(severity) == expected

    def test_kind_and_level_agree_with_classify(self):
        for severity in Severity:
            assert classify(severity) == (sarif_kind(severity), sarif_level(severity))

    def test_tables_are_exhaustive(self):
        assert set(SEVERITY_TO_SARIF_KIND) == set(Severity)
        assert set(SEVERITY_TO_SARIF_LEVEL) == set(Severity)


class TestUnknownSeverity:
    """Values outside the enum fail loudly instead of defaulting."""

    def test_unknown_string_raises(self):
        with pytest.raises(SeverityMappingError, match="Unknown severity"):
            sarif_level("critical")  # type: ignore[arg-type]

    def test_plain_string_of_known_value_raises(self):
        # Only enum members are accepted; raw strings must be validated first.
        with pytest.raises(SeverityMappingError):
            classify("error")  # type: ignore[arg-type]

    def test_none_raises(self):
        with pytest.raises(SeverityMappingError):
            sarif_kind(None)  # type: ignore[arg-type]
