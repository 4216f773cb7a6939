# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for diagnostic position normalization."""

from __future__ import annotations

import pytest

from diagsarif.core.exceptions import PositionError
from diagsarif.sarif.position import normalize_position


class TestNormalizePosition:
    """Each accepted position shape expands to a 1-based 4-tuple."""

    def test_absent(self):
        assert normalize_position(None) == (1, 1, 1, 1)

    def test_line_only(self):
        assert normalize_position(5) == (5, 1, 5, 1)

    def test_line_and_column(self):
        assert normalize_position((3, 4)) == (3, 4, 3, 4)

    def test_full_range_passes_through(self):
        assert normalize_position((1, 2, 3, 4)) == (1, 2, 3, 4)

    def test_lists_accepted(self):
        assert normalize_position([3, 4]) == (3, 4, 3, 4)
        assert normalize_position([7, 1, 9, 12]) == (7, 1, 9, 12)

    def test_result_is_tuple(self):
        assert isinstance(normalize_position([2, 2]), tuple)


class TestRejectedPositions:
    """Anything else is an explicit PositionError."""

    @pytest.mark.parametrize(
        "position",
        [
            (),
            (1,),
            (1, 2, 3),
            (1, 2, 3, 4, 5),
            "10",
            ("1", 2),
            1.5,
            {"line": 1},
        ],
    )
    def test_bad_shape(self, position: object):
        with pytest.raises(PositionError, match="Unsupported diagnostic position"):
            normalize_position(position)

    @pytest.mark.parametrize("position", [0, -1, (0, 1), (1, 0), (1, 1, 0, 1)])
    def test_coordinates_below_one(self, position: object):
        with pytest.raises(PositionError):
            normalize_position(position)

    def test_bool_is_not_a_line(self):
        with pytest.raises(PositionError):
            normalize_position(True)
