# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Normalization of diagnostic positions into SARIF regions."""

from __future__ import annotations

from diagsarif.core.exceptions import PositionError

Region = tuple[int, int, int, int]


def _is_coordinate(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def normalize_position(position: object) -> Region:
    """Return ``(start_line, start_column, end_line, end_column)``, 1-based.

    Accepted shapes are ``None``, a line number, a ``(line, column)`` pair and a
    full four-element range, which is passed through unchanged. Lists are
    accepted wherever a tuple is.

    Raises:
        PositionError: For any other shape, or a coordinate below 1.
    """
    if position is None:
        return (1, 1, 1, 1)

    if _is_coordinate(position):
        line = int(position)  # type: ignore[call-overload]
        return (line, 1, line, 1)

    if isinstance(position, (tuple, list)) and all(_is_coordinate(v) for v in position):
        if len(position) == 2:
            line, column = position
            return (line, column, line, column)
        if len(position) == 4:
            start_line, start_column, end_line, end_column = position
            return (start_line, start_column, end_line, end_column)

    msg = (
        f"Unsupported diagnostic position: {position!r}. Expected None, a line number, "
        "(line, column) or (start_line, start_column, end_line, end_column) with values >= 1"
    )
    raise PositionError(msg)
