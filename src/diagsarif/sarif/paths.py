# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Root-relative artifact URIs.

Pure path arithmetic over POSIX-style paths: nothing here touches the
filesystem or resolves symlinks.
"""

from __future__ import annotations

import posixpath

from diagsarif.core.exceptions import ConfigurationError


def _segments(path: str) -> list[str]:
    normalized = posixpath.normpath(path)
    return [part for part in normalized.split("/") if part]


def check_root(root: str | None) -> str:
    """Return ``root`` if it is a usable absolute directory path."""
    if not root:
        raise ConfigurationError("A root directory is required to build artifact URIs")
    if not posixpath.isabs(root):
        msg = f"Root directory must be an absolute path, got {root!r}"
        raise ConfigurationError(msg)
    return root


def relative_uri(file: str, root: str) -> str:
    """Express ``file`` relative to ``root`` using ``/`` separators.

    >>> relative_uri("/proj/lib/x.ex", "/proj")
    'lib/x.ex'
    >>> relative_uri("/other/x.ex", "/proj/app")
    '../../other/x.ex'
    """
    check_root(root)
    if not posixpath.isabs(file):
        return posixpath.normpath(file)

    file_parts = _segments(file)
    root_parts = _segments(root)

    common = 0
    for file_part, root_part in zip(file_parts, root_parts):
        if file_part != root_part:
            break
        common += 1

    parts = [".."] * (len(root_parts) - common) + file_parts[common:]
    return "/".join(parts) or "."
