# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

import pytest

PROJECT_ROOT = "/proj"


@pytest.fixture
def project_root() -> str:
    return PROJECT_ROOT


@pytest.fixture
def diagnostic_records() -> list[dict[str, object]]:
    """Raw diagnostic records as the build pipeline would emit them."""
    return [
        {
            "compiler_name": "Elixir",
            "message": "unused var",
            "severity": "warning",
            "file": "/proj/lib/x.ex",
            "position": [10, 3],
        },
        {
            "compiler_name": "ExUnit",
            "message": "test failed",
            "severity": "error",
            "file": "/proj/test/x_test.exs",
            "position": 4,
        },
        {
            "compiler_name": "Elixir",
            "message": "module attribute not used",
            "severity": "hint",
            "file": "/proj/lib/y.ex",
            "position": None,
        },
    ]


@pytest.fixture
def diagnostics_file(tmp_path: Path, diagnostic_records: list[dict[str, object]]) -> Path:
    path = tmp_path / "diagnostics.json"
    path.write_text(json.dumps(diagnostic_records), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep DIAGSARIF_* variables, stray .env files and log handlers out of tests."""
    for key in list(os.environ):
        if key.startswith("DIAGSARIF_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    yield
    logging.getLogger("diagsarif").handlers.clear()
    logging.getLogger("diagsarif").setLevel(logging.NOTSET)
