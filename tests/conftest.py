"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from id3_lab.core.dataset import Dataset
from id3_lab.datasets import PLAY_TENNIS_HEADER, PLAY_TENNIS_ROWS, play_tennis


# ============================================================================
# Dataset Fixtures
# ============================================================================


@pytest.fixture
def tennis() -> Dataset:
    """The 14-row play-tennis table, label 'play-tennis'."""
    return play_tennis()


@pytest.fixture
def make_dataset():
    """Factory: make_dataset(["y", "a"], [["yes", "x"], ...]) with label in column 0."""

    def _make(header, rows, label=None):
        return Dataset.from_rows(header, rows, label=label)

    return _make


# ============================================================================
# File Fixtures
# ============================================================================


@pytest.fixture
def tennis_csv(tmp_path: Path) -> Path:
    """Write the play-tennis table as a comma-delimited file with a header line."""
    path = tmp_path / "tennis.txt"
    lines = [",".join(PLAY_TENNIS_HEADER)] + [",".join(r) for r in PLAY_TENNIS_ROWS]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
