# id3_lab/datasets.py
# Small built-in tables for demos and tests.
from __future__ import annotations

from .core.dataset import Dataset

PLAY_TENNIS_HEADER = ["play-tennis", "outlook", "temperature", "humidity", "wind"]

# Quinlan's 14-day weather table, label in the first column
PLAY_TENNIS_ROWS = [
    ["no",  "sunny",    "hot",  "high",   "weak"],
    ["no",  "sunny",    "hot",  "high",   "strong"],
    ["yes", "overcast", "hot",  "high",   "weak"],
    ["yes", "rain",     "mild", "high",   "weak"],
    ["yes", "rain",     "cool", "normal", "weak"],
    ["no",  "rain",     "cool", "normal", "strong"],
    ["yes", "overcast", "cool", "normal", "strong"],
    ["no",  "sunny",    "mild", "high",   "weak"],
    ["yes", "sunny",    "cool", "normal", "weak"],
    ["yes", "rain",     "mild", "normal", "weak"],
    ["yes", "sunny",    "mild", "normal", "strong"],
    ["yes", "overcast", "mild", "high",   "strong"],
    ["yes", "overcast", "hot",  "normal", "weak"],
    ["no",  "rain",     "mild", "high",   "strong"],
]


def play_tennis() -> Dataset:
    return Dataset.from_rows(PLAY_TENNIS_HEADER, PLAY_TENNIS_ROWS)
