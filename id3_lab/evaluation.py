# id3_lab/evaluation.py
# Hold-out evaluation: seeded shuffle-then-cut split, build on train, score on test.
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .core.builder import build
from .core.classifier import tally
from .core.dataset import Dataset
from .core.errors import InsufficientData
from .core.metrics import MeasuredRun
from .core.tree import Tree


@dataclass
class EvaluationResult:
    accuracy: float                 # percent, on the testing partition
    correct: int
    incorrect: int
    train_accuracy: float           # percent, re-predicting the training partition
    n_train: int
    n_test: int
    build_s: float
    tree: Tree


def train_test_split(dataset: Dataset, train_fraction: float = 0.5,
                     seed: Optional[int] = 42) -> Tuple[Dataset, Dataset]:
    """
    Shuffle once, then cut. Both parts are non-empty for any dataset of at
    least two records, disjoint, and together hold every record exactly once.
    """
    if not 0.0 < float(train_fraction) < 1.0:
        raise ValueError(f"train_fraction must be in (0, 1), got {train_fraction}")
    n = len(dataset)
    if n < 2:
        raise InsufficientData(f"need at least 2 records to split, got {n}")
    rng = np.random.default_rng(seed)
    idx = np.arange(n)
    rng.shuffle(idx)
    n_train = min(max(int(round(n * float(train_fraction))), 1), n - 1)
    return dataset.take(idx[:n_train]), dataset.take(idx[n_train:])


def accuracy(tree: Tree, testing: Dataset, on_unseen: str = "raise") -> float:
    """Percentage of `testing` records whose label the tree predicts correctly."""
    if len(testing) == 0:
        raise InsufficientData("testing partition is empty; accuracy is undefined")
    correct, incorrect = tally(tree, testing, on_unseen)
    return 100.0 * correct / (correct + incorrect)


def evaluate(dataset: Dataset, train_fraction: float = 0.5, seed: Optional[int] = 42,
             on_unseen: str = "raise", verbose: bool = False) -> EvaluationResult:
    training, testing = train_test_split(dataset, train_fraction, seed)
    if len(testing) == 0:
        raise InsufficientData("testing partition is empty; accuracy is undefined")

    with MeasuredRun() as run:
        tree = build(training, dataset.attributes, verbose=verbose)

    correct, incorrect = tally(tree, testing, on_unseen)
    return EvaluationResult(
        accuracy=100.0 * correct / (correct + incorrect),
        correct=correct,
        incorrect=incorrect,
        train_accuracy=accuracy(tree, training, on_unseen),
        n_train=len(training),
        n_test=len(testing),
        build_s=run.elapsed,
        tree=tree,
    )
