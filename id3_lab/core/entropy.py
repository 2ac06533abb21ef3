# id3_lab/core/entropy.py
# Shannon entropy and information gain over the label column of a Dataset.
from __future__ import annotations

from typing import Dict, List, Sequence

import numpy as np

from .dataset import Dataset
from .errors import InvalidInput


def _entropy(y: np.ndarray) -> float:
    """Shannon entropy (bits) of a non-empty label vector."""
    _, counts = np.unique(y, return_counts=True)
    p = counts / float(y.size)
    h = float(-(p * np.log2(p)).sum())
    return h if h > 0.0 else 0.0


def entropy(records: Dataset) -> float:
    """
    H(S) = -sum_v p(v) * log2 p(v) over the label values present in `records`.

    Only observed values contribute, so there is no log2(0) term. Works for
    any number of distinct labels.
    """
    if len(records) == 0:
        raise InvalidInput("entropy of an empty record set is undefined")
    return _entropy(records.labels())


def _split_entropy(y: np.ndarray, col: np.ndarray) -> float:
    """Weighted entropy of y after partitioning by the values in col."""
    values, inverse = np.unique(col, return_inverse=True)
    n = float(y.size)
    remainder = 0.0
    for k in range(values.size):
        y_sub = y[inverse == k]
        remainder += (y_sub.size / n) * _entropy(y_sub)
    return remainder


def gain(records: Dataset, attribute: str) -> float:
    """
    Information gain of splitting `records` on `attribute`:
    H(S) - sum_v |S_v|/|S| * H(S_v), over the values v observed in S.
    """
    if len(records) == 0:
        raise InvalidInput("information gain of an empty record set is undefined")
    y = records.labels()
    col = records.column(attribute)
    ig = _entropy(y) - _split_entropy(y, col)
    # float rounding can leave a -1e-17 when the split changes nothing
    return ig if ig > 0.0 else 0.0


def gain_table(records: Dataset, attributes: Sequence[str]) -> List[Dict]:
    """
    Per-attribute metrics at a node, in the order given.

    Returns: list of dicts with keys: name, ig, value_counts (dict[value] -> count)
    """
    if len(records) == 0:
        raise InvalidInput("cannot score attributes on an empty record set")
    y = records.labels()
    h_parent = _entropy(y)
    metrics = []
    for name in attributes:
        col = records.column(name)
        values, counts = np.unique(col, return_counts=True)
        ig = h_parent - _split_entropy(y, col)
        metrics.append({
            "name": name,
            "ig": ig if ig > 0.0 else 0.0,
            "value_counts": {str(v): int(c) for v, c in zip(values, counts)},
        })
    return metrics
