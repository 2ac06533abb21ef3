# id3_lab/core/builder.py
# Recursive ID3 induction: split on the attribute with the highest information gain.
from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

from .dataset import Dataset
from .entropy import _entropy, gain_table
from .errors import InvalidInput, MissingAttribute
from .tree import Decision, Leaf, Tree

# gains closer than this are treated as a tie
GAIN_TOL = 1e-12


def _leaf(records: Dataset, label: str, note: str) -> Leaf:
    return Leaf(label=label, note=note, n_samples=len(records),
                counts=records.label_counts())


def choose_attribute(metrics: List[Dict]) -> Dict:
    """First entry with the maximal gain; `metrics` must already be in lexicographic order."""
    best = metrics[0]
    for m in metrics[1:]:
        if m["ig"] > best["ig"] + GAIN_TOL:
            best = m
    return best


def build(records: Dataset, attributes: Optional[Sequence[str]] = None,
          values: Optional[Mapping[str, Sequence[str]]] = None,
          verbose: bool = False) -> Tree:
    """
    Build an ID3 tree.

    Parameters
    ----------
    records : Dataset
        Training records; must not be empty.
    attributes : sequence of str | None
        Candidate attributes. Defaults to every non-label attribute of `records`.
    values : mapping attribute -> values | None
        Optional externally known value lists. A value with no training
        records becomes a leaf predicting the parent's majority label.
    verbose : bool
        If True, print entropy/IG at each node while building.
    """
    if len(records) == 0:
        raise InvalidInput("cannot build a tree from an empty record set")
    attributes = list(records.attributes if attributes is None else attributes)
    for a in attributes:
        if a == records.label:
            raise MissingAttribute(a, where="candidate attributes (label is not a feature)")
        if a not in records[0]:
            raise MissingAttribute(a, where="training records")
    return _create_tree(records, sorted(set(attributes)), values or {}, verbose, depth=0)


def _create_tree(records: Dataset, attributes: List[str],
                 values: Mapping[str, Sequence[str]], verbose: bool, depth: int) -> Tree:
    # If all labels equal -> leaf
    if records.is_pure():
        return _leaf(records, records[0][records.label], "pure")

    # No attributes left -> majority vote
    if not attributes:
        return _leaf(records, records.majority_label(), "majority vote")

    metrics = gain_table(records, attributes)
    best = choose_attribute(metrics)
    best_name = best["name"]

    if verbose:
        indent = "|  " * depth
        print(f"{indent}Node depth={depth}, n={len(records)}, H={_entropy(records.labels()):.3f}")
        for m in metrics:
            vc = ", ".join(f"{val}:{cnt}" for val, cnt in m["value_counts"].items())
            print(f"{indent}  - {m['name']:<12} IG={m['ig']:.3f}  (values: {vc})")
        print(f"{indent}=> choose '{best_name}'\n")

    majority = records.majority_label()
    remaining = [a for a in attributes if a != best_name]
    branch_values = set(best["value_counts"])
    branch_values.update(str(v) for v in values.get(best_name, ()))

    children: Dict[str, Tree] = {}
    for v in sorted(branch_values):
        subset = records.where(best_name, v)
        if len(subset) == 0:
            children[v] = Leaf(label=majority, note="parent majority", n_samples=0)
        else:
            children[v] = _create_tree(subset, remaining, values, verbose, depth + 1)

    return Decision(attribute=best_name, children=children,
                    default=majority, n_samples=len(records))
