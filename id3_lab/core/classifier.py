# id3_lab/core/classifier.py
# Tree traversal, path explanations, and a small fit/predict estimator.
from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Tuple

from .builder import build
from .dataset import Dataset
from .errors import InsufficientData, MissingAttribute, NotFittedError, PredictionGap
from .tree import Decision, Leaf, Tree

ON_UNSEEN = ("raise", "default")

Step = Tuple[str, str, Optional[str]]


def _check_policy(on_unseen: str) -> None:
    if on_unseen not in ON_UNSEEN:
        raise ValueError(f"on_unseen must be one of {ON_UNSEEN}, got {on_unseen!r}")


def _branch(node: Decision, record: Mapping[str, str], on_unseen: str) -> Tuple[str, Optional[Tree]]:
    """Value read at `node` and the child it leads to (None = fall back to node.default)."""
    try:
        val = str(record[node.attribute])
    except KeyError:
        raise MissingAttribute(node.attribute) from None
    child = node.children.get(val)
    if child is None and on_unseen == "raise":
        raise PredictionGap(node.attribute, val, known=node.children.keys())
    return val, child


def predict(tree: Tree, record: Mapping[str, str], on_unseen: str = "raise") -> str:
    """
    Label predicted for `record`.

    A value never seen at a decision node either raises PredictionGap
    (on_unseen="raise") or returns that node's majority training label
    (on_unseen="default").
    """
    _check_policy(on_unseen)
    node = tree
    while isinstance(node, Decision):
        _, child = _branch(node, record, on_unseen)
        if child is None:
            return node.default
        node = child
    return node.label


def explain(tree: Tree, record: Mapping[str, str], on_unseen: str = "raise",
            print_path: bool = False) -> List[Step]:
    """
    Return the root→leaf path taken to classify `record`.
    Each step is (attribute, record_value, prediction_if_this_step_ends_the_walk).
    """
    _check_policy(on_unseen)
    path: List[Step] = []
    node = tree
    while isinstance(node, Decision):
        val, child = _branch(node, record, on_unseen)
        if child is None:
            path.append((node.attribute, val, node.default))
            break
        path.append((node.attribute, val, child.label if isinstance(child, Leaf) else None))
        node = child

    if print_path:
        print("Explanation (root → leaf):")
        for i, (attr, val, pred) in enumerate(path):
            arrow = "└─" if i == len(path) - 1 else "├─"
            if pred is not None:
                print(f"{arrow} {attr} = {val}  →  predict {pred}")
            else:
                print(f"{arrow} {attr} = {val}")
    return path


def tally(tree: Tree, dataset: Dataset, on_unseen: str = "raise") -> Tuple[int, int]:
    """(correct, incorrect) counts of predictions against the true labels."""
    correct = incorrect = 0
    for r in dataset:
        if predict(tree, r, on_unseen) == r[dataset.label]:
            correct += 1
        else:
            incorrect += 1
    return correct, incorrect


class ID3Classifier:
    """
    Estimator-style wrapper around build/predict.

    Parameters
    ----------
    on_unseen : {"raise", "default"}
        Policy for attribute values that were never seen while training.
    verbose : bool
        If True, print entropy/IG at each node while fitting.
    """

    def __init__(self, on_unseen: str = "raise", verbose: bool = False):
        _check_policy(on_unseen)
        self.on_unseen = on_unseen
        self.verbose = verbose
        self.tree_: Optional[Tree] = None
        self.label_: Optional[str] = None

    def fit(self, dataset: Dataset, attributes: Optional[Iterable[str]] = None) -> "ID3Classifier":
        self.tree_ = build(dataset, attributes, verbose=self.verbose)
        self.label_ = dataset.label
        return self

    def _tree(self) -> Tree:
        if self.tree_ is None:
            raise NotFittedError("Estimator not fitted, call `fit` first.")
        return self.tree_

    def predict(self, records: Iterable[Mapping[str, str]]) -> List[str]:
        tree = self._tree()
        return [predict(tree, r, self.on_unseen) for r in records]

    def score(self, dataset: Dataset) -> float:
        """Accuracy in percent on `dataset`."""
        correct, incorrect = tally(self._tree(), dataset, self.on_unseen)
        if correct + incorrect == 0:
            raise InsufficientData("accuracy of an empty record set is undefined")
        return 100.0 * correct / (correct + incorrect)
