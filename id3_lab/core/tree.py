# id3_lab/core/tree.py
# Tree = Leaf | Decision. Children are owned by their parent; no back-references.
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Union


@dataclass(frozen=True)
class Leaf:
    label: str
    note: str = ""                       # how the label was derived (diagnostics)
    n_samples: int = 0
    counts: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "counts", MappingProxyType(dict(self.counts)))

    def __hash__(self):
        return hash((self.label, self.note, self.n_samples, tuple(sorted(self.counts.items()))))


@dataclass(frozen=True)
class Decision:
    attribute: str
    children: Mapping[str, "Tree"]
    default: str                         # majority label of the partition at this node
    n_samples: int = 0

    def __post_init__(self):
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    def __hash__(self):
        return hash((self.attribute, self.default, self.n_samples, tuple(sorted(self.children.items()))))


Tree = Union[Leaf, Decision]


# ---------- read-only helpers ----------

def num_leaves(tree: Tree) -> int:
    if isinstance(tree, Leaf):
        return 1
    return sum(num_leaves(child) for child in tree.children.values())


def depth(tree: Tree) -> int:
    """Number of decision levels on the longest root-to-leaf path (a lone leaf is 0)."""
    if isinstance(tree, Leaf):
        return 0
    return 1 + max((depth(child) for child in tree.children.values()), default=0)


def leaf_labels(tree: Tree) -> List[str]:
    """Labels of all leaves, left to right."""
    if isinstance(tree, Leaf):
        return [tree.label]
    out: List[str] = []
    for child in tree.children.values():
        out.extend(leaf_labels(child))
    return out


def attributes_on_paths(tree: Tree) -> List[List[str]]:
    """Splitting attributes met on every root-to-leaf path."""
    if isinstance(tree, Leaf):
        return [[]]
    paths = []
    for child in tree.children.values():
        for p in attributes_on_paths(child):
            paths.append([tree.attribute] + p)
    return paths


def export_text(tree: Tree) -> str:
    lines: List[str] = []
    _dump(tree, prefix="", lines=lines)
    return "\n".join(lines)


def _dump(node: Tree, prefix: str, lines: List[str]) -> None:
    if isinstance(node, Leaf):
        note = f" ({node.note})" if node.note else ""
        lines.append(prefix + f"→ {node.label}{note} {dict(node.counts)}")
        return
    lines.append(prefix + f"[{node.attribute}?]")
    for v, child in node.children.items():
        lines.append(prefix + f"  = {v}")
        _dump(child, prefix + "    ", lines)


def to_dict(node: Tree) -> Dict[str, Any]:
    """Plain nested dict, suitable for json.dumps or a pretty-printer."""
    if isinstance(node, Leaf):
        return {"leaf": True, "label": node.label, "note": node.note,
                "n_samples": node.n_samples, "counts": dict(node.counts)}
    return {
        "leaf": False,
        "attribute": node.attribute,
        "default": node.default,
        "n_samples": node.n_samples,
        "children": {v: to_dict(child) for v, child in node.children.items()},
    }
