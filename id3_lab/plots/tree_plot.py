# id3_lab/plots/tree_plot.py
# Draw a Tree with matplotlib annotations: sawtooth boxes for decisions, rounded boxes for leaves.
from __future__ import annotations

from typing import Optional, Tuple

import matplotlib
matplotlib.use("Agg")   # file output only; safe even if a display exists
import matplotlib.pyplot as plt

from ..core.tree import Decision, Leaf, Tree, depth, num_leaves

decisionNode = dict(boxstyle="sawtooth", fc="0.8")
leafNode     = dict(boxstyle="round4",   fc="0.8")
arrow_args   = dict(arrowstyle="<-")

Point = Tuple[float, float]


class _Layout:
    """Running x/y offsets while walking the tree, in axes-fraction units."""
    def __init__(self, ax, tree: Tree):
        self.ax = ax
        self.total_w = float(max(num_leaves(tree), 1))
        self.total_d = float(max(depth(tree), 1))
        self.x_off = -0.5 / self.total_w
        self.y_off = 1.0


def _plot_node(ax, text: str, center: Point, parent: Point, node_type: dict) -> None:
    ax.annotate(
        text, xy=parent, xycoords="axes fraction",
        xytext=center, textcoords="axes fraction",
        va="center", ha="center", bbox=node_type, arrowprops=arrow_args
    )


def _plot_mid_text(ax, center: Point, parent: Point, text: str) -> None:
    x_mid = (parent[0] - center[0]) / 2.0 + center[0]
    y_mid = (parent[1] - center[1]) / 2.0 + center[1]
    ax.text(x_mid, y_mid, text)


def _plot_tree(lay: _Layout, node: Decision, parent: Point, edge_text: str) -> None:
    leafs = num_leaves(node)
    center = (lay.x_off + (1.0 + float(leafs)) / 2.0 / lay.total_w, lay.y_off)
    _plot_mid_text(lay.ax, center, parent, edge_text)
    _plot_node(lay.ax, node.attribute, center, parent, decisionNode)
    lay.y_off = lay.y_off - 1.0 / lay.total_d
    for value, child in node.children.items():
        if isinstance(child, Decision):
            _plot_tree(lay, child, center, str(value))
        else:
            lay.x_off = lay.x_off + 1.0 / lay.total_w
            _plot_node(lay.ax, child.label, (lay.x_off, lay.y_off), center, leafNode)
            _plot_mid_text(lay.ax, (lay.x_off, lay.y_off), center, str(value))
    lay.y_off = lay.y_off + 1.0 / lay.total_d


def plot_tree(tree: Tree, out: Optional[str] = None, title: str = ""):
    """Render `tree` to a new figure; save it to `out` when given. Returns the figure."""
    fig = plt.figure(facecolor="white", figsize=(10, 6))
    ax = fig.add_subplot(111, frameon=False, xticks=[], yticks=[])
    if isinstance(tree, Leaf):
        _plot_node(ax, tree.label, (0.5, 0.5), (0.5, 0.5), leafNode)
    else:
        _plot_tree(_Layout(ax, tree), tree, (0.5, 1.0), "")
    if title:
        ax.set_title(title)
    if out:
        fig.savefig(out, bbox_inches="tight")
        print(f"[saved] {out}")
    return fig
