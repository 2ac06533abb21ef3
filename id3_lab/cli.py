# id3_lab/cli.py
from __future__ import annotations

import argparse
import os
from typing import List, Optional

from .core.builder import build
from .core.entropy import entropy, gain_table
from .core.errors import ID3Error
from .core.metrics import MeasuredRun
from .core.tree import depth, export_text, num_leaves
from .datasets import play_tennis
from .evaluation import accuracy, train_test_split
from .io.loader import load_dataset

# ---- Tunables (overridable via environment variables) -----------------------
TRAIN_FRACTION = float(os.getenv("ID3_TRAIN_FRACTION", "0.5"))   # share of records used to build
SEED           = int(os.getenv("ID3_SEED", "42"))                 # shuffle seed for the split


def _parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="ID3 decision tree on categorical delimited-text data.")
    ap.add_argument("--data", default="", help="path to a delimited file with a header line. If empty, use the built-in play-tennis table.")
    ap.add_argument("--label", default=None, help="label column (default: first column)")
    ap.add_argument("--sep", default=",", help="delimiter (default ','; use '\\t' for TSV)")
    ap.add_argument("--train-fraction", type=float, default=TRAIN_FRACTION)
    ap.add_argument("--seed", type=int, default=SEED)
    ap.add_argument("--on-unseen", choices=["raise", "default"], default="default",
                    help="unseen attribute value at predict time: fail, or use the node's majority label")
    ap.add_argument("--print-tree", action="store_true", help="print the induced tree")
    ap.add_argument("--show-gains", action="store_true", help="print entropy and per-attribute gain over all records")
    ap.add_argument("--verbose", action="store_true", help="print entropy/IG at every node while building")
    ap.add_argument("--plot", action="store_true", help="save a picture of the tree")
    ap.add_argument("--out", default="id3_tree.png", help="output image path for --plot")
    ap.add_argument("--compare-sklearn", action="store_true", help="also report scikit-learn's entropy tree on the same split")
    return ap


def run(args: argparse.Namespace) -> float:
    sep = "\t" if args.sep in ("\\t", "tab") else args.sep

    # 1) Load
    with MeasuredRun() as load_run:
        if args.data:
            dataset = load_dataset(args.data, label=args.label, sep=sep)
            source = args.data
        else:
            print("[info] No data file given; using the built-in play-tennis table.")
            dataset = play_tennis()
            source = "play-tennis"
    print(f"[info] Read {len(dataset)} records from {source} in {load_run.elapsed:.4f}s "
          f"(label={dataset.label!r}, {len(dataset.attributes)} attributes)")

    if args.show_gains:
        print(f"Entropy({dataset.label}) = {entropy(dataset):.3f}")
        for m in sorted(gain_table(dataset, dataset.attributes), key=lambda m: -m["ig"]):
            print(f"  Gain({m['name']}) = {m['ig']:.3f}")

    # 2) Split + build
    training, testing = train_test_split(dataset, args.train_fraction, seed=args.seed)
    print(f"[info] Building tree on {len(training)} records ({len(testing)} held out)")
    with MeasuredRun() as build_run:
        tree = build(training, dataset.attributes, verbose=args.verbose)
    print(f"[info] Tree building finished in {build_run.elapsed:.4f}s "
          f"(depth={depth(tree)}, leaves={num_leaves(tree)})")

    if args.print_tree:
        print(export_text(tree))

    # 3) Report
    acc = accuracy(tree, testing, on_unseen=args.on_unseen)
    train_acc = accuracy(tree, training, on_unseen=args.on_unseen)
    print(f"Training accuracy: {train_acc:.2f}%")
    print(f"Accuracy: {acc:.2f}%  (train_fraction={args.train_fraction}, seed={args.seed}, on_unseen={args.on_unseen})")

    if args.compare_sklearn:
        from .baseline import baseline_accuracy
        print(f"scikit-learn entropy tree: {baseline_accuracy(training, testing, random_state=args.seed):.2f}%")

    if args.plot:
        from .plots.tree_plot import plot_tree
        plot_tree(tree, out=args.out, title=f"ID3 tree for {dataset.label}")

    return acc


def main(argv: Optional[List[str]] = None) -> None:
    args = _parser().parse_args(argv)
    try:
        run(args)
    except (ID3Error, ValueError, OSError) as e:
        raise SystemExit(f"[error] {e}")


if __name__ == "__main__":
    main()
