from .errors import (
    ID3Error,
    InsufficientData,
    InvalidInput,
    MissingAttribute,
    NotFittedError,
    PredictionGap,
)
from .dataset import Dataset, Record
from .entropy import entropy, gain, gain_table
from .tree import (
    Decision,
    Leaf,
    Tree,
    attributes_on_paths,
    depth,
    export_text,
    leaf_labels,
    num_leaves,
    to_dict,
)
from .builder import build
from .classifier import ID3Classifier, explain, predict, tally

__all__ = [
    "ID3Error", "InsufficientData", "InvalidInput", "MissingAttribute",
    "NotFittedError", "PredictionGap",
    "Dataset", "Record",
    "entropy", "gain", "gain_table",
    "Decision", "Leaf", "Tree", "attributes_on_paths", "depth", "export_text", "leaf_labels", "num_leaves", "to_dict",
    "build",
    "ID3Classifier", "explain", "predict", "tally",
]
