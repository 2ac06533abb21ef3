"""ID3 decision-tree induction over categorical records."""
from .core import (
    Dataset,
    Decision,
    ID3Classifier,
    ID3Error,
    InsufficientData,
    InvalidInput,
    Leaf,
    MissingAttribute,
    NotFittedError,
    PredictionGap,
    Tree,
    build,
    entropy,
    explain,
    export_text,
    gain,
    predict,
)
from .evaluation import EvaluationResult, accuracy, evaluate, train_test_split

__version__ = "0.1.0"
