# id3_lab/baseline.py
# scikit-learn reference: entropy-criterion CART over one-hot encoded categoricals.
from __future__ import annotations

import pandas as pd
from sklearn.compose import ColumnTransformer
from sklearn.metrics import accuracy_score
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import OneHotEncoder
from sklearn.tree import DecisionTreeClassifier

from .core.dataset import Dataset
from .core.errors import InsufficientData


def to_frame(dataset: Dataset) -> tuple[pd.DataFrame, pd.Series]:
    rows = [dict(r) for r in dataset]
    df = pd.DataFrame(rows, columns=list(dataset.attributes) + [dataset.label])
    X = df[list(dataset.attributes)]
    y = df[dataset.label]
    return X, y


def train_tree(training: Dataset, random_state: int = 42) -> Pipeline:
    X, y = to_frame(training)
    pre = ColumnTransformer([
        ("cat", OneHotEncoder(handle_unknown="ignore"), list(X.columns))
    ])
    clf = DecisionTreeClassifier(criterion="entropy", random_state=random_state)
    pipe = Pipeline([("pre", pre), ("tree", clf)])
    pipe.fit(X, y)
    return pipe


def baseline_accuracy(training: Dataset, testing: Dataset, random_state: int = 42) -> float:
    """Test accuracy (percent) of the scikit-learn tree trained on `training`."""
    if len(testing) == 0:
        raise InsufficientData("testing partition is empty; accuracy is undefined")
    pipe = train_tree(training, random_state=random_state)
    X, y = to_frame(testing)
    return 100.0 * float(accuracy_score(y, pipe.predict(X)))
