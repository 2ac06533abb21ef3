# id3_lab/io/loader.py
# Delimited text -> Dataset. First line is the header; every cell stays a string.
from __future__ import annotations

import os
from typing import Optional

import pandas as pd

from ..core.dataset import Dataset
from ..core.errors import InvalidInput, MissingAttribute


def frame_to_dataset(df: pd.DataFrame, label: Optional[str] = None) -> Dataset:
    """Convert a DataFrame of categorical columns. Label defaults to the first column."""
    if df.shape[1] == 0:
        raise InvalidInput("table has no columns")
    columns = [str(c) for c in df.columns]
    label = columns[0] if label is None else label
    if label not in columns:
        raise MissingAttribute(label, where="table header")
    df = df.astype(str)
    df.columns = columns
    return Dataset(df.to_dict(orient="records"), label, attributes=columns)


def load_dataset(path: str, label: Optional[str] = None, sep: str = ",") -> Dataset:
    """
    Read a delimited text file whose first line is the header.
    Values are kept verbatim (no NA parsing), so '?' or '' stay ordinary categories.
    """
    path = os.path.abspath(os.path.expanduser(path))
    df = pd.read_csv(path, sep=sep, dtype=str, keep_default_na=False,
                     skipinitialspace=True)
    if df.shape[0] == 0:
        raise InvalidInput(f"{path} has a header but no records")
    return frame_to_dataset(df, label)
