# id3_lab/core/dataset.py
# Immutable record collection with an explicit label attribute.
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from .errors import InvalidInput, MissingAttribute

Record = Mapping[str, str]


def _freeze(record: Mapping[str, str]) -> Record:
    # values are categories; store them as strings so branch keys match
    return MappingProxyType({str(k): str(v) for k, v in record.items()})


@dataclass(frozen=True)
class Dataset:
    """
    Ordered, read-only sequence of records plus the name of the label column.

    Parameters
    ----------
    records : sequence of mappings
        Each record maps attribute name -> categorical value (str).
    label : str
        Name of the attribute to predict.
    attributes : sequence of str | None
        Candidate attributes for splitting, in column order. Defaults to the
        keys of the first record minus the label.
    """
    records: Tuple[Record, ...]
    label: str
    attributes: Tuple[str, ...] = field(default=())

    def __init__(self, records: Iterable[Mapping[str, str]], label: str,
                 attributes: Optional[Sequence[str]] = None):
        label = str(label)
        frozen = tuple(_freeze(r) for r in records)
        if attributes is None:
            attributes = [k for k in frozen[0] if k != label] if frozen else []
        attributes = tuple(str(a) for a in attributes if str(a) != label)

        for i, r in enumerate(frozen):
            for name in (label,) + attributes:
                if name not in r:
                    raise MissingAttribute(name, where=f"record {i}")

        object.__setattr__(self, "records", frozen)
        object.__setattr__(self, "label", label)
        object.__setattr__(self, "attributes", attributes)

    @classmethod
    def from_rows(cls, header: Sequence[str], rows: Iterable[Sequence[str]],
                  label: Optional[str] = None) -> "Dataset":
        """Build from a header and positional rows. Label defaults to the first column."""
        header = [str(h) for h in header]
        label = header[0] if label is None else label
        if label not in header:
            raise MissingAttribute(label, where="header")
        records = []
        for i, row in enumerate(rows):
            if len(row) != len(header):
                raise InvalidInput(
                    f"row {i} has {len(row)} values but the header has {len(header)}"
                )
            records.append({h: str(v) for h, v in zip(header, row)})
        return cls(records, label, attributes=header)

    # ---------- sequence protocol ----------

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __getitem__(self, i: int) -> Record:
        return self.records[i]

    # ---------- views ----------

    def labels(self) -> np.ndarray:
        return np.array([r[self.label] for r in self.records], dtype=object)

    def column(self, attribute: str) -> np.ndarray:
        try:
            return np.array([r[attribute] for r in self.records], dtype=object)
        except KeyError:
            raise MissingAttribute(attribute) from None

    def values_of(self, attribute: str) -> List[str]:
        """Distinct values of `attribute` observed in these records, sorted."""
        return sorted(set(self.column(attribute).tolist()))

    def label_counts(self) -> Dict[str, int]:
        if not self.records:
            return {}
        values, counts = np.unique(self.labels(), return_counts=True)
        return {str(v): int(c) for v, c in zip(values, counts)}

    def majority_label(self) -> str:
        """Most frequent label; ties go to the lexicographically smallest value."""
        if not self.records:
            raise InvalidInput("majority label of an empty record set is undefined")
        values, counts = np.unique(self.labels(), return_counts=True)
        # np.unique sorts, and argmax keeps the first maximum
        return str(values[np.argmax(counts)])

    def is_pure(self) -> bool:
        return len(set(r[self.label] for r in self.records)) <= 1

    # ---------- subsets ----------

    def _derive(self, records: Iterable[Record]) -> "Dataset":
        # records already validated by the parent; skip the per-field checks
        sub = object.__new__(Dataset)
        object.__setattr__(sub, "records", tuple(records))
        object.__setattr__(sub, "label", self.label)
        object.__setattr__(sub, "attributes", self.attributes)
        return sub

    def where(self, attribute: str, value: str) -> "Dataset":
        """Records whose `attribute` equals `value` (order preserved)."""
        col = self.column(attribute)
        return self._derive(r for r, v in zip(self.records, col) if v == value)

    def take(self, indices: Iterable[int]) -> "Dataset":
        return self._derive(self.records[int(i)] for i in indices)
