# id3_lab/core/errors.py
# Error types raised by the ID3 core. Callers decide what to do with them.
from __future__ import annotations


class ID3Error(Exception):
    """Base class for every error raised by id3_lab."""
    pass


class InvalidInput(ID3Error, ValueError):
    """Raised when an empty record sequence is given where records are required."""
    pass


class MissingAttribute(ID3Error, KeyError):
    """Raised when a record has no value for an attribute the algorithm reads."""

    def __init__(self, attribute: str, where: str = "record"):
        self.attribute = attribute
        self.where = where
        super().__init__(f"{where} has no value for attribute {attribute!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class PredictionGap(ID3Error, LookupError):
    """
    Raised when classification reaches a decision node that has no branch for
    the record's value (the value was never seen while training that node).
    """

    def __init__(self, attribute: str, value: str, known=()):
        self.attribute = attribute
        self.value = value
        self.known = tuple(known)
        super().__init__(
            f"no branch for {attribute}={value!r} (known values: {', '.join(self.known) or '-'})"
        )


class InsufficientData(ID3Error):
    """Raised when there are too few records to split or to measure accuracy."""
    pass


class NotFittedError(ID3Error):
    """Raised if estimator is used before fitting."""
    pass
