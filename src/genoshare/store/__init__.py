"""Record storage for GenoShare."""

from genoshare.store.memory import KINDS, RecordNotFoundError, RecordStore, kind_of

__all__ = [
    "KINDS",
    "RecordNotFoundError",
    "RecordStore",
    "kind_of",
]
