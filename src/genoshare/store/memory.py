"""In-memory record store with JSON snapshots.

ARCHITECTURE:
    RecordStore
        ├── one ordered table per record kind (users, genotypes, ...)
        ├── recent(kind, limit)       newest first, for the news feed
        ├── observations_for(id)      oldest first, for known variations
        └── save()/load()             JSON snapshot on disk

Listeners registered with subscribe() are called after every add, which
is how caches derived from stored records learn about new writes.
"""

import json
from pathlib import Path
from typing import Callable, Iterable, TypeVar

from genoshare.config.constants import NEWS_LIMIT
from genoshare.config.debug import get_logger
from genoshare.models.base import Record
from genoshare.models.phenotype import Phenotype, UserPhenotype
from genoshare.models.records import (
    Genotype,
    PhenotypeComment,
    Snp,
    SnpComment,
    User,
    UserSnp,
)

logger = get_logger(__name__)

R = TypeVar("R", bound=Record)

KINDS: dict[str, type[Record]] = {
    "users": User,
    "genotypes": Genotype,
    "phenotypes": Phenotype,
    "user_phenotypes": UserPhenotype,
    "phenotype_comments": PhenotypeComment,
    "snp_comments": SnpComment,
    "snps": Snp,
    "user_snps": UserSnp,
}

_KIND_BY_MODEL = {model: kind for kind, model in KINDS.items()}

Listener = Callable[[str, Record], None]


class RecordNotFoundError(Exception):
    """Raised when a record id is not in the store."""


def kind_of(record_or_model: Record | type[Record] | str) -> str:
    """Resolve a kind name from a kind name, model class or record."""
    if isinstance(record_or_model, str):
        if record_or_model not in KINDS:
            raise ValueError(f"Unknown record kind: {record_or_model}")
        return record_or_model
    model = record_or_model if isinstance(record_or_model, type) else type(record_or_model)
    try:
        return _KIND_BY_MODEL[model]
    except KeyError:
        raise ValueError(f"Not a stored record type: {model.__name__}") from None


def _check_limit(limit: int) -> None:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise ValueError(f"limit must be a non-negative integer, got {limit!r}")


class RecordStore:
    """Holds every record kind in insertion order.

    Example:
        >>> store = RecordStore()
        >>> user = store.add(User(name="alice"))
        >>> user.id
        1
        >>> [u.name for u in store.recent("users", limit=5)]
        ['alice']
    """

    def __init__(self):
        self._tables: dict[str, dict[int, Record]] = {kind: {} for kind in KINDS}
        self._next_id: dict[str, int] = {kind: 1 for kind in KINDS}
        self._listeners: list[Listener] = []

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener(kind, record)`` after every add."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> bool:
        """Stop calling a listener. Returns True if it was subscribed."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def add(self, record: R) -> R:
        """Store a record, assigning the next id for its kind if it has none.

        Raises:
            ValueError: If a record of the same kind already has that id.
        """
        kind = kind_of(record)
        table = self._tables[kind]

        if record.id is None:
            record.id = self._next_id[kind]
        elif record.id in table:
            raise ValueError(f"Duplicate id {record.id} for {kind}")

        table[record.id] = record
        self._next_id[kind] = max(self._next_id[kind], record.id + 1)
        logger.debug(f"Added {kind} #{record.id}")

        for listener in self._listeners:
            listener(kind, record)
        return record

    def add_all(self, records: Iterable[Record]) -> None:
        for record in records:
            self.add(record)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def get(self, kind: str | type[R], record_id: int) -> R:
        kind = kind_of(kind)
        try:
            return self._tables[kind][record_id]
        except KeyError:
            raise RecordNotFoundError(f"No {kind} with id {record_id}") from None

    def all(self, kind: str | type[R]) -> list[R]:
        """All records of a kind in insertion order."""
        return list(self._tables[kind_of(kind)].values())

    def count(self, kind: str | type[Record]) -> int:
        return len(self._tables[kind_of(kind)])

    def recent(self, kind: str | type[R], limit: int = NEWS_LIMIT) -> list[R]:
        """Newest records of a kind, ordered by created_at descending.

        Records created at the same instant come back latest-added first.

        Raises:
            ValueError: If limit is not a non-negative integer.
        """
        _check_limit(limit)
        records = list(enumerate(self._tables[kind_of(kind)].values()))
        records.sort(key=lambda pair: (pair[1].created_at, pair[0]), reverse=True)
        return [record for _, record in records[:limit]]

    def observations_for(self, phenotype_id: int) -> list[UserPhenotype]:
        """A phenotype's reported variations, oldest first.

        Ties on created_at keep insertion order.
        """
        observations = [
            obs for obs in self._tables["user_phenotypes"].values()
            if obs.phenotype_id == phenotype_id
        ]
        observations.sort(key=lambda obs: obs.created_at)
        return observations

    def snp_names(self) -> set[str]:
        return {snp.name for snp in self._tables["snps"].values()}

    def user_snp_names(self, user_id: int) -> set[str]:
        return {
            user_snp.snp_name for user_snp in self._tables["user_snps"].values()
            if user_snp.user_id == user_id
        }

    # -------------------------------------------------------------------------
    # Snapshots
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, list[dict]]:
        return {
            kind: [record.model_dump(mode="json") for record in table.values()]
            for kind, table in self._tables.items()
        }

    @classmethod
    def from_dict(cls, data: dict[str, list[dict]]) -> "RecordStore":
        """Build a store from a snapshot dict.

        Raises:
            ValueError: If the snapshot is malformed (pydantic's
                ValidationError is a ValueError).
        """
        if not isinstance(data, dict):
            raise ValueError(f"Snapshot must be a JSON object, got {type(data).__name__}")
        store = cls()
        for kind, rows in data.items():
            model = KINDS.get(kind)
            if model is None:
                logger.warning(f"Ignoring unknown record kind in snapshot: {kind}")
                continue
            if not isinstance(rows, list):
                raise ValueError(f"Snapshot section '{kind}' must be a list")
            for row in rows:
                store.add(model.model_validate(row))
        return store

    def save(self, path: Path | str) -> None:
        path = Path(path)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved snapshot to {path}")

    @classmethod
    def load(cls, path: Path | str) -> "RecordStore":
        path = Path(path)
        with open(path, "r") as f:
            data = json.load(f)
        store = cls.from_dict(data)
        logger.info(f"Loaded snapshot from {path}")
        return store


__all__ = [
    "KINDS",
    "RecordNotFoundError",
    "RecordStore",
    "kind_of",
]
