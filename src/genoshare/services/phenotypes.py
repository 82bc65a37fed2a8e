"""Phenotype operations: recording variations and listing known ones."""

from genoshare.config.debug import get_logger
from genoshare.models.base import Record
from genoshare.models.phenotype import Phenotype, UserPhenotype
from genoshare.normalization.variations import VariationNormalizer
from genoshare.services.cache import KnownVariationsCache
from genoshare.store.memory import RecordStore

logger = get_logger(__name__)


class PhenotypeService:
    """Owns the known-variations cache for a store.

    Every UserPhenotype added to the store, through this service or
    directly, invalidates the cached entry of its phenotype, so a read
    after a write always sees the new variation.
    Call close() (or use the service as a context manager) when done
    with it on a store that outlives the service.

    Example:
        >>> service = PhenotypeService(store)
        >>> service.add_variation(phenotype.id, user.id, "Ping pong")
        >>> service.add_variation(phenotype.id, user.id, "ping pong")
        >>> service.known_variations(phenotype.id)
        ['Ping pong']
    """

    def __init__(self, store: RecordStore, cache: KnownVariationsCache | None = None):
        self.store = store
        self.cache = cache if cache is not None else KnownVariationsCache()
        store.subscribe(self._on_record_added)

    def close(self) -> None:
        """Detach from the store and drop cached values."""
        self.store.unsubscribe(self._on_record_added)
        self.cache.clear()

    def __enter__(self) -> "PhenotypeService":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _on_record_added(self, kind: str, record: Record) -> None:
        if isinstance(record, UserPhenotype):
            self.cache.invalidate(record.phenotype_id)

    def add_variation(self, phenotype_id: int, user_id: int, variation: str) -> UserPhenotype:
        """Record a user's variation for a phenotype.

        Raises:
            RecordNotFoundError: If the phenotype does not exist.
            pydantic.ValidationError: If variation is not a string.
        """
        self.store.get(Phenotype, phenotype_id)
        observation = UserPhenotype(
            phenotype_id=phenotype_id,
            user_id=user_id,
            variation=variation,
        )
        self.store.add(observation)
        logger.info(f"User #{user_id} reported '{variation}' for phenotype #{phenotype_id}")
        return observation

    def compute_known_variations(self, phenotype_id: int) -> list[str]:
        """Compute known variations from the stored observations, bypassing the cache."""
        return VariationNormalizer.compute(self.store.observations_for(phenotype_id))

    def known_variations(self, phenotype_id: int, refresh: bool = False) -> list[str]:
        """Distinct variations of a phenotype, first spelling wins.

        Args:
            phenotype_id: Phenotype to look up
            refresh: Drop any cached value and recompute

        Raises:
            RecordNotFoundError: If the phenotype does not exist.
        """
        self.store.get(Phenotype, phenotype_id)
        if refresh:
            self.cache.invalidate(phenotype_id)
        return self.cache.get_or_compute(
            phenotype_id,
            lambda: self.compute_known_variations(phenotype_id),
        )
