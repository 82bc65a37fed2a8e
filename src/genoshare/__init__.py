"""GenoShare - sharing genotypes and phenotypes between users.

Public API:
    >>> from genoshare import RecordStore, PhenotypeService, get_news
    >>> store = RecordStore.load("snapshot.json")
    >>> PhenotypeService(store).known_variations(1)
    ['Brown', 'Blue']
    >>> feed = get_news(store)

Deduplicating variations without a store:
    >>> from genoshare import dedupe_variations
    >>> dedupe_variations(["Ping pong", "ping pong"])
    ['Ping pong']
"""

__version__ = "0.1.0"

from genoshare.normalization import (
    VariationNormalizer,
    dedupe_variations,
    known_variations,
    parse_genotype_file,
)
from genoshare.services import (
    KnownVariationsCache,
    NewsConfig,
    PhenotypeService,
    get_news,
    import_genotype,
)
from genoshare.store import RecordNotFoundError, RecordStore

__all__ = [
    "__version__",
    # Variations
    "VariationNormalizer",
    "known_variations",
    "dedupe_variations",
    "KnownVariationsCache",
    "PhenotypeService",
    # Store
    "RecordStore",
    "RecordNotFoundError",
    # News
    "NewsConfig",
    "get_news",
    # Genotype import
    "parse_genotype_file",
    "import_genotype",
]
