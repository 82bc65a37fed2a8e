"""Services built on top of the record store."""

from genoshare.services.cache import KnownVariationsCache
from genoshare.services.importer import import_genotype
from genoshare.services.news import NewsConfig, get_news
from genoshare.services.phenotypes import PhenotypeService

__all__ = [
    "KnownVariationsCache",
    "PhenotypeService",
    "NewsConfig",
    "get_news",
    "import_genotype",
]
