"""News feed: the newest genotypes, users, phenotypes and comments."""

from dataclasses import dataclass

from genoshare.config.constants import NEWS_LIMIT
from genoshare.config.debug import get_logger
from genoshare.models.news import NewsFeed
from genoshare.models.phenotype import Phenotype
from genoshare.models.records import Genotype, PhenotypeComment, SnpComment, User
from genoshare.store.memory import RecordStore

logger = get_logger(__name__)


@dataclass
class NewsConfig:
    """How many records each news section shows.

    Example:
        >>> config = NewsConfig(max_users=5)
        >>> feed = get_news(store, config)
    """

    max_genotypes: int = NEWS_LIMIT
    max_users: int = NEWS_LIMIT
    max_phenotypes: int = NEWS_LIMIT
    max_phenotype_comments: int = NEWS_LIMIT
    max_snp_comments: int = NEWS_LIMIT

    @classmethod
    def uniform(cls, limit: int) -> "NewsConfig":
        """Same limit for every section."""
        return cls(limit, limit, limit, limit, limit)


def get_news(store: RecordStore, config: NewsConfig | None = None) -> NewsFeed:
    """Collect the newest records of each kind, newest first.

    Raises:
        ValueError: If any configured limit is negative.
    """
    config = config or NewsConfig()

    feed = NewsFeed(
        genotypes=store.recent(Genotype, config.max_genotypes),
        users=store.recent(User, config.max_users),
        phenotypes=store.recent(Phenotype, config.max_phenotypes),
        phenotype_comments=store.recent(PhenotypeComment, config.max_phenotype_comments),
        snp_comments=store.recent(SnpComment, config.max_snp_comments),
    )
    logger.debug(
        f"News: {len(feed.genotypes)} genotypes, {len(feed.users)} users, "
        f"{len(feed.phenotypes)} phenotypes, {len(feed.phenotype_comments)} phenotype comments, "
        f"{len(feed.snp_comments)} SNP comments"
    )
    return feed
