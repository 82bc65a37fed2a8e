"""Data models for GenoShare."""

from genoshare.models.base import Record
from genoshare.models.genotyping import ImportReport, ParsedSnp
from genoshare.models.news import NewsFeed
from genoshare.models.phenotype import Phenotype, UserPhenotype
from genoshare.models.records import (
    Genotype,
    PhenotypeComment,
    Snp,
    SnpComment,
    User,
    UserSnp,
)

__all__ = [
    "Record",
    "User",
    "Genotype",
    "Snp",
    "UserSnp",
    "Phenotype",
    "UserPhenotype",
    "PhenotypeComment",
    "SnpComment",
    "NewsFeed",
    "ParsedSnp",
    "ImportReport",
]
