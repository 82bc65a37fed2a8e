"""NewsFeed - the most recently created records of each kind."""

from pydantic import BaseModel, Field

from genoshare.models.phenotype import Phenotype
from genoshare.models.records import Genotype, PhenotypeComment, SnpComment, User


class NewsFeed(BaseModel):
    """Newest records per kind, each list ordered newest first."""

    genotypes: list[Genotype] = Field(default_factory=list)
    users: list[User] = Field(default_factory=list)
    phenotypes: list[Phenotype] = Field(default_factory=list)
    phenotype_comments: list[PhenotypeComment] = Field(default_factory=list)
    snp_comments: list[SnpComment] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not any((
            self.genotypes,
            self.users,
            self.phenotypes,
            self.phenotype_comments,
            self.snp_comments,
        ))
