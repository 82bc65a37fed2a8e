"""Users, genotypings, SNPs and comments."""

from pydantic import Field

from genoshare.config.constants import (
    DEFAULT_ALLELE_FREQUENCY,
    DEFAULT_GENOTYPE_FREQUENCY,
    DEFAULT_SNP_RANKING,
)
from genoshare.models.base import Record


class User(Record):
    name: str = Field(..., description="Display name")
    email: str | None = Field(default=None, description="Contact address")


class Genotype(Record):
    """An uploaded raw genotyping file belonging to a user."""

    user_id: int = Field(..., description="Owner of the genotyping")
    filetype: str = Field(..., description="Raw file format, e.g. '23andme'")
    fs_filename: str | None = Field(default=None, description="Stored upload filename")


class Snp(Record):
    name: str = Field(..., description="SNP name, usually a dbSNP rsid")
    chromosome: str = Field(..., description="Chromosome, upper-cased (e.g. 'MT', 'X', '11')")
    position: str = Field(..., description="Position on the chromosome")
    ranking: int = Field(default=DEFAULT_SNP_RANKING)
    allele_frequency: dict[str, int] = Field(default_factory=lambda: dict(DEFAULT_ALLELE_FREQUENCY))
    genotype_frequency: dict[str, int] = Field(default_factory=lambda: dict(DEFAULT_GENOTYPE_FREQUENCY))
    user_snps_count: int = Field(default=0, description="Number of users carrying this SNP")


class UserSnp(Record):
    """One user's genotype call at one SNP."""

    snp_name: str = Field(..., description="Name of the SNP")
    genotype_id: int = Field(..., description="Genotyping the call came from")
    user_id: int = Field(..., description="User the call belongs to")
    local_genotype: str = Field(..., description="Called alleles, upper-cased (e.g. 'AG')")


class PhenotypeComment(Record):
    phenotype_id: int = Field(..., description="Commented phenotype")
    user_id: int = Field(..., description="Author")
    subject: str = Field(default="", description="Comment subject line")
    comment_text: str = Field(..., description="Comment body")


class SnpComment(Record):
    snp_name: str = Field(..., description="Commented SNP")
    user_id: int = Field(..., description="Author")
    subject: str = Field(default="", description="Comment subject line")
    comment_text: str = Field(..., description="Comment body")
