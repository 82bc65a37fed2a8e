"""Models produced while reading raw genotype files."""

from pydantic import BaseModel, Field


class ParsedSnp(BaseModel):
    """One genotype call read from a raw file.

    Example:
        >>> ParsedSnp(name="rs4477212", chromosome="1", position="82154", allele="AA")
    """

    name: str = Field(..., description="SNP name (lower-case rsid or internal id)")
    chromosome: str = Field(..., description="Chromosome, upper-cased")
    position: str = Field(..., description="Position as written in the file")
    allele: str = Field(..., description="Called alleles, upper-cased")
    line_number: int | None = Field(default=None, description="1-based source line")


class ImportReport(BaseModel):
    """Counts from importing one genotyping into the store."""

    genotype_id: int
    filetype: str
    parsed: int = Field(default=0, description="Genotype calls read from the file")
    snps_created: int = Field(default=0, description="SNPs that were not known before")
    user_snps_created: int = Field(default=0, description="New calls stored for the user")
    user_snps_skipped: int = Field(default=0, description="Calls the user already had")
