"""Centralized constants for GenoShare.

- News feed limits
- Supported raw genotype file formats
- Mitochondrial SNP renames
- Defaults for newly discovered SNPs
"""

# =============================================================================
# NEWS FEED
# =============================================================================

NEWS_LIMIT = 20

# Record kinds shown on the news page, in display order
NEWS_SECTIONS: tuple[str, ...] = (
    "genotypes",
    "users",
    "phenotypes",
    "phenotype_comments",
    "snp_comments",
)


# =============================================================================
# GENOTYPE FILE FORMATS
# =============================================================================

FILETYPE_23ANDME = "23andme"
FILETYPE_ANCESTRY = "ancestry"
FILETYPE_DECODEME = "decodeme"
FILETYPE_FTDNA_ILLUMINA = "ftdna-illumina"
FILETYPE_23ANDME_EXOME_VCF = "23andme-exome-vcf"
FILETYPE_IYG = "IYG"

SUPPORTED_FILETYPES: tuple[str, ...] = (
    FILETYPE_23ANDME,
    FILETYPE_ANCESTRY,
    FILETYPE_DECODEME,
    FILETYPE_FTDNA_ILLUMINA,
    FILETYPE_23ANDME_EXOME_VCF,
    FILETYPE_IYG,
)


# =============================================================================
# MITOCHONDRIAL SNP NAMES
# =============================================================================
# IYG files name some mitochondrial SNPs by position; these have dbSNP ids.

MT_DBSNP_NAMES: dict[str, str] = {
    "MT-T3027C": "rs199838004",
    "MT-T4336C": "rs41456348",
    "MT-G4580A": "rs28357975",
    "MT-T5004C": "rs41419549",
    "MT-C5178a": "rs28357984",
    "MT-A5390G": "rs41333444",
    "MT-C6371T": "rs41366755",
    "MT-G8697A": "rs28358886",
    "MT-G9477A": "rs2853825",
    "MT-G10310A": "rs41467651",
    "MT-A10550G": "rs28358280",
    "MT-C10873T": "rs2857284",
    "MT-C11332T": "rs55714831",
    "MT-A11947G": "rs28359168",
    "MT-A12308G": "rs2853498",
    "MT-A12612G": "rs28359172",
    "MT-T14318C": "rs28357675",
    "MT-T14766C": "rs3135031",
    "MT-T14783C": "rs28357680",
}


# =============================================================================
# NEW SNP DEFAULTS
# =============================================================================

DEFAULT_ALLELE_FREQUENCY: dict[str, int] = {"A": 0, "T": 0, "G": 0, "C": 0}
DEFAULT_GENOTYPE_FREQUENCY: dict[str, int] = {}
DEFAULT_SNP_RANKING = 0
