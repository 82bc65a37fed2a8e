"""Import of a raw genotyping file into the store.

For every genotype call in the file:
1. Create the SNP if nobody has reported it before
2. Create the user's call (UserSnp) unless the user already has one

Known SNP names and the user's existing calls are loaded once up front.
"""

from typing import Iterable

from genoshare.config.debug import get_logger
from genoshare.models.genotyping import ImportReport
from genoshare.models.records import Genotype, Snp, UserSnp
from genoshare.normalization.genotype_parser import parse_genotype_file
from genoshare.store.memory import RecordStore

logger = get_logger(__name__)


def import_genotype(
    store: RecordStore,
    genotype_id: int,
    lines: Iterable[str],
    filetype: str | None = None,
) -> ImportReport:
    """Parse a genotyping's raw file and store its SNP calls.

    Args:
        store: Store holding the genotype, its user and all SNPs
        genotype_id: Genotyping the file belongs to
        lines: Lines of the raw file
        filetype: Override the genotyping's recorded filetype

    Returns:
        ImportReport with counts of what was created and skipped

    Raises:
        RecordNotFoundError: If the genotyping does not exist
        GenotypeParseError: If the file cannot be parsed. Records created
            before the bad line stay in the store.
    """
    genotype: Genotype = store.get(Genotype, genotype_id)
    filetype = filetype or genotype.filetype
    logger.info(f"Importing genotype #{genotype_id} ({filetype}) for user #{genotype.user_id}")

    snps_by_name = {snp.name: snp for snp in store.all(Snp)}
    known_user_snps = store.user_snp_names(genotype.user_id)
    logger.debug(f"{len(snps_by_name)} known SNPs, {len(known_user_snps)} known user-SNPs")

    report = ImportReport(genotype_id=genotype_id, filetype=filetype)

    for parsed in parse_genotype_file(lines, filetype):
        report.parsed += 1

        snp = snps_by_name.get(parsed.name)
        if snp is None:
            snp = store.add(Snp(
                name=parsed.name,
                chromosome=parsed.chromosome,
                position=parsed.position,
            ))
            snps_by_name[snp.name] = snp
            report.snps_created += 1

        if parsed.name in known_user_snps:
            logger.debug(f"User-SNP {parsed.name} with allele {parsed.allele} already exists")
            report.user_snps_skipped += 1
            continue

        store.add(UserSnp(
            snp_name=parsed.name,
            genotype_id=genotype_id,
            user_id=genotype.user_id,
            local_genotype=parsed.allele,
        ))
        snp.user_snps_count += 1
        known_user_snps.add(parsed.name)
        report.user_snps_created += 1

    logger.info(
        f"Imported genotype #{genotype_id}: {report.parsed} calls, "
        f"{report.snps_created} new SNPs, {report.user_snps_created} new user-SNPs, "
        f"{report.user_snps_skipped} skipped"
    )
    return report
