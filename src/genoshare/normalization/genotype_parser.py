"""Parsing of raw genotyping files from direct-to-consumer providers.

Each supported format is reduced to the same four fields:
SNP name, chromosome, position and the called alleles.

Supported formats (see SUPPORTED_FILETYPES):
- 23andme:            rsid <tab> chromosome <tab> position <tab> genotype
- ancestry:           rsid <tab> chromosome <tab> position <tab> allele1 <tab> allele2
- decodeme:           Name,Variation,Chromosome,Position,Strand,YourCode
- ftdna-illumina:     "RSID","CHROMOSOME","POSITION","RESULT"
- 23andme-exome-vcf:  VCF 4.x with a single sample column
- IYG:                name <tab> genotype

Examples:
    >>> parse_genotype_line("rs4477212\\t1\\t82154\\tAA", "23andme")
    ParsedSnp(name='rs4477212', chromosome='1', position='82154', allele='AA', line_number=None)
"""

import re
from typing import Callable, Iterable, Iterator

from genoshare.config.constants import (
    FILETYPE_23ANDME,
    FILETYPE_23ANDME_EXOME_VCF,
    FILETYPE_ANCESTRY,
    FILETYPE_DECODEME,
    FILETYPE_FTDNA_ILLUMINA,
    FILETYPE_IYG,
    MT_DBSNP_NAMES,
    SUPPORTED_FILETYPES,
)
from genoshare.config.debug import get_logger
from genoshare.models.genotyping import ParsedSnp

logger = get_logger(__name__)

# Lower-cased lookup, lines are lower-cased before parsing
_MT_NAMES = {name.lower(): rsid for name, rsid in MT_DBSNP_NAMES.items()}

_NON_DIGITS = re.compile(r"\D")


class GenotypeParseError(Exception):
    """Raised when a line of a genotype file cannot be parsed."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class UnknownFiletypeError(GenotypeParseError):
    """Raised for a genotype file format we have no parser for."""


# Fields: name, chromosome, position, allele (before upper-casing)
Fields = list[str]


def _require(fields: Fields, count: int, filetype: str) -> None:
    if len(fields) < count:
        raise GenotypeParseError(
            f"expected at least {count} columns for {filetype}, got {len(fields)}"
        )


def _parse_23andme(line: str) -> Fields | None:
    fields = line.split("\t")
    _require(fields, 4, FILETYPE_23ANDME)
    return fields[:4]


def _parse_ancestry(line: str) -> Fields | None:
    fields = line.split("\t")
    if fields[0] == "rsid":
        return None
    _require(fields, 5, FILETYPE_ANCESTRY)
    return [fields[0], fields[1], fields[2], fields[3] + fields[4]]


def _parse_decodeme(line: str) -> Fields | None:
    fields = line.split(",")
    if fields[0] == "name":
        return None
    _require(fields, 6, FILETYPE_DECODEME)
    return [fields[0], fields[2], fields[3], fields[5]]


def _parse_ftdna_illumina(line: str) -> Fields | None:
    fields = line.replace('"', "").split(",")
    if fields[0] == "rsid":
        return None
    # Same column layout as 23andme from here on
    _require(fields, 4, FILETYPE_FTDNA_ILLUMINA)
    return fields[:4]


def _parse_exome_vcf(line: str) -> Fields | None:
    fields = line.split("\t")
    _require(fields, 10, FILETYPE_23ANDME_EXOME_VCF)

    format_keys = fields[8].split(":")
    try:
        gt_index = format_keys.index("gt")
    except ValueError:
        raise GenotypeParseError("no GT key in FORMAT column") from None

    sample = fields[9].split(":")
    if gt_index >= len(sample):
        raise GenotypeParseError("sample column has no GT value")

    ref, alt = fields[3], fields[4]
    genotype = ""
    for allele in re.split(r"[/|]", sample[gt_index]):
        if allele == "0":
            genotype += ref
        elif allele == "1":
            genotype += alt

    return [fields[2], fields[0], fields[1], genotype]


def _parse_iyg(line: str) -> Fields | None:
    fields = line.split("\t")
    _require(fields, 2, FILETYPE_IYG)
    name, allele = fields[0], fields[1]

    if name.startswith("mt"):
        position = _NON_DIGITS.sub("", name)
        return [_MT_NAMES.get(name, name), "MT", position, allele]

    # Non-mitochondrial IYG calls carry no coordinates
    return [name, "1", "1", allele]


_PARSERS: dict[str, Callable[[str], Fields | None]] = {
    FILETYPE_23ANDME: _parse_23andme,
    FILETYPE_ANCESTRY: _parse_ancestry,
    FILETYPE_DECODEME: _parse_decodeme,
    FILETYPE_FTDNA_ILLUMINA: _parse_ftdna_illumina,
    FILETYPE_23ANDME_EXOME_VCF: _parse_exome_vcf,
    FILETYPE_IYG: _parse_iyg,
}


def _get_parser(filetype: str) -> Callable[[str], Fields | None]:
    parser = _PARSERS.get(filetype)
    if parser is None:
        raise UnknownFiletypeError(
            f"Unknown filetype '{filetype}'. Supported: {', '.join(SUPPORTED_FILETYPES)}"
        )
    return parser


def parse_genotype_line(
    line: str,
    filetype: str,
    line_number: int | None = None,
) -> ParsedSnp | None:
    """Parse a single line of a raw genotype file.

    Args:
        line: Raw line, with or without the trailing newline
        filetype: One of SUPPORTED_FILETYPES
        line_number: 1-based line number, used in errors and the result

    Returns:
        ParsedSnp, or None for comments, blank lines and header rows

    Raises:
        UnknownFiletypeError: If the filetype is not supported
        GenotypeParseError: If the line is malformed
    """
    parser = _get_parser(filetype)

    if line.startswith("#"):
        return None
    line = line.rstrip("\r\n").lower()
    if not line.strip():
        return None

    try:
        fields = parser(line)
    except GenotypeParseError as e:
        raise GenotypeParseError(str(e), line_number) from None
    if fields is None:
        return None

    name, chromosome, position, allele = fields
    return ParsedSnp(
        name=name,
        chromosome=chromosome.upper(),
        position=position,
        allele=allele.upper(),
        line_number=line_number,
    )


def parse_genotype_file(lines: Iterable[str], filetype: str) -> Iterator[ParsedSnp]:
    """Parse every genotype call in a raw file.

    Args:
        lines: The file's lines (an open text file works)
        filetype: One of SUPPORTED_FILETYPES

    Yields:
        ParsedSnp for each genotype call, in file order
    """
    # Fail on the format before reading anything
    _get_parser(filetype)

    count = 0
    for line_number, line in enumerate(lines, start=1):
        parsed = parse_genotype_line(line, filetype, line_number)
        if parsed is not None:
            count += 1
            yield parsed

    logger.debug(f"Parsed {count} genotype calls from {filetype} file")


__all__ = [
    "GenotypeParseError",
    "UnknownFiletypeError",
    "parse_genotype_line",
    "parse_genotype_file",
]
