"""Normalization of user-entered and uploaded genetic data.

This module provides tools to:
- Deduplicate free-text phenotype variations case-insensitively
- Parse raw genotype files from several providers

Example usage:
    >>> from genoshare.normalization import dedupe_variations
    >>> dedupe_variations(["x", "y", "X"])
    ['x', 'y']
"""

from genoshare.normalization.variations import (
    VariationNormalizer,
    known_variations,
    dedupe_variations,
)
from genoshare.normalization.genotype_parser import (
    GenotypeParseError,
    UnknownFiletypeError,
    parse_genotype_line,
    parse_genotype_file,
)

__all__ = [
    # Variations
    "VariationNormalizer",
    "known_variations",
    "dedupe_variations",
    # Genotype files
    "GenotypeParseError",
    "UnknownFiletypeError",
    "parse_genotype_line",
    "parse_genotype_file",
]
