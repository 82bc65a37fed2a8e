"""Phenotypes and the variations users report for them.

A Phenotype is a trait (e.g. "Eye color"); each UserPhenotype is one
user's free-text answer ("Brown", "brown", "Hazel", ...).
"""

from pydantic import Field

from genoshare.models.base import Record


class Phenotype(Record):
    characteristic: str = Field(..., description="Name of the trait")
    description: str | None = Field(default=None, description="Longer explanation of the trait")


class UserPhenotype(Record):
    """A user's reported variation of a phenotype.

    The variation text is stored exactly as entered. Casing and whitespace
    are kept; deduplication happens when known variations are computed.
    Strict typing rejects None and non-string values at creation time,
    and the fields cannot be reassigned afterwards.
    """

    phenotype_id: int = Field(..., frozen=True, description="Phenotype this observation belongs to")
    user_id: int = Field(..., frozen=True, description="User who reported it")
    variation: str = Field(..., strict=True, frozen=True, description="Free-text variation as entered")
