"""Case-insensitive deduplication of phenotype variations.

Users type variations freely, so the same answer shows up as
"Ping pong", "ping pong" and "PING PONG". The known variations of a
phenotype are the distinct answers, keeping the spelling of whoever
entered each one first.

Examples:
    >>> dedupe_variations(["Ping pong", "ping pong"])
    ['Ping pong']
    >>> dedupe_variations(["AA", "aa", "Aa", "BB"])
    ['AA', 'BB']
"""

from typing import Iterable

from genoshare.models.phenotype import UserPhenotype


class VariationNormalizer:
    """Computes the known variations of a phenotype.

    Input order decides which spelling wins, so observations must be
    passed oldest first. Surrounding whitespace is significant.
    """

    @staticmethod
    def key(variation: str) -> str:
        """Comparison key for a variation.

        Raises:
            TypeError: If the variation is not a string (e.g. None).
        """
        if not isinstance(variation, str):
            raise TypeError(f"variation must be a string, got {type(variation).__name__}")
        return variation.lower()

    @classmethod
    def compute_strings(cls, variations: Iterable[str]) -> list[str]:
        """Deduplicate raw variation strings, first spelling wins."""
        seen: set[str] = set()
        known: list[str] = []
        for variation in variations:
            key = cls.key(variation)
            if key not in seen:
                seen.add(key)
                known.append(variation)
        return known

    @classmethod
    def compute(cls, observations: Iterable[UserPhenotype]) -> list[str]:
        """Known variations from observations ordered by creation."""
        return cls.compute_strings(obs.variation for obs in observations)


def known_variations(observations: Iterable[UserPhenotype]) -> list[str]:
    return VariationNormalizer.compute(observations)


def dedupe_variations(variations: Iterable[str]) -> list[str]:
    return VariationNormalizer.compute_strings(variations)


__all__ = [
    "VariationNormalizer",
    "known_variations",
    "dedupe_variations",
]
