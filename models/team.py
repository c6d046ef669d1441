"""Team data model."""

import re
from dataclasses import dataclass

# Play-in teams share a seed and carry a sub-letter, e.g. "16a" / "16b"
_SEED_SUFFIX = re.compile(r"[a-z]")
_SEED_DIGITS = re.compile(r"[0-9]+")


class SeedParseError(ValueError):
    """Raised when a seed label does not reduce to a positive integer."""


def parse_seed(seed: str | int) -> int:
    """Parse a seed label like "11" or "16b" into its seed number.

    Raises:
        SeedParseError: if nothing numeric remains after stripping letters
    """
    if isinstance(seed, bool):
        raise SeedParseError(f"Invalid seed: {seed!r}")
    if isinstance(seed, int):
        number = seed
    else:
        digits = _SEED_SUFFIX.sub("", str(seed)).strip()
        if not _SEED_DIGITS.fullmatch(digits):
            raise SeedParseError(f"Invalid seed: {seed!r}")
        number = int(digits)
    if number < 1:
        raise SeedParseError(f"Seed must be positive: {seed!r}")
    return number


@dataclass(frozen=True)
class Team:
    name: str
    seed: str  # label as published, may carry a play-in suffix
    region: str

    @property
    def seed_number(self) -> int:
        return parse_seed(self.seed)

    def __str__(self):
        return f"({self.seed}) {self.name}"
