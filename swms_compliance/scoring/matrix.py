# swms_compliance/scoring/matrix.py
"""
5x5 risk matrix and score -> risk level classification.

The matrix is a fixed lookup (row = likelihood, column = consequence).
Risk level thresholds are named tables selected by configuration, since
different parts of the SWMS workflow have historically banded the same
score differently (score 10 is "Medium" in one table and "High" in another).
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from swms_compliance.errors import ConfigError

MIN_FACTOR = 1
MAX_FACTOR = 5

RISK_MATRIX: MappingProxyType = MappingProxyType(
    {
        1: (1, 2, 3, 4, 5),
        2: (2, 4, 6, 8, 10),
        3: (3, 6, 9, 12, 15),
        4: (4, 8, 12, 16, 20),
        5: (5, 10, 15, 20, 25),
    }
)


class RiskLevel(Enum):
    """Risk level bands, lowest first."""

    VERY_LOW = "Very Low"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    EXTREME = "Extreme"

    @property
    def rank(self) -> int:
        return list(RiskLevel).index(self)


@dataclass(frozen=True)
class RiskBands:
    """
    A named score -> RiskLevel threshold table.

    With upper_bounds=False, cutoffs are (minimum score, level) pairs checked
    highest first. With upper_bounds=True, cutoffs are (maximum score, level)
    pairs checked lowest first. Scores matching no cutoff get the fallback.
    """

    name: str
    cutoffs: tuple[tuple[int, RiskLevel], ...]
    fallback: RiskLevel
    upper_bounds: bool = False

    def classify(self, score: int) -> RiskLevel:
        for bound, level in self.cutoffs:
            if self.upper_bounds and score <= bound:
                return level
            if not self.upper_bounds and score >= bound:
                return level
        return self.fallback


DESCENDING_BANDS = RiskBands(
    name="descending",
    cutoffs=(
        (20, RiskLevel.EXTREME),
        (15, RiskLevel.HIGH),
        (10, RiskLevel.MEDIUM),
        (5, RiskLevel.LOW),
    ),
    fallback=RiskLevel.VERY_LOW,
)

INCLUSIVE_4_8_15_BANDS = RiskBands(
    name="inclusive_4_8_15",
    cutoffs=(
        (4, RiskLevel.LOW),
        (8, RiskLevel.MEDIUM),
        (15, RiskLevel.HIGH),
    ),
    fallback=RiskLevel.EXTREME,
    upper_bounds=True,
)

INCLUSIVE_4_9_16_BANDS = RiskBands(
    name="inclusive_4_9_16",
    cutoffs=(
        (4, RiskLevel.LOW),
        (9, RiskLevel.MEDIUM),
        (16, RiskLevel.HIGH),
    ),
    fallback=RiskLevel.EXTREME,
    upper_bounds=True,
)

BANDS_BY_NAME: MappingProxyType = MappingProxyType(
    {
        bands.name: bands
        for bands in (DESCENDING_BANDS, INCLUSIVE_4_8_15_BANDS, INCLUSIVE_4_9_16_BANDS)
    }
)

DEFAULT_BANDS = DESCENDING_BANDS


def get_bands(name: str) -> RiskBands:
    """
    Resolve a threshold table by name.

    Raises:
        ConfigError: If no table has that name
    """
    try:
        return BANDS_BY_NAME[name]
    except KeyError:
        raise ConfigError(
            f"Unknown risk level table '{name}'. Must be one of: {', '.join(BANDS_BY_NAME)}"
        ) from None


def clamp_factor(value: int) -> int:
    """Clamp a likelihood or consequence into the matrix range."""
    return max(MIN_FACTOR, min(MAX_FACTOR, value))


def expected_score(likelihood: int, consequence: int) -> int:
    """
    Look up the matrix score for a likelihood/consequence pair.

    Raises:
        ValueError: If either factor is outside 1-5 (clamp first)
    """
    if not (MIN_FACTOR <= likelihood <= MAX_FACTOR and MIN_FACTOR <= consequence <= MAX_FACTOR):
        raise ValueError(
            f"Risk factors must be between {MIN_FACTOR} and {MAX_FACTOR}, "
            f"got likelihood={likelihood}, consequence={consequence}"
        )
    return RISK_MATRIX[likelihood][consequence - 1]


def classify(score: int, bands: RiskBands = DEFAULT_BANDS) -> RiskLevel:
    """Classify a risk score with the given threshold table."""
    return bands.classify(score)
