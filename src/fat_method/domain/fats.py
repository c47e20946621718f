"""Domain models for the oils and fats ranking."""

from dataclasses import dataclass
from enum import Enum


class Usage(Enum):
    """Usage profiles the ranking is published for."""

    CRU = "cru"
    DOUCE = "douce"
    HAUTE = "haute"


@dataclass(frozen=True)
class BaseMeasurement:
    """Hand-curated measurements for one oil or fat."""

    omega6_pct: float
    omega3_pct: float
    saturated_pct: float
    stability_index: float
    refining_level: float
    smoke_point_c: float


@dataclass(frozen=True)
class CriterionScore:
    """A criterion's 0-5 note with its weight and weighted contribution."""

    criterion: str
    note5: int
    weight: int
    contribution: int


@dataclass(frozen=True)
class ProductEntry:
    """Scorecard of one product for one usage.

    ``total`` is None when the product is out of scope for the usage.
    """

    name: str
    total: int | None
    criteria: tuple[CriterionScore, ...]


@dataclass(frozen=True)
class WeightingRow:
    """Weight given to a criterion within a usage."""

    criterion: str
    weight: int


@dataclass(frozen=True)
class ScaleStep:
    note: int
    label: str


@dataclass(frozen=True)
class CriterionDoc:
    """User-facing description of a criterion and its 0-5 scale."""

    criterion: str
    description: str
    scale: tuple[ScaleStep, ...]


@dataclass(frozen=True)
class FaqEntry:
    question: str
    answer: str
