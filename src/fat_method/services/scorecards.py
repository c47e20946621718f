"""Scorecards of each oil and fat per usage.

Each usage weighs a subset of criteria (weights sum to 100). A criterion's
0-5 note becomes a contribution of ``round(note / 5 * weight)`` and the
contributions add up to the product total. Published tables are built once
at import.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from fat_method.domain import reference_data as ref
from fat_method.domain.fats import (
    BaseMeasurement,
    CriterionScore,
    ProductEntry,
    Usage,
    WeightingRow,
)
from fat_method.services import grading

TOTAL_WEIGHT = 100


@dataclass(frozen=True)
class Criterion:
    """A weighted criterion of a usage and how to note a product on it."""

    label: str
    weight: int
    grade: Callable[[str, BaseMeasurement], int]


def _ratio(_name: str, base: BaseMeasurement) -> int:
    return grading.note_from_ratio(base.omega6_pct, base.omega3_pct)


def _omega6_bas(_name: str, base: BaseMeasurement) -> int:
    return grading.note_from_omega6_bas(base.omega6_pct)


def _omega3(_name: str, base: BaseMeasurement) -> int:
    return grading.note_from_omega3(base.omega3_pct)


def _stability(_name: str, base: BaseMeasurement) -> int:
    return grading.note_from_stability(base.stability_index)


def _raffinage(_name: str, base: BaseMeasurement) -> int:
    return grading.note_from_raffinage(base.refining_level)


def _smoke_douce(_name: str, base: BaseMeasurement) -> int:
    return grading.note_from_smoke_point_douce(base.smoke_point_c)


def _smoke_haute(_name: str, base: BaseMeasurement) -> int:
    return grading.note_from_smoke_point_haute(base.smoke_point_c)


def _satures(_name: str, base: BaseMeasurement) -> int:
    return grading.note_from_satures(base.saturated_pct)


def _anciennete(name: str, _base: BaseMeasurement) -> int:
    return grading.get_anciennete_note(name)


# Row order is the order criteria are listed on a scorecard.
CRITERIA_BY_USAGE: Mapping[Usage, tuple[Criterion, ...]] = MappingProxyType(
    {
        Usage.CRU: (
            Criterion(ref.RATIO, 35, _ratio),
            Criterion(ref.RAFFINAGE, 35, _raffinage),
            Criterion(ref.STABILITE, 5, _stability),
            Criterion(ref.OMEGA6_BAS, 10, _omega6_bas),
            Criterion(ref.OMEGA3, 10, _omega3),
            Criterion(ref.ANCIENNETE, 5, _anciennete),
        ),
        Usage.DOUCE: (
            Criterion(ref.STABILITE, 40, _stability),
            Criterion(ref.POINT_DE_FUMEE, 15, _smoke_douce),
            Criterion(ref.RAFFINAGE, 20, _raffinage),
            Criterion(ref.OMEGA6_BAS, 15, _omega6_bas),
            Criterion(ref.SATURES, 5, _satures),
            Criterion(ref.ANCIENNETE, 5, _anciennete),
        ),
        Usage.HAUTE: (
            Criterion(ref.STABILITE, 45, _stability),
            Criterion(ref.POINT_DE_FUMEE, 30, _smoke_haute),
            Criterion(ref.RAFFINAGE, 10, _raffinage),
            Criterion(ref.ANCIENNETE, 5, _anciennete),
            Criterion(ref.SATURES, 5, _satures),
            Criterion(ref.OMEGA6_BAS, 5, _omega6_bas),
        ),
    }
)

EXCLUDED_BY_USAGE: Mapping[Usage, frozenset[str]] = MappingProxyType(
    {
        Usage.CRU: ref.CRU_EXCLUDED_NAMES,
        Usage.DOUCE: frozenset(),
        Usage.HAUTE: frozenset(),
    }
)


def contribution(note5: int, weight: int) -> int:
    """Return the share of ``weight`` earned by a 0-5 note."""
    return grading.round_half_up(note5 / grading.MAX_NOTE * weight)


def score_criterion(criterion: str, note5: int, weight: int) -> CriterionScore:
    return CriterionScore(
        criterion=criterion,
        note5=note5,
        weight=weight,
        contribution=contribution(note5, weight),
    )


def build_entry(usage: Usage, name: str) -> ProductEntry:
    """Build the scorecard of one product for one usage.

    Excluded products and products without base data or consumption history
    get a None total and no criteria.
    """
    base = ref.OIL_BASE_DATA.get(name)
    if (
        name in EXCLUDED_BY_USAGE[usage]
        or base is None
        or name not in ref.OIL_CONSUMPTION_YEARS
    ):
        return ProductEntry(name=name, total=None, criteria=())
    criteria = tuple(
        score_criterion(item.label, item.grade(name, base), item.weight)
        for item in CRITERIA_BY_USAGE[usage]
    )
    total = sum(row.contribution for row in criteria)
    return ProductEntry(name=name, total=total, criteria=criteria)


def build_detail(usage: Usage) -> tuple[ProductEntry, ...]:
    """Build the scorecards of a usage in its display order."""
    return tuple(build_entry(usage, name) for name in ref.DISPLAY_ORDER[usage])


def build_weightings(usage: Usage) -> tuple[WeightingRow, ...]:
    """Return the weights of a usage, heaviest first (ties keep row order)."""
    rows = [
        WeightingRow(criterion=item.label, weight=item.weight)
        for item in CRITERIA_BY_USAGE[usage]
    ]
    return tuple(sorted(rows, key=lambda row: row.weight, reverse=True))


def build_scorecards() -> dict[Usage, tuple[ProductEntry, ...]]:
    """Build the scorecards of every usage."""
    return {usage: build_detail(usage) for usage in Usage}


WEIGHTINGS_BY_USAGE: Mapping[Usage, tuple[WeightingRow, ...]] = MappingProxyType(
    {usage: build_weightings(usage) for usage in Usage}
)

DETAIL_BY_USAGE: Mapping[Usage, tuple[ProductEntry, ...]] = MappingProxyType(
    build_scorecards()
)
DETAIL_CRU = DETAIL_BY_USAGE[Usage.CRU]
DETAIL_DOUCE = DETAIL_BY_USAGE[Usage.DOUCE]
DETAIL_HAUTE = DETAIL_BY_USAGE[Usage.HAUTE]
