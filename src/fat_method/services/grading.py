"""Threshold grids turning measurements into 0-5 notes.

Every grid is an ordered list of ``(bound, note)`` pairs scanned in order,
first match wins. When nothing matches the grid falls back to a default
note, so every grid is total over its numeric domain.
"""

import math

from fat_method.domain.reference_data import OIL_CONSUMPTION_YEARS

MAX_NOTE = 5

_Cutoffs = tuple[tuple[float, int], ...]

# Ratio omega-6/omega-3, matched with ratio <= bound.
_RATIO_CUTOFFS = ((1, 5), (2, 4), (4, 3), (10, 2), (20, 1), (math.inf, 0))

# Omega-6 %, matched with pct < bound.
_OMEGA6_CUTOFFS = ((5, 5), (10, 4), (15, 3), (25, 2), (35, 1), (math.inf, 0))

# Omega-3 %, matched with pct >= bound.
_OMEGA3_CUTOFFS = ((50, 5), (30, 4), (15, 3), (5, 2), (1, 1))

# Rancimat-like index 0-25, matched with index >= bound.
_STABILITY_CUTOFFS = ((20, 5), (15, 4), (10, 3), (5, 2), (2, 1))

# Smoke point °C, matched with temperature >= bound.
_SMOKE_DOUCE_CUTOFFS = ((200, 5), (180, 4), (160, 3), (140, 2), (120, 1))
_SMOKE_HAUTE_CUTOFFS = ((220, 5), (200, 4), (180, 3), (160, 2), (140, 1))

# Saturated %, matched with pct < bound.
_SATURES_CUTOFFS = ((15, 5), (25, 4), (35, 3), (50, 2), (65, 1), (math.inf, 0))

# Years of human consumption, matched with years < bound.
_ANCIENNETE_CUTOFFS = ((50, 0), (100, 1), (200, 2), (300, 3), (400, 4))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -0.5 -> 0)."""
    return math.floor(value + 0.5)


def _first_below(value: float, cutoffs: _Cutoffs, default: int) -> int:
    return next((note for bound, note in cutoffs if value < bound), default)


def _first_at_least(value: float, cutoffs: _Cutoffs, default: int = 0) -> int:
    return next((note for bound, note in cutoffs if value >= bound), default)


def note_from_ratio(omega6_pct: float, omega3_pct: float) -> int:
    """Note the omega-6/omega-3 balance, lower ratio scoring higher.

    Without omega-3 the ratio is infinite and scores 0, unless there is no
    omega-6 either, which is treated as neutral (3).
    """
    if omega3_pct <= 0:
        return 3 if omega6_pct <= 0 else 0
    ratio = omega6_pct / omega3_pct
    return next((note for bound, note in _RATIO_CUTOFFS if ratio <= bound), 0)


def note_from_omega6_bas(omega6_pct: float) -> int:
    """Note a low omega-6 content."""
    return _first_below(omega6_pct, _OMEGA6_CUTOFFS, default=0)


def note_from_omega3(omega3_pct: float) -> int:
    """Note the omega-3 content."""
    return _first_at_least(omega3_pct, _OMEGA3_CUTOFFS)


def note_from_stability(stability_index: float) -> int:
    """Note the oxidative stability index."""
    return _first_at_least(stability_index, _STABILITY_CUTOFFS)


def note_from_raffinage(refining_level: float) -> int:
    """Note the refining level: 0 (extra virgin) -> 5, 5 (industrial) -> 0."""
    level = round_half_up(max(0, min(MAX_NOTE, refining_level)))
    return MAX_NOTE - level


def note_from_smoke_point_douce(smoke_point_c: float) -> int:
    """Note the smoke point for gentle cooking (<= 160 °C)."""
    return _first_at_least(smoke_point_c, _SMOKE_DOUCE_CUTOFFS)


def note_from_smoke_point_haute(smoke_point_c: float) -> int:
    """Note the smoke point for high-heat cooking (> 160 °C)."""
    return _first_at_least(smoke_point_c, _SMOKE_HAUTE_CUTOFFS)


def note_from_satures(saturated_pct: float) -> int:
    """Note the saturated fat content, lightly penalising very saturated fats."""
    return _first_below(saturated_pct, _SATURES_CUTOFFS, default=0)


def anciennete_from_years(years: float) -> int:
    """Note how long a fat has been part of the human diet."""
    return _first_below(years, _ANCIENNETE_CUTOFFS, default=MAX_NOTE)


def get_anciennete_note(name: str) -> int:
    """Return the history note of a product, 0 when its history is unknown."""
    years = OIL_CONSUMPTION_YEARS.get(name)
    return anciennete_from_years(years) if years is not None else 0
