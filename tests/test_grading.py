"""Tests for the threshold grids."""

import pytest

from fat_method.services.grading import (
    anciennete_from_years,
    get_anciennete_note,
    note_from_omega3,
    note_from_omega6_bas,
    note_from_raffinage,
    note_from_ratio,
    note_from_satures,
    note_from_smoke_point_douce,
    note_from_smoke_point_haute,
    note_from_stability,
    round_half_up,
)


def test_ratio_without_omega3() -> None:
    assert note_from_ratio(0, 0) == 3
    assert note_from_ratio(-1, 0) == 3
    assert note_from_ratio(5, 0) == 0
    assert note_from_ratio(5, -2) == 0


@pytest.mark.parametrize(
    ("omega6", "omega3", "expected"),
    [
        (1, 1, 5),
        (2, 1, 4),
        (4, 1, 3),
        (10, 1, 2),
        (20, 1, 1),
        (20.5, 1, 0),
        (14, 55, 5),
        (10, 0.8, 1),
    ],
)
def test_ratio_bounds_are_inclusive(omega6, omega3, expected) -> None:
    assert note_from_ratio(omega6, omega3) == expected


@pytest.mark.parametrize(
    ("pct", "expected"),
    [(4.9, 5), (5, 4), (10, 3), (15, 2), (25, 1), (34.9, 1), (35, 0), (70, 0)],
)
def test_omega6_bas_bounds_are_strict(pct, expected) -> None:
    assert note_from_omega6_bas(pct) == expected


@pytest.mark.parametrize(
    ("pct", "expected"),
    [(55, 5), (50, 5), (30, 4), (15, 3), (5, 2), (1, 1), (0.8, 0), (0, 0), (-1, 0)],
)
def test_omega3_bounds(pct, expected) -> None:
    assert note_from_omega3(pct) == expected


@pytest.mark.parametrize(
    ("index", "expected"),
    [(25, 5), (20, 5), (19.9, 4), (15, 4), (10, 3), (5, 2), (2, 1), (1, 0), (-3, 0)],
)
def test_stability_bounds(index, expected) -> None:
    assert note_from_stability(index) == expected


@pytest.mark.parametrize(
    ("level", "expected"),
    [(-1, 5), (0, 5), (1, 4), (2.4, 3), (2.5, 2), (2.6, 2), (5, 0), (6, 0)],
)
def test_raffinage_rounds_then_clamps(level, expected) -> None:
    assert note_from_raffinage(level) == expected


def test_smoke_point_grids_differ_by_usage() -> None:
    assert note_from_smoke_point_douce(200) == 5
    assert note_from_smoke_point_haute(200) == 4
    assert note_from_smoke_point_douce(120) == 1
    assert note_from_smoke_point_haute(120) == 0
    assert note_from_smoke_point_douce(119.9) == 0
    assert note_from_smoke_point_haute(220) == 5
    assert note_from_smoke_point_haute(139) == 0


@pytest.mark.parametrize(
    ("pct", "expected"),
    [(7, 5), (15, 4), (25, 3), (35, 2), (50, 1), (64.9, 1), (65, 0), (87, 0)],
)
def test_satures_bounds_are_strict(pct, expected) -> None:
    assert note_from_satures(pct) == expected


@pytest.mark.parametrize(
    ("years", "expected"),
    [(0, 0), (49, 0), (50, 1), (99, 1), (100, 2), (200, 3), (399, 4), (400, 5)],
)
def test_anciennete_from_years(years, expected) -> None:
    assert anciennete_from_years(years) == expected


def test_anciennete_is_capped() -> None:
    assert anciennete_from_years(100000) == 5


def test_anciennete_note_of_unknown_product_is_zero() -> None:
    assert get_anciennete_note("Huile de palme") == 0
    assert get_anciennete_note("Huile de lin") == 5
    assert get_anciennete_note("Huile d'arachide") == 2


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(0.49) == 0
    assert round_half_up(-0.5) == 0
