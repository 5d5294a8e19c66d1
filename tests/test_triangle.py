import math

import numpy as np
import pytest

from triggy.errors import ErrorKind, ErrorSet
from triggy.pair import PairStatus
from triggy.solver import SolverConfig, Strategy, TriangleSolver, solve


def _solved(**values):
    triangle = TriangleSolver.from_values(**values)
    result = solve(triangle)
    assert result.success, result.errors
    return triangle, result


@pytest.mark.parametrize(
    'values, expected',
    [
        ({'angle_a': 50, 'angle_b': 60}, True),
        ({'angle_a': 50, 'side_a': 3}, False),
        ({'side_a': 3, 'side_b': 4, 'side_c': 5}, True),
        ({'angle_b': 60, 'side_a': 5, 'side_c': 5}, True),
        ({'side_a': 3, 'side_b': 4}, False),
        ({}, False),
    ],
)
def test_is_sufficient(values, expected):
    assert TriangleSolver.from_values(**values).is_sufficient is expected


def test_is_complete_only_when_every_pair_is_known():
    triangle = TriangleSolver.from_values(side_a=3, side_b=4, side_c=5)
    assert not triangle.is_complete

    solve(triangle)

    assert triangle.is_complete
    assert triangle.statuses() == (PairStatus.BOTH,) * 3


@pytest.mark.parametrize(
    'values, kind',
    [
        ({'angle_a': 180}, ErrorKind.ONE_ANGLE_180),
        ({'angle_c': 200, 'angle_b': 10}, ErrorKind.ONE_ANGLE_180),
        ({'angle_a': 100, 'angle_b': 80}, ErrorKind.TWO_ANGLE_180),
        ({'angle_b': 90, 'angle_c': 120}, ErrorKind.TWO_ANGLE_180),
    ],
)
def test_check_angles_rejects_impossible_angles(values, kind):
    triangle = TriangleSolver.from_values(**values)
    errors = ErrorSet()

    assert not triangle.check_angles(errors)
    assert errors == {kind}


def test_check_angles_accepts_valid_angles():
    errors = ErrorSet()
    assert TriangleSolver.from_values(angle_a=60, angle_b=60).check_angles(errors)
    assert not errors


def test_sss_round_trip_reproduces_angles():
    first, result = _solved(side_a=5, side_b=6, side_c=7)
    again, _ = _solved(side_a=5, side_b=6, side_c=7)

    assert result.strategy is Strategy.SSS
    assert again.angles() == pytest.approx(first.angles(), abs=1e-6)
    assert first.angles().sum() == pytest.approx(180.0, abs=1e-6)


def test_sss_three_four_five():
    triangle, result = _solved(side_a=3, side_b=4, side_c=5)

    assert result.strategy is Strategy.SSS
    assert triangle.angles() == pytest.approx([36.87, 53.13, 90.0], abs=0.005)
    assert triangle.sides() == pytest.approx([3, 4, 5])
    assert triangle.alt_triangle is None


def test_sss_rejects_triangle_inequality():
    triangle = TriangleSolver.from_values(side_a=10, side_b=3, side_c=4)
    errors = ErrorSet()

    result = solve(triangle, errors)

    assert not result.success
    assert result.strategy is None
    assert errors == {ErrorKind.ONE_SIDE}
    assert triangle.angles() == pytest.approx([0, 0, 0])


def test_sss_rejects_flat_triangle():
    errors = ErrorSet()
    assert not TriangleSolver.from_values(side_a=7, side_b=3, side_c=4).solve_sss(errors)
    assert ErrorKind.ONE_SIDE in errors


def test_sas_equilateral():
    triangle, result = _solved(angle_b=60, side_a=5, side_c=5)

    assert result.strategy is Strategy.SAS
    assert triangle.angles() == pytest.approx([60, 60, 60], abs=1e-6)
    assert triangle.sides() == pytest.approx([5, 5, 5], abs=1e-6)


@pytest.mark.parametrize(
    'values',
    [
        {'side_a': 4, 'angle_b': 100, 'side_c': 9},
        {'side_a': 9, 'angle_c': 100, 'side_b': 4},
        {'side_b': 9, 'angle_a': 100, 'side_c': 4},
    ],
)
def test_sas_handles_obtuse_included_angle(values):
    triangle, result = _solved(**values)

    assert result.strategy is Strategy.SAS
    assert triangle.angles().sum() == pytest.approx(180.0, abs=1e-6)
    # law of cosines agrees with the deduced angles
    check = TriangleSolver.from_values(
        side_a=triangle.a.side.value, side_b=triangle.b.side.value, side_c=triangle.c.side.value
    )
    assert check.solve_sss(ErrorSet())
    assert check.angles() == pytest.approx(triangle.angles(), abs=1e-6)


def test_sas_solves_opposite_side_first():
    triangle, _ = _solved(angle_b=90, side_a=3, side_c=4)

    assert triangle.b.side.value == pytest.approx(5.0)
    assert triangle.a.angle.degrees == pytest.approx(math.degrees(math.atan2(3, 4)))


def test_asa_from_two_angles_uses_nominal_side():
    triangle, result = _solved(angle_a=50, angle_b=60)

    assert result.strategy is Strategy.ASA
    assert triangle.c.angle.degrees == pytest.approx(70.0)
    assert triangle.c.side.value == pytest.approx(100.0)
    expected_a = 100 * math.sin(math.radians(50)) / math.sin(math.radians(70))
    assert triangle.a.side.value == pytest.approx(expected_a)


def test_asa_scale_doubles_sides_and_keeps_angles():
    triangle, _ = _solved(angle_a=50, angle_b=60)
    angles = triangle.angles()
    sides = triangle.sides()

    triangle.scale(2)

    assert triangle.sides() == pytest.approx(2 * sides)
    assert triangle.angles() == pytest.approx(angles)
    assert np.all(triangle.sides() > 0)


def test_asa_keeps_the_given_side():
    triangle, result = _solved(angle_a=30, angle_c=90, side_b=4)

    assert result.strategy is Strategy.ASA
    assert triangle.b.side.value == pytest.approx(4.0)
    assert triangle.c.side.value == pytest.approx(4 / math.sin(math.radians(60)))


def test_nominal_side_is_configurable():
    config = SolverConfig(nominal_side=1.0)
    triangle = TriangleSolver.from_values(angle_a=50, angle_b=60, config=config)

    assert solve(triangle).success
    assert triangle.c.side.value == pytest.approx(1.0)


def test_ssa_returns_principal_solution():
    triangle, result = _solved(side_a=7, side_b=10, angle_a=35)

    expected_b = math.degrees(math.asin(10 * math.sin(math.radians(35)) / 7))
    expected_c = 180 - 35 - expected_b
    assert result.strategy is Strategy.SSA
    assert triangle.b.angle.degrees == pytest.approx(expected_b)
    assert triangle.b.angle.degrees < 90
    assert triangle.c.angle.degrees == pytest.approx(expected_c)
    expected_side = 7 * math.sin(math.radians(expected_c)) / math.sin(math.radians(35))
    assert triangle.c.side.value == pytest.approx(expected_side)


def test_ssa_is_deterministic():
    first, _ = _solved(side_a=7, side_b=10, angle_a=35)
    second, _ = _solved(side_a=7, side_b=10, angle_a=35)

    assert first.angles().tolist() == second.angles().tolist()
    assert first.sides().tolist() == second.sides().tolist()


def test_ssa_failure_keeps_user_values():
    triangle = TriangleSolver.from_values(side_a=2, side_b=10, angle_a=35)
    errors = ErrorSet()

    result = solve(triangle, errors)

    assert not result.success
    assert errors == {ErrorKind.ANGLE_TOO_LARGE}
    assert triangle.a.angle.degrees == 35
    assert triangle.a.side.value == 2
    assert triangle.b.side.value == 10
    assert triangle.b.angle.is_empty


def test_ssa_needs_an_empty_third_pair():
    triangle = TriangleSolver.from_values(side_a=7, angle_a=35, side_b=10, side_c=12)
    assert not triangle.solve_ssa(ErrorSet())


@pytest.mark.parametrize(
    'values',
    [
        {'side_a': 5, 'side_b': 3, 'side_c': 4},
        {'side_a': 3, 'side_b': 5, 'side_c': 4},
        {'angle_a': 90, 'angle_b': 30, 'side_c': 2},
        {'angle_b': 90, 'side_a': 3, 'side_c': 4},
    ],
)
def test_no_alt_triangle_with_right_angle_at_a_or_b(values):
    triangle, _ = _solved(**values)
    assert triangle.alt_triangle is None


def test_alt_triangle_inside_base():
    triangle, _ = _solved(angle_a=50, angle_b=60)
    alt = triangle.alt_triangle

    assert alt is not None
    assert alt.a.angle.degrees == pytest.approx(90.0)
    assert alt.b.angle.degrees == pytest.approx(60.0)
    assert alt.c.angle.degrees == pytest.approx(30.0)
    assert alt.a.side.value == pytest.approx(triangle.a.side.value)
    assert alt.b.side.value == pytest.approx(triangle.a.side.value * math.sin(math.radians(60)))
    assert alt.alt_triangle is None


def test_alt_triangle_outside_base_when_a_is_obtuse():
    triangle, _ = _solved(angle_a=120, angle_b=30)
    alt = triangle.alt_triangle

    assert alt.a.side.value == pytest.approx(triangle.b.side.value)
    assert alt.b.angle.degrees == pytest.approx(60.0)
    assert alt.is_complete


def test_alt_triangle_outside_base_when_b_is_obtuse():
    triangle, _ = _solved(angle_a=30, angle_b=120)
    alt = triangle.alt_triangle

    assert alt.a.side.value == pytest.approx(triangle.a.side.value)
    assert alt.b.angle.degrees == pytest.approx(60.0)


def test_alt_triangle_replaced_on_each_solve():
    triangle, _ = _solved(angle_a=50, angle_b=60)
    first_alt = triangle.alt_triangle

    triangle.read_values(70, None, 60, None, None, None)
    assert triangle.alt_triangle is None
    solve(triangle)

    assert triangle.alt_triangle is not first_alt
    assert triangle.alt_triangle.b.angle.degrees == pytest.approx(60.0)


def test_scale_is_computed_from_stable_baseline():
    triangle, _ = _solved(side_a=5, side_b=6, side_c=7)

    for factor in (0.37, 2.5, 1.9, 3):
        triangle.scale(factor)

    assert triangle.sides() == pytest.approx([15, 18, 21])


def test_scale_reaches_alt_triangle():
    triangle, _ = _solved(angle_a=50, angle_b=60)
    alt_sides = triangle.alt_triangle.sides()

    triangle.scale(0.5)

    assert triangle.alt_triangle.sides() == pytest.approx(alt_sides * 0.5)


def test_scale_without_baseline_is_a_no_op():
    triangle = TriangleSolver.from_values(angle_a=50, angle_b=60)

    triangle.scale(3)

    assert triangle.sides().tolist() == [0.0, 0.0, 0.0]


@pytest.mark.parametrize('factor', [0, -1, float('nan')])
def test_scale_rejects_bad_factor(factor):
    triangle, _ = _solved(side_a=3, side_b=4, side_c=5)
    with pytest.raises(ValueError):
        triangle.scale(factor)


def test_clone_is_deep():
    triangle, _ = _solved(angle_a=50, angle_b=60)
    copy = triangle.clone()

    copy.a.side.value = 1
    copy.alt_triangle.b.angle.degrees = 10
    copy.scale(4)

    expected_a = 100 * math.sin(math.radians(50)) / math.sin(math.radians(70))
    assert triangle.a.side.value == pytest.approx(expected_a)
    assert triangle.alt_triangle.b.angle.degrees == pytest.approx(60.0)
    assert copy.alt_triangle is not triangle.alt_triangle
    assert copy.sides() == pytest.approx(4 * triangle.sides())


def test_clear_resets_everything():
    triangle, _ = _solved(angle_a=50, angle_b=60)

    triangle.clear()

    assert triangle.statuses() == (PairStatus.NEITHER,) * 3
    assert triangle.alt_triangle is None
    assert triangle.original_sides.tolist() == [0.0, 0.0, 0.0]


def test_pair_lookup_by_label():
    triangle = TriangleSolver.from_values(angle_b=20)
    assert triangle.pair('b') is triangle.b
    assert triangle.pair(2) is triangle.c
