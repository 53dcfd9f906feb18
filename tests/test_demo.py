import math
import random

import pytest

from gmtimer.demo import estimate_pi, main


def test_estimate_is_close_to_pi():
    value = estimate_pi(200_000, random.Random(7))
    assert abs(value - math.pi) < 0.05


def test_estimate_is_reproducible_with_seed():
    first = estimate_pi(5_000, random.Random(3))
    second = estimate_pi(5_000, random.Random(3))
    assert first == second
    assert abs(first - math.pi) < 0.2


@pytest.mark.parametrize("points", [1, 10, 1000])
def test_estimate_is_a_multiple_of_four_over_points(points):
    value = estimate_pi(points, random.Random(11))
    assert 0.0 <= value <= 4.0
    inside = value * points / 4.0
    assert inside == pytest.approx(round(inside))


@pytest.mark.parametrize("points", [0, -5])
def test_estimate_rejects_non_positive_counts(points):
    with pytest.raises(ValueError):
        estimate_pi(points)


def test_main_reports_timers_in_closing_order(capsys):
    assert main(["--points", "1000", "--count", "5", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Estimating PI...")
    assert "Estimated PI: " in out
    manual2 = out.index("(manual2)")
    manual1 = out.index("(manual1)")
    auto = out.index("(auto)")
    assert manual2 < manual1 < auto


def test_main_prints_requested_numbers(capsys):
    main(["--points", "10", "--count", "3", "--seed", "2"])
    lines = capsys.readouterr().out.splitlines()
    numbers = lines[1].split()
    assert numbers[0::2] == ["0", "1", "2"]
    assert all(0 <= int(n) <= 100 for n in numbers[1::2])