import math
import random

import pytest

from src.domain.services.synthetic_series import (
    PLACEHOLDER_VALUE,
    POINT_COUNT,
    generate_series,
    implied_open,
    session_label,
)


class TestSessionLabels:
    def test_session_starts_at_open_bell(self):
        assert session_label(0) == "9:30"

    def test_steps_are_thirteen_minutes_apart(self):
        assert session_label(1) == "9:43"
        assert session_label(3) == "10:09"

    def test_last_step_before_close(self):
        assert session_label(POINT_COUNT - 1) == "15:47"


class TestGenerateSeries:
    @pytest.mark.parametrize(
        "current, change",
        [(150.25, 1.5), (42.0, -3.2), (0.87, 0.0), (10.0, math.nan), (10.0, -100.0)],
    )
    def test_always_thirty_points_ending_at_current(self, current, change):
        series = generate_series(current, change, rng=random.Random(1))

        assert len(series) == POINT_COUNT
        assert series[-1].value == current

    def test_nan_price_gives_flat_placeholder_line(self):
        series = generate_series(math.nan, 1.5)

        assert len(series) == POINT_COUNT
        assert all(p.value == PLACEHOLDER_VALUE for p in series)
        assert [p.time_label for p in series] == [session_label(i) for i in range(POINT_COUNT)]

    def test_labels_are_chronological(self):
        labels = [p.time_label for p in generate_series(100.0, 1.0, rng=random.Random(3))]

        minutes = [int(h) * 60 + int(m) for h, m in (label.split(":") for label in labels)]
        assert minutes == sorted(minutes)
        assert len(set(minutes)) == POINT_COUNT

    def test_values_are_rounded_to_cents(self):
        series = generate_series(123.456, 0.7, rng=random.Random(5))

        for point in series[:-1]:
            assert point.value == round(point.value, 2)

    def test_seeded_rng_is_reproducible(self):
        first = generate_series(150.25, 1.5, rng=random.Random(7))
        second = generate_series(150.25, 1.5, rng=random.Random(7))

        assert first == second

    def test_walk_starts_near_implied_open(self):
        current, change = 150.25, 1.5
        open_price = implied_open(current, change)
        series = generate_series(current, change, rng=random.Random(11))

        # first step is one drift plus at most half the volatility away from open
        drift = (current - open_price) / POINT_COUNT
        bound = abs(drift) + open_price * 0.005 / 2 + 0.01
        assert abs(series[0].value - open_price) <= bound

    def test_zero_noise_walk_is_a_straight_line(self):
        class MidpointRandom(random.Random):
            def random(self):
                return 0.5

        series = generate_series(110.0, 10.0, rng=MidpointRandom())

        assert series[0].value == pytest.approx(100.0 + 10.0 / POINT_COUNT, abs=0.01)
        assert series[14].value == pytest.approx(105.0, abs=0.01)


class TestImpliedOpen:
    def test_inverts_the_percentage_change(self):
        current, change = 150.25, 1.5
        assert implied_open(current, change) * (1 + change / 100) == pytest.approx(current)

    def test_degenerate_changes_fall_back_to_current(self):
        assert implied_open(50.0, math.nan) == 50.0
        assert implied_open(50.0, -100.0) == 50.0
