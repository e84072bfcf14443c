"""Tests for arrival generation."""

import pytest

from teller_staffing.config import SimulationConfig
from teller_staffing.core import (
    ArrivalGenerator,
    ConfigurationError,
    generate_arrivals,
    generate_from_distributions,
)
from teller_staffing.distributions import (
    deterministic_distribution,
    make_rng,
    sequence_distribution,
)


class TestGenerateArrivals:

    def test_arrivals_are_spaced_and_inside_window(self):
        """Consecutive arrivals are at least the minimum interval apart."""
        customers = generate_arrivals(7200, 5, 50, 30, 120, make_rng(7))

        assert customers
        previous = 0
        for customer in customers:
            assert customer.arrival_time - previous >= 5
            assert customer.arrival_time - previous <= 50
            assert customer.arrival_time < 7200
            previous = customer.arrival_time

    def test_service_durations_within_bounds(self):
        """Service durations are drawn from the inclusive range."""
        customers = generate_arrivals(7200, 5, 50, 30, 120, make_rng(3))

        assert all(30 <= c.service_duration <= 120 for c in customers)

    def test_identifiers_are_sequential(self):
        """Customers are numbered from 1 in arrival order."""
        customers = generate_arrivals(3600, 5, 50, 30, 120, make_rng(11))

        assert [c.customer_id for c in customers] == list(range(1, len(customers) + 1))

    def test_customers_start_unassigned(self):
        customers = generate_arrivals(600, 5, 50, 30, 120, make_rng(0))

        assert not any(c.is_assigned for c in customers)

    def test_same_seed_same_sequence(self):
        """The generator itself holds no state between calls."""
        first = generate_arrivals(3600, 5, 50, 30, 120, make_rng(5))
        second = generate_arrivals(3600, 5, 50, 30, 120, make_rng(5))

        assert first == second

    def test_window_smaller_than_minimum_interval_is_empty(self):
        """A window shorter than any interval yields no customers."""
        assert generate_arrivals(3, 5, 50, 30, 120, make_rng(1)) == []

    def test_arrival_on_window_edge_is_excluded(self):
        """An arrival exactly at the window end is not generated."""
        assert generate_arrivals(5, 5, 5, 30, 30, make_rng(1)) == []

    @pytest.mark.parametrize('params', [
        (7200, 0, 50, 30, 120),
        (7200, 50, 5, 30, 120),
        (7200, 5, 50, 120, 30),
        (7200, 5, 50, -1, 120),
        (0, 5, 50, 30, 120),
    ])
    def test_invalid_parameters_rejected(self, params):
        with pytest.raises(ConfigurationError):
            generate_arrivals(*params, make_rng(1))


class TestGenerateFromDistributions:

    def test_deterministic_intervals(self):
        """Fixed intervals produce evenly spaced arrivals."""
        customers = generate_from_distributions(
            35, deterministic_distribution(10), deterministic_distribution(60))

        assert [c.arrival_time for c in customers] == [10, 20, 30]
        assert [c.service_duration for c in customers] == [60, 60, 60]

    def test_replayed_sequence(self):
        customers = generate_from_distributions(
            100,
            sequence_distribution([5, 15, 30, 60]),
            sequence_distribution([40, 50, 70])
        )

        assert [(c.arrival_time, c.service_duration) for c in customers] == [
            (5, 40), (20, 50), (50, 70)
        ]

    def test_non_positive_interval_rejected(self):
        """A zero interval would never advance the clock."""
        with pytest.raises(ConfigurationError):
            generate_from_distributions(
                100, deterministic_distribution(0), deterministic_distribution(60))


class TestArrivalGenerator:

    def test_from_config(self):
        config = SimulationConfig(window_seconds=600, min_service=10, max_service=20)
        generator = ArrivalGenerator.from_config(config)

        customers = generator.generate(make_rng(2))

        assert generator.window_seconds == 600
        assert all(c.arrival_time < 600 for c in customers)
        assert all(10 <= c.service_duration <= 20 for c in customers)

    def test_invalid_construction(self):
        with pytest.raises(ConfigurationError):
            ArrivalGenerator(min_interarrival=0)
