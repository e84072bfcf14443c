"""Shared fixtures for the teller staffing tests."""

import matplotlib
matplotlib.use('Agg')

import pytest

from teller_staffing.config import SimulationConfig
from teller_staffing.core import Customer


def make_customers(pairs):
    """Build customers from (arrival_time, service_duration) pairs."""
    return [
        Customer(customer_id=i, arrival_time=arrival, service_duration=duration)
        for i, (arrival, duration) in enumerate(pairs, start=1)
    ]


@pytest.fixture
def three_customers():
    """Arrivals at 10, 20 and 30 seconds, one minute of service each."""
    return make_customers([(10, 60), (20, 60), (30, 60)])


@pytest.fixture
def steady_config():
    """A customer every 10 seconds, each served in exactly 60 seconds."""
    return SimulationConfig(
        min_interarrival=10,
        max_interarrival=10,
        min_service=60,
        max_service=60,
        max_wait_allowed=0,
        window_seconds=1000,
        min_tellers=1,
        max_tellers=8
    )


@pytest.fixture
def small_config():
    return SimulationConfig(window_seconds=1800, max_tellers=5)
