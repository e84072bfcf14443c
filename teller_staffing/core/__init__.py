"""Core components of the teller staffing simulation."""

from .base import (
    DEFAULT_MAX_WAIT_ALLOWED,
    Customer,
    Teller,
    SimulationResult,
    TellerStaffingError,
    ConfigurationError,
    InvariantViolation,
    EmptyPoolError,
)
from .pool import TellerPool
from .arrivals import ArrivalGenerator, generate_arrivals, generate_from_distributions
from .assignment import AssignmentEngine, assign_customers
from .statistics import summarize

__all__ = [
    'Customer',
    'Teller',
    'SimulationResult',
    'TellerStaffingError',
    'ConfigurationError',
    'InvariantViolation',
    'EmptyPoolError',
    'TellerPool',
    'ArrivalGenerator',
    'generate_arrivals',
    'generate_from_distributions',
    'AssignmentEngine',
    'assign_customers',
    'summarize',
    'DEFAULT_MAX_WAIT_ALLOWED',
]
