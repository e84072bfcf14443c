"""Bank teller staffing simulation package."""

from teller_staffing.core import (
    Customer,
    Teller,
    TellerPool,
    SimulationResult,
    ArrivalGenerator,
    AssignmentEngine,
    generate_arrivals,
    assign_customers,
    summarize,
    TellerStaffingError,
    ConfigurationError,
    InvariantViolation,
    EmptyPoolError,
)
from teller_staffing.config import SimulationConfig
from teller_staffing.system import StaffingReport, StaffingSearch, find_minimum_sufficient

__version__ = '0.1.0'

__all__ = [
    'Customer',
    'Teller',
    'TellerPool',
    'SimulationResult',
    'ArrivalGenerator',
    'AssignmentEngine',
    'generate_arrivals',
    'assign_customers',
    'summarize',
    'TellerStaffingError',
    'ConfigurationError',
    'InvariantViolation',
    'EmptyPoolError',
    'SimulationConfig',
    'StaffingReport',
    'StaffingSearch',
    'find_minimum_sufficient',
]
