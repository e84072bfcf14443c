"""Simulation parameters."""

import json
from dataclasses import dataclass, fields, asdict, replace as dataclass_replace
from pathlib import Path
from typing import Any, Dict, Union

from teller_staffing.core.base import DEFAULT_MAX_WAIT_ALLOWED, ConfigurationError
from teller_staffing.core.validators import (
    require_int_at_least,
    require_non_negative,
    require_ordered,
    validate_arrival_parameters,
)


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters of the peak-hour staffing experiment, all in seconds."""
    min_interarrival: int = 5
    max_interarrival: int = 50
    min_service: int = 30
    max_service: int = 120
    max_wait_allowed: int = DEFAULT_MAX_WAIT_ALLOWED
    window_seconds: int = 2 * 60 * 60
    min_tellers: int = 1
    max_tellers: int = 10

    def __post_init__(self):
        validate_arrival_parameters(self.window_seconds,
                                    self.min_interarrival, self.max_interarrival,
                                    self.min_service, self.max_service)
        require_non_negative("max_wait_allowed", self.max_wait_allowed)
        require_int_at_least("min_tellers", self.min_tellers, 1)
        require_int_at_least("max_tellers", self.max_tellers, 1)
        require_ordered("min_tellers", self.min_tellers, "max_tellers", self.max_tellers)

    @property
    def teller_counts(self) -> range:
        return range(self.min_tellers, self.max_tellers + 1)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SimulationConfig':
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> 'SimulationConfig':
        with open(path, 'r') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise ConfigurationError(f"Invalid JSON in {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration in {path} must be a JSON object")
        return cls.from_dict(data)

    def replace(self, **overrides) -> 'SimulationConfig':
        """Copy with some parameters overridden; None values are ignored."""
        overrides = {k: v for k, v in overrides.items() if v is not None}
        return dataclass_replace(self, **overrides)

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)
