"""Parameter checks raising ConfigurationError."""

from teller_staffing.core.base import ConfigurationError


def require_int(name: str, value) -> None:
    # bool is an int subclass but never a valid parameter
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")


def require_positive(name: str, value: int) -> None:
    require_int(name, value)
    if value <= 0:
        raise ConfigurationError(f"{name} must be > 0")


def require_non_negative(name: str, value: int) -> None:
    require_int(name, value)
    if value < 0:
        raise ConfigurationError(f"{name} must be >= 0")


def require_int_at_least(name: str, value: int, minimum: int) -> None:
    require_int(name, value)
    if value < minimum:
        raise ConfigurationError(f"{name} must be an integer >= {minimum}")


def require_ordered(low_name: str, low: int, high_name: str, high: int) -> None:
    if low > high:
        raise ConfigurationError(f"{low_name} ({low}) must not exceed {high_name} ({high})")


def validate_arrival_parameters(window_seconds: int,
                                min_interarrival: int, max_interarrival: int,
                                min_service: int, max_service: int) -> None:
    """Check the window and the inter-arrival and service ranges."""
    require_positive("window_seconds", window_seconds)
    require_positive("min_interarrival", min_interarrival)
    require_positive("max_interarrival", max_interarrival)
    require_ordered("min_interarrival", min_interarrival, "max_interarrival", max_interarrival)
    require_non_negative("min_service", min_service)
    require_non_negative("max_service", max_service)
    require_ordered("min_service", min_service, "max_service", max_service)
