# core/errors.py

class RaytracerError(Exception):
    """
    Base class for all errors raised by the ray tracer.
    """


class InvalidConfigurationError(RaytracerError, ValueError):
    """
    Raised when a scene object is constructed with arguments that break its
    contract (None references, non-finite values, degenerate vectors, ...).
    These errors happen while the scene is being built, never while tracing.
    """


def require(value, name: str):
    """
    Returns value unchanged, or raises if it is None.
    """
    if value is None:
        raise InvalidConfigurationError(f"The parameter '{name}' must not be None.")
    return value
