"""Fail-fast parameter checks shared by the generators.

Every check raises InvalidParameterError naming the parameter and the
offending value, and is called before a generator touches its graph.
"""

import math
import numbers

from graphgen.graph.errors import InvalidParameterError


def check_count(name: str, value, minimum: int = 0) -> int:
    """Return ``value`` as int, rejecting non-integers and values < minimum."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    value = int(value)
    if value < minimum:
        raise InvalidParameterError(f"{name} must be >= {minimum}, got {value}")
    return value


def check_positive(name: str, value) -> float:
    """Return ``value`` as float, rejecting non-positive or non-finite input."""
    value = float(value)
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidParameterError(f"{name} must be > 0, got {value}")
    return value


def check_unit_interval(name: str, value) -> float:
    """Return ``value`` as float, rejecting anything outside (0, 1]."""
    value = float(value)
    if not (0.0 < value <= 1.0):
        raise InvalidParameterError(f"{name} must be in (0, 1], got {value}")
    return value


def check_open_probability(name: str, value) -> float:
    """Return ``value`` as float, rejecting anything outside (0, 1)."""
    value = float(value)
    if not (0.0 < value < 1.0):
        raise InvalidParameterError(f"{name} must be in (0, 1), got {value}")
    return value
