from typing import Callable

class FuzzyError(Exception):
    """Domain error for fuzzy framework."""

class SamplingError(FuzzyError, ValueError):
    """Invalid sampling grid (step <= 0, max < min, non-finite bounds)."""

Float = float
Membership = Callable[[Float], Float]
Predicate = Callable[[Float], bool]
