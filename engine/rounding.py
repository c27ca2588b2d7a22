import math


def round_half_up(value: float, places: int = 1) -> float:
    """
    Round to ``places`` decimals, ties toward positive infinity.

    Every displayed stat goes through here instead of the builtin ``round``
    (ties to even), so 0.25 shows as 0.3. Idempotent on values already at
    ``places`` decimals.
    """
    factor = 10**places
    return math.floor(value * factor + 0.5) / factor


def safe_ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator, or 0 when the denominator is not positive."""
    if denominator <= 0:
        return 0.0
    return numerator / denominator
