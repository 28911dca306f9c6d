"""Coverage percentage arithmetic."""


def percent(covered: int, total: int) -> float:
    """Return ``covered / total`` as a percentage rounded to one decimal.

    Rounds half away from zero (``percent(1, 16) == 6.3``) and clamps the
    result to ``[0, 100]``. A zero or negative total yields ``0.0``.
    """
    if total <= 0:
        return 0.0
    covered = min(max(covered, 0), total)
    # integer arithmetic so exact halves like 50.25 round up
    tenths = (2000 * covered + total) // (2 * total)
    return tenths / 10
