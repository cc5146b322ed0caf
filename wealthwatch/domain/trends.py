"""Period-over-period trend detection"""

# Changes smaller than this many percentage points count as stable
TREND_DEADBAND = 5


def percent_change(current: float, previous: float) -> float:
    """
    Percentage change from previous to current.

    A zero baseline yields 100 when anything was spent now and 0 otherwise;
    this is an approximation, not a true percentage.
    """
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return (current - previous) / previous * 100


def classify_trend(change: float) -> str:
    """Map a percentage change to increasing | decreasing | stable"""
    if abs(change) < TREND_DEADBAND:
        return "stable"
    return "increasing" if change > 0 else "decreasing"
