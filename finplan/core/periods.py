"""Time-step primitives shared by the monthly simulators."""


def monthly_rate(annual_percentage: float) -> float:
    """Simple monthly rate: 12% a year compounds at 1% a month."""
    return annual_percentage / 100 / 12


def horizon_months(years: float) -> int:
    return int(round(years * 12))
