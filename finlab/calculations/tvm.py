"""
Time Value of Money

Single-sum compounding and discounting, the implied rate and number of
periods linking a present and a future amount, and discounting of dated
cash flow schedules.
"""

import math
from typing import List, Sequence, Tuple

from finlab.calculations.errors import InvalidDomain
from finlab.calculations.rates import finite_result, require_finite

CashFlowSchedule = List[Tuple[int, float]]


def _is_integral(value: float) -> bool:
    return float(value).is_integer()


def growth_factor(rate: float, periods: float) -> float:
    """
    Calculate (1 + rate) ** periods, rejecting results that are not real.

    Raises:
        InvalidDomain: For a negative base with fractional periods, a zero
            base with negative periods, or a result too large for a float
    """
    require_finite(rate=rate, periods=periods)
    base = 1 + rate

    if base < 0 and not _is_integral(periods):
        raise InvalidDomain(
            "A rate below -100% cannot be compounded over a fractional number of periods"
        )
    if base == 0 and periods < 0:
        raise InvalidDomain("A rate of -100% cannot be compounded over negative periods")

    try:
        return base ** periods
    except OverflowError:
        raise InvalidDomain("Compounded value is too large to represent")


def discount_factor(rate: float, periods: float) -> float:
    """
    Calculate 1 / (1 + rate) ** periods.

    For rates above -100% this goes through exp/log1p, so long horizons
    underflow towards zero instead of overflowing the compounded value.

    Raises:
        InvalidDomain: If the compounded value is zero or not real, or the
            factor is too large to represent
    """
    require_finite(rate=rate, periods=periods)
    if rate > -1:
        try:
            return math.exp(-periods * math.log1p(rate))
        except OverflowError:
            raise InvalidDomain("Discount factor is too large to represent")

    factor = growth_factor(rate, periods)
    if factor == 0:
        raise InvalidDomain("A discount rate of -100% makes the present value undefined")
    return 1 / factor


def future_value(present_value: float, rate: float, periods: float) -> float:
    """
    Calculate the future value of a single present amount.

    Args:
        present_value: Amount today
        rate: Periodic rate as decimal (e.g., 0.08 for 8%)
        periods: Number of periods, may be fractional

    Returns:
        PV * (1 + rate) ** periods
    """
    require_finite(present_value=present_value)
    return finite_result(present_value * growth_factor(rate, periods), "Future value")


def present_value(future_value: float, rate: float, periods: float) -> float:
    """
    Calculate the present value of a single future amount.

    Args:
        future_value: Amount received after `periods`
        rate: Periodic discount rate as decimal
        periods: Number of periods, may be fractional

    Returns:
        FV / (1 + rate) ** periods

    Raises:
        InvalidDomain: If the discount factor is zero or not real
    """
    require_finite(future_value=future_value)
    return finite_result(future_value * discount_factor(rate, periods), "Present value")


def implied_rate(present_value: float, future_value: float, periods: float) -> float:
    """
    Calculate the periodic rate that grows PV into FV over `periods`.

    Returns:
        (FV / PV) ** (1 / periods) - 1

    Raises:
        InvalidDomain: If PV is zero, periods is not positive, or no real
            root exists
    """
    require_finite(present_value=present_value, future_value=future_value, periods=periods)
    if present_value == 0:
        raise InvalidDomain("Present value must be non-zero to imply a rate")
    if periods <= 0:
        raise InvalidDomain("Number of periods must be positive to imply a rate")

    ratio = future_value / present_value

    if ratio > 0:
        return ratio ** (1 / periods) - 1
    if ratio == 0:
        return -1.0

    # Negative ratio: only an odd integer root is real
    if _is_integral(periods) and int(periods) % 2 == 1:
        return -((-ratio) ** (1 / periods)) - 1
    raise InvalidDomain("FV/PV must be positive unless periods is an odd integer")


def implied_periods(present_value: float, future_value: float, rate: float) -> float:
    """
    Calculate the number of periods needed for PV to grow into FV.

    Returns:
        ln(FV / PV) / ln(1 + rate)

    Raises:
        InvalidDomain: If FV/PV <= 0, rate <= -1 or rate == 0
    """
    require_finite(present_value=present_value, future_value=future_value, rate=rate)
    if present_value == 0 or future_value / present_value <= 0:
        raise InvalidDomain("FV/PV must be positive to imply a number of periods")
    if rate <= -1:
        raise InvalidDomain("Rate must be greater than -100%")
    if rate == 0:
        raise InvalidDomain("At a zero rate the amount never changes")

    return math.log(future_value / present_value) / math.log1p(rate)


def _require_horizon(periods: int) -> None:
    if isinstance(periods, bool) or not isinstance(periods, int) or periods < 0:
        raise InvalidDomain("Horizon must be a non-negative whole number of periods")


def growth_path(present_value: float, rate: float, periods: int) -> List[Tuple[int, float]]:
    """Value of a present amount at each period 0..periods."""
    _require_horizon(periods)
    return [(t, future_value(present_value, rate, t)) for t in range(periods + 1)]


def discount_path(future_value: float, rate: float, periods: int) -> List[Tuple[int, float]]:
    """Value of an amount due at `periods` as seen from each period 0..periods."""
    _require_horizon(periods)
    return [(t, present_value(future_value, rate, periods - t)) for t in range(periods + 1)]


def validate_schedule(schedule: Sequence[Tuple[int, float]]) -> CashFlowSchedule:
    """
    Check a cash flow schedule and return it as a list of (period, amount).

    Raises:
        InvalidDomain: If a period is not a positive integer, periods are not
            strictly increasing, or an amount is not finite
    """
    validated = []
    previous = 0
    for period, amount in schedule:
        if isinstance(period, bool) or not isinstance(period, int) or period <= 0:
            raise InvalidDomain(f"Cash flow period must be a positive integer, got {period}")
        if period <= previous:
            raise InvalidDomain("Cash flow periods must be strictly increasing")
        require_finite(amount=amount)
        validated.append((period, float(amount)))
        previous = period
    return validated


def discount_schedule(
    schedule: Sequence[Tuple[int, float]], rate: float
) -> CashFlowSchedule:
    """Discount each dated cash flow back to period 0."""
    return [
        (period, present_value(amount, rate, period))
        for period, amount in validate_schedule(schedule)
    ]
