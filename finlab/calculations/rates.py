"""
Rate Conversions

Percentage inputs, APR vs EAR, and the Fisher effect.
"""

import math
from dataclasses import dataclass
from typing import List

from finlab.calculations.errors import InvalidDomain


@dataclass(frozen=True)
class CompoundingPeriod:
    """One compounding step within a year."""

    period: int
    beginning_balance: float
    interest: float
    ending_balance: float


def require_finite(**values: float) -> None:
    """Raise InvalidDomain if any named input is NaN or infinite."""
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidDomain(f"{name} must be a finite number, got {value}")


def finite_result(value: float, what: str) -> float:
    """Return `value`, raising InvalidDomain if the calculation overflowed."""
    if not math.isfinite(value):
        raise InvalidDomain(f"{what} is too large to represent")
    return value


def percent_to_decimal(value: float) -> float:
    """Convert a rate entered as a percentage (8 means 8%) to a decimal."""
    require_finite(rate=value)
    return value / 100


def decimal_to_percent(value: float) -> float:
    """Convert a decimal rate back to a percentage for display."""
    return value * 100


def _check_compounding(apr: float, m: int) -> None:
    require_finite(apr=apr)
    if isinstance(m, bool) or not isinstance(m, int) or m <= 0:
        raise InvalidDomain("Compounding periods per year must be a positive integer")
    if apr <= -m:
        raise InvalidDomain("APR must be greater than minus the compounding frequency")


def effective_annual_rate(apr: float, compounding_periods_per_year: int) -> float:
    """
    Calculate the effective annual rate of a quoted APR.

    Args:
        apr: Annual percentage rate as decimal (e.g., 0.12 for 12%)
        compounding_periods_per_year: Compounding frequency (12 = monthly)

    Returns:
        EAR as decimal, (1 + apr/m)^m - 1

    Raises:
        InvalidDomain: If m is not a positive integer, apr <= -m, or the
            result is too large to represent
    """
    m = compounding_periods_per_year
    _check_compounding(apr, m)

    try:
        return finite_result(((1 + apr / m) ** m) - 1, "Effective annual rate")
    except OverflowError:
        raise InvalidDomain("Effective annual rate is too large to represent")


def compounding_breakdown(
    principal: float, apr: float, compounding_periods_per_year: int
) -> List[CompoundingPeriod]:
    """
    Grow `principal` through one year of compounding at apr/m per period.

    The last ending balance equals principal * (1 + EAR).
    """
    m = compounding_periods_per_year
    _check_compounding(apr, m)
    require_finite(principal=principal)

    periodic_rate = apr / m
    balance = principal
    rows = []
    for period in range(1, m + 1):
        interest = balance * periodic_rate
        ending = finite_result(balance + interest, "Compounded balance")
        rows.append(
            CompoundingPeriod(
                period=period,
                beginning_balance=balance,
                interest=interest,
                ending_balance=ending,
            )
        )
        balance = ending
    return rows


def fisher_nominal_rate(real_rate: float, inflation_rate: float) -> float:
    """Nominal rate implied by a real rate and expected inflation."""
    require_finite(real_rate=real_rate, inflation_rate=inflation_rate)
    return finite_result((1 + real_rate) * (1 + inflation_rate) - 1, "Nominal rate")


def fisher_real_rate(nominal_rate: float, inflation_rate: float) -> float:
    """Real rate implied by a nominal rate and expected inflation."""
    require_finite(nominal_rate=nominal_rate, inflation_rate=inflation_rate)
    if inflation_rate == -1:
        raise InvalidDomain("Inflation rate of -100% leaves the real rate undefined")
    return finite_result((1 + nominal_rate) / (1 + inflation_rate) - 1, "Real rate")
