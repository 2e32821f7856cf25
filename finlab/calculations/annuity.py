"""
Annuity and Perpetuity Calculations

Closed-form values of level payment streams. A zero rate is priced with the
limiting formula (payment * periods) instead of dividing by zero.
"""

import math
from dataclasses import dataclass
from typing import List

from finlab.calculations.errors import InvalidDomain, NonConvergentSeries
from finlab.calculations.rates import finite_result, require_finite
from finlab.calculations.tvm import future_value, growth_factor, present_value


@dataclass(frozen=True)
class AnnuityPayment:
    """One payment of an annuity with its value today and at the horizon."""

    period: int
    payment: float
    present_value: float
    future_value: float


def _check_inputs(payment: float, rate: float, periods: float) -> None:
    require_finite(payment=payment, rate=rate, periods=periods)
    if periods < 0:
        raise InvalidDomain("Number of payments cannot be negative")


def present_value_annuity(payment: float, rate: float, periods: float) -> float:
    """
    Calculate the present value of an ordinary annuity.

    Args:
        payment: Payment at the end of each period
        rate: Periodic discount rate as decimal
        periods: Number of payments

    Returns:
        payment * (1 - (1 + rate) ** -periods) / rate, or payment * periods
        at a zero rate
    """
    _check_inputs(payment, rate, periods)
    if rate == 0:
        return finite_result(payment * periods, "Annuity value")

    if rate > -1:
        # expm1/log1p keep precision for rates close to zero
        try:
            factor = -math.expm1(-periods * math.log1p(rate)) / rate
        except OverflowError:
            raise InvalidDomain("Annuity value is too large to represent")
        return finite_result(payment * factor, "Annuity value")

    discount = growth_factor(rate, -periods)
    return finite_result(payment * (1 - discount) / rate, "Annuity value")


def future_value_annuity(payment: float, rate: float, periods: float) -> float:
    """
    Calculate the future value of an ordinary annuity at its last payment.

    Returns:
        payment * ((1 + rate) ** periods - 1) / rate, or payment * periods
        at a zero rate
    """
    _check_inputs(payment, rate, periods)
    if rate == 0:
        return finite_result(payment * periods, "Annuity value")

    if rate > -1:
        try:
            factor = math.expm1(periods * math.log1p(rate)) / rate
        except OverflowError:
            raise InvalidDomain("Annuity value is too large to represent")
        return finite_result(payment * factor, "Annuity value")

    compounded = growth_factor(rate, periods)
    return finite_result(payment * (compounded - 1) / rate, "Annuity value")


def present_value_perpetuity(payment: float, rate: float) -> float:
    """
    Calculate the present value of a level perpetuity.

    Raises:
        NonConvergentSeries: If rate <= 0, where the payments never shrink
    """
    require_finite(payment=payment, rate=rate)
    if rate <= 0:
        raise NonConvergentSeries("Perpetuity rate must be positive")
    return finite_result(payment / rate, "Perpetuity value")


def annuity_schedule(payment: float, rate: float, periods: int) -> List[AnnuityPayment]:
    """
    Break an annuity into its payments.

    Each row carries the payment discounted to period 0 and compounded to
    the last period, so the columns sum to the closed-form values.
    """
    if isinstance(periods, bool) or not isinstance(periods, int):
        raise InvalidDomain("Number of payments must be a whole number")
    _check_inputs(payment, rate, periods)

    return [
        AnnuityPayment(
            period=t,
            payment=payment,
            present_value=present_value(payment, rate, t),
            future_value=future_value(payment, rate, periods - t),
        )
        for t in range(1, periods + 1)
    ]
