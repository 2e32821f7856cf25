"""
Bond Valuation

Fixed-coupon, zero-coupon and perpetual bond prices, plus the price-yield
curve used in the interest rate risk lecture.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

import numpy as np

from finlab.calculations.annuity import present_value_annuity, present_value_perpetuity
from finlab.calculations.errors import InvalidDomain
from finlab.calculations.rates import require_finite
from finlab.calculations.tvm import present_value

MAX_CURVE_POINTS = 1001


class PriceStatus(str, Enum):
    """Where a bond trades relative to its face value."""

    PREMIUM = "premium"
    DISCOUNT = "discount"
    PAR = "par"


@dataclass(frozen=True)
class BondSpec:
    """Terms of a level-coupon bond."""

    face_value: float
    coupon_rate: float  # Annual coupon as decimal of face value
    market_rate: float  # Yield to maturity as decimal
    periods: int  # Coupon payments remaining

    def __post_init__(self):
        require_finite(
            face_value=self.face_value,
            coupon_rate=self.coupon_rate,
            market_rate=self.market_rate,
        )
        if self.face_value <= 0:
            raise InvalidDomain("Face value must be positive")
        if self.coupon_rate < 0:
            raise InvalidDomain("Coupon rate cannot be negative")
        if isinstance(self.periods, bool) or not isinstance(self.periods, int) or self.periods <= 0:
            raise InvalidDomain("Bond must have a positive whole number of periods")

    @property
    def coupon(self) -> float:
        return self.face_value * self.coupon_rate


def price_fixed_coupon_bond(spec: BondSpec) -> float:
    """
    Price a fixed-coupon bond.

    Price = PV of the coupon annuity + PV of the face value, both at the
    market rate.
    """
    pv_coupons = present_value_annuity(spec.coupon, spec.market_rate, spec.periods)
    pv_face = present_value(spec.face_value, spec.market_rate, spec.periods)
    return pv_coupons + pv_face


def bond_price_status(spec: BondSpec) -> PriceStatus:
    """Premium when the coupon rate beats the market rate, discount when it trails."""
    if spec.coupon_rate > spec.market_rate:
        return PriceStatus.PREMIUM
    if spec.coupon_rate < spec.market_rate:
        return PriceStatus.DISCOUNT
    return PriceStatus.PAR


def price_zero_coupon_bond(face_value: float, market_rate: float, periods: float) -> float:
    """Price a zero-coupon bond as the present value of its face value."""
    require_finite(face_value=face_value)
    if face_value <= 0:
        raise InvalidDomain("Face value must be positive")
    if periods <= 0:
        raise InvalidDomain("Periods to maturity must be positive")
    return present_value(face_value, market_rate, periods)


def price_perpetual_bond(coupon: float, market_rate: float) -> float:
    """Price a consol paying `coupon` forever."""
    return present_value_perpetuity(coupon, market_rate)


def yield_from_perpetual_price(coupon: float, price: float) -> float:
    """Yield implied by the market price of a perpetual bond."""
    require_finite(coupon=coupon, price=price)
    if price <= 0:
        raise InvalidDomain("Price must be positive")
    return coupon / price


def price_yield_curve(
    face_value: float,
    coupon_rate: float,
    periods: int,
    max_yield: float = 0.15,
    step: float = 0.005,
) -> List[Tuple[float, float]]:
    """
    Price a fixed-coupon bond across a range of yields.

    Args:
        face_value: Redemption amount
        coupon_rate: Annual coupon as decimal
        periods: Coupon payments remaining
        max_yield: Highest yield on the curve, as decimal
        step: Spacing between yields, as decimal

    Returns:
        List of (yield, price) points starting at a zero yield
    """
    require_finite(max_yield=max_yield, step=step)
    if step <= 0:
        raise InvalidDomain("Yield step must be positive")
    if max_yield < 0:
        raise InvalidDomain("Maximum yield cannot be negative")

    intervals = max_yield / step
    if intervals >= MAX_CURVE_POINTS - 0.5:
        raise InvalidDomain(
            f"Price-yield curve is limited to {MAX_CURVE_POINTS} points; use a larger step"
        )

    count = int(round(intervals))
    yields = np.linspace(0.0, count * step, count + 1)

    curve = []
    for y in yields:
        spec = BondSpec(face_value, coupon_rate, float(y), periods)
        curve.append((float(y), price_fixed_coupon_bond(spec)))
    return curve
