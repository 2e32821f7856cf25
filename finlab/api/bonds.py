"""
Bond valuation calculator endpoints.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from finlab.calculations import bonds, rates
from finlab.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class FixedCouponInput(BaseModel):
    """Input for fixed-coupon bond pricing."""

    face_value: float = 1000.0
    coupon_rate_pct: float
    market_rate_pct: float
    periods: int


class FixedCouponResponse(BaseModel):
    price: float
    coupon: float
    status: bonds.PriceStatus


@router.post("/fixed-coupon", response_model=FixedCouponResponse)
async def price_fixed_coupon(inputs: FixedCouponInput):
    """Price a level-coupon bond and flag premium, discount or par."""
    try:
        spec = bonds.BondSpec(
            face_value=inputs.face_value,
            coupon_rate=rates.percent_to_decimal(inputs.coupon_rate_pct),
            market_rate=rates.percent_to_decimal(inputs.market_rate_pct),
            periods=inputs.periods,
        )
        return FixedCouponResponse(
            price=bonds.price_fixed_coupon_bond(spec),
            coupon=spec.coupon,
            status=bonds.bond_price_status(spec),
        )
    except ValueError as e:
        logger.info(f"Fixed-coupon bond rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))


class ZeroCouponInput(BaseModel):
    face_value: float = 1000.0
    market_rate_pct: float
    periods: float


@router.post("/zero-coupon")
async def price_zero_coupon(inputs: ZeroCouponInput):
    """Price a zero-coupon bond."""
    try:
        price = bonds.price_zero_coupon_bond(
            inputs.face_value,
            rates.percent_to_decimal(inputs.market_rate_pct),
            inputs.periods,
        )
        return {"price": price}
    except ValueError as e:
        logger.info(f"Zero-coupon bond rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))


class PerpetualInput(BaseModel):
    coupon: float
    market_rate_pct: float


@router.post("/perpetual")
async def price_perpetual(inputs: PerpetualInput):
    """Price a perpetual bond."""
    try:
        price = bonds.price_perpetual_bond(
            inputs.coupon, rates.percent_to_decimal(inputs.market_rate_pct)
        )
        return {"price": price}
    except ValueError as e:
        logger.info(f"Perpetual bond rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))


class PerpetualYieldInput(BaseModel):
    coupon: float
    price: float


@router.post("/perpetual-yield")
async def perpetual_yield(inputs: PerpetualYieldInput):
    """Yield implied by a perpetual bond's price."""
    try:
        y = bonds.yield_from_perpetual_price(inputs.coupon, inputs.price)
        return {"yield_pct": rates.decimal_to_percent(y)}
    except ValueError as e:
        logger.info(f"Perpetual yield rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))


class PriceYieldInput(BaseModel):
    """Input for the price-yield curve. Defaults come from settings."""

    face_value: float = 1000.0
    coupon_rate_pct: float
    periods: int
    max_yield_pct: Optional[float] = None
    step_pct: Optional[float] = None


class CurvePoint(BaseModel):
    yield_pct: float
    price: float


@router.post("/price-yield-curve", response_model=List[CurvePoint])
async def price_yield_curve(inputs: PriceYieldInput):
    """Bond price across a range of yields."""
    settings = get_settings()
    max_yield_pct = inputs.max_yield_pct
    if max_yield_pct is None:
        max_yield_pct = settings.price_yield_max_yield_pct
    step_pct = inputs.step_pct
    if step_pct is None:
        step_pct = settings.price_yield_step_pct

    try:
        curve = bonds.price_yield_curve(
            inputs.face_value,
            rates.percent_to_decimal(inputs.coupon_rate_pct),
            inputs.periods,
            max_yield=rates.percent_to_decimal(max_yield_pct),
            step=rates.percent_to_decimal(step_pct),
        )
        return [
            CurvePoint(yield_pct=rates.decimal_to_percent(y), price=p) for y, p in curve
        ]
    except ValueError as e:
        logger.info(f"Price-yield curve rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))


class FisherInput(BaseModel):
    real_rate_pct: float
    inflation_pct: float


@router.post("/fisher")
async def fisher_effect(inputs: FisherInput):
    """Nominal rate from a real rate and expected inflation."""
    try:
        nominal = rates.fisher_nominal_rate(
            rates.percent_to_decimal(inputs.real_rate_pct),
            rates.percent_to_decimal(inputs.inflation_pct),
        )
        return {"nominal_rate_pct": rates.decimal_to_percent(nominal)}
    except ValueError as e:
        logger.info(f"Fisher effect rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))
