"""
Stock valuation calculator endpoints.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from finlab.calculations import rates, stocks
from finlab.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class ZeroGrowthInput(BaseModel):
    dividend: float
    required_return_pct: float


@router.post("/zero-growth")
async def price_zero_growth(inputs: ZeroGrowthInput):
    """Price a stock with a constant dividend."""
    try:
        price = stocks.price_zero_growth_stock(
            inputs.dividend, rates.percent_to_decimal(inputs.required_return_pct)
        )
        return {"price": price}
    except ValueError as e:
        logger.info(f"Zero-growth price rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))


class ConstantGrowthInput(BaseModel):
    """Input for the Gordon growth model, starting from the current dividend."""

    current_dividend: float
    required_return_pct: float
    growth_rate_pct: float
    projection_years: Optional[int] = None


class ProjectionRow(BaseModel):
    year: int
    dividend: float
    price: float


class ConstantGrowthResponse(BaseModel):
    next_dividend: float
    price: float
    projection: List[ProjectionRow]


@router.post("/constant-growth", response_model=ConstantGrowthResponse)
async def price_constant_growth(inputs: ConstantGrowthInput):
    """Price a stock whose dividend grows at a constant rate forever."""
    years = inputs.projection_years
    if years is None:
        years = get_settings().dividend_projection_years

    try:
        r = rates.percent_to_decimal(inputs.required_return_pct)
        g = rates.percent_to_decimal(inputs.growth_rate_pct)
        spec = stocks.DividendGrowthSpec(
            next_dividend=stocks.next_dividend(inputs.current_dividend, g),
            required_return=r,
            growth_rate=g,
        )
        projection = stocks.dividend_projection(inputs.current_dividend, r, g, years)

        return ConstantGrowthResponse(
            next_dividend=spec.next_dividend,
            price=spec.price(),
            projection=[ProjectionRow(**row) for row in projection],
        )
    except ValueError as e:
        logger.info(f"Constant-growth price rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))


class MultiStageInput(BaseModel):
    """
    Input for the two-stage dividend model.

    Explicit `dividends` for periods 1..n take precedence; otherwise they
    are forecast from the current dividend at the high growth rate.
    """

    current_dividend: Optional[float] = None
    high_growth_rate_pct: float = 0.0
    high_growth_years: Optional[int] = None
    dividends: Optional[List[float]] = None
    terminal_growth_rate_pct: float
    required_return_pct: float


class DiscountedDividend(BaseModel):
    period: int
    dividend: float
    present_value: float


class MultiStageResponse(BaseModel):
    dividends: List[DiscountedDividend]
    pv_dividends: float
    horizon_period: int
    horizon_value: float
    pv_horizon_value: float
    price: float


@router.post("/multi-stage", response_model=MultiStageResponse)
async def price_multi_stage(inputs: MultiStageInput):
    """Price a stock with a high-growth stage followed by constant growth."""
    try:
        if inputs.dividends:
            forecast = [(t, d) for t, d in enumerate(inputs.dividends, start=1)]
        elif inputs.current_dividend is not None and inputs.high_growth_years is not None:
            forecast = stocks.forecast_dividends(
                inputs.current_dividend,
                rates.percent_to_decimal(inputs.high_growth_rate_pct),
                inputs.high_growth_years,
            )
        else:
            raise HTTPException(
                status_code=422,
                detail="Provide either dividends or current_dividend with high_growth_years",
            )

        valuation = stocks.price_multi_stage_dividend(
            forecast,
            rates.percent_to_decimal(inputs.terminal_growth_rate_pct),
            rates.percent_to_decimal(inputs.required_return_pct),
        )

        return MultiStageResponse(
            dividends=[
                DiscountedDividend(period=period, dividend=dividend, present_value=pv)
                for (period, dividend), (_, pv) in zip(forecast, valuation.discounted_dividends)
            ],
            pv_dividends=valuation.pv_dividends,
            horizon_period=valuation.horizon_period,
            horizon_value=valuation.horizon_value,
            pv_horizon_value=valuation.pv_horizon_value,
            price=valuation.price,
        )
    except ValueError as e:
        logger.info(f"Multi-stage price rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))
