"""
Time value of money calculator endpoints.

Rates are entered as percentages, matching the lecture sliders, and the
pages call these on every input change.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from finlab.calculations import annuity, rates, tvm
from finlab.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class PathPoint(BaseModel):
    """Value of an amount at one period."""

    period: int
    value: float


class FutureValueInput(BaseModel):
    """Input for future value calculation."""

    present_value: float
    rate_pct: float
    periods: float


class FutureValueResponse(BaseModel):
    future_value: float
    path: Optional[List[PathPoint]] = None


@router.post("/future-value", response_model=FutureValueResponse)
async def calculate_future_value(inputs: FutureValueInput):
    """Compound a present amount forward."""
    try:
        rate = rates.percent_to_decimal(inputs.rate_pct)
        fv = tvm.future_value(inputs.present_value, rate, inputs.periods)

        path = None
        if inputs.periods >= 0 and float(inputs.periods).is_integer():
            path = [
                PathPoint(period=t, value=v)
                for t, v in tvm.growth_path(inputs.present_value, rate, int(inputs.periods))
            ]

        return FutureValueResponse(future_value=fv, path=path)
    except ValueError as e:
        logger.info(f"Future value rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))


class PresentValueInput(BaseModel):
    """Input for present value calculation."""

    future_value: float
    rate_pct: float
    periods: float


class PresentValueResponse(BaseModel):
    present_value: float
    path: Optional[List[PathPoint]] = None


@router.post("/present-value", response_model=PresentValueResponse)
async def calculate_present_value(inputs: PresentValueInput):
    """Discount a future amount back to today."""
    try:
        rate = rates.percent_to_decimal(inputs.rate_pct)
        pv = tvm.present_value(inputs.future_value, rate, inputs.periods)

        path = None
        if inputs.periods >= 0 and float(inputs.periods).is_integer():
            path = [
                PathPoint(period=t, value=v)
                for t, v in tvm.discount_path(inputs.future_value, rate, int(inputs.periods))
            ]

        return PresentValueResponse(present_value=pv, path=path)
    except ValueError as e:
        logger.info(f"Present value rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))


class ImpliedRateInput(BaseModel):
    present_value: float
    future_value: float
    periods: float


@router.post("/implied-rate")
async def calculate_implied_rate(inputs: ImpliedRateInput):
    """Solve for the rate linking PV and FV."""
    try:
        rate = tvm.implied_rate(inputs.present_value, inputs.future_value, inputs.periods)
        return {"rate_pct": rates.decimal_to_percent(rate)}
    except ValueError as e:
        logger.info(f"Implied rate rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))


class ImpliedPeriodsInput(BaseModel):
    present_value: float
    future_value: float
    rate_pct: float


@router.post("/implied-periods")
async def calculate_implied_periods(inputs: ImpliedPeriodsInput):
    """Solve for the number of periods linking PV and FV."""
    try:
        periods = tvm.implied_periods(
            inputs.present_value,
            inputs.future_value,
            rates.percent_to_decimal(inputs.rate_pct),
        )
        return {"periods": periods}
    except ValueError as e:
        logger.info(f"Implied periods rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))


class AnnuityInput(BaseModel):
    """Input for annuity calculation."""

    payment: float
    rate_pct: float
    periods: int


class AnnuityRow(BaseModel):
    period: int
    payment: float
    present_value: float
    future_value: float


class AnnuityResponse(BaseModel):
    present_value: float
    future_value: float
    schedule: List[AnnuityRow]


@router.post("/annuity", response_model=AnnuityResponse)
async def calculate_annuity(inputs: AnnuityInput):
    """Value an ordinary annuity and break it into payments."""
    try:
        rate = rates.percent_to_decimal(inputs.rate_pct)
        schedule = annuity.annuity_schedule(inputs.payment, rate, inputs.periods)

        return AnnuityResponse(
            present_value=annuity.present_value_annuity(inputs.payment, rate, inputs.periods),
            future_value=annuity.future_value_annuity(inputs.payment, rate, inputs.periods),
            schedule=[
                AnnuityRow(
                    period=row.period,
                    payment=row.payment,
                    present_value=row.present_value,
                    future_value=row.future_value,
                )
                for row in schedule
            ],
        )
    except ValueError as e:
        logger.info(f"Annuity rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))


class PerpetuityInput(BaseModel):
    payment: float
    rate_pct: float


@router.post("/perpetuity")
async def calculate_perpetuity(inputs: PerpetuityInput):
    """Value a level perpetuity."""
    try:
        pv = annuity.present_value_perpetuity(
            inputs.payment, rates.percent_to_decimal(inputs.rate_pct)
        )
        return {"present_value": pv}
    except ValueError as e:
        logger.info(f"Perpetuity rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))


class EffectiveRateInput(BaseModel):
    """Input for APR vs EAR, with the principal grown through the year."""

    apr_pct: float
    compounding_periods_per_year: int
    principal: float = 1000.0


class CompoundingRow(BaseModel):
    period: int
    beginning_balance: float
    interest: float
    ending_balance: float


class EffectiveRateResponse(BaseModel):
    ear_pct: float
    final_balance: float
    breakdown: Optional[List[CompoundingRow]] = None


@router.post("/effective-annual-rate", response_model=EffectiveRateResponse)
async def calculate_effective_annual_rate(inputs: EffectiveRateInput):
    """Convert a quoted APR to its effective annual rate."""
    settings = get_settings()
    try:
        apr = rates.percent_to_decimal(inputs.apr_pct)
        m = inputs.compounding_periods_per_year
        ear = rates.effective_annual_rate(apr, m)

        breakdown = None
        if m <= settings.compounding_breakdown_max_periods:
            breakdown = [
                CompoundingRow(
                    period=row.period,
                    beginning_balance=row.beginning_balance,
                    interest=row.interest,
                    ending_balance=row.ending_balance,
                )
                for row in rates.compounding_breakdown(inputs.principal, apr, m)
            ]

        return EffectiveRateResponse(
            ear_pct=rates.decimal_to_percent(ear),
            final_balance=tvm.future_value(inputs.principal, ear, 1),
            breakdown=breakdown,
        )
    except ValueError as e:
        logger.info(f"Effective annual rate rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))
