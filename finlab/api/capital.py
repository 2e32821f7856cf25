"""
Cost of capital and capital budgeting calculator endpoints.
"""

import logging
from typing import Dict, List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from finlab.calculations import capital_budgeting, cost_of_capital, rates, stocks

logger = logging.getLogger(__name__)

router = APIRouter()


class CostOfEquityInput(BaseModel):
    current_dividend: float
    price: float
    growth_rate_pct: float


@router.post("/cost-of-equity")
async def cost_of_equity(inputs: CostOfEquityInput):
    """Cost of equity implied by the dividend growth model."""
    try:
        g = rates.percent_to_decimal(inputs.growth_rate_pct)
        d1 = stocks.next_dividend(inputs.current_dividend, g)
        re = stocks.cost_of_equity_from_dividend_growth(d1, inputs.price, g)
        return {"next_dividend": d1, "cost_of_equity_pct": rates.decimal_to_percent(re)}
    except ValueError as e:
        logger.info(f"Cost of equity rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))


class GrowthRateInput(BaseModel):
    dividends: List[float]


@router.post("/growth-rate")
async def growth_rate(inputs: GrowthRateInput):
    """Average historical dividend growth."""
    try:
        period_rates = cost_of_capital.period_growth_rates(inputs.dividends)
        average = cost_of_capital.historical_growth_rate(inputs.dividends)
        return {
            "growth_rates_pct": [rates.decimal_to_percent(g) for g in period_rates],
            "average_growth_pct": rates.decimal_to_percent(average),
        }
    except ValueError as e:
        logger.info(f"Growth estimate rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))


class WaccInput(BaseModel):
    """Input for WACC calculation."""

    equity_value: float
    debt_value: float
    preferred_value: float = 0.0
    cost_of_equity_pct: float
    pre_tax_cost_of_debt_pct: float
    cost_of_preferred_pct: float = 0.0
    tax_rate_pct: float


class WaccResponse(BaseModel):
    weights: Dict[str, float]
    after_tax_cost_of_debt_pct: float
    wacc_pct: float


@router.post("/wacc", response_model=WaccResponse)
async def wacc(inputs: WaccInput):
    """Weighted average cost of capital."""
    try:
        structure = cost_of_capital.CapitalStructure(
            equity_value=inputs.equity_value,
            debt_value=inputs.debt_value,
            preferred_value=inputs.preferred_value,
            cost_of_equity=rates.percent_to_decimal(inputs.cost_of_equity_pct),
            pre_tax_cost_of_debt=rates.percent_to_decimal(inputs.pre_tax_cost_of_debt_pct),
            cost_of_preferred=rates.percent_to_decimal(inputs.cost_of_preferred_pct),
            tax_rate=rates.percent_to_decimal(inputs.tax_rate_pct),
        )
        return WaccResponse(
            weights=structure.weights(),
            after_tax_cost_of_debt_pct=rates.decimal_to_percent(structure.after_tax_cost_of_debt),
            wacc_pct=rates.decimal_to_percent(
                cost_of_capital.weighted_average_cost_of_capital(structure)
            ),
        )
    except ValueError as e:
        logger.info(f"WACC rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))


class NPVInput(BaseModel):
    """Input for NPV calculation."""

    initial_outlay: float
    cash_flows: List[float]
    rate_pct: float


class DiscountedCashFlow(BaseModel):
    period: int
    cash_flow: float
    present_value: float


class NPVResponse(BaseModel):
    npv: float
    accept: bool
    discounted_cash_flows: List[DiscountedCashFlow]


@router.post("/npv", response_model=NPVResponse)
async def npv(inputs: NPVInput):
    """NPV of a project and the accept/reject decision."""
    try:
        project = capital_budgeting.ProjectCashFlows(inputs.initial_outlay, inputs.cash_flows)
        result = capital_budgeting.evaluate_project(
            project, rates.percent_to_decimal(inputs.rate_pct)
        )
        return NPVResponse(
            npv=result.npv,
            accept=result.accept,
            discounted_cash_flows=[
                DiscountedCashFlow(period=period, cash_flow=cf, present_value=pv)
                for (period, cf), (_, pv) in zip(project.schedule(), result.discounted_cash_flows)
            ],
        )
    except ValueError as e:
        logger.info(f"NPV rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))
