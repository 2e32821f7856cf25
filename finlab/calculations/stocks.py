"""
Stock Valuation

Dividend discount models: zero growth, constant (Gordon) growth, and a
finite high-growth stage followed by constant growth.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from finlab.calculations.annuity import present_value_perpetuity
from finlab.calculations.errors import InvalidDomain, NonConvergentSeries
from finlab.calculations.rates import finite_result, require_finite
from finlab.calculations.tvm import CashFlowSchedule, discount_schedule, present_value


@dataclass(frozen=True)
class DividendGrowthSpec:
    """Inputs of the constant growth model."""

    next_dividend: float
    required_return: float
    growth_rate: float

    def price(self) -> float:
        return price_constant_growth_stock(
            self.next_dividend, self.required_return, self.growth_rate
        )


@dataclass(frozen=True)
class MultiStageValuation:
    """Breakdown of a two-stage dividend discount valuation."""

    discounted_dividends: CashFlowSchedule  # (period, PV of dividend)
    horizon_period: int
    horizon_value: float
    pv_horizon_value: float

    @property
    def pv_dividends(self) -> float:
        return sum(pv for _, pv in self.discounted_dividends)

    @property
    def price(self) -> float:
        return finite_result(self.pv_dividends + self.pv_horizon_value, "Stock price")


def next_dividend(current_dividend: float, growth_rate: float) -> float:
    """D1 = D0 * (1 + g)."""
    require_finite(current_dividend=current_dividend, growth_rate=growth_rate)
    return finite_result(current_dividend * (1 + growth_rate), "Next dividend")


def price_zero_growth_stock(dividend: float, required_return: float) -> float:
    """Price a stock paying a constant dividend forever."""
    return present_value_perpetuity(dividend, required_return)


def price_constant_growth_stock(
    next_dividend: float, required_return: float, growth_rate: float
) -> float:
    """
    Price a stock with the Gordon growth model.

    Args:
        next_dividend: Dividend expected one period from now (D1)
        required_return: Required return as decimal
        growth_rate: Perpetual dividend growth rate as decimal

    Returns:
        D1 / (R - g)

    Raises:
        NonConvergentSeries: If required_return <= growth_rate
    """
    require_finite(
        next_dividend=next_dividend,
        required_return=required_return,
        growth_rate=growth_rate,
    )
    if required_return <= growth_rate:
        raise NonConvergentSeries("Required return must exceed the growth rate")
    return finite_result(next_dividend / (required_return - growth_rate), "Stock price")


def cost_of_equity_from_dividend_growth(
    next_dividend: float, price: float, growth_rate: float
) -> float:
    """Required return implied by a price under constant growth: D1/P0 + g."""
    require_finite(next_dividend=next_dividend, price=price, growth_rate=growth_rate)
    if price <= 0:
        raise InvalidDomain("Price must be positive")
    return finite_result(next_dividend / price + growth_rate, "Cost of equity")


def forecast_dividends(
    current_dividend: float, growth_rate: float, years: int
) -> CashFlowSchedule:
    """Dividends for periods 1..years growing from D0 at `growth_rate`."""
    if isinstance(years, bool) or not isinstance(years, int) or years <= 0:
        raise InvalidDomain("Forecast horizon must be a positive whole number of years")

    dividends = []
    dividend = current_dividend
    for t in range(1, years + 1):
        dividend = next_dividend(dividend, growth_rate)
        dividends.append((t, dividend))
    return dividends


def price_multi_stage_dividend(
    high_growth_dividends: Sequence[Tuple[int, float]],
    terminal_growth_rate: float,
    required_return: float,
) -> MultiStageValuation:
    """
    Price a stock with explicit dividends followed by constant growth.

    1. Discount each forecast dividend at its own period.
    2. Value the stock at the last forecast period with the Gordon model,
       using the last dividend grown once at the terminal rate.
    3. Discount that horizon value back over the same number of periods.
    4. The price is the sum of all discounted terms.

    Raises:
        InvalidDomain: If the forecast is empty or its periods are invalid
        NonConvergentSeries: If required_return <= terminal_growth_rate
    """
    forecast = list(high_growth_dividends)
    if not forecast:
        raise InvalidDomain("At least one forecast dividend is required")
    if required_return <= terminal_growth_rate:
        raise NonConvergentSeries("Required return must exceed the terminal growth rate")

    discounted = discount_schedule(forecast, required_return)
    horizon_period, last_dividend = forecast[-1]

    horizon_value = price_constant_growth_stock(
        next_dividend(last_dividend, terminal_growth_rate),
        required_return,
        terminal_growth_rate,
    )

    return MultiStageValuation(
        discounted_dividends=discounted,
        horizon_period=horizon_period,
        horizon_value=horizon_value,
        pv_horizon_value=present_value(horizon_value, required_return, horizon_period),
    )


def dividend_projection(
    current_dividend: float,
    required_return: float,
    growth_rate: float,
    years: int = 20,
) -> List[Dict]:
    """
    Project dividends and the constant growth price for years 0..years.

    The price at year t is D(t+1) / (R - g), so it grows at g alongside the
    dividend.
    """
    if isinstance(years, bool) or not isinstance(years, int) or years < 0:
        raise InvalidDomain("Projection horizon must be a non-negative whole number")

    rows = []
    dividend = current_dividend
    for year in range(years + 1):
        d_next = next_dividend(dividend, growth_rate)
        rows.append(
            {
                "year": year,
                "dividend": dividend,
                "price": price_constant_growth_stock(d_next, required_return, growth_rate),
            }
        )
        dividend = d_next
    return rows
