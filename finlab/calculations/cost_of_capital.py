"""
Cost of Capital

Weighted average cost of capital and dividend growth estimation.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence

from finlab.calculations.errors import InsufficientData, InvalidDomain
from finlab.calculations.rates import require_finite


@dataclass(frozen=True)
class CapitalStructure:
    """Market values and costs of a firm's capital sources."""

    equity_value: float
    debt_value: float
    preferred_value: float
    cost_of_equity: float
    pre_tax_cost_of_debt: float
    cost_of_preferred: float
    tax_rate: float

    def __post_init__(self):
        require_finite(
            equity_value=self.equity_value,
            debt_value=self.debt_value,
            preferred_value=self.preferred_value,
            cost_of_equity=self.cost_of_equity,
            pre_tax_cost_of_debt=self.pre_tax_cost_of_debt,
            cost_of_preferred=self.cost_of_preferred,
            tax_rate=self.tax_rate,
        )
        if min(self.equity_value, self.debt_value, self.preferred_value) < 0:
            raise InvalidDomain("Capital values cannot be negative")

    @property
    def total_value(self) -> float:
        return self.equity_value + self.debt_value + self.preferred_value

    @property
    def after_tax_cost_of_debt(self) -> float:
        return self.pre_tax_cost_of_debt * (1 - self.tax_rate)

    def weights(self) -> Dict[str, float]:
        """Share of each source in total capital."""
        total = self.total_value
        if total <= 0:
            raise InvalidDomain("Total capital value must be positive")
        return {
            "equity": self.equity_value / total,
            "debt": self.debt_value / total,
            "preferred": self.preferred_value / total,
        }


def weighted_average_cost_of_capital(structure: CapitalStructure) -> float:
    """
    Calculate WACC.

    WACC = wE * Re + wD * Rd * (1 - T) + wP * Rp

    Raises:
        InvalidDomain: If total capital value is not positive
    """
    w = structure.weights()
    return (
        w["equity"] * structure.cost_of_equity
        + w["debt"] * structure.after_tax_cost_of_debt
        + w["preferred"] * structure.cost_of_preferred
    )


def period_growth_rates(dividends: Sequence[float]) -> List[float]:
    """
    Growth from each observation to the next: (D[i] - D[i-1]) / D[i-1].

    Raises:
        InsufficientData: If fewer than two observations are given
        InvalidDomain: If any observation is not positive
    """
    if len(dividends) < 2:
        raise InsufficientData("At least two dividend observations are required")
    for value in dividends:
        require_finite(dividend=value)
        if value <= 0:
            raise InvalidDomain("Dividend observations must be positive")

    return [
        (current - previous) / previous
        for previous, current in zip(dividends, dividends[1:])
    ]


def historical_growth_rate(dividends: Sequence[float]) -> float:
    """Arithmetic average of the period-over-period dividend growth rates."""
    rates = period_growth_rates(dividends)
    return sum(rates) / len(rates)
