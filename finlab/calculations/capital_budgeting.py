"""
Capital Budgeting

Net present value of a project and the accept/reject rule derived from it.
"""

from dataclasses import dataclass
from typing import List, Sequence

from finlab.calculations.errors import InvalidDomain
from finlab.calculations.rates import finite_result, require_finite
from finlab.calculations.tvm import CashFlowSchedule, discount_schedule


@dataclass(frozen=True)
class ProjectCashFlows:
    """An initial outlay at period 0 followed by cash flows from period 1."""

    initial_outlay: float
    period_cash_flows: List[float]

    def __post_init__(self):
        require_finite(initial_outlay=self.initial_outlay)
        if self.initial_outlay < 0:
            raise InvalidDomain("Initial outlay cannot be negative")

    def schedule(self) -> CashFlowSchedule:
        return [(period, cf) for period, cf in enumerate(self.period_cash_flows, start=1)]


@dataclass(frozen=True)
class NPVResult:
    """NPV of a project with its discounted cash flows."""

    discounted_cash_flows: CashFlowSchedule
    npv: float

    @property
    def accept(self) -> bool:
        return self.npv >= 0


def evaluate_project(project: ProjectCashFlows, rate: float) -> NPVResult:
    """Discount a project's cash flows at `rate` and net off the outlay."""
    require_finite(rate=rate)
    discounted = discount_schedule(project.schedule(), rate)
    npv = finite_result(
        -project.initial_outlay + sum(pv for _, pv in discounted), "Net present value"
    )
    return NPVResult(discounted_cash_flows=discounted, npv=npv)


def net_present_value(
    initial_outlay: float, cash_flows: Sequence[float], rate: float
) -> float:
    """
    Calculate NPV (Net Present Value) of a project.

    Args:
        initial_outlay: Investment at period 0 (positive number)
        cash_flows: Cash flows for periods 1..n
        rate: Discount rate as decimal (e.g., 0.10 for 10%)

    Returns:
        -initial_outlay + sum(cf / (1 + rate) ** t)
    """
    project = ProjectCashFlows(initial_outlay, list(cash_flows))
    return evaluate_project(project, rate).npv
