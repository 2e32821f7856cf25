"""
Financial Calculation Engine

Pure formula modules behind the lecture calculators. Every function is
stateless and validates its inputs, raising a FormulaError subclass
instead of returning NaN or infinity.
"""

from finlab.calculations import (
    annuity,
    bonds,
    capital_budgeting,
    cost_of_capital,
    errors,
    rates,
    stocks,
    tvm,
)

__all__ = [
    "annuity",
    "bonds",
    "capital_budgeting",
    "cost_of_capital",
    "errors",
    "rates",
    "stocks",
    "tvm",
]
