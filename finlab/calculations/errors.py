"""
Domain errors raised by the formula library.

All of them are ValueError subclasses, so callers that already guard
calculations with ``except ValueError`` keep working.
"""


class FormulaError(ValueError):
    """Base class for invalid mathematical preconditions."""

    kind = "formula_error"


class NonConvergentSeries(FormulaError):
    """Perpetuity or growth model whose rate does not exceed its growth."""

    kind = "non_convergent_series"


class InvalidDomain(FormulaError):
    """Input outside the domain where the formula yields a real number."""

    kind = "invalid_domain"


class InsufficientData(FormulaError):
    """Too few observations to estimate a quantity."""

    kind = "insufficient_data"
