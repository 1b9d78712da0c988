"""Error taxonomy for profit curve evaluation."""


class ProfitCurveError(Exception):
    """Base class for all profit_curves errors."""


class InvalidInputError(ProfitCurveError, ValueError):
    """Scores, labels or payoffs that cannot be evaluated.

    Raised for empty datasets, non-finite scores, labels outside
    {Positive, Negative} and non-finite cost model entries.
    """


class OutOfRangeError(ProfitCurveError, ValueError):
    """A requested fraction, cut or budget lies outside its valid range."""


class EmptyCurveError(ProfitCurveError, RuntimeError):
    """Extraction was requested from a curve that has no points."""
