"""Operating points on a profit curve.

Given a swept curve, pick the profit-maximizing fraction, read the profit at
a budget-constrained fraction, and compare an operating point against the
historical mean profit.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from .baseline import baseline_anchors, interpolate_baseline
from .curve import ProfitCurve, ProfitCurvePoint, profit_at_cut, targeted_counts
from .dataset import ScoredDataset
from .exceptions import EmptyCurveError, InvalidInputError, OutOfRangeError
from .results import OptimalTargeting
from .types_minimal import FRACTION_TOLERANCE
from .validation import validate_fraction, validate_payoff

logger = logging.getLogger(__name__)


def argmax_profit(curve: ProfitCurve) -> OptimalTargeting:
    """Fraction with the highest profit on the curve.

    Ties resolve to the smallest fraction.

    Raises
    ------
    EmptyCurveError
        If the curve has no points.
    """
    if len(curve) == 0:
        raise EmptyCurveError(
            f"Cannot take the optimum of curve '{curve.model_name}': it has no points"
        )

    # np.argmax returns the first maximum and the grid is increasing
    index = int(np.argmax(curve.profits))
    best = curve[index]
    logger.debug(
        f"Optimum for {curve.model_name}: fraction={best.fraction} "
        f"targeted={best.targeted_count} profit={best.profit}"
    )
    return OptimalTargeting(
        fraction=best.fraction,
        targeted_count=best.targeted_count,
        profit=best.profit,
        model_name=curve.model_name,
        metadata={"index": index, "n_points": len(curve)},
    )


def _grid_index(curve: ProfitCurve, fraction: float) -> int | None:
    """Index of the grid point equal to ``fraction`` (within tolerance)."""
    if len(curve) == 0:
        return None
    distances = np.abs(curve.fractions - fraction)
    index = int(np.argmin(distances))
    if distances[index] <= FRACTION_TOLERANCE:
        return index
    return None


def profit_at_fraction(
    curve: ProfitCurve,
    fraction: float,
    *,
    dataset: ScoredDataset | None = None,
) -> ProfitCurvePoint:
    """Profit when targeting the top ``fraction`` of the population.

    Parameters
    ----------
    curve : ProfitCurve
        A model curve or the random baseline.
    fraction : float
        Requested targeting fraction in [0, 1].
    dataset : ScoredDataset, optional
        The population the curve was computed on. When given and ``fraction``
        is not on the grid, the profit is recomputed exactly at that fraction.
        Without it the nearest grid point is returned (the smaller fraction
        when two are equally near).

    Raises
    ------
    OutOfRangeError
        If ``fraction`` is outside [0, 1].
    EmptyCurveError
        If the curve is empty and no dataset is available for recomputation.
    """
    fraction = validate_fraction(fraction)

    index = _grid_index(curve, fraction)
    if index is not None:
        return curve[index]

    if dataset is not None:
        if dataset.n_records != curve.n_records:
            raise InvalidInputError(
                f"Dataset has {dataset.n_records} records but curve "
                f"'{curve.model_name}' was computed on {curve.n_records}"
            )
        if curve.n_positive is not None and dataset.n_positive != curve.n_positive:
            raise InvalidInputError(
                f"Dataset has {dataset.n_positive} positives but curve "
                f"'{curve.model_name}' was computed on {curve.n_positive}"
            )
        k = int(targeted_counts([fraction], dataset.n_records)[0])
        if curve.is_random:
            profit_at_zero, profit_at_one = baseline_anchors(dataset, curve.cost_model)
            profit = float(interpolate_baseline(fraction, profit_at_zero, profit_at_one))
        else:
            profit = profit_at_cut(dataset, curve.cost_model, k)
        logger.debug(f"Recomputed {curve.model_name} at off-grid {fraction=} ({k=})")
        return ProfitCurvePoint(
            fraction=fraction,
            targeted_count=k,
            profit=profit,
            model_name=curve.model_name,
        )

    if len(curve) == 0:
        raise EmptyCurveError(
            f"Curve '{curve.model_name}' has no points and no dataset was given"
        )

    # argmin keeps the first (smaller) fraction on equidistant ties
    nearest = int(np.argmin(np.abs(curve.fractions - fraction)))
    return curve[nearest]


def budget_fraction(budget: float, cost_per_lead: float, n_records: int) -> float:
    """Fraction of the population a budget can pay to approach.

    ``(budget / cost_per_lead) / n_records``, e.g. a budget that covers 2,400
    contacts in a population of 10,000 leads gives 0.24.

    Raises
    ------
    InvalidInputError
        If ``cost_per_lead`` is not positive or ``n_records`` is below 1.
    OutOfRangeError
        If the budget is negative or covers more leads than exist.
    """
    budget = validate_payoff(budget, "budget")
    cost_per_lead = validate_payoff(cost_per_lead, "cost_per_lead")
    if cost_per_lead <= 0:
        raise InvalidInputError(f"cost_per_lead must be positive, got {cost_per_lead}")
    if isinstance(n_records, bool) or not isinstance(n_records, (int, np.integer)):
        raise InvalidInputError(f"n_records must be an integer, got {n_records!r}")
    if n_records < 1:
        raise InvalidInputError(f"n_records must be at least 1, got {n_records}")
    if budget < 0:
        raise OutOfRangeError(f"budget must be non-negative, got {budget}")

    fraction = (budget / cost_per_lead) / n_records
    if fraction > 1.0:
        raise OutOfRangeError(
            f"Budget covers {budget / cost_per_lead:g} leads but only "
            f"{n_records} exist (fraction {fraction:.3f} > 1)"
        )
    return fraction


def lift_over_baseline(
    curve: ProfitCurve,
    fraction: float,
    mean_historical_profit: float,
    *,
    dataset: ScoredDataset | None = None,
) -> float:
    """Relative improvement of the curve at ``fraction`` over a historical mean.

    ``|profit(fraction) - mean_historical_profit| / mean_historical_profit``.
    The reference value comes from outside the curve (e.g. finance's average
    campaign profit).
    """
    reference = validate_payoff(mean_historical_profit, "mean_historical_profit")
    if reference == 0:
        raise InvalidInputError("mean_historical_profit cannot be zero")

    point = profit_at_fraction(curve, fraction, dataset=dataset)
    return abs(point.profit - reference) / reference


def summarize(
    curve: ProfitCurve,
    baseline: ProfitCurve | None = None,
    *,
    operating_fraction: float | None = None,
    mean_historical_profit: float | None = None,
    dataset: ScoredDataset | None = None,
) -> dict[str, Any]:
    """Flat report of a curve's key operating points.

    Keys always present: ``model_name``, ``optimal_fraction``,
    ``optimal_targeted_count``, ``optimal_profit``, ``mean_profit``. The
    baseline, operating-point and lift keys appear when their inputs are
    given.
    """
    best = argmax_profit(curve)
    report: dict[str, Any] = {
        "model_name": curve.model_name,
        "optimal_fraction": best.fraction,
        "optimal_targeted_count": best.targeted_count,
        "optimal_profit": best.profit,
        "mean_profit": curve.area(),
    }

    if baseline is not None:
        random_at_best = profit_at_fraction(baseline, best.fraction, dataset=dataset)
        report["baseline_profit_at_optimum"] = random_at_best.profit
        report["gain_over_baseline"] = best.profit - random_at_best.profit

    if operating_fraction is not None:
        point = profit_at_fraction(curve, operating_fraction, dataset=dataset)
        report["operating_fraction"] = point.fraction
        report["operating_targeted_count"] = point.targeted_count
        report["operating_profit"] = point.profit

        if mean_historical_profit is not None:
            report["lift_over_historical"] = lift_over_baseline(
                curve,
                operating_fraction,
                mean_historical_profit,
                dataset=dataset,
            )

    return report
