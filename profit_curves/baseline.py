"""Random-targeting baseline.

A policy that ignores scores and contacts a uniformly random subset expects
the same class composition in that subset as in the whole population. Its
expected profit is therefore linear in the fraction targeted, and the two
endpoints (nobody targeted, everybody targeted) determine the whole line.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike

from .costs import CostModel
from .curve import ProfitCurve, resolve_grid, targeted_counts
from .dataset import ScoredDataset
from .types_minimal import DEFAULT_STEP, RANDOM_SERIES

logger = logging.getLogger(__name__)


def baseline_anchors(dataset: ScoredDataset, cost_model: CostModel) -> tuple[float, float]:
    """Profit with nobody targeted and with everybody targeted.

    Neither value depends on the ranking. With the usual zero payoffs for
    untargeted leads the first anchor is 0.
    """
    n_pos, n_neg = dataset.n_positive, dataset.n_negative
    nobody = cost_model.profit(tp=0, fp=0, tn=n_neg, fn=n_pos)
    everybody = cost_model.profit(tp=n_pos, fp=n_neg, tn=0, fn=0)
    return float(nobody), float(everybody)


def interpolate_baseline(
    fractions: ArrayLike, profit_at_zero: float, profit_at_one: float
) -> np.ndarray:
    """Expected random-targeting profit at each fraction."""
    f = np.asarray(fractions, dtype=np.float64)
    return (1.0 - f) * profit_at_zero + f * profit_at_one


def random_baseline(
    dataset: ScoredDataset,
    cost_model: CostModel,
    grid: ArrayLike | None = None,
    *,
    step: float = DEFAULT_STEP,
) -> ProfitCurve:
    """The ``"Random"`` comparison series on the same grid as the model curve."""
    fractions = resolve_grid(grid, step)
    profit_at_zero, profit_at_one = baseline_anchors(dataset, cost_model)
    logger.debug(
        f"Random baseline from {profit_at_zero=} to {profit_at_one=} "
        f"over {fractions.size} fractions"
    )

    return ProfitCurve(
        model_name=RANDOM_SERIES,
        fractions=fractions,
        targeted_counts=targeted_counts(fractions, dataset.n_records),
        profits=interpolate_baseline(fractions, profit_at_zero, profit_at_one),
        n_records=dataset.n_records,
        cost_model=cost_model,
        metadata={
            "kind": "random",
            "profit_at_zero": profit_at_zero,
            "profit_at_one": profit_at_one,
        },
        n_positive=dataset.n_positive,
    )
