"""Profit curve engine.

The population is ranked once and its confusion counts are accumulated once,
so sweeping any number of targeting fractions costs O(N + G) for N records
and G grid points. Each fraction ``f`` targets the top ``round(f * N)``
records (halves round up).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.integrate import trapezoid

from .costs import CostModel
from .counts import cumulative_counts
from .dataset import ScoredDataset
from .exceptions import EmptyCurveError, InvalidInputError
from .types_minimal import DEFAULT_STEP, MODEL_SERIES, RANDOM_SERIES, FractionGrid
from .validation import validate_cut, validate_grid, validate_step

logger = logging.getLogger(__name__)


# ============================================================================
# Grid helpers
# ============================================================================


def fraction_grid(step: float = DEFAULT_STEP) -> FractionGrid:
    """Evenly spaced fractions from 0 to 1 inclusive.

    ``step=0.01`` yields the 101 points 0.00, 0.01, ..., 1.00. Points are
    computed as ``i / n`` so they match the corresponding decimal literals.
    """
    n_intervals = validate_step(step)
    grid = np.arange(n_intervals + 1, dtype=np.float64) / n_intervals
    return grid


def resolve_grid(grid: ArrayLike | None, step: float = DEFAULT_STEP) -> FractionGrid:
    """Explicit ``grid`` if given, otherwise the even grid for ``step``."""
    if grid is None:
        return fraction_grid(step)
    return validate_grid(grid)


def targeted_counts(fractions: ArrayLike, n_records: int) -> NDArray[np.int64]:
    """Number of records targeted at each fraction, rounding halves up."""
    # Inner round absorbs float noise such as 0.29 * 100 = 28.999999999999996
    raw = np.round(np.asarray(fractions, dtype=np.float64) * n_records, 9)
    return np.floor(raw + 0.5).astype(np.int64)


# ============================================================================
# Curve containers
# ============================================================================


@dataclass(frozen=True, slots=True)
class ProfitCurvePoint:
    """Realized profit when targeting the top ``targeted_count`` records."""

    fraction: float
    targeted_count: int
    profit: float
    model_name: str


@dataclass(frozen=True, eq=False)
class ProfitCurve:
    """An ordered series of :class:`ProfitCurvePoint` for one model.

    Attributes
    ----------
    model_name : str
        Series label, ``"Model"`` by default or ``"Random"`` for the baseline.
    fractions, targeted_counts, profits : NDArray
        Parallel, read-only arrays, one entry per grid point.
    n_records : int
        Size of the population the curve was computed on.
    cost_model : CostModel
        Payoffs used to compute ``profits``.
    metadata : dict
        Extra facts about the series (e.g. the baseline anchors).
    n_positive : int, optional
        Number of positives in that population.
    """

    model_name: str
    fractions: FractionGrid
    targeted_counts: NDArray[np.int64]
    profits: NDArray[np.float64]
    n_records: int
    cost_model: CostModel
    metadata: dict[str, Any] = field(default_factory=dict)
    n_positive: int | None = None

    def __post_init__(self) -> None:
        # Read-only copies; the caller's arrays are left untouched
        for name in ("fractions", "targeted_counts", "profits"):
            arr = np.array(getattr(self, name))
            arr.setflags(write=False)
            object.__setattr__(self, name, arr)

        shapes = {self.fractions.shape, self.targeted_counts.shape, self.profits.shape}
        if len(shapes) != 1 or self.fractions.ndim != 1:
            raise InvalidInputError(
                f"Curve arrays must be 1D and aligned, got shapes {sorted(shapes)}"
            )

    @property
    def is_random(self) -> bool:
        return self.metadata.get("kind") == "random"

    def __len__(self) -> int:
        return int(self.fractions.size)

    def __getitem__(self, index: int) -> ProfitCurvePoint:
        return ProfitCurvePoint(
            fraction=float(self.fractions[index]),
            targeted_count=int(self.targeted_counts[index]),
            profit=float(self.profits[index]),
            model_name=self.model_name,
        )

    def __iter__(self) -> Iterator[ProfitCurvePoint]:
        for i in range(len(self)):
            yield self[i]

    def points(self) -> list[ProfitCurvePoint]:
        return list(self)

    def to_records(self) -> list[dict[str, Any]]:
        """Rows suitable for a DataFrame or a plotting layer."""
        return [
            {
                "fraction": p.fraction,
                "targeted_count": p.targeted_count,
                "profit": p.profit,
                "model_name": p.model_name,
            }
            for p in self
        ]

    def area(self) -> float:
        """Mean profit over the swept fraction range.

        The trapezoid-rule integral of profit over the grid divided by the
        width of the range. Useful as a single number for comparing models
        evaluated on the same grid.
        """
        if len(self) == 0:
            raise EmptyCurveError(f"Curve '{self.model_name}' has no points")
        if len(self) == 1:
            return float(self.profits[0])
        width = float(self.fractions[-1] - self.fractions[0])
        return float(trapezoid(self.profits, self.fractions)) / width


# ============================================================================
# Engine
# ============================================================================


def profit_by_cut(dataset: ScoredDataset, cost_model: CostModel) -> NDArray[np.float64]:
    """Profit for every cut ``k = 0 .. N``; index ``k`` targets the top ``k``."""
    counts = cumulative_counts(dataset)
    return np.asarray(
        cost_model.profit(counts.tp, counts.fp, counts.tn, counts.fn), dtype=np.float64
    )


def profit_at_cut(dataset: ScoredDataset, cost_model: CostModel, k: int) -> float:
    """Profit when exactly the top ``k`` records are targeted."""
    k = validate_cut(k, dataset.n_records)
    return float(profit_by_cut(dataset, cost_model)[k])


def profit_curve(
    dataset: ScoredDataset,
    cost_model: CostModel,
    grid: ArrayLike | None = None,
    *,
    step: float = DEFAULT_STEP,
    model_name: str = MODEL_SERIES,
) -> ProfitCurve:
    """Sweep the targeting fraction and compute realized profit at each point.

    Parameters
    ----------
    dataset : ScoredDataset
        Ranked holdout population.
    cost_model : CostModel
        Payoff per confusion-matrix cell.
    grid : array-like, optional
        Strictly increasing fractions in [0, 1]. Defaults to an even grid.
    step : float, default=0.01
        Spacing of the default grid. Ignored when ``grid`` is given.
    model_name : str, default="Model"
        Label carried by every point of the curve.

    Returns
    -------
    ProfitCurve
        One point per grid fraction, in grid order.
    """
    fractions = resolve_grid(grid, step)
    counts = cumulative_counts(dataset)
    k = targeted_counts(fractions, dataset.n_records)

    profits = np.asarray(
        cost_model.profit(counts.tp[k], counts.fp[k], counts.tn[k], counts.fn[k]),
        dtype=np.float64,
    )
    logger.debug(
        f"Swept {fractions.size} fractions over {dataset.n_records} records "
        f"for {model_name=}"
    )

    return ProfitCurve(
        model_name=model_name,
        fractions=fractions,
        targeted_counts=k,
        profits=profits,
        n_records=dataset.n_records,
        cost_model=cost_model,
        metadata={"kind": "model"},
        n_positive=dataset.n_positive,
    )


def compare_models(
    datasets: Mapping[str, ScoredDataset],
    cost_model: CostModel,
    grid: ArrayLike | None = None,
    *,
    step: float = DEFAULT_STEP,
) -> dict[str, ProfitCurve]:
    """Profit curves for several classifiers scored on the same population.

    Returns one curve per model, keyed by name, followed by the ``"Random"``
    baseline. All datasets must describe the same holdout population: same
    size and same number of positives.
    """
    from .baseline import random_baseline

    if not datasets:
        raise InvalidInputError("At least one scored dataset is required")
    if RANDOM_SERIES in datasets:
        raise InvalidInputError(f"Model name '{RANDOM_SERIES}' is reserved")

    fractions = resolve_grid(grid, step)
    reference = next(iter(datasets.values()))
    for name, dataset in datasets.items():
        if (dataset.n_records, dataset.n_positive) != (
            reference.n_records,
            reference.n_positive,
        ):
            raise InvalidInputError(
                f"Dataset '{name}' does not match the population of the first "
                f"dataset ({dataset.n_records} vs {reference.n_records} records, "
                f"{dataset.n_positive} vs {reference.n_positive} positives)"
            )

    logger.debug(f"Comparing {len(datasets)} models: {list(datasets)}")
    curves = {
        name: profit_curve(dataset, cost_model, fractions, model_name=name)
        for name, dataset in datasets.items()
    }
    curves[RANDOM_SERIES] = random_baseline(reference, cost_model, fractions)
    return curves
