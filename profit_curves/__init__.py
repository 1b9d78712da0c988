"""Lead Profit Curves - rank scored leads and price every targeting decision.

Given a holdout population scored by any binary classifier, this library
answers "how many leads should the sales team pursue?":

**Scored population:**
- ScoredDataset: immutable, ranked (score descending, stable ties)
- confusion_at_cut() / cumulative_counts(): confusion counts at any cut

**Economics:**
- CostModel: payoff for each confusion-matrix cell

**Curves:**
- profit_curve(): O(N) prefix-sum sweep over a fraction grid
- random_baseline(): closed-form random-targeting line
- compare_models(): several classifiers plus the baseline on one grid

**Operating points:**
- argmax_profit(): profit-maximizing fraction (smallest on ties)
- profit_at_fraction(): profit at a budget-constrained fraction
- budget_fraction(): budget and cost per lead -> fraction
- lift_over_baseline(): improvement over a historical mean profit
- summarize(): flat report of all of the above
"""

# Single source of truth for version
try:
    from importlib.metadata import version

    __version__ = version("lead-profit-curves")
except Exception:
    import pathlib
    import tomllib

    pyproject_path = pathlib.Path(__file__).parent.parent / "pyproject.toml"
    if pyproject_path.exists():
        with open(pyproject_path, "rb") as f:
            __version__ = tomllib.load(f)["project"]["version"]
    else:
        __version__ = "unknown"

from .baseline import baseline_anchors, random_baseline
from .costs import CostModel
from .counts import ConfusionCounts, CumulativeCounts, confusion_at_cut, cumulative_counts
from .curve import (
    ProfitCurve,
    ProfitCurvePoint,
    compare_models,
    fraction_grid,
    profit_at_cut,
    profit_by_cut,
    profit_curve,
)
from .dataset import ScoredDataset, ScoredRecord
from .exceptions import (
    EmptyCurveError,
    InvalidInputError,
    OutOfRangeError,
    ProfitCurveError,
)
from .metrics import (
    METRICS,
    get_metric,
    metric_at_fraction,
    metrics_at_cut,
    register_metric,
)
from .optimize import (
    argmax_profit,
    budget_fraction,
    lift_over_baseline,
    profit_at_fraction,
    summarize,
)
from .results import OptimalTargeting
from .types_minimal import Label

__all__ = [
    "__version__",
    # === Scored population ===
    "Label",
    "ScoredRecord",
    "ScoredDataset",
    "ConfusionCounts",
    "CumulativeCounts",
    "confusion_at_cut",
    "cumulative_counts",
    # === Economics ===
    "CostModel",
    # === Curves ===
    "ProfitCurve",
    "ProfitCurvePoint",
    "fraction_grid",
    "profit_curve",
    "profit_by_cut",
    "profit_at_cut",
    "random_baseline",
    "baseline_anchors",
    "compare_models",
    # === Operating points ===
    "OptimalTargeting",
    "argmax_profit",
    "profit_at_fraction",
    "budget_fraction",
    "lift_over_baseline",
    "summarize",
    # === Metrics ===
    "METRICS",
    "register_metric",
    "get_metric",
    "metrics_at_cut",
    "metric_at_fraction",
    # === Errors ===
    "ProfitCurveError",
    "InvalidInputError",
    "OutOfRangeError",
    "EmptyCurveError",
]
