"""Minimal type definitions for the profit_curves package.

Only the aliases and label constants needed by the public API live here.
"""

from collections.abc import Callable
from enum import IntEnum
from typing import TypeAlias

import numpy as np
from numpy.typing import ArrayLike, NDArray

# ============================================================================
# Core Type Aliases
# ============================================================================

CountsMetricFunc: TypeAlias = Callable[..., float | NDArray[np.float64]]
"""Function signature for metrics: (tp, fp, tn, fn) -> score."""

UtilityDict: TypeAlias = dict[str, float]
"""Payoff specification dict with keys 'tp', 'fp' and optionally 'tn', 'fn'."""

FractionGrid: TypeAlias = NDArray[np.float64]
"""Strictly increasing targeting fractions in [0, 1]."""

ScoresLike: TypeAlias = ArrayLike
LabelsLike: TypeAlias = ArrayLike


class Label(IntEnum):
    """Binary ground truth for a lead."""

    NEGATIVE = 0
    POSITIVE = 1


# Accepted textual spellings for labels, compared case-insensitively
POSITIVE_LABEL_NAMES = {"positive", "pos", "yes", "y", "true", "1"}
NEGATIVE_LABEL_NAMES = {"negative", "neg", "no", "n", "false", "0"}

MODEL_SERIES = "Model"
RANDOM_SERIES = "Random"

DEFAULT_STEP = 0.01

# Tolerance for matching a requested fraction against grid points
FRACTION_TOLERANCE = 1e-9
