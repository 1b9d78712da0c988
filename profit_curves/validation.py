"""validation.py - Simple, direct validation with fail-fast semantics."""

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from .exceptions import InvalidInputError, OutOfRangeError
from .types_minimal import (
    FRACTION_TOLERANCE,
    NEGATIVE_LABEL_NAMES,
    POSITIVE_LABEL_NAMES,
    FractionGrid,
    Label,
    LabelsLike,
    ScoresLike,
)

# ============================================================================
# Core validation - Just simple functions that return clean arrays
# ============================================================================


def _coerce_label(value: Any) -> int:
    """Map a single label spelling onto 0/1."""
    if isinstance(value, bytes):
        value = value.decode()
    if isinstance(value, str):
        key = value.strip().lower()
        if key in POSITIVE_LABEL_NAMES:
            return int(Label.POSITIVE)
        if key in NEGATIVE_LABEL_NAMES:
            return int(Label.NEGATIVE)
        raise InvalidInputError(
            f"Labels must be Positive or Negative, got {value!r}"
        )
    if isinstance(value, (bool, np.bool_)):
        return int(value)
    if isinstance(value, numbers.Real) and value in (0, 1):
        return int(value)
    raise InvalidInputError(f"Labels must be Positive or Negative, got {value!r}")


def validate_binary_labels(labels: LabelsLike) -> np.ndarray[Any, np.dtype[np.int8]]:
    """Validate and return binary labels as int8 array.

    Parameters
    ----------
    labels : array-like
        Input labels. Accepts :class:`Label` members, booleans, 0/1 numbers
        or textual spellings such as ``"Positive"`` / ``"no"``.

    Returns
    -------
    np.ndarray of int8
        Validated binary labels in {0, 1}

    Raises
    ------
    InvalidInputError
        If labels are empty, not 1D or not binary
    """
    arr = np.asarray(labels)

    if arr.ndim != 1:
        raise InvalidInputError(f"Labels must be 1D, got shape {arr.shape}")

    if arr.size == 0:
        raise InvalidInputError("Labels cannot be empty")

    match arr.dtype.kind:
        case "b":
            return arr.astype(np.int8)
        case "i" | "u" | "f":
            valid = (arr == 0) | (arr == 1)
            if not np.all(valid):
                bad = np.unique(arr[~valid])
                raise InvalidInputError(
                    f"Labels must be binary (0 or 1), got unexpected values: {bad}"
                )
            return arr.astype(np.int8)
        case "U" | "S" | "O":
            return np.fromiter(
                (_coerce_label(v) for v in arr.tolist()), dtype=np.int8, count=arr.size
            )
        case _:
            raise InvalidInputError(f"Unsupported label dtype {arr.dtype}")


def validate_scores(scores: ScoresLike, require_proba: bool = True) -> np.ndarray:
    """Validate and return scores as float64 array.

    Parameters
    ----------
    scores : array-like
        Model scores, one per lead
    require_proba : bool
        If True, scores must additionally lie in [0, 1].

    Returns
    -------
    np.ndarray of float64
        Validated scores

    Raises
    ------
    InvalidInputError
        If scores are empty, not 1D, non-finite or (optionally) outside [0, 1]
    """
    try:
        arr = np.asarray(scores, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Scores must be numeric: {exc}") from exc

    if arr.ndim != 1:
        raise InvalidInputError(f"Scores must be 1D, got shape {arr.shape}")

    if arr.size == 0:
        raise InvalidInputError("Scores cannot be empty")

    if not np.all(np.isfinite(arr)):
        raise InvalidInputError("Scores must be finite (no NaN/inf)")

    if require_proba and (np.any(arr < 0) or np.any(arr > 1)):
        raise InvalidInputError(
            f"Scores must be in [0, 1], got range "
            f"[{arr.min():.3f}, {arr.max():.3f}]"
        )

    return arr


def validate_scored_inputs(
    scores: ScoresLike, labels: LabelsLike, require_proba: bool = True
) -> tuple[np.ndarray, np.ndarray]:
    """Validate a (scores, labels) pair for a scored holdout population.

    Returns
    -------
    tuple
        (scores as float64, labels as int8)
    """
    scores = validate_scores(scores, require_proba=require_proba)
    labels = validate_binary_labels(labels)

    if len(labels) != len(scores):
        raise InvalidInputError(
            f"Length mismatch: {len(labels)} labels vs {len(scores)} scores"
        )

    return scores, labels


# ============================================================================
# Scalars - fractions, cuts and payoffs
# ============================================================================


def validate_fraction(fraction: Any, name: str = "fraction") -> float:
    """Validate a targeting fraction and return it as a float.

    Raises
    ------
    InvalidInputError
        If the value is not numeric
    OutOfRangeError
        If the value is non-finite or outside [0, 1]
    """
    if isinstance(fraction, (bool, np.bool_)):
        raise InvalidInputError(f"{name} must be a number, got {fraction!r}")
    try:
        value = float(fraction)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} must be a number, got {fraction!r}") from exc

    if not np.isfinite(value):
        raise OutOfRangeError(f"{name} must be finite, got {value}")
    if not (0.0 <= value <= 1.0):
        raise OutOfRangeError(f"{name} must be in [0, 1], got {value}")
    return value


def validate_cut(k: Any, n_records: int) -> int:
    """Validate a targeted count ``0 <= k <= n_records``."""
    if isinstance(k, (bool, np.bool_)) or not isinstance(k, numbers.Integral):
        raise InvalidInputError(f"Targeted count must be an integer, got {k!r}")
    k = int(k)
    if not (0 <= k <= n_records):
        raise OutOfRangeError(f"Targeted count must be in [0, {n_records}], got {k}")
    return k


def validate_payoff(value: Any, name: str) -> float:
    """Validate a single cost model entry."""
    try:
        payoff = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} must be a real number, got {value!r}") from exc
    if not np.isfinite(payoff):
        raise InvalidInputError(f"{name} must be finite, got {payoff}")
    return payoff


# ============================================================================
# Fraction grids
# ============================================================================


def validate_step(step: Any) -> int:
    """Validate a grid step and return the number of intervals it produces.

    The step must lie in (0, 1] and divide 1 evenly, so that the grid
    contains both endpoints.
    """
    try:
        value = float(step)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Step must be a number, got {step!r}") from exc

    if not np.isfinite(value) or not (0.0 < value <= 1.0):
        raise OutOfRangeError(f"Step must be in (0, 1], got {value}")

    n_intervals = int(round(1.0 / value))
    if abs(n_intervals * value - 1.0) > FRACTION_TOLERANCE:
        raise InvalidInputError(f"Step must divide 1 evenly, got {value}")
    return n_intervals


def validate_grid(grid: ArrayLike) -> FractionGrid:
    """Validate an explicit fraction grid.

    Returns
    -------
    np.ndarray of float64
        Strictly increasing fractions in [0, 1]. May be empty.
    """
    try:
        arr = np.asarray(grid, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Grid must be numeric: {exc}") from exc

    if arr.ndim != 1:
        raise InvalidInputError(f"Grid must be 1D, got shape {arr.shape}")

    if arr.size == 0:
        return arr

    if not np.all(np.isfinite(arr)):
        raise OutOfRangeError("Grid fractions must be finite")

    if np.any(arr < 0) or np.any(arr > 1):
        raise OutOfRangeError(
            f"Grid fractions must be in [0, 1], got range "
            f"[{arr.min():.3f}, {arr.max():.3f}]"
        )

    if np.any(np.diff(arr) <= 0):
        raise InvalidInputError("Grid fractions must be strictly increasing")

    return arr


def validate_choice(value: str, choices: set[str], name: str) -> str:
    """Validate string choice."""
    if value not in choices:
        raise InvalidInputError(f"Invalid {name} '{value}'. Must be one of: {choices}")
    return value
