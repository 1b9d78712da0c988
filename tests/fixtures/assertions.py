"""Custom assertion helpers for test consistency.

This module provides standardized assertion functions to ensure
consistent validation across all test modules.
"""

import numpy as np


def assert_valid_confusion_counts(
    tp: int,
    fp: int,
    tn: int,
    fn: int,
    total_samples: int | None = None,
) -> None:
    """Assert that confusion counts are valid.

    Parameters
    ----------
    tp, fp, tn, fn : int
        Confusion matrix components
    total_samples : int, optional
        Expected total number of samples
    """
    assert tp >= 0, f"True positives {tp} < 0"
    assert fp >= 0, f"False positives {fp} < 0"
    assert tn >= 0, f"True negatives {tn} < 0"
    assert fn >= 0, f"False negatives {fn} < 0"

    if total_samples is not None:
        total = tp + fp + tn + fn
        assert total == total_samples, f"Total {total} != expected {total_samples}"


def assert_monotonic_increase(values: np.ndarray, strict: bool = False) -> None:
    """Assert that values are monotonically increasing."""
    diffs = np.diff(np.asarray(values))

    if strict:
        assert np.all(diffs > 0), f"Values not strictly increasing: {values}"
    else:
        assert np.all(diffs >= 0), f"Values not monotonically increasing: {values}"


def assert_valid_curve(curve, n_records: int | None = None) -> None:
    """Assert structural invariants of a ProfitCurve.

    Parameters
    ----------
    curve : ProfitCurve
        Curve to validate
    n_records : int, optional
        Expected population size
    """
    assert curve.fractions.shape == curve.profits.shape == curve.targeted_counts.shape
    assert np.all(np.isfinite(curve.profits)), "Curve contains non-finite profits"
    assert np.all((curve.fractions >= 0) & (curve.fractions <= 1))
    assert_monotonic_increase(curve.fractions, strict=True)
    assert_monotonic_increase(curve.targeted_counts)

    if n_records is not None:
        assert curve.n_records == n_records
        assert np.all(curve.targeted_counts <= n_records)

    for point in curve:
        assert point.model_name == curve.model_name


def assert_curves_identical(first, second) -> None:
    """Assert two curves are bit-for-bit identical."""
    assert first.model_name == second.model_name
    assert first.n_records == second.n_records
    assert np.array_equal(first.fractions, second.fractions)
    assert np.array_equal(first.targeted_counts, second.targeted_counts)
    assert first.profits.tobytes() == second.profits.tobytes()
