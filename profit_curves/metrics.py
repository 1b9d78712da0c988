"""Metric registry and confusion-matrix metrics for targeting decisions.

Treating "targeted" as a positive prediction, every cut of the ranked
population is a binary classifier, and the usual confusion-matrix metrics
apply. All built-in metrics are vectorized over count arrays and return 0.0
where their denominator is zero.
"""

from collections.abc import Callable
from typing import Any

import numpy as np

from .counts import confusion_at_cut
from .curve import targeted_counts
from .dataset import ScoredDataset
from .types_minimal import CountsMetricFunc
from .validation import validate_choice, validate_fraction

METRICS: dict[str, CountsMetricFunc] = {}


def register_metric(
    name: str | None = None,
    func: CountsMetricFunc | None = None,
) -> CountsMetricFunc | Callable[[CountsMetricFunc], CountsMetricFunc]:
    """Register a metric function.

    Parameters
    ----------
    name:
        Optional key under which to store the metric. If not provided the
        function's ``__name__`` is used.
    func:
        Metric callable accepting ``tp, fp, tn, fn`` and returning a float.
        When supplied the function is registered immediately. If omitted, the
        returned decorator can be used to annotate a metric function.

    Returns
    -------
    CountsMetricFunc | Callable[[CountsMetricFunc], CountsMetricFunc]
        The registered function or decorator.
    """
    if func is not None:
        METRICS[name or func.__name__] = func
        return func

    def decorator(f: CountsMetricFunc) -> CountsMetricFunc:
        METRICS[name or f.__name__] = f
        return f

    return decorator


def get_metric(name: str) -> CountsMetricFunc:
    """Look up a registered metric by name."""
    validate_choice(name, set(METRICS), "metric")
    return METRICS[name]


def _safe_ratio(numerator: Any, denominator: Any) -> float | np.ndarray:
    num = np.asarray(numerator, dtype=np.float64)
    den = np.asarray(denominator, dtype=np.float64)
    out = np.divide(num, den, out=np.zeros_like(num * den), where=den > 0)
    return float(out) if out.ndim == 0 else out


@register_metric("accuracy")
def accuracy_score(tp, fp, tn, fn):
    return _safe_ratio(np.add(tp, tn), np.add(np.add(tp, fp), np.add(tn, fn)))


@register_metric("precision")
def precision_score(tp, fp, tn, fn):
    return _safe_ratio(tp, np.add(tp, fp))


@register_metric("recall")
def recall_score(tp, fp, tn, fn):
    return _safe_ratio(tp, np.add(tp, fn))


@register_metric("specificity")
def specificity_score(tp, fp, tn, fn):
    return _safe_ratio(tn, np.add(tn, fp))


@register_metric("f1")
def f1_score(tp, fp, tn, fn):
    return _safe_ratio(np.multiply(2, tp), np.add(np.multiply(2, tp), np.add(fp, fn)))


def metrics_at_cut(dataset: ScoredDataset, k: int) -> dict[str, float]:
    """All registered metrics when the top ``k`` records are targeted."""
    counts = confusion_at_cut(dataset, k)
    return {name: float(fn(*counts.as_tuple())) for name, fn in METRICS.items()}


def metric_at_fraction(dataset: ScoredDataset, fraction: float, metric: str) -> float:
    """One registered metric when the top ``fraction`` of records are targeted."""
    metric_fn = get_metric(metric)
    fraction = validate_fraction(fraction)
    k = int(targeted_counts([fraction], dataset.n_records)[0])
    counts = confusion_at_cut(dataset, k)
    return float(metric_fn(*counts.as_tuple()))
