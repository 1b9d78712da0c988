"""Scored holdout populations and their ranking.

A :class:`ScoredDataset` is the hand-off point from an external classifier.
It is built once, ranked once (score descending, stable among equal scores)
and never mutated afterwards. Everything downstream reads the ranked arrays.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Self

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .exceptions import InvalidInputError
from .types_minimal import Label, LabelsLike, ScoresLike
from .validation import validate_cut, validate_scored_inputs

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScoredRecord:
    """One member of the evaluation population."""

    score: float
    label: Label

    @property
    def is_positive(self) -> bool:
        return self.label == Label.POSITIVE


def rank_by_score(scores: NDArray[np.float64]) -> NDArray[np.intp]:
    """Return indices that order ``scores`` descending.

    Equal scores keep their original input order, so "top k" is reproducible
    for identical input.
    """
    # Negating keeps a stable ascending sort equivalent to a stable descending one
    return np.argsort(-scores, kind="stable")


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


class ScoredDataset:
    """Immutable, ranked collection of (score, label) pairs.

    Parameters
    ----------
    scores : array-like of float
        Probability-like scores, one per lead.
    labels : array-like
        Ground truth per lead (see :func:`validate_binary_labels`).
    require_proba : bool, default=True
        Reject scores outside [0, 1].

    Attributes
    ----------
    scores : NDArray[np.float64]
        Scores in ranked (descending) order. Read-only.
    labels : NDArray[np.int8]
        Labels aligned with ``scores``. Read-only.
    order : NDArray[np.intp]
        ``order[i]`` is the input position of the i-th ranked record.
    """

    def __init__(
        self,
        scores: ScoresLike,
        labels: LabelsLike,
        *,
        require_proba: bool = True,
    ) -> None:
        raw_scores, raw_labels = validate_scored_inputs(
            scores, labels, require_proba=require_proba
        )
        order = rank_by_score(raw_scores)

        self.scores = _readonly(raw_scores[order])
        self.labels = _readonly(raw_labels[order])
        self.order = _readonly(order)

        logger.debug(
            f"Ranked {self.n_records} records "
            f"({self.n_positive} positive, {self.n_negative} negative)"
        )

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_predictions(
        cls,
        scores: ScoresLike,
        labels: LabelsLike,
        *,
        require_proba: bool = True,
    ) -> Self:
        """Build from parallel score and label arrays."""
        return cls(scores, labels, require_proba=require_proba)

    @classmethod
    def from_records(
        cls,
        records: Iterable[ScoredRecord | tuple[float, Any]],
        *,
        require_proba: bool = True,
    ) -> Self:
        """Build from :class:`ScoredRecord` objects or ``(score, label)`` pairs."""
        scores: list[float] = []
        labels: list[Any] = []
        for record in records:
            if isinstance(record, ScoredRecord):
                scores.append(record.score)
                labels.append(record.label)
            else:
                try:
                    score, label = record
                except (TypeError, ValueError) as exc:
                    raise InvalidInputError(
                        f"Records must be (score, label) pairs, got {record!r}"
                    ) from exc
                scores.append(score)
                labels.append(label)
        # An object array keeps mixed label spellings intact for validation
        label_arr = np.empty(len(labels), dtype=object)
        label_arr[:] = labels
        return cls(scores, label_arr, require_proba=require_proba)

    @classmethod
    def from_estimator(cls, estimator: Any, X: ArrayLike, y: ArrayLike) -> Self:
        """Score a fitted classifier on a holdout set.

        The estimator is only asked for ``predict_proba``; the positive class
        is taken to be the last column (scikit-learn orders ``classes_``
        ascending, so this is class 1 for 0/1 targets).
        """
        if not hasattr(estimator, "predict_proba"):
            raise InvalidInputError(
                f"{type(estimator).__name__} does not implement predict_proba"
            )
        proba = np.asarray(estimator.predict_proba(X), dtype=np.float64)
        if proba.ndim != 2 or proba.shape[1] != 2:
            raise InvalidInputError(
                f"Expected binary predict_proba output of shape (n, 2), got {proba.shape}"
            )
        return cls(proba[:, 1], y)

    # ------------------------------------------------------------------
    # Population summaries
    # ------------------------------------------------------------------

    @property
    def n_records(self) -> int:
        return int(self.scores.size)

    @cached_property
    def n_positive(self) -> int:
        return int(np.count_nonzero(self.labels))

    @property
    def n_negative(self) -> int:
        return self.n_records - self.n_positive

    @property
    def base_rate(self) -> float:
        """Fraction of positives in the population."""
        return self.n_positive / self.n_records

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self.n_records

    def __iter__(self) -> Iterator[ScoredRecord]:
        for score, label in zip(self.scores.tolist(), self.labels.tolist()):
            yield ScoredRecord(score=score, label=Label(label))

    def __getitem__(self, index: int) -> ScoredRecord:
        return ScoredRecord(
            score=float(self.scores[index]), label=Label(int(self.labels[index]))
        )

    def top(self, k: int) -> list[ScoredRecord]:
        """The ``k`` highest-scoring records in ranked order."""
        k = validate_cut(k, self.n_records)
        return [self[i] for i in range(k)]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(n_records={self.n_records}, "
            f"n_positive={self.n_positive}, n_negative={self.n_negative})"
        )
