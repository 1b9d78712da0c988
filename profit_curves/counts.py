"""Confusion counts for every possible targeting cut.

Targeting the top ``k`` ranked records splits the population into a targeted
head and an untargeted tail. With labels already in ranked order, one pass of
cumulative sums gives the counts for every ``k`` at once.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property

import numpy as np
from numpy.typing import NDArray

from .dataset import ScoredDataset
from .validation import validate_cut


@dataclass(frozen=True, slots=True)
class ConfusionCounts:
    """Confusion counts for one targeting cut."""

    tp: int
    fp: int
    tn: int
    fn: int

    @property
    def total(self) -> int:
        return self.tp + self.fp + self.tn + self.fn

    @property
    def targeted(self) -> int:
        return self.tp + self.fp

    def as_tuple(self) -> tuple[int, int, int, int]:
        return self.tp, self.fp, self.tn, self.fn


@dataclass(frozen=True, eq=False)
class CumulativeCounts:
    """Confusion counts for all cuts ``k = 0 .. n_records``.

    The indexing convention is:
    - Index 0: nobody targeted
    - Index k (k > 0): the first k ranked records are targeted

    At cut index k:
      tp[k] = positives among the first k records
      fp[k] = negatives among the first k records
      fn[k] = P - tp[k]
      tn[k] = N - fp[k]

    where P and N are the population's positive and negative counts.
    """

    tp: NDArray[np.int64]
    fp: NDArray[np.int64]

    @classmethod
    def from_dataset(cls, dataset: ScoredDataset) -> CumulativeCounts:
        labels = dataset.labels.astype(np.int64)

        # Include "target nobody" at the beginning
        tp = np.concatenate([[0], np.cumsum(labels)])
        fp = np.concatenate([[0], np.cumsum(1 - labels)])
        tp.setflags(write=False)
        fp.setflags(write=False)
        return cls(tp=tp, fp=fp)

    @property
    def n_records(self) -> int:
        return int(self.tp.size - 1)

    @property
    def n_positive(self) -> int:
        return int(self.tp[-1])

    @property
    def n_negative(self) -> int:
        return int(self.fp[-1])

    @cached_property
    def fn(self) -> NDArray[np.int64]:
        return self.n_positive - self.tp

    @cached_property
    def tn(self) -> NDArray[np.int64]:
        return self.n_negative - self.fp

    def at(self, k: int) -> ConfusionCounts:
        """Counts when exactly the top ``k`` records are targeted."""
        k = validate_cut(k, self.n_records)
        return ConfusionCounts(
            tp=int(self.tp[k]),
            fp=int(self.fp[k]),
            tn=int(self.tn[k]),
            fn=int(self.fn[k]),
        )


def cumulative_counts(dataset: ScoredDataset) -> CumulativeCounts:
    """Prefix-sum confusion counts for every cut of ``dataset``."""
    return CumulativeCounts.from_dataset(dataset)


def confusion_at_cut(dataset: ScoredDataset, k: int) -> ConfusionCounts:
    """Confusion counts when the top ``k`` records of ``dataset`` are targeted.

    Raises
    ------
    OutOfRangeError
        If ``k`` is outside ``[0, len(dataset)]``.
    """
    k = validate_cut(k, dataset.n_records)
    tp = int(np.count_nonzero(dataset.labels[:k]))
    fp = k - tp
    return ConfusionCounts(
        tp=tp,
        fp=fp,
        tn=dataset.n_negative - fp,
        fn=dataset.n_positive - tp,
    )
