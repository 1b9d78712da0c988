"""Business payoffs for acting (or not acting) on a prediction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .exceptions import InvalidInputError
from .types_minimal import UtilityDict
from .validation import validate_payoff


@dataclass(frozen=True, slots=True)
class CostModel:
    """Payoff per confusion-matrix cell.

    No sign constraints are enforced. The usual lead-scoring convention is a
    positive ``benefit_true_positive``, a non-positive ``cost_false_positive``
    (the wasted cost of approaching a lead that does not buy) and zero for
    both untargeted cells.
    """

    benefit_true_positive: float
    cost_false_positive: float
    benefit_true_negative: float = 0.0
    cost_false_negative: float = 0.0

    def __post_init__(self) -> None:
        for name in (
            "benefit_true_positive",
            "cost_false_positive",
            "benefit_true_negative",
            "cost_false_negative",
        ):
            # frozen: normalize through object.__setattr__
            object.__setattr__(self, name, validate_payoff(getattr(self, name), name))

    @classmethod
    def from_utility(cls, utility: UtilityDict) -> Self:
        """Create from dictionary with keys 'tp', 'fp' and optionally 'tn', 'fn'."""
        required_keys = {"tp", "fp"}
        allowed_keys = {"tp", "fp", "tn", "fn"}
        if not required_keys <= utility.keys():
            raise InvalidInputError(f"Utility dict must contain keys: {required_keys}")
        unknown = set(utility) - allowed_keys
        if unknown:
            raise InvalidInputError(f"Unknown utility keys: {unknown}")

        return cls(
            benefit_true_positive=utility["tp"],
            cost_false_positive=utility["fp"],
            benefit_true_negative=utility.get("tn", 0.0),
            cost_false_negative=utility.get("fn", 0.0),
        )

    @classmethod
    def from_unit_economics(cls, revenue_per_sale: float, cost_per_contact: float) -> Self:
        """Every contacted lead costs the same; converted leads bring revenue.

        A converted lead nets ``revenue_per_sale - cost_per_contact``; a lead
        contacted in vain loses ``cost_per_contact``.
        """
        revenue = validate_payoff(revenue_per_sale, "revenue_per_sale")
        cost = validate_payoff(cost_per_contact, "cost_per_contact")
        return cls(
            benefit_true_positive=revenue - cost,
            cost_false_positive=-cost,
        )

    def as_utility(self) -> UtilityDict:
        """Inverse of :meth:`from_utility`."""
        return {
            "tp": self.benefit_true_positive,
            "fp": self.cost_false_positive,
            "tn": self.benefit_true_negative,
            "fn": self.cost_false_negative,
        }

    def profit(
        self, tp: ArrayLike, fp: ArrayLike, tn: ArrayLike, fn: ArrayLike
    ) -> float | NDArray[np.float64]:
        """Total payoff for the given confusion counts.

        Accepts scalars or equally shaped arrays and returns the same shape.
        """
        total = (
            np.asarray(tp, dtype=np.float64) * self.benefit_true_positive
            + np.asarray(fp, dtype=np.float64) * self.cost_false_positive
            + np.asarray(tn, dtype=np.float64) * self.benefit_true_negative
            + np.asarray(fn, dtype=np.float64) * self.cost_false_negative
        )
        if total.ndim == 0:
            return float(total)
        return total
