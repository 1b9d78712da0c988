"""Result types for profit curve extraction."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class OptimalTargeting:
    """The profit-maximizing operating point of a curve.

    Attributes
    ----------
    fraction : float
        Smallest grid fraction achieving the maximum profit.
    targeted_count : int
        Number of top-ranked leads targeted at ``fraction``.
    profit : float
        Maximum profit over the grid.
    model_name : str
        Series the optimum was taken from.
    metadata : dict[str, Any]
        Extra facts (grid size, index of the optimum).
    """

    fraction: float
    targeted_count: int
    profit: float
    model_name: str
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def grid_index(self) -> int:
        return int(self.metadata.get("index", -1))
