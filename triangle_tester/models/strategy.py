"""
Strategy - Test design strategies for the width/height domain
"""
from enum import Enum
from typing import Dict, List


class Strategy(str, Enum):
    """
    Test design strategy.

    Decides two things: whether the point set is extended one step past
    each boundary (robust) and whether width and height points are paired
    as a full cross product (worst case) or one dimension at a time.
    """

    BVA = "Bva"
    ROBUSTNESS = "Robustness"
    WORST_CASE = "Worst case"
    WORST_CASE_ROBUSTNESS = "Worst case Robustness"

    @property
    def is_robust(self) -> bool:
        """Whether min-1 and max+1 are added to the point set."""
        return _ROBUST[self]

    @property
    def is_worst_case(self) -> bool:
        """Whether points are combined as a full cross product."""
        return _WORST_CASE[self]

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def catalogue(cls) -> List[Dict[str, str]]:
        """Strategies as value/label pairs, in declaration order."""
        return [{"value": s.value, "label": s.label} for s in cls]


_ROBUST: Dict[Strategy, bool] = {
    Strategy.BVA: False,
    Strategy.ROBUSTNESS: True,
    Strategy.WORST_CASE: False,
    Strategy.WORST_CASE_ROBUSTNESS: True,
}

_WORST_CASE: Dict[Strategy, bool] = {
    Strategy.BVA: False,
    Strategy.ROBUSTNESS: False,
    Strategy.WORST_CASE: True,
    Strategy.WORST_CASE_ROBUSTNESS: True,
}

_LABELS: Dict[Strategy, str] = {
    Strategy.BVA: "Boundary Value Analysis (BVA)",
    Strategy.ROBUSTNESS: "Robustness",
    Strategy.WORST_CASE: "Worst Case",
    Strategy.WORST_CASE_ROBUSTNESS: "Worst Case Robustness",
}
