"""
Case Pairer - Combines width and height test points into test cases
"""
from typing import Any, Dict, List, Sequence, Tuple

from .base_generator import BaseGenerator
from ..models import Strategy, TestCase


class CasePairer(BaseGenerator):
    """
    Pairs width and height points according to the strategy.

    Worst-case strategies take the full cross product, width outer and
    height inner. The others follow the single fault assumption: height
    varies with width held at nominal, then width varies with height held
    at nominal. The width nominal is skipped in the second pass since
    (nominal, nominal) was already emitted in the first.
    """

    def __init__(self):
        super().__init__(
            name="CasePairer",
            description="Combines width/height points into test cases"
        )

    def execute(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """Pair the points in the context and return the test cases."""
        cases = self.pair(
            context["width_points"],
            context["height_points"],
            context["width_nominal"],
            context["height_nominal"],
            Strategy(context.get("strategy", Strategy.BVA))
        )
        return {"test_cases": cases, "total": len(cases)}

    def pair(
        self,
        width_points: Sequence[int],
        height_points: Sequence[int],
        width_nominal: int,
        height_nominal: int,
        strategy: Strategy
    ) -> List[TestCase]:
        """
        Build the ordered test cases.

        Args:
            width_points: Sorted width test values
            height_points: Sorted height test values
            width_nominal: Width held fixed while height varies
            height_nominal: Height held fixed while width varies
            strategy: Selected test strategy

        Returns:
            Test cases with ids 1..n in emission order
        """
        if strategy.is_worst_case:
            pairs = self._cross_product(width_points, height_points)
        else:
            pairs = self._single_fault(width_points, height_points, width_nominal, height_nominal)

        cases = [TestCase(id=i + 1, width=w, height=h) for i, (w, h) in enumerate(pairs)]
        self.log_info(f"Paired {len(cases)} test cases ({strategy.value})")
        return cases

    def _cross_product(
        self,
        width_points: Sequence[int],
        height_points: Sequence[int]
    ) -> List[Tuple[int, int]]:
        return [(w, h) for w in width_points for h in height_points]

    def _single_fault(
        self,
        width_points: Sequence[int],
        height_points: Sequence[int],
        width_nominal: int,
        height_nominal: int
    ) -> List[Tuple[int, int]]:
        pairs = [(width_nominal, h) for h in height_points]
        pairs.extend((w, height_nominal) for w in width_points if w != width_nominal)
        return pairs
