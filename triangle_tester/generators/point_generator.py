"""
Point Generator - Derives boundary test values from an integer range
"""
from typing import Any, Dict

from .base_generator import BaseGenerator
from ..models import PointSet, Strategy


class PointGenerator(BaseGenerator):
    """
    Produces the boundary values for one dimension.

    Base points are min, min+1, nominal, max-1 and max. Robust
    strategies add min-1 and max+1. Narrow ranges collapse to fewer
    points once duplicates are removed.
    """

    def __init__(self):
        super().__init__(
            name="PointGenerator",
            description="Derives boundary test values from a range"
        )

    def execute(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """Generate points for context['min'], context['max'] and context['strategy']."""
        point_set = self.generate(
            context["min"],
            context["max"],
            Strategy(context.get("strategy", Strategy.BVA))
        )
        return {"points": point_set.points, "nominal": point_set.nominal}

    def generate(self, minimum: int, maximum: int, strategy: Strategy) -> PointSet:
        """
        Generate the sorted, unique test values for a range.

        Args:
            minimum: Lower bound of the range
            maximum: Upper bound of the range
            strategy: Selected test strategy

        Returns:
            PointSet with the points and the nominal value
        """
        nominal = (minimum + maximum) // 2

        points = {minimum, minimum + 1, nominal, maximum - 1, maximum}
        if strategy.is_robust:
            points.update((minimum - 1, maximum + 1))

        point_set = PointSet(points=sorted(points), nominal=nominal)
        self.log_debug(
            f"{strategy.value} [{minimum}, {maximum}] -> {point_set.points} (nominal {nominal})"
        )
        return point_set
