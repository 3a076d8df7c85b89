"""
Strategy Tests
==============
Classification of the four strategies.
"""
import pytest

from triangle_tester.models import Strategy


class TestClassification:

    @pytest.mark.parametrize("strategy, robust, worst_case", [
        (Strategy.BVA, False, False),
        (Strategy.ROBUSTNESS, True, False),
        (Strategy.WORST_CASE, False, True),
        (Strategy.WORST_CASE_ROBUSTNESS, True, True),
    ])
    def test_flags(self, strategy, robust, worst_case):
        assert strategy.is_robust is robust
        assert strategy.is_worst_case is worst_case

    def test_lookup_by_value(self):
        assert Strategy("Worst case Robustness") is Strategy.WORST_CASE_ROBUSTNESS

    def test_unknown_value_rejected(self):
        with pytest.raises(ValueError):
            Strategy("Pairwise")


class TestCatalogue:

    def test_catalogue_lists_all_strategies_in_order(self):
        assert Strategy.catalogue() == [
            {"value": "Bva", "label": "Boundary Value Analysis (BVA)"},
            {"value": "Robustness", "label": "Robustness"},
            {"value": "Worst case", "label": "Worst Case"},
            {"value": "Worst case Robustness", "label": "Worst Case Robustness"},
        ]
