"""Models package"""
from .strategy import Strategy
from .test_case import Range, PointSet, TestCase
from .report import Report, TestPlan

__all__ = ["Strategy", "Range", "PointSet", "TestCase", "Report", "TestPlan"]
