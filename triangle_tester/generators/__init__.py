"""Generators package"""
from .base_generator import BaseGenerator
from .point_generator import PointGenerator
from .case_pairer import CasePairer
from .report_formatter import ReportFormatter
from .test_plan import TestPlanner

__all__ = [
    "BaseGenerator",
    "PointGenerator",
    "CasePairer",
    "ReportFormatter",
    "TestPlanner"
]
