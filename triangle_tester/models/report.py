"""
Report Data Model
"""
from datetime import datetime
from typing import List
from pydantic import BaseModel, Field

from .strategy import Strategy
from .test_case import PointSet, Range, TestCase


class Report(BaseModel):
    """Rendered execute log for one generation."""

    tester_name: str = ""
    strategy: Strategy
    generated_at: datetime
    finished_at: datetime
    test_cases: List[TestCase] = Field(default_factory=list)
    text: str = Field(..., description="Formatted log, exactly as downloaded")

    @property
    def total(self) -> int:
        return len(self.test_cases)

    class Config:
        frozen = True


class TestPlan(BaseModel):
    """Everything produced by one Generate action."""

    width_range: Range
    height_range: Range
    width: PointSet
    height: PointSet
    report: Report

    __test__ = False  # not a pytest class
