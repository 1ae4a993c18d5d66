"""
Pydantic schemas for scoring results.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class CheckResult(BaseModel):
    """Outcome of one check."""
    message: str
    points: int
    passed: bool
    hints: list[str] = []


class ScoreReport(BaseModel):
    """Complete scoring run."""
    # Timestamps
    started_at: datetime
    completed_at: Optional[datetime] = None
    duration_seconds: float = 0
    
    # Totals
    total_points: int = Field(0, ge=0)
    earned_points: int = 0
    
    # Details
    results: list[CheckResult] = []

    @property
    def passed_count(self) -> int:
        return sum(1 for r in self.results if r.passed)
