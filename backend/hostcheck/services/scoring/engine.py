"""
Scoring Engine - Combine condition outcomes into check results and totals.

Check rules, evaluated in this order with short-circuiting:
- any PassOverride condition true -> pass
- any Fail condition true -> fail
- Pass conditions present -> pass only if all are true
- otherwise pass only if the check had Fail conditions (none fired)
"""
from datetime import datetime, timezone
from typing import Optional

from hostcheck.schemas.check import Check, Cond
from hostcheck.schemas.check_result import CheckResult, ScoreReport
from hostcheck.services.conditions.engine import ConditionEngine
from hostcheck.logger import logger


class CheckScorer:
    """Main scoring orchestrator."""

    def __init__(self, engine: Optional[ConditionEngine] = None):
        self.engine = engine or ConditionEngine()

    def score_check(self, check: Check) -> CheckResult:
        """Evaluate one check."""
        passed, failed_hints = self._run(check)

        hints = []
        # Hints only help on positive checks the host has not earned yet
        if not passed and check.points > 0:
            if check.hint:
                hints.append(check.hint)
            hints.extend(failed_hints)

        return CheckResult(
            message=check.message,
            points=check.points,
            passed=passed,
            hints=hints
        )

    def _run(self, check: Check) -> tuple[bool, list[str]]:
        for cond in check.pass_override:
            if self.engine.evaluate(cond):
                return True, []

        for cond in check.fail:
            if self.engine.evaluate(cond):
                return False, _hint_of(cond)

        if check.pass_:
            for cond in check.pass_:
                if not self.engine.evaluate(cond):
                    return False, _hint_of(cond)
            return True, []

        if not check.fail:
            logger.warning(f"Check '{check.message}' has no pass or fail conditions")
            return False, []
        return True, []

    def score(self, checks: list[Check]) -> ScoreReport:
        """Run all checks and total the points.

        Returns:
            ScoreReport with per-check results
        """
        logger.info(f"Scoring {len(checks)} checks...")
        started_at = datetime.now(timezone.utc)

        results = [self.score_check(check) for check in checks]

        completed_at = datetime.now(timezone.utc)
        total = sum(r.points for r in results if r.points > 0)
        earned = sum(r.points for r in results if r.passed)

        logger.info(
            f"Scored {sum(1 for r in results if r.passed)}/{len(results)} checks, "
            f"{earned}/{total} points"
        )

        return ScoreReport(
            started_at=started_at,
            completed_at=completed_at,
            duration_seconds=round((completed_at - started_at).total_seconds(), 2),
            total_points=total,
            earned_points=earned,
            results=results
        )


def _hint_of(cond: Cond) -> list[str]:
    return [cond.hint] if cond.hint else []
