"""
Check Runner - Load a check file and score it against this host.
"""
from pathlib import Path
from typing import Optional, Union

from hostcheck.logger import CheckLogger, logger
from hostcheck.schemas.check_result import ScoreReport
from hostcheck.services.check_loader import load_checks
from hostcheck.services.conditions.context import EvaluationContext
from hostcheck.services.conditions.engine import ConditionEngine
from hostcheck.services.scoring.engine import CheckScorer


class CheckRunner:
    """Orchestrates a complete scoring run."""
    
    def __init__(self, context: Optional[EvaluationContext] = None):
        self.context = context or EvaluationContext()
        self.scorer = CheckScorer(ConditionEngine(self.context))
    
    @classmethod
    def with_verbosity(cls, verbose: bool) -> "CheckRunner":
        return cls(EvaluationContext(log=CheckLogger(verbose=verbose)))
    
    def run(self, config_path: Union[str, Path]) -> ScoreReport:
        """
        Score every check in a configuration file.
        
        Raises:
            ConfigurationError: invalid configuration; aborts the whole run
        """
        logger.info(f"Starting check run for {config_path}")
        checks = load_checks(config_path)
        
        # Loaded values stay hidden until a single evaluation reveals them
        for check in checks:
            for cond in check.pass_override + check.fail + check.pass_:
                self.context.obfuscator.obfuscate(cond)
        
        return self.scorer.score(checks)
