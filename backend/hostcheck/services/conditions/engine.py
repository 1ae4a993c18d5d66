"""
Dispatch Engine - Evaluate one condition to a boolean.

Steps:
- Reveal obfuscated values for the duration of the call
- Resolve Not/Regex modifiers from the type
- Invoke the registered predicate
- Combine (result, error) with negation; an error always means False
"""
from typing import Mapping, Optional

from hostcheck.schemas.check import Cond
from hostcheck.services.conditions.context import EvaluationContext
from hostcheck.services.conditions.modifiers import resolve_modifiers
from hostcheck.services.conditions.predicates import PREDICATES
from hostcheck.services.conditions.registry import Predicate
from hostcheck.services.obfuscation import revealed


class ConditionEngine:
    """Evaluates conditions against the current host."""

    def __init__(
        self,
        context: Optional[EvaluationContext] = None,
        predicates: Optional[Mapping[str, Predicate]] = None
    ):
        self.context = context or EvaluationContext()
        self.predicates = PREDICATES if predicates is None else predicates

    @property
    def log(self):
        return self.context.log

    def evaluate(self, cond: Cond) -> bool:
        """
        Run a single condition.

        Returns:
            True when the predicate ran without error and its (possibly
            negated) result holds

        Raises:
            ConfigurationError: invalid type or missing required argument
        """
        with revealed(cond, self.context.obfuscator, self.log):
            self.log.debug(f"Running condition:\n{cond.describe()}")

            resolved = resolve_modifiers(cond.type, self.log, known=self.predicates)
            predicate = self.predicates[resolved.name]
            result, err = predicate(cond.with_regex(resolved.regex), self.context)

            if err is not None and self.log.verbose:
                self.log.warn(f"{resolved.name} returned an error: {err}")

            if resolved.negate:
                self.log.debug(
                    f"Result is {not result} (was {result} before negation) and error is {err}"
                )
                return err is None and not result

            self.log.debug(f"Result is {result} and error is {err}")
            return err is None and result
