"""
Predicate registry - name to implementation mapping used by the dispatch engine.

New predicates are added with the @predicate decorator; the engine never
needs to change.
"""
from dataclasses import dataclass
from typing import Callable, Optional

from hostcheck.schemas.check import PARAMETER_SLOTS, Cond
from hostcheck.services.conditions.context import EvaluationContext
from hostcheck.services.conditions.contract import require_args
from hostcheck.services.conditions.modifiers import NOT_SUFFIX, REGEX_SUFFIX

PredicateResult = tuple[bool, Optional[Exception]]
PredicateFunc = Callable[[Cond, EvaluationContext], PredicateResult]


@dataclass(frozen=True)
class Predicate:
    """A registered check kind and the slots it requires."""
    name: str
    func: PredicateFunc
    required: tuple[str, ...]

    def __call__(self, cond: Cond, context: EvaluationContext) -> PredicateResult:
        require_args(cond, self.required, context.log)
        return self.func(cond, context)


PREDICATES: dict[str, Predicate] = {}


def predicate(name: str, *required: str):
    """Register a predicate function under a base name.
    
    Names ending in a modifier suffix would never be reached through a
    condition type and are rejected.
    """
    unknown = [slot for slot in required if slot not in PARAMETER_SLOTS]
    if unknown:
        raise ValueError(f"{name}: unknown parameter slot(s) {unknown}")
    if name.endswith(NOT_SUFFIX) or name.endswith(REGEX_SUFFIX):
        raise ValueError(f"{name}: predicate names cannot end in a modifier suffix")
    
    def decorator(func: PredicateFunc) -> PredicateFunc:
        if name in PREDICATES:
            raise ValueError(f"predicate already registered: {name}")
        PREDICATES[name] = Predicate(name=name, func=func, required=tuple(required))
        return func
    
    return decorator
