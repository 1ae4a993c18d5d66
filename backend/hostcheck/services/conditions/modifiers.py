"""
Modifier Resolver - Split a condition type into base predicate and modifiers.

Grammar:
- <Base>            plain predicate
- <Base>Not         negated
- <Base>Regex       value is a regular expression
- <Base>NotRegex    both

Only this ordering is recognised: <Base>RegexNot resolves to the base
"<Base>Regex", which is not a predicate.
"""
from dataclasses import dataclass
from typing import Container, Optional

from hostcheck.logger import CheckLogger

NOT_SUFFIX = "Not"
REGEX_SUFFIX = "Regex"


@dataclass(frozen=True)
class ResolvedType:
    """Base predicate name plus modifier flags."""
    name: str
    negate: bool = False
    regex: bool = False


def resolve_modifiers(
    cond_type: str,
    log: CheckLogger,
    known: Optional[Container[str]] = None
) -> ResolvedType:
    """
    Resolve a condition type string.
    
    Args:
        cond_type: Type as written in the check configuration
        log: Logger used for fatal reporting
        known: Registered base predicate names; skipped when None
        
    Raises:
        ConfigurationError: type too short to be valid or unknown base name
    """
    if len(cond_type) <= len(REGEX_SUFFIX):
        log.fail(
            f'Condition type "{cond_type}" is not long enough to be valid.',
            "Do you have a \"type = 'CheckTypeHere'\" for all check conditions?"
        )
    
    name = cond_type
    regex = False
    negate = False
    
    if name.endswith(REGEX_SUFFIX):
        regex = True
        name = name[:-len(REGEX_SUFFIX)]
    
    if name.endswith(NOT_SUFFIX):
        negate = True
        name = name[:-len(NOT_SUFFIX)]
    
    if known is not None and name not in known:
        log.fail(f"Check type does not exist: {name}", f'(from type "{cond_type}")')
    
    return ResolvedType(name=name, negate=negate, regex=regex)
