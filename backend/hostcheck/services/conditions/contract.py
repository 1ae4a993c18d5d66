"""
Argument contract - every predicate declares the slots it needs.
"""
from typing import Sequence

from hostcheck.logger import CheckLogger
from hostcheck.schemas.check import PARAMETER_SLOTS, Cond


def require_args(cond: Cond, required: Sequence[str], log: CheckLogger):
    """
    Validate the populated slots of a condition.
    
    A required slot left empty is fatal. A populated slot the predicate does
    not use is only a warning. Conditions without a type come from another
    predicate, not from configuration, and are not validated.
    
    Raises:
        ConfigurationError: through log.fail() on a missing required slot
    """
    if cond.type == "":
        return
    
    for slot in PARAMETER_SLOTS:
        value = getattr(cond, slot)
        if slot in required:
            if value == "":
                log.fail(f"{cond.type}: missing required argument '{slot}'")
        elif value != "":
            log.warn(f"{cond.type}: specifying unused argument '{slot}'")
