"""
Evaluation context shared by the dispatch engine and every predicate.
"""
from dataclasses import dataclass, field
from typing import Callable

from hostcheck.config import settings
from hostcheck.logger import CheckLogger
from hostcheck.services.host.files import read_file
from hostcheck.services.host.shell import shell_command_output
from hostcheck.services.obfuscation import Obfuscator, get_obfuscator


@dataclass
class EvaluationContext:
    """Collaborators a condition is evaluated against.

    Tests swap run_command and read_file for fakes; production uses the
    host implementations.
    """
    log: CheckLogger = field(default_factory=lambda: CheckLogger(verbose=settings.VERBOSE))
    run_command: Callable[[str], str] = shell_command_output
    read_file: Callable[[str], str] = read_file
    obfuscator: Obfuscator = field(default_factory=get_obfuscator)
    max_dir_files: int = settings.DIR_SEARCH_MAX_FILES
