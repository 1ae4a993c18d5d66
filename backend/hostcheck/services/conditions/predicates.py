"""
Predicate Library - Concrete condition kinds.

Every predicate returns (result, error). Errors are handed back, not raised,
so the dispatch engine can turn them into a failed condition. Expected
absence (missing path, no match) is a plain False with no error.
"""
import hashlib
import os
import re

from hostcheck.errors import CommandError, DirectorySearchError
from hostcheck.schemas.check import Cond
from hostcheck.services.conditions.context import EvaluationContext
from hostcheck.services.conditions.registry import PREDICATES, PredicateResult, predicate
from hostcheck.services.host.files import content_bytes


@predicate("PathExists", "path")
def path_exists(cond: Cond, context: EvaluationContext) -> PredicateResult:
    """Whether a file or folder exists."""
    try:
        os.stat(cond.path)
    except FileNotFoundError:
        return False, None
    except (OSError, ValueError) as e:
        return False, e
    return True, None


@predicate("FileContains", "path", "value")
def file_contains(cond: Cond, context: EvaluationContext) -> PredicateResult:
    """Whether any line of a file contains the value (or matches it as a regex).

    Matching is line by line, so patterns relying on newlines or multi-line
    anchors do not behave as they would against the whole file.
    """
    try:
        content = context.read_file(cond.path)
    except (OSError, ValueError) as e:
        return False, e

    pattern = None
    if cond.regex:
        try:
            pattern = re.compile(cond.value)
        except re.error as e:
            return False, e

    for line in content.split("\n"):
        if pattern is not None:
            found = pattern.search(line) is not None
        else:
            found = cond.value in line
        if found:
            return True, None
    return False, None


@predicate("DirContains", "path", "value")
def dir_contains(cond: Cond, context: EvaluationContext) -> PredicateResult:
    """Whether any file below a directory contains the value.

    Gives up with an error once more than context.max_dir_files files are
    found. A permission error on any file, or an invalid pattern, ends the
    search. Other read errors skip the file.
    """
    exists, err = PREDICATES["PathExists"](Cond(path=cond.path), context)
    if err is not None:
        return False, err
    if not exists:
        return False, DirectorySearchError("path does not exist")

    try:
        files = _collect_files(cond.path, context.max_dir_files)
    except DirectorySearchError as e:
        return False, e

    for file_path in files:
        found, err = PREDICATES["FileContains"](cond.with_path(file_path), context)
        if isinstance(err, (PermissionError, re.error)):
            return False, err
        if found:
            return True, None
    return False, None


def _collect_files(root: str, limit: int) -> list[str]:
    """Non-directory entries below root in lexical order."""
    if not os.path.isdir(root):
        return [root]

    files = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for filename in sorted(filenames):
            files.append(os.path.join(dirpath, filename))
            if len(files) > limit:
                raise DirectorySearchError(
                    "attempted to index too many files in recursive search"
                )
    return files


@predicate("FileEquals", "path", "value")
def file_equals(cond: Cond, context: EvaluationContext) -> PredicateResult:
    """Compare the SHA256 sum of a file with the hash given in the check."""
    try:
        content = context.read_file(cond.path)
    except (OSError, ValueError) as e:
        return False, e
    digest = hashlib.sha256(content_bytes(content)).hexdigest()
    return digest == cond.value, None


@predicate("CommandOutput", "cmd", "value")
def command_output(cond: Cond, context: EvaluationContext) -> PredicateResult:
    """Whether a shell command produces exactly the value.

    The comparison still runs when the command fails; both the comparison
    and the error are returned.
    """
    err = None
    try:
        out = context.run_command(cond.cmd)
    except CommandError as e:
        out, err = e.output, e
    return out.strip() == cond.value, err


@predicate("CommandContains", "cmd", "value")
def command_contains(cond: Cond, context: EvaluationContext) -> PredicateResult:
    """Whether the output of a shell command contains the value.

    Always fails if the command returns an error.
    """
    try:
        out = context.run_command(cond.cmd)
    except CommandError as e:
        return False, e

    out = out.strip()
    if cond.regex:
        try:
            return re.search(cond.value, out) is not None, None
        except re.error as e:
            return False, e
    return cond.value in out, None
