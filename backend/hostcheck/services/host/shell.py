"""
Shell command execution.
"""
import subprocess

from hostcheck.config import settings
from hostcheck.errors import CommandError


def shell_command_output(cmd: str, shell: str = None) -> str:
    """
    Run one shell command line and return its combined output.
    
    stderr is folded into stdout. No timeout is applied: a command that
    blocks, blocks the evaluation.
    
    Raises:
        CommandError: if the shell could not be started or the command
            exited with a non-zero status. The error carries the output.
    """
    executable = shell or settings.SHELL
    try:
        completed = subprocess.run(
            [executable, "-c", cmd],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except (OSError, ValueError) as e:
        raise CommandError(cmd, None, str(e)) from e
    
    output = completed.stdout.decode("utf-8", errors="replace")
    if completed.returncode != 0:
        raise CommandError(cmd, completed.returncode, output)
    return output
