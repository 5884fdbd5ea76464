"""External command execution"""

import logging
import shlex
import subprocess
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..api.exceptions import ExternalProcessError
from ..models.result import CommandResult

logger = logging.getLogger(__name__)

Command = Union[str, Sequence[str]]


def split_command(command: Command) -> List[str]:
    """Split a command string into argv, leaving sequences untouched"""
    if isinstance(command, str):
        return shlex.split(command)
    return list(command)


class CommandRunner(ABC):
    """Runs an external command to completion"""

    @abstractmethod
    def run(self, command: Command, cwd: Optional[Path] = None) -> CommandResult:
        """Run a command and wait for it to exit

        Args:
            command: Command string or argv
            cwd: Working directory

        Returns:
            CommandResult of a successful run

        Raises:
            ExternalProcessError: The command exited non-zero or could not start
        """


class SubprocessRunner(CommandRunner):
    """Runs commands with ``subprocess.run``

    By default the child inherits stdin, stdout and stderr so build and
    deploy output reaches the operator's terminal as it is produced.
    """

    def __init__(self, capture_output: bool = False, timeout: Optional[float] = None):
        self.capture_output = capture_output
        self.timeout = timeout

    def run(self, command: Command, cwd: Optional[Path] = None) -> CommandResult:
        argv = split_command(command)
        display = command if isinstance(command, str) else shlex.join(argv)
        if not argv:
            raise ExternalProcessError(display, None, reason="empty command")

        logger.info(f"Running: {display}")
        start = time.monotonic()

        try:
            completed = subprocess.run(
                argv,
                cwd=str(cwd) if cwd else None,
                capture_output=self.capture_output,
                text=True,
                timeout=self.timeout
            )
        except FileNotFoundError:
            raise ExternalProcessError(display, None, reason=f"'{argv[0]}' not found on PATH")
        except subprocess.TimeoutExpired:
            raise ExternalProcessError(display, None, reason=f"timed out after {self.timeout}s")

        result = CommandResult(
            command=display,
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
            duration=time.monotonic() - start
        )
        logger.debug(f"{display} exited with {result.returncode} in {result.duration:.1f}s")

        if not result.is_success:
            raise ExternalProcessError(display, result.returncode, stderr=result.stderr)

        return result
