"""
Command runners for the lock regeneration side effect.

The bump transform never spawns processes itself. It calls a CommandRunner
with the working directory and the command line, which keeps the external
package manager behind an interface that tests and dry runs can replace.
"""

import shutil
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from bumpforge.core.logging import get_logger

logger = get_logger(__name__)


class CommandRunner(ABC):
    """Runs a command line in a given directory."""

    @abstractmethod
    def run(self, working_directory: str, command: Sequence[str]) -> int:
        """
        Run the command and wait for it.

        Args:
            working_directory: Directory the command runs in.
            command: Program and arguments.

        Returns:
            Exit status of the command.
        """
        pass

    def is_available(self, command: Sequence[str]) -> bool:
        """Check whether the program of a command line can be started."""
        return True


class SubprocessCommandRunner(CommandRunner):
    """Runs commands as child processes with their output discarded."""

    def __init__(self, timeout: Optional[float] = None) -> None:
        self.timeout = timeout

    def run(self, working_directory: str, command: Sequence[str]) -> int:
        logger.debug(
            "Running command",
            command=" ".join(command),
            cwd=working_directory,
        )
        result = subprocess.run(
            list(command),
            cwd=working_directory,
            capture_output=True,
            text=True,
            timeout=self.timeout,
        )
        if result.returncode != 0:
            logger.debug(
                "Command output",
                stderr=(result.stderr or "").strip()[-500:],
            )
        return result.returncode

    def is_available(self, command: Sequence[str]) -> bool:
        return bool(command) and shutil.which(command[0]) is not None


@dataclass
class NullCommandRunner(CommandRunner):
    """Records commands instead of running them."""

    exit_code: int = 0
    calls: List[Tuple[str, Tuple[str, ...]]] = field(default_factory=list)

    def run(self, working_directory: str, command: Sequence[str]) -> int:
        self.calls.append((working_directory, tuple(command)))
        return self.exit_code
