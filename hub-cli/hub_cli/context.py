"""
CommandContext - Encapsulates all context needed for command execution.

This module provides the CommandContext dataclass that carries the
environment, the running program's path and the command registry, so that
commands and the help machinery never read process globals directly.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Sequence, TYPE_CHECKING
import logging
import os
import shutil
import subprocess
import sys

from .exceptions import CommandNotFoundError, RendererProcessError

if TYPE_CHECKING:
    from .command_registry import CommandRegistry

logger = logging.getLogger(__name__)


def command_path(name: str, path: Optional[str] = None) -> str:
    """
    Resolve an executable to an absolute path with symlinks resolved.

    Args:
        name: Program name or path
        path: PATH value to search (default: the process PATH)

    Returns:
        Absolute, symlink-free path of the executable

    Raises:
        CommandNotFoundError: If the program cannot be found
    """
    found = shutil.which(name, path=path)
    if found is None:
        raise CommandNotFoundError(name)
    return os.path.realpath(os.path.abspath(found))


def run_program(argv: Sequence[str]) -> int:
    """
    Run an external program attached to the terminal and wait for it.

    Args:
        argv: Program and arguments

    Returns:
        The program's exit status

    Raises:
        RendererProcessError: If the program could not be started
    """
    logger.debug("$ %s", " ".join(argv))
    try:
        return subprocess.call(list(argv))
    except OSError as e:
        raise RendererProcessError(argv, e.strerror or str(e)) from e


@dataclass
class CommandContext:
    """
    Encapsulates all context needed for command execution.

    This provides commands with access to:
    - Environment variables (PAGER, PATH, HUB_VERBOSE)
    - The path hub was invoked as
    - The command registry
    - How external programs are looked up and run

    Example:
        >>> ctx = CommandContext(env={'PATH': '/usr/bin'})
        >>> ctx.command_path('git')
        '/usr/bin/git'
    """

    env: Dict[str, str] = field(default_factory=lambda: dict(os.environ))
    program_path: str = field(default_factory=lambda: sys.argv[0] if sys.argv else "hub")
    registry: Optional['CommandRegistry'] = None

    # Executable lookup, replaceable in tests
    which: Callable[..., str] = command_path
    # Launches git and pagers; returns the exit status
    run: Callable[[Sequence[str]], int] = run_program

    def command_path(self, name: str) -> str:
        """
        Resolve an executable using this context's PATH.

        Raises:
            CommandNotFoundError: If the program cannot be found
        """
        return self.which(name, path=self.env.get("PATH"))

    def install_prefix(self, program_path: Optional[str] = None) -> str:
        """
        Directory hub is installed under: the parent of the directory
        containing the resolved program.

        Args:
            program_path: Program to resolve (default: self.program_path)

        Example:
            /usr/local/bin/hub -> /usr/local

        Raises:
            CommandNotFoundError: If the program path cannot be resolved
        """
        program = self.command_path(program_path or self.program_path)
        return os.path.normpath(os.path.join(os.path.dirname(program), ".."))

    @property
    def verbose(self) -> bool:
        return bool(self.env.get("HUB_VERBOSE"))

    def __repr__(self):
        """String representation for debugging"""
        return (
            f"CommandContext(program_path={self.program_path!r}, "
            f"env_vars={len(self.env)}, "
            f"commands={len(self.registry) if self.registry is not None else 0})"
        )
