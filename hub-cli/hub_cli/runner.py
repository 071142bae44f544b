"""Dispatching a hub command line to a registered command or to git"""

import logging
import sys
from typing import Callable, List, Optional, Sequence, TextIO

from .command_registry import CommandRegistry
from .commands.base import split_command_value
from .context import CommandContext
from .process import Process

logger = logging.getLogger(__name__)

GIT_PROGRAM = "git"


class Runner:
    """
    Runs one hub invocation.

    A registered command runs first. Unless it called no_forward(), the
    same command line is then passed on to git, and the command's queued
    after-callbacks run once git has succeeded.

    Git and pagers are both launched through context.run, which `run`
    replaces when given.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        context: Optional[CommandContext] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        run: Optional[Callable[[Sequence[str]], int]] = None,
    ):
        self.registry = registry
        self.context = context or CommandContext(registry=registry)
        if self.context.registry is None:
            self.context.registry = registry
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        if run is not None:
            self.context.run = run

    def execute(self, argv: List[str]) -> int:
        """
        Execute a command line (without the program name).

        Returns:
            Exit code

        Raises:
            HubError: Fatal errors from the command, or git missing from PATH
        """
        if not argv:
            argv = ["help"]

        command, args = argv[0], argv[1:]
        key, _ = split_command_value(command)
        descriptor = self.registry.lookup(key)

        if descriptor is None or descriptor.run is None:
            logger.debug("%s is not handled by hub, passing to git", key)
            return self.forward(argv)

        process = Process(
            command=command,
            args=args,
            stdout=self.stdout,
            stderr=self.stderr,
            executor=descriptor.run,
            context=self.context,
        )
        exit_code = process.execute()

        if not process.forward or exit_code != 0:
            return exit_code

        status = self.forward(argv)
        if status == 0:
            process.run_after_callbacks()
        return status

    def forward(self, argv: List[str]) -> int:
        """Run git with the same arguments and return its exit status."""
        git = self.context.command_path(GIT_PROGRAM)
        return self.context.run([git] + list(argv))
