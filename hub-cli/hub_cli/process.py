"""Process class for command execution"""

import io
import logging
from typing import Callable, List, Optional, TextIO

from .context import CommandContext
from .exceptions import HubError

logger = logging.getLogger(__name__)


class Process:
    """Represents a single hub command invocation"""

    def __init__(
        self,
        command: str,
        args: List[str],
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        executor: Optional[Callable] = None,
        context: Optional[CommandContext] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command as typed, e.g. 'help' or '--list-cmds=others'
            args: Command arguments
            stdout: Output stream (default: in-memory buffer)
            stderr: Error stream (default: in-memory buffer)
            executor: Callable that executes the command
            context: CommandContext with environment and registry
        """
        self.command = command
        self.args = args
        self.stdout = stdout or io.StringIO()
        self.stderr = stderr or io.StringIO()
        self.executor = executor
        self.context = context or CommandContext()

        # Whether git should still receive this command after hub is done
        self.forward = True
        self._after: List[Callable[[], None]] = []

        self.exit_code = 0

    def no_forward(self):
        """Stop the command from being passed on to git."""
        self.forward = False

    def after(self, callback: Callable[[], None]):
        """Queue a callback to run once git has handled the command."""
        self._after.append(callback)

    def run_after_callbacks(self):
        for callback in self._after:
            callback()
        self._after.clear()

    @property
    def after_callbacks(self) -> List[Callable[[], None]]:
        return list(self._after)

    def execute(self) -> int:
        """
        Execute the process

        Returns:
            Exit code (0 for success, non-zero for error)

        Raises:
            HubError: Fatal errors are left for the caller to report
        """
        if self.executor is None:
            self.stderr.write(f"Error: No such command '{self.command}'\n")
            self.exit_code = 127
            return self.exit_code

        try:
            self.exit_code = self.executor(self)
        except KeyboardInterrupt:
            raise
        except HubError:
            raise
        except Exception as e:
            logger.debug("command %s failed", self.command, exc_info=True)
            self.stderr.write(f"Error executing '{self.command}': {str(e)}\n")
            self.exit_code = 1

        self.stdout.flush()
        self.stderr.flush()

        return self.exit_code

    def get_stdout(self) -> str:
        """Get stdout contents (in-memory buffers only)"""
        return self.stdout.getvalue()

    def get_stderr(self) -> str:
        """Get stderr contents (in-memory buffers only)"""
        return self.stderr.getvalue()

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
