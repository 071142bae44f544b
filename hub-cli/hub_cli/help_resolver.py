"""Help resolution for hub commands.

HelpResolver decides, for one `hub help` request, whether to show a man
page, a plain-text page in a pager, inline help text, or nothing at all
(leaving the request to git). Every path ends in a HelpOutcome; nothing in
here exits the process.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence

from .command_registry import CommandDescriptor, CommandRegistry
from .context import CommandContext
from .doc_locator import locate
from .exceptions import HubError, RendererProcessError
from .renderer import select_renderer

logger = logging.getLogger(__name__)

PROGRAM_NAME = "hub"
EXTENSION_PREFIX = "hub-"

HELP_TEXT = """
These GitHub commands are provided by hub:

   api            Low-level GitHub API request interface
   browse         Open a GitHub page in the default browser
   ci-status      Show the status of GitHub checks for a commit
   compare        Open a compare page on GitHub
   create         Create this repository on GitHub and add GitHub as origin
   delete         Delete a repository on GitHub
   fork           Make a fork of a remote repository on GitHub and add as remote
   gist           Make a gist
   issue          List or create GitHub issues
   pr             List or checkout GitHub pull requests
   pull-request   Open a pull request on GitHub
   release        List or create GitHub releases
   sync           Fetch git objects from upstream and update branches
"""


class Resolution(Enum):
    HANDLED = "handled"
    FALL_THROUGH = "fall-through"
    FATAL = "fatal"


@dataclass
class HelpRequest:
    """
    Inputs for one help lookup.

    Attributes:
        target: Requested command name ('' for none, may carry a 'hub-' prefix)
        show_all: --all/-a was given
        plain_text: --plain-text was given
        program_path: Path hub was invoked as
    """

    target: str = ""
    show_all: bool = False
    plain_text: bool = False
    program_path: Optional[str] = None


@dataclass
class HelpOutcome:
    """
    Result of resolving a help request.

    Attributes:
        resolution: HANDLED, FALL_THROUGH or FATAL
        exit_code: Exit status when a page was displayed
        text: Text to print, if any
        deferred: Print text only after git has handled the request
        forward: Whether the request still goes to git
        error: The fatal error, for FATAL outcomes
    """

    resolution: Resolution
    exit_code: int = 0
    text: Optional[str] = None
    deferred: bool = False
    forward: bool = True
    error: Optional[HubError] = None

    @classmethod
    def displayed(cls, exit_code: int) -> 'HelpOutcome':
        return cls(Resolution.HANDLED, exit_code=exit_code, forward=False)

    @classmethod
    def inline(cls, text: str, deferred: bool = False) -> 'HelpOutcome':
        return cls(Resolution.HANDLED, text=text, deferred=deferred, forward=deferred)

    @classmethod
    def fall_through(cls) -> 'HelpOutcome':
        return cls(Resolution.FALL_THROUGH)

    @classmethod
    def fatal(cls, error: HubError) -> 'HelpOutcome':
        return cls(Resolution.FATAL, exit_code=error.exit_code, forward=False, error=error)

    def raise_for_status(self):
        if self.resolution is Resolution.FATAL and self.error is not None:
            raise self.error


def classify(registry: CommandRegistry, name: str) -> Optional[CommandDescriptor]:
    """
    Find the command a help request refers to.

    'hub-<name>' asks for hub's extension of a git command and matches any
    registered command. A bare name only matches commands that are not git
    extensions, so that `hub help clone` stays with git's own page.

    Examples:
        >>> classify(registry, 'sync')         # native
        CommandDescriptor(name='sync', native)
        >>> classify(registry, 'clone')        # extension
        None
        >>> classify(registry, 'hub-clone')
        CommandDescriptor(name='clone', extension)
    """
    if name.startswith(EXTENSION_PREFIX):
        return registry.lookup(name[len(EXTENSION_PREFIX):])

    command = registry.lookup(name)
    if command is not None and not command.git_extension:
        return command
    return None


def custom_commands_text(registry: CommandRegistry) -> str:
    return "\nhub custom commands\n\n  %s" % "  ".join(registry.list_native())


class HelpResolver:
    """
    Decision tree for `hub help`.

    Example:
        >>> resolver = HelpResolver(registry, CommandContext())
        >>> resolver.resolve(HelpRequest(target='frobnicate')).resolution
        <Resolution.FALL_THROUGH: 'fall-through'>
    """

    def __init__(self, registry: CommandRegistry, context: CommandContext,
                 run: Optional[Callable[[Sequence[str]], int]] = None):
        self.registry = registry
        self.context = context
        self.run = run or context.run

    def resolve(self, request: HelpRequest) -> HelpOutcome:
        if request.show_all:
            return HelpOutcome.inline(custom_commands_text(self.registry), deferred=True)

        if not request.target:
            return HelpOutcome.inline(HELP_TEXT, deferred=True)

        if request.target == PROGRAM_NAME:
            try:
                return self.display_man_page(f"{PROGRAM_NAME}.1", request.program_path)
            except HubError as e:
                return HelpOutcome.fatal(e)

        command = classify(self.registry, request.target)
        if command is None:
            return HelpOutcome.fall_through()

        if not request.plain_text:
            try:
                return self.display_man_page(f"{EXTENSION_PREFIX}{command.name}.1",
                                             request.program_path)
            except HubError as e:
                logger.debug("man page for %s unavailable: %s", command.name, e)

        return HelpOutcome.inline(command.help_text())

    def display_man_page(self, man_page: str, program_path: Optional[str] = None) -> HelpOutcome:
        """
        Show a man page (or its .txt rendering) and wait for the viewer.

        Args:
            man_page: Document name, e.g. 'hub-sync.1'
            program_path: Path hub was invoked as (default: the context's)

        Returns:
            HANDLED outcome with exit code 0 if the viewer succeeded, 1 otherwise

        Raises:
            RendererArgumentParseError: If PAGER cannot be parsed
            CommandNotFoundError: If hub's own path cannot be resolved
            DocumentNotFoundError: If the page is not installed
        """
        choice = select_renderer(self.context.env, self.context.command_path)
        install_prefix = self.context.install_prefix(program_path)
        man_file = locate(choice.document_name(man_page), install_prefix)

        try:
            status = self.run(choice.command_for(man_file))
        except RendererProcessError as e:
            logger.error("%s", e)
            return HelpOutcome.displayed(1)
        return HelpOutcome.displayed(0 if status == 0 else 1)
