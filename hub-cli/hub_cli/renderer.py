"""Choosing the program that displays a help page.

On systems that have 'man', help pages are handed to it directly. On
systems without 'man', the '.txt' rendering of the page is shown with the
user's PAGER, or with 'less -R' when PAGER is not set.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Mapping, Tuple

from .exceptions import CommandNotFoundError, ParsingError, RendererArgumentParseError
from .lexer import split_command_line

logger = logging.getLogger(__name__)

MAN_PROGRAM = "man"
DEFAULT_PAGER = ("less", "-R")
PLAIN_TEXT_SUFFIX = ".txt"


class RendererKind(Enum):
    MAN_VIEWER = "man"
    PAGER = "pager"
    DEFAULT_PAGER = "default-pager"


@dataclass(frozen=True)
class RendererChoice:
    """
    The display program for one help lookup.

    Attributes:
        kind: Which branch of the selection picked the program
        argv: Program and leading arguments
        doc_suffix: Suffix appended to the document name ('' or '.txt')
    """

    kind: RendererKind
    argv: Tuple[str, ...]
    doc_suffix: str = ""

    def document_name(self, doc_name: str) -> str:
        return doc_name + self.doc_suffix

    def command_for(self, doc_path: str) -> List[str]:
        """Full argument vector to display doc_path."""
        return list(self.argv) + [doc_path]


def select_renderer(env: Mapping[str, str], command_path) -> RendererChoice:
    """
    Pick the program used to display help pages.

    Args:
        env: Environment variables (PAGER is consulted)
        command_path: Callable resolving a program name on PATH, raising
            CommandNotFoundError when it is missing

    Returns:
        RendererChoice

    Raises:
        RendererArgumentParseError: If PAGER cannot be split into words

    Examples:
        With 'man' on PATH:
            RendererChoice(MAN_VIEWER, ('/usr/bin/man',), '')
        Without 'man' and PAGER='my pager --flag':
            RendererChoice(PAGER, ('my', 'pager', '--flag'), '.txt')
    """
    try:
        man = command_path(MAN_PROGRAM)
    except CommandNotFoundError:
        man = None

    if man:
        choice = RendererChoice(RendererKind.MAN_VIEWER, (man,))
    else:
        pager = env.get("PAGER", "")
        try:
            argv = split_command_line(pager)
        except ParsingError as e:
            raise RendererArgumentParseError(pager, e.message) from e
        # A blank PAGER counts as unset
        if argv:
            choice = RendererChoice(RendererKind.PAGER, tuple(argv), PLAIN_TEXT_SUFFIX)
        else:
            choice = RendererChoice(RendererKind.DEFAULT_PAGER, DEFAULT_PAGER, PLAIN_TEXT_SUFFIX)

    logger.debug("selected %s renderer: %s", choice.kind.value, " ".join(choice.argv))
    return choice
