"""
Custom exception hierarchy for hub-cli.

This module defines a structured exception hierarchy that provides:
- Clear error categorization
- Consistent error messages
- Proper exit codes

Usage:
    from hub_cli.exceptions import DocumentNotFoundError

    try:
        path = locate("hub.1", prefix)
    except DocumentNotFoundError as e:
        print(f"hub: {e}")
        return e.exit_code
"""

from typing import List, Optional, Sequence


class HubError(Exception):
    """
    Base class for all hub-cli errors.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


# =============================================================================
# Documentation Errors
# =============================================================================

class DocumentationError(HubError):
    """
    Base class for documentation lookup errors.
    """

    def __init__(self, message: str, doc_name: Optional[str] = None, exit_code: int = 1):
        super().__init__(message, exit_code)
        self.doc_name = doc_name


class DocumentNotFoundError(DocumentationError):
    """
    Raised when none of the candidate documentation paths exist.

    Example:
        raise DocumentNotFoundError("hub.1", ["/usr/local/man/hub.1"])
    """

    def __init__(self, doc_name: str, candidates: Optional[Sequence[str]] = None):
        self.candidates: List[str] = list(candidates or [])
        if self.candidates:
            message = f"{self.candidates[-1]}: No such file or directory"
        else:
            message = f"{doc_name}: No such file or directory"
        super().__init__(message, doc_name, exit_code=1)


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(HubError):
    """
    Base class for command-related errors.
    """

    def __init__(self, command: str, message: str, exit_code: int = 1):
        super().__init__(message, exit_code)
        self.command = command


class CommandNotFoundError(CommandError):
    """
    Raised when an executable cannot be found on PATH.

    Example:
        raise CommandNotFoundError("git")
    """

    def __init__(self, command: str):
        message = f"exec: \"{command}\": executable file not found in $PATH"
        super().__init__(command, message, exit_code=127)


# =============================================================================
# Parsing Errors
# =============================================================================

class ParsingError(HubError):
    """
    Base class for parsing-related errors.

    Raised when splitting a shell-style command line fails.
    """

    def __init__(self, message: str, line: Optional[str] = None, position: Optional[int] = None):
        super().__init__(message, exit_code=2)
        self.line = line
        self.position = position


class UnmatchedQuoteError(ParsingError):
    """
    Raised when quotes are not properly matched.

    Example:
        raise UnmatchedQuoteError("less 'hello", quote_char="'")
    """

    def __init__(self, line: str, quote_char: str = '"', position: Optional[int] = None):
        kind = "single" if quote_char == "'" else "double"
        message = f"Unterminated {kind}-quoted string"
        super().__init__(message, line=line, position=position)
        self.quote_char = quote_char


class UnterminatedEscapeError(ParsingError):
    """
    Raised when a command line ends with an unescaped backslash.
    """

    def __init__(self, line: str, position: Optional[int] = None):
        super().__init__("Unterminated backslash-escape", line=line, position=position)


# =============================================================================
# Renderer Errors
# =============================================================================

class RendererError(HubError):
    """
    Base class for errors choosing or running a documentation renderer.
    """
    pass


class RendererArgumentParseError(RendererError):
    """
    Raised when the configured pager command line cannot be split into words.

    Example:
        raise RendererArgumentParseError("less '-R", "Unterminated single-quoted string")
    """

    def __init__(self, command_line: str, details: str):
        message = f"PAGER: {details}"
        super().__init__(message, exit_code=1)
        self.command_line = command_line


class RendererProcessError(RendererError):
    """
    Raised when the renderer process cannot be started.

    Example:
        raise RendererProcessError(["man", "/tmp/hub.1"], "No such file or directory")
    """

    def __init__(self, argv: Sequence[str], details: str):
        self.argv = list(argv)
        program = self.argv[0] if self.argv else ""
        message = f"{program}: {details}"
        super().__init__(message, exit_code=1)
