"""Shell-style word splitting for hub-cli.

This module provides the ShellLexer class which handles:
- Splitting a command line into words on unquoted whitespace
- Single quotes (fully literal)
- Double quotes (backslash escapes only for $ ` " \\ and newline)
- Backslash escapes and line continuations outside quotes

It is used to turn the PAGER environment variable into an argument vector.
"""

from enum import Enum
from typing import List, Optional

from .exceptions import UnmatchedQuoteError, UnterminatedEscapeError


WHITESPACE = " \t\n"
DOUBLE_QUOTE_ESCAPABLE = '$`"\\\n'


class TokenType(Enum):
    """Token types produced by the lexer"""
    WORD = "word"
    EOF = "eof"


class Token:
    """A single lexed token"""

    def __init__(self, type: TokenType, value: str, position: int = 0):
        self.type = type
        self.value = value
        self.position = position

    def __repr__(self):
        return f"Token({self.type.value}, {self.value!r}, pos={self.position})"

    def __eq__(self, other):
        if not isinstance(other, Token):
            return False
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))


class ShellLexer:
    """
    Split a command line into words the way a POSIX shell would,
    without any expansion.

    Example:
        >>> ShellLexer("less -R 'my file'").words()
        ['less', '-R', 'my file']
    """

    def __init__(self, text: str):
        self.text = text or ""
        self.pos = 0

    def _peek(self) -> Optional[str]:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def _skip_whitespace(self):
        while self._peek() is not None and self._peek() in WHITESPACE:
            self.pos += 1

    def _read_single_quoted(self, start: int) -> str:
        # Opening quote already consumed
        end = self.text.find("'", self.pos)
        if end == -1:
            raise UnmatchedQuoteError(self.text, quote_char="'", position=start)
        value = self.text[self.pos:end]
        self.pos = end + 1
        return value

    def _read_double_quoted(self, start: int) -> str:
        chars = []
        while True:
            char = self._peek()
            if char is None:
                raise UnmatchedQuoteError(self.text, quote_char='"', position=start)
            self.pos += 1
            if char == '"':
                return "".join(chars)
            if char == "\\":
                nxt = self._peek()
                if nxt is None:
                    raise UnmatchedQuoteError(self.text, quote_char='"', position=start)
                if nxt in DOUBLE_QUOTE_ESCAPABLE:
                    self.pos += 1
                    if nxt != "\n":
                        chars.append(nxt)
                    continue
            chars.append(char)

    def _read_word(self) -> Token:
        start = self.pos
        chars = []
        while True:
            char = self._peek()
            if char is None or char in WHITESPACE:
                break
            self.pos += 1
            if char == "'":
                chars.append(self._read_single_quoted(self.pos - 1))
            elif char == '"':
                chars.append(self._read_double_quoted(self.pos - 1))
            elif char == "\\":
                nxt = self._peek()
                if nxt is None:
                    raise UnterminatedEscapeError(self.text, position=self.pos - 1)
                self.pos += 1
                # Backslash-newline is a line continuation
                if nxt != "\n":
                    chars.append(nxt)
            else:
                chars.append(char)
        return Token(TokenType.WORD, "".join(chars), position=start)

    def tokenize(self) -> List[Token]:
        """
        Tokenize the whole input.

        Returns:
            List of WORD tokens followed by a single EOF token

        Raises:
            UnmatchedQuoteError: If a quote is never closed
            UnterminatedEscapeError: If the input ends with a lone backslash
        """
        self.pos = 0
        tokens = []
        while True:
            self._skip_whitespace()
            if self._peek() is None:
                break
            # A line continuation between words separates nothing
            if self.text.startswith("\\\n", self.pos):
                self.pos += 2
                continue
            tokens.append(self._read_word())
        tokens.append(Token(TokenType.EOF, "", position=self.pos))
        return tokens

    def words(self) -> List[str]:
        """Return the word values, without the EOF token."""
        return [t.value for t in self.tokenize() if t.type == TokenType.WORD]


def split_command_line(text: str) -> List[str]:
    """
    Split a shell-style command line into an argument vector.

    Examples:
        >>> split_command_line('my pager --flag')
        ['my', 'pager', '--flag']
        >>> split_command_line('')
        []
    """
    return ShellLexer(text).words()
