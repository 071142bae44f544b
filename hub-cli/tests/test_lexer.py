"""
Tests for lexer.py module.

Tests cover:
- Token: token class with equality and representation
- ShellLexer: word splitting with quotes and escapes
- split_command_line: PAGER-style command lines
- Error cases: unterminated quotes and escapes
"""

import pytest
from hub_cli.exceptions import ParsingError, UnmatchedQuoteError, UnterminatedEscapeError
from hub_cli.lexer import ShellLexer, Token, TokenType, split_command_line


class TestToken:
    """Tests for Token class."""

    def test_token_with_position(self):
        """Test creating a token with position."""
        token = Token(TokenType.WORD, "world", position=5)
        assert token.type == TokenType.WORD
        assert token.value == "world"
        assert token.position == 5

    def test_token_repr(self):
        """Test token representation."""
        repr_str = repr(Token(TokenType.WORD, "test", position=10))
        assert "word" in repr_str
        assert "test" in repr_str
        assert "10" in repr_str

    def test_token_equality(self):
        """Test token equality ignores position."""
        assert Token(TokenType.WORD, "a", 0) == Token(TokenType.WORD, "a", 3)
        assert Token(TokenType.WORD, "a") != Token(TokenType.WORD, "b")
        assert Token(TokenType.WORD, "") != Token(TokenType.EOF, "")
        assert Token(TokenType.WORD, "a") != "a"

    def test_token_hashable(self):
        """Equal tokens hash alike, so they collapse in a set."""
        tokens = {Token(TokenType.WORD, "a", 0), Token(TokenType.WORD, "a", 3),
                  Token(TokenType.EOF, "")}
        assert len(tokens) == 2
        assert hash(Token(TokenType.WORD, "a", 0)) == hash(Token(TokenType.WORD, "a", 7))


class TestShellLexer:
    """Tests for ShellLexer class."""

    def test_empty_string(self):
        """Test lexing empty string gives only EOF."""
        tokens = ShellLexer("").tokenize()
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.EOF

    def test_word_positions(self):
        """Test word tokens record where they start."""
        tokens = ShellLexer("less  -R").tokenize()
        assert [t.position for t in tokens[:2]] == [0, 6]
        assert tokens[-1].type == TokenType.EOF

    def test_whitespace_handling(self):
        """Test leading, trailing and repeated whitespace."""
        assert ShellLexer("  less \t -R\n").words() == ["less", "-R"]

    def test_tokenize_is_repeatable(self):
        """Test tokenizing twice gives the same result."""
        lexer = ShellLexer("more -s")
        assert lexer.tokenize() == lexer.tokenize()


class TestSplitCommandLine:
    """Tests for split_command_line()."""

    def test_simple_words(self):
        assert split_command_line("my pager --flag") == ["my", "pager", "--flag"]

    def test_empty_and_blank(self):
        assert split_command_line("") == []
        assert split_command_line("   ") == []

    def test_single_quoted_spaces(self):
        assert split_command_line("less 'my file'") == ["less", "my file"]

    def test_double_quoted_spaces(self):
        assert split_command_line('"/opt/my pager/bin/pg" -r') == ["/opt/my pager/bin/pg", "-r"]

    def test_single_quotes_are_literal(self):
        assert split_command_line(r"echo 'a\"b $x'") == ["echo", r'a\"b $x']

    def test_escapes_in_double_quotes(self):
        assert split_command_line(r'"a\"b" "c\\d" "e\$f"') == ['a"b', 'c\\d', 'e$f']

    def test_other_backslashes_kept_in_double_quotes(self):
        assert split_command_line(r'"a\nb"') == [r'a\nb']

    def test_backslash_escapes_space(self):
        assert split_command_line(r"less my\ file") == ["less", "my file"]

    def test_line_continuation(self):
        assert split_command_line("less \\\n-R") == ["less", "-R"]
        assert split_command_line("le\\\nss") == ["less"]

    def test_adjacent_segments_join(self):
        assert split_command_line("a'b c'\"d\"e") == ["ab cde"]

    def test_empty_quotes_give_empty_word(self):
        assert split_command_line("less '' -R") == ["less", "", "-R"]


class TestLexerErrors:
    """Tests for malformed command lines."""

    def test_unterminated_single_quote(self):
        with pytest.raises(UnmatchedQuoteError) as exc_info:
            split_command_line("less 'oops")
        assert exc_info.value.quote_char == "'"
        assert exc_info.value.position == 5
        assert "single-quoted" in str(exc_info.value)

    def test_unterminated_double_quote(self):
        with pytest.raises(UnmatchedQuoteError) as exc_info:
            split_command_line('less "oops')
        assert exc_info.value.quote_char == '"'
        assert "double-quoted" in str(exc_info.value)

    def test_trailing_backslash_in_double_quote(self):
        with pytest.raises(UnmatchedQuoteError):
            split_command_line('"oops\\')

    def test_trailing_backslash(self):
        with pytest.raises(UnterminatedEscapeError):
            split_command_line("less \\")

    def test_errors_are_parsing_errors(self):
        with pytest.raises(ParsingError) as exc_info:
            split_command_line("'")
        assert exc_info.value.exit_code == 2
        assert exc_info.value.line == "'"


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
