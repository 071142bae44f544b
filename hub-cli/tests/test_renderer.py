"""Unit tests for renderer selection."""

import pytest

from hub_cli.exceptions import RendererArgumentParseError, RendererError
from hub_cli.renderer import DEFAULT_PAGER, RendererChoice, RendererKind, select_renderer


class TestSelectRenderer:
    """Tests for select_renderer()."""

    def test_man_available(self, make_which):
        which = make_which({'man': '/usr/bin/man'})
        choice = select_renderer({'PAGER': 'more'}, which)
        assert choice.kind is RendererKind.MAN_VIEWER
        assert choice.argv == ('/usr/bin/man',)
        assert choice.document_name('hub.1') == 'hub.1'

    def test_default_pager(self, make_which):
        choice = select_renderer({}, make_which())
        assert choice.kind is RendererKind.DEFAULT_PAGER
        assert list(choice.argv) == ['less', '-R']
        assert choice.argv == DEFAULT_PAGER
        assert choice.document_name('hub.1') == 'hub.1.txt'

    def test_pager_from_environment(self, make_which):
        choice = select_renderer({'PAGER': 'my pager --flag'}, make_which())
        assert choice.kind is RendererKind.PAGER
        assert list(choice.argv) == ['my', 'pager', '--flag']
        assert choice.document_name('hub-sync.1') == 'hub-sync.1.txt'

    def test_pager_with_quotes(self, make_which):
        choice = select_renderer({'PAGER': "'/opt/my pager' -r"}, make_which())
        assert list(choice.argv) == ['/opt/my pager', '-r']

    def test_empty_pager_uses_default(self, make_which):
        assert select_renderer({'PAGER': ''}, make_which()).kind is RendererKind.DEFAULT_PAGER
        assert select_renderer({'PAGER': '  '}, make_which()).kind is RendererKind.DEFAULT_PAGER

    def test_malformed_pager(self, make_which):
        with pytest.raises(RendererArgumentParseError) as exc_info:
            select_renderer({'PAGER': "less 'oops"}, make_which())
        assert exc_info.value.command_line == "less 'oops"
        assert str(exc_info.value).startswith("PAGER: ")
        assert isinstance(exc_info.value, RendererError)

    def test_malformed_pager_ignored_when_man_exists(self, make_which):
        which = make_which({'man': '/usr/bin/man'})
        assert select_renderer({'PAGER': "'"}, which).kind is RendererKind.MAN_VIEWER


class TestRendererChoice:
    """Tests for RendererChoice."""

    def test_command_for_appends_path(self):
        choice = RendererChoice(RendererKind.PAGER, ('more', '-s'), '.txt')
        assert choice.command_for('/p/man/hub.1.txt') == ['more', '-s', '/p/man/hub.1.txt']

    def test_command_for_does_not_mutate(self):
        choice = RendererChoice(RendererKind.DEFAULT_PAGER, DEFAULT_PAGER, '.txt')
        choice.command_for('/a')
        assert choice.command_for('/b') == ['less', '-R', '/b']
