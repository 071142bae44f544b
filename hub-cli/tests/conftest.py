"""
Pytest configuration and shared fixtures for hub-cli tests.

This module provides reusable test fixtures for:
- A small command registry with native and extension commands
- A temporary hub install prefix
- Fake PATH lookup and a recording program runner
"""

import io
import os
from typing import Dict, List, Optional, Sequence

import pytest

from hub_cli.command_registry import CommandDescriptor, CommandRegistryBuilder
from hub_cli.context import CommandContext
from hub_cli.exceptions import CommandNotFoundError


# ============================================================================
# Fake PATH lookup and program runner
# ============================================================================

class FakeWhich:
    """
    Stand-in for command_path() that knows a fixed set of programs.

    Absolute paths resolve to themselves, like shutil.which does for
    existing executables.
    """

    def __init__(self, programs: Optional[Dict[str, str]] = None):
        self.programs = dict(programs or {})

    def __call__(self, name: str, path: Optional[str] = None) -> str:
        if name in self.programs:
            return self.programs[name]
        if os.path.isabs(name):
            return name
        raise CommandNotFoundError(name)


class RecordingRunner:
    """Records every argv it is asked to run and returns a fixed status."""

    def __init__(self, status: int = 0):
        self.status = status
        self.calls: List[List[str]] = []

    def __call__(self, argv: Sequence[str]) -> int:
        self.calls.append(list(argv))
        return self.status


def _run(name: str, **kwargs) -> CommandDescriptor:
    def executor(process):
        return 0
    return CommandDescriptor(name=name, run=executor, **kwargs)


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def registry():
    """Registry with native commands, git extensions and flag-like keys."""
    builder = CommandRegistryBuilder()
    builder.use(CommandDescriptor('sync', usage='sync [--color]',
                                  long='Fetch git objects from upstream.'))
    builder.use(CommandDescriptor('browse', usage='browse [-uc]', long='Open a page.'))
    builder.use(CommandDescriptor('pr', usage='pr list\npr checkout <PR-NUMBER>',
                                  long='Manage pull requests.'))
    builder.use(CommandDescriptor('clone', git_extension=True, usage='clone [-p] <REPO>',
                                  long='Clone a repository from GitHub.'))
    builder.use(CommandDescriptor('fetch', git_extension=True, usage='fetch <USER>',
                                  long='Add missing remotes.'))
    builder.use(_run('help', git_extension=True), '--help')
    builder.use(_run('list-cmds', git_extension=True, key='--list-cmds'))
    builder.use(_run('--version'))
    return builder.build()


@pytest.fixture
def install_prefix(tmp_path):
    """A hub install prefix with bin/hub and empty documentation directories."""
    (tmp_path / 'bin').mkdir()
    (tmp_path / 'bin' / 'hub').write_text('')
    (tmp_path / 'man').mkdir()
    (tmp_path / 'share' / 'man' / 'man1').mkdir(parents=True)
    return tmp_path


@pytest.fixture
def program_path(install_prefix):
    return str(install_prefix / 'bin' / 'hub')


@pytest.fixture
def fake_which():
    """FakeWhich with no programs on PATH."""
    return FakeWhich()


@pytest.fixture
def recorder():
    return RecordingRunner()


@pytest.fixture
def context(registry, program_path, fake_which):
    """CommandContext with an empty environment and no 'man' on PATH."""
    return CommandContext(env={}, program_path=program_path, registry=registry, which=fake_which)


@pytest.fixture
def capture_output():
    """In-memory stdout and stderr."""
    return io.StringIO(), io.StringIO()


@pytest.fixture
def make_which():
    """Factory for FakeWhich instances."""
    return FakeWhich
