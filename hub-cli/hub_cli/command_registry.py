"""Command registry for hub-cli.

This module provides:
- CommandDescriptor: a registered command and its documentation
- CommandRegistryBuilder: collects descriptors at startup
- CommandRegistry: read-only lookup and enumeration once built
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class CommandDescriptor:
    """Represents a hub command.

    Attributes:
        name: Command name as typed by the user
        run: Callable executing the command, or None for commands that are
            only documented here and otherwise handled by git
        git_extension: True if the command augments a git subcommand of the
            same name rather than being wholly new
        usage: Usage lines, one per line (without the program name)
        long: Long description in hub's markdown-like help format
        key: Registry key, when it differs from the name (e.g. '--list-cmds')
    """

    name: str
    run: Optional[Callable] = None
    git_extension: bool = False
    usage: str = ""
    long: str = ""
    key: Optional[str] = None

    @property
    def is_extension(self) -> bool:
        return self.git_extension

    def help_text(self) -> str:
        """Render the inline help text for this command.

        Example:
            >>> CommandDescriptor('sync', usage='sync [--color]', long='Fetch.').help_text()
            'Usage: hub sync [--color]\\n\\nFetch.'
        """
        usage_lines = [line.strip() for line in self.usage.strip().splitlines() if line.strip()]
        parts = []
        if usage_lines:
            parts.append("\n".join(f"{'Usage:' if i == 0 else '      '} hub {line}"
                                   for i, line in enumerate(usage_lines)))
        if self.long.strip():
            parts.append(self.long.strip())
        return "\n\n".join(parts)

    def __repr__(self) -> str:
        kind = "extension" if self.git_extension else "native"
        return f"CommandDescriptor(name={self.name!r}, {kind})"


class CommandRegistry:
    """Read-only registry of hub commands.

    Built by CommandRegistryBuilder and passed explicitly to whatever needs
    to look commands up.

    Attributes:
        _commands: Read-only mapping of registry keys to descriptors
    """

    def __init__(self, commands: Mapping[str, CommandDescriptor]):
        self._commands = MappingProxyType(dict(commands))

    def lookup(self, name: str) -> Optional[CommandDescriptor]:
        """Get a command by exact name.

        Args:
            name: Registry key to look up

        Returns:
            CommandDescriptor if found, None otherwise
        """
        return self._commands.get(name)

    def all(self) -> List[Tuple[str, CommandDescriptor]]:
        """Return every (name, descriptor) pair, aliases included."""
        return list(self._commands.items())

    def names(self) -> List[str]:
        """List all registry keys (sorted alphabetically)."""
        return sorted(self._commands.keys())

    def list_native(self) -> List[str]:
        """List commands that exist only in hub.

        Extensions of git commands and flag-like keys (starting with '--')
        are left out.

        Returns:
            Sorted list of unique command names
        """
        names = {
            name for name, cmd in self._commands.items()
            if not cmd.git_extension and not name.startswith("--")
        }
        return sorted(names)

    def __contains__(self, name: str) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return f"CommandRegistry({len(self._commands)} commands: {', '.join(self.names())})"


class CommandRegistryBuilder:
    """Collects command descriptors before the registry is frozen.

    Example:
        >>> builder = CommandRegistryBuilder()
        >>> builder.use(CommandDescriptor('sync'))
        >>> registry = builder.build()
        >>> registry.lookup('sync').name
        'sync'
    """

    def __init__(self):
        self._commands: Dict[str, CommandDescriptor] = {}

    def use(self, command: CommandDescriptor, *aliases: str) -> None:
        """Register a command under its key (or name) and any aliases.

        Registering the same key again replaces the earlier descriptor.
        """
        self._commands[command.key or command.name] = command
        for alias in aliases:
            self._commands[alias] = command

    def build(self) -> CommandRegistry:
        """Freeze the collected commands into a CommandRegistry."""
        return CommandRegistry(self._commands)

    def __len__(self) -> int:
        return len(self._commands)
