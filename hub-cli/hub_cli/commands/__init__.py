"""
hub commands.

Each command module defines one function decorated with @register_command.
The decorator only attaches a CommandDescriptor to the function; commands
end up in a registry when load_all_commands() is called with a builder.
"""

import importlib
from typing import Callable, Iterable, Optional, Tuple

from ..command_registry import CommandDescriptor, CommandRegistry, CommandRegistryBuilder

COMMAND_MODULES = (
    'help',
    'list_cmds',
)


def register_command(name: str, git_extension: bool = False, usage: str = "",
                     long: str = "", key: Optional[str] = None, aliases: Iterable[str] = ()):
    """
    Decorator marking a function as a hub command.

    Args:
        name: Command name
        git_extension: True if the command extends the git command of the same name
        usage: Usage lines
        long: Long help text
        key: Registry key when it differs from name (e.g. '--list-cmds')
        aliases: Extra registry keys for the same command

    Example:
        @register_command('help', git_extension=True, aliases=('--help',))
        def cmd_help(process: Process) -> int:
            ...
    """
    def decorator(func: Callable) -> Callable:
        func.descriptor = CommandDescriptor(
            name=name,
            run=func,
            git_extension=git_extension,
            usage=usage,
            long=long,
            key=key,
        )
        func.aliases = tuple(aliases)
        return func
    return decorator


def command_functions() -> Iterable[Tuple[CommandDescriptor, Tuple[str, ...]]]:
    for module_name in COMMAND_MODULES:
        module = importlib.import_module(f'.{module_name}', __name__)
        for value in vars(module).values():
            if (callable(value) and hasattr(value, 'descriptor')
                    and value.__module__ == module.__name__):
                yield value.descriptor, value.aliases


def load_all_commands(builder: CommandRegistryBuilder) -> CommandRegistryBuilder:
    """
    Register every hub command with a builder.

    Args:
        builder: Registry builder to populate

    Returns:
        The same builder, for chaining
    """
    from .catalog import CATALOG

    for descriptor in CATALOG:
        builder.use(descriptor)
    for descriptor, aliases in command_functions():
        builder.use(descriptor, *aliases)
    return builder


def build_registry() -> CommandRegistry:
    """Build the registry of all hub commands."""
    return load_all_commands(CommandRegistryBuilder()).build()


__all__ = [
    'register_command',
    'load_all_commands',
    'build_registry',
]
