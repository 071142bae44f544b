"""
Base utilities for command implementations.

This module provides common helper functions that command modules can use
to reduce code duplication and maintain consistency.
"""

from typing import Dict, List, Optional, Tuple


def parse_flags_and_args(args: List[str], known_flags: Optional[set] = None) -> Tuple[Dict[str, bool], List[str]]:
    """
    Parse command arguments into flags and positional arguments.

    Args:
        args: List of arguments
        known_flags: Set of known flag names (e.g., {'--all', '-a'})
                    If None, all args starting with '-' are treated as flags

    Returns:
        Tuple of (flags_dict, positional_args)
        flags_dict maps flag name to True (e.g., {'--all': True})
        positional_args is list of non-flag arguments
    """
    flags = {}
    positional = []
    i = 0

    while i < len(args):
        arg = args[i]

        # '--' stops flag parsing
        if arg == '--':
            positional.extend(args[i + 1:])
            break

        if arg.startswith('-') and len(arg) > 1 and (known_flags is None or arg in known_flags):
            flags[arg] = True
        else:
            positional.append(arg)
        i += 1

    return flags, positional


def has_flag(flags: dict, *flag_names: str) -> bool:
    """
    Check if any of the given flags are present.

    Example:
        >>> flags = {'--all': True}
        >>> has_flag(flags, '--all', '-a')
        True
        >>> has_flag(flags, '--plain-text')
        False
    """
    return any(name in flags for name in flag_names)


def split_command_value(command: str) -> Tuple[str, Optional[str]]:
    """
    Split a '--key=value' command into its key and value.

    Examples:
        >>> split_command_value('--list-cmds=others,main')
        ('--list-cmds', 'others,main')
        >>> split_command_value('help')
        ('help', None)
    """
    if '=' in command:
        key, value = command.split('=', 1)
        return key, value
    return command, None


__all__ = [
    'parse_flags_and_args',
    'has_flag',
    'split_command_value',
]
