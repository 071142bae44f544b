"""
--list-cmds directive - list hub's own commands for shell completion.

git calls `git --list-cmds=main,others,...`; when 'others' is requested,
hub appends its native commands, one per line, after git's output.
"""

from ..process import Process
from . import register_command
from .base import split_command_value


@register_command('list-cmds', git_extension=True, key='--list-cmds')
def cmd_list_cmds(process: Process) -> int:
    _, value = split_command_value(process.command)
    kinds = value.split(',') if value else []

    if 'others' in kinds:
        registry = process.context.registry
        process.after(lambda: process.stdout.write("\n".join(registry.list_native()) + "\n"))
    return 0
