"""
HELP command - show the help page for a command.
"""

from ..help_resolver import HelpRequest, HelpResolver, Resolution
from ..process import Process
from . import register_command
from .base import has_flag, parse_flags_and_args

USAGE = """
help hub
help <COMMAND>
help hub-<COMMAND> [--plain-text]
"""

LONG = """Show the help page for a command.

## Options:
	hub-<COMMAND>
		Use this format to view help for hub extensions to an existing git command.

	--plain-text
		Skip man page lookup mechanism and display plain help text.

## Lookup mechanism:

On systems that have 'man', help pages are looked up in these directories
relative to the hub install prefix:

* man/<command>.1
* share/man/man1/<command>.1

On systems without 'man', help pages are looked up using the ".txt" extension.

## See also:

hub(1), git-help(1)
"""

HELP_FLAGS = {'--all', '-a', '--plain-text'}


def help_request(process: Process) -> HelpRequest:
    """Build a HelpRequest from `hub help` arguments."""
    flags, positional = parse_flags_and_args(process.args, HELP_FLAGS)
    return HelpRequest(
        target=positional[0] if positional else "",
        show_all=has_flag(flags, '--all', '-a'),
        plain_text=has_flag(flags, '--plain-text'),
        program_path=process.context.program_path,
    )


@register_command('help', git_extension=True, usage=USAGE, long=LONG, aliases=('--help',))
def cmd_help(process: Process) -> int:
    """
    Show the help page for a command

    Usage: help [hub | <COMMAND> | hub-<COMMAND>] [--all] [--plain-text]
    """
    resolver = HelpResolver(process.context.registry, process.context, run=process.context.run)
    outcome = resolver.resolve(help_request(process))
    outcome.raise_for_status()

    if outcome.resolution is Resolution.FALL_THROUGH:
        return 0

    if not outcome.forward:
        process.no_forward()

    if outcome.text is not None:
        text = outcome.text
        if outcome.deferred:
            process.after(lambda: process.stdout.write(text + "\n"))
        else:
            process.stdout.write(text + "\n")

    return outcome.exit_code
