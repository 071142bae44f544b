"""Command-line entry point for hub-cli"""

import logging
import sys
from typing import List, Optional

from .commands import build_registry
from .context import CommandContext
from .exceptions import HubError
from .runner import Runner


def setup_logging(context: CommandContext):
    """Log to stderr; HUB_VERBOSE turns on debug output (commands being run)."""
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if context.verbose else logging.WARNING,
        format="%(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run hub.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Exit code
    """
    if argv is None:
        argv = sys.argv[1:]

    registry = build_registry()
    context = CommandContext(registry=registry)
    setup_logging(context)

    try:
        return Runner(registry, context).execute(argv)
    except KeyboardInterrupt:
        return 130
    except HubError as e:
        sys.stderr.write(f"hub: {e}\n")
        return e.exit_code


if __name__ == '__main__':
    sys.exit(main())
