"""``tern try`` — dry-run a message against a dispatcher.

Resolves the message exactly as ``Dispatcher.run()`` would, but never
calls the handler. Exits with code 1 when nothing matches.
"""

import argparse
import sys

from tern.cli._resolve import resolve_dispatcher
from tern.errors import TernError
from tern.testing import FakeContext


def run_try(args: argparse.Namespace) -> None:
    """Print the route, phase, and handler arguments for ``args.text``."""
    try:
        dispatcher = resolve_dispatcher(args.target)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    context = FakeContext(
        text=args.text,
        callback_data=args.callback_data,
        bot_name=args.bot_name,
        admin=args.admin,
        owner=args.owner,
        env_admin=args.env_admin,
    )
    try:
        resolution = dispatcher.resolve(context)
    except TernError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if resolution is None:
        print("No match.")
        raise SystemExit(1)

    print(f"route:   {resolution.route.label}")
    print(f"phase:   {resolution.phase.value}")
    print(f"aliases: {', '.join(resolution.route.aliases)}")
    if resolution.args:
        print(f"args:    {resolution.args[0]!r}")
