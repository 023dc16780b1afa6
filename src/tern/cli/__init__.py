"""Tern CLI — route table inspection and dry-run dispatch.

Entry point registered as ``tern`` in ``pyproject.toml``::

    [project.scripts]
    tern = "tern.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``tern`` command."""
    parser = argparse.ArgumentParser(
        prog="tern",
        description="Tern — declarative command routing for chat bots.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- tern routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "target",
        help="Import string of a Dispatcher or RouteTable (e.g. mybot:bot)",
    )

    # -- tern try ---------------------------------------------------------
    try_parser = subparsers.add_parser("try", help="Show which route a message resolves to")
    try_parser.add_argument(
        "target",
        help="Import string of a Dispatcher or RouteTable (e.g. mybot:bot)",
    )
    try_parser.add_argument("text", help="Message text to resolve")
    try_parser.add_argument(
        "--callback-data",
        default=None,
        help="Callback-query payload (takes precedence over text when non-empty)",
    )
    try_parser.add_argument("--bot-name", default="", help="Configured bot name")
    try_parser.add_argument("--admin", action="store_true", help="Sender is a chat admin")
    try_parser.add_argument("--owner", action="store_true", help="Sender is the chat owner")
    try_parser.add_argument(
        "--env-admin",
        action="store_true",
        help="Sender is a hosting-environment admin",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from tern.cli._routes import run_routes

        run_routes(args)
    elif args.command == "try":
        from tern.cli._try import run_try

        run_try(args)
