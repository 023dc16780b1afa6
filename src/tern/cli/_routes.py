"""``tern routes`` — list registered routes.

Prints every route in dispatch order with its aliases, flags, and
handler name.
"""

import argparse
import sys

from tern.cli._resolve import resolve_dispatcher
from tern.errors import ConfigurationError
from tern.routing.route import Route


def describe_flags(route: Route) -> str:
    """Compact flag summary, e.g. ``data,admin,sep='_',fuzzy>=80``."""
    flags: list[str] = []
    if route.return_data:
        flags.append("data")
    if route.require_data:
        flags.append("needs-data")
    if route.match_bot_name:
        flags.append("@bot")
    if route.require_env_admin:
        flags.append("env-admin")
    if route.require_owner:
        flags.append("owner")
    if route.require_admin:
        flags.append("admin")
    if route.separator != " ":
        flags.append(f"sep={route.separator!r}")
    if route.fuzzy:
        flags.append(f"fuzzy>={route.temperature}")
    return ",".join(flags) or "-"


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of #, ALIASES, FLAGS, and HANDLER."""
    try:
        dispatcher = resolve_dispatcher(args.target)
        routes = dispatcher.table.routes
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    rows = [
        (str(index), " | ".join(route.aliases), describe_flags(route), route.label)
        for index, route in enumerate(routes, 1)
    ]

    max_index = max(max(len(r[0]) for r in rows), 1)
    max_aliases = max(max(len(r[1]) for r in rows), 7)  # "ALIASES" header
    max_flags = max(max(len(r[2]) for r in rows), 5)  # "FLAGS" header

    fmt = f"{{:>{max_index}}}  {{:<{max_aliases}}}  {{:<{max_flags}}}  {{}}"
    print(fmt.format("#", "ALIASES", "FLAGS", "HANDLER"))
    sep_len = max_index + max_aliases + max_flags + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
