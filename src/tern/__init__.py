"""Tern — declarative command routing for chat bots.

Routes free-form inbound text to handlers using declared aliases and
access flags instead of a parser grammar: exact token-prefix matching
first, edit-distance fuzzy matching second.

Basic usage::

    from tern import Dispatcher

    bot = Dispatcher()

    @bot.command("/start", match_bot_name=True)
    def start():
        ...

    @bot.command(["/ban", "block"], return_data=True, require_admin=True)
    def ban(data):
        text, user, *rest = data

    @bot.command("помощь", temperature=80)
    def help_():
        ...

    bot.run(context)
"""

__version__ = "0.1.0"
__all__ = [
    "Abort",
    "ConfigurationError",
    "DispatchConfig",
    "DispatchResult",
    "Dispatcher",
    "Match",
    "MessengerContext",
    "NoInputError",
    "NoMatch",
    "NoRouteError",
    "Phase",
    "Resolution",
    "Route",
    "RouteTable",
    "TernError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import tern`` fast while providing a clean top-level API.
    """
    if name in ("Dispatcher", "DispatchResult", "Phase", "Resolution"):
        from tern import dispatcher as _dispatcher

        return getattr(_dispatcher, name)

    if name == "DispatchConfig":
        from tern.config import DispatchConfig

        return DispatchConfig

    if name == "MessengerContext":
        from tern.context import MessengerContext

        return MessengerContext

    if name in ("Route", "Match", "NoMatch", "Abort"):
        from tern.routing import route as _route

        return getattr(_route, name)

    if name == "RouteTable":
        from tern.routing.table import RouteTable

        return RouteTable

    if name in ("TernError", "ConfigurationError", "NoRouteError", "NoInputError"):
        from tern import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
