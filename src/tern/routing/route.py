"""Route declaration and match outcome frozen dataclasses."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from tern.errors import ConfigurationError
from tern.normalize import normalize


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen command route.

    Created during setup, compiled into a ``RouteTable`` before dispatch.

    ``aliases`` accepts a single string or any sequence of strings::

        Route("/start", start)
        Route(["/ban", "block"], ban, return_data=True, require_admin=True)
        Route("/ban", ban, separator="_")   # matches "/ban_user1_2d"
    """

    aliases: tuple[str, ...]
    handler: Callable[..., Any]
    return_data: bool = False
    require_data: bool = False
    separator: str = " "
    temperature: int = 100
    match_bot_name: bool = False
    require_owner: bool = False
    require_admin: bool = False
    require_env_admin: bool = False
    name: str | None = None

    def __post_init__(self) -> None:
        aliases = (self.aliases,) if isinstance(self.aliases, str) else tuple(self.aliases)
        object.__setattr__(self, "aliases", aliases)

        label = self.label
        if not aliases:
            msg = f"Route {label!r} declares no aliases."
            raise ConfigurationError(msg)
        for alias in aliases:
            if not normalize(alias, keep_spaces=True):
                msg = f"Route {label!r} has alias {alias!r} with no matchable characters."
                raise ConfigurationError(msg)
        if not self.separator:
            msg = f"Route {label!r} has an empty separator."
            raise ConfigurationError(msg)
        if not 0 <= self.temperature <= 100:
            msg = f"Route {label!r} temperature must be within 0..100, got {self.temperature}."
            raise ConfigurationError(msg)
        if not callable(self.handler):
            msg = f"Route {label!r} handler is not callable."
            raise ConfigurationError(msg)

    @property
    def fuzzy(self) -> bool:
        """True if this route takes part in the fuzzy phase."""
        return self.temperature < 100 and not self.return_data and not self.require_data

    @property
    def label(self) -> str:
        """Route name, falling back to the handler's ``__name__``."""
        return self.name or getattr(self.handler, "__name__", repr(self.handler))


@dataclass(frozen=True, slots=True)
class NoMatch:
    """No alias of the route matched the text."""


@dataclass(frozen=True, slots=True)
class Abort:
    """The text addressed a different bot; the exact phase must stop."""

    claimed_bot_name: str = ""


@dataclass(frozen=True, slots=True)
class Match:
    """An alias matched. ``params`` are the trailing normalized tokens."""

    params: tuple[str, ...] = field(default=())


MatchOutcome = NoMatch | Match | Abort

NO_MATCH = NoMatch()
