"""Dispatcher — routes one inbound message to one handler.

Mutable during setup (command registration). Frozen on the first
dispatch, after which it holds no per-message state and can be shared
between concurrently processed messages.

Each cycle runs to completion::

    text from context
      -> exact phase  (routes in declaration order, permission-gated)
      -> fuzzy phase  (same order, same gate)
      -> no-match callback
"""

import logging
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from tern._internal.invoke import invoke
from tern.config import DispatchConfig
from tern.context import MessengerContext, read_bot_name, read_text
from tern.errors import NoInputError
from tern.matching.exact import try_exact
from tern.matching.fuzzy import try_fuzzy
from tern.permissions import can_access
from tern.routing.route import Abort, Match, Route
from tern.routing.table import RouteTable

logger = logging.getLogger("tern.dispatch")

Handler = Callable[..., Any]


class Phase(Enum):
    """Which phase resolved a dispatch cycle."""

    EXACT = "exact"
    FUZZY = "fuzzy"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class Resolution:
    """The route a message resolved to, and the arguments its handler gets."""

    route: Route
    phase: Phase
    args: tuple[Any, ...] = ()


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Outcome of one dispatch cycle.

    ``value`` is whatever the handler (or the no-match callback) returned.
    """

    handled: bool
    phase: Phase = Phase.NONE
    route: Route | None = None
    args: tuple[Any, ...] = ()
    value: Any = None


def _default_no_match() -> None:
    logger.debug("No route matched; override with @dispatcher.no_match to handle it.")


class Dispatcher:
    """The command dispatcher.

    Usage::

        bot = Dispatcher()

        @bot.command("/start", match_bot_name=True)
        def start():
            ...

        @bot.command(["/ban", "block"], return_data=True, require_admin=True)
        def ban(data):
            text, *params = data

        @bot.no_match
        def fallback():
            ...

        bot.run(context)

    Thread safety:
        Registration happens at import time on one thread. The freeze
        uses a Lock + double-check so exactly one thread compiles the
        route table, even when the first messages arrive concurrently.
    """

    __slots__ = ("_config", "_freeze_lock", "_frozen", "_on_no_match", "_table")

    def __init__(
        self,
        routes: RouteTable | Sequence[Route] | None = None,
        *,
        config: DispatchConfig | None = None,
        on_no_match: Callable[[], Any] | None = None,
    ) -> None:
        if isinstance(routes, RouteTable):
            self._table = routes
        else:
            self._table = RouteTable(list(routes or ()))
        self._config = config or DispatchConfig()
        self._on_no_match: Callable[[], Any] = on_no_match or _default_no_match
        self._freeze_lock = threading.Lock()
        self._frozen = False

    @property
    def config(self) -> DispatchConfig:
        return self._config

    @property
    def table(self) -> RouteTable:
        """The compiled route table. Freezes the dispatcher on first access."""
        self._ensure_frozen()
        return self._table

    # -- Registration --

    def command(
        self,
        aliases: str | Sequence[str],
        *,
        return_data: bool = False,
        require_data: bool = False,
        separator: str = " ",
        temperature: int = 100,
        match_bot_name: bool = False,
        require_owner: bool = False,
        require_admin: bool = False,
        require_env_admin: bool = False,
        name: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a command handler via decorator.

        Args:
            aliases: One alias or a list of aliases, e.g. ``"/start"`` or
                ``["/ban", "block"]``.
            return_data: Pass ``[text, *params]`` to the handler.
            require_data: Reject matches with no trailing parameters.
            separator: Token delimiter. Use ``"_"`` for ``/ban_user1_2d``.
            temperature: Fuzzy threshold percentage. ``100`` disables fuzzy.
            match_bot_name: Honour ``/start@BotName`` suffixes.
            require_owner: Chat owner (or env-admin) only.
            require_admin: Chat admin (or owner, or env-admin) only.
            require_env_admin: Hosting-environment operators only.
            name: Optional label for the CLI and logs.
        """

        def decorator(func: Handler) -> Handler:
            self._check_not_frozen()
            self._table.add(
                Route(
                    aliases=aliases,  # type: ignore[arg-type]
                    handler=func,
                    return_data=return_data,
                    require_data=require_data,
                    separator=separator,
                    temperature=temperature,
                    match_bot_name=match_bot_name,
                    require_owner=require_owner,
                    require_admin=require_admin,
                    require_env_admin=require_env_admin,
                    name=name,
                )
            )
            return func

        return decorator

    def no_match(self, func: Callable[[], Any]) -> Callable[[], Any]:
        """Register the zero-argument callback invoked when nothing matches."""
        self._check_not_frozen()
        self._on_no_match = func
        return func

    # -- Freeze --

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = "Cannot modify the dispatcher after the first message was dispatched."
            raise RuntimeError(msg)

    def _ensure_frozen(self) -> None:
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._table.compile()
            self._frozen = True
            logger.debug("Route table compiled with %d route(s).", len(self._table))

    # -- Resolution --

    def resolve(self, context: MessengerContext) -> Resolution | None:
        """Find the route *context*'s message resolves to, without invoking it.

        Returns ``None`` when neither phase matches or no text is available.
        Raises ``NoInputError`` for missing text if the config asks for it.
        """
        table = self.table

        text = read_text(context)
        if not text:
            if self._config.raise_on_no_input:
                raise NoInputError
            logger.warning("No input text available from context; falling through to no-match.")
            return None

        # Permission results are cached for this cycle only.
        eligible: dict[int, bool] = {}

        def gate(index: int, route: Route) -> bool:
            if index not in eligible:
                eligible[index] = can_access(route, context)
            return eligible[index]

        resolution = self._exact_phase(table, text, read_bot_name(context), gate)
        if resolution is None and self._config.fuzzy_enabled:
            resolution = self._fuzzy_phase(table, text, gate)

        if resolution is not None:
            logger.debug(
                "Resolved %r to route %r (%s phase).",
                text,
                resolution.route.label,
                resolution.phase.value,
            )
        return resolution

    def _exact_phase(
        self,
        table: RouteTable,
        text: str,
        bot_name: str,
        gate: Callable[[int, Route], bool],
    ) -> Resolution | None:
        for index, route in enumerate(table):
            if not gate(index, route):
                continue
            outcome = try_exact(route, text, bot_name)
            if isinstance(outcome, Abort):
                logger.debug(
                    "Message addressed to @%s, not this bot (route %r).",
                    outcome.claimed_bot_name,
                    route.label,
                )
                if self._config.abort_on_bot_name_mismatch:
                    return None
                continue
            if isinstance(outcome, Match):
                args = ([text, *outcome.params],) if route.return_data else ()
                return Resolution(route=route, phase=Phase.EXACT, args=args)
        return None

    def _fuzzy_phase(
        self,
        table: RouteTable,
        text: str,
        gate: Callable[[int, Route], bool],
    ) -> Resolution | None:
        for index, route in enumerate(table):
            if not route.fuzzy or not gate(index, route):
                continue
            if try_fuzzy(route, text):
                return Resolution(route=route, phase=Phase.FUZZY)
        return None

    # -- Dispatch --

    def run(self, context: MessengerContext) -> DispatchResult:
        """Dispatch one message synchronously."""
        resolution = self.resolve(context)
        if resolution is None:
            return DispatchResult(handled=False, value=self._on_no_match())
        value = resolution.route.handler(*resolution.args)
        return DispatchResult(
            handled=True,
            phase=resolution.phase,
            route=resolution.route,
            args=resolution.args,
            value=value,
        )

    async def run_async(self, context: MessengerContext) -> DispatchResult:
        """Dispatch one message, awaiting ``async def`` handlers."""
        resolution = self.resolve(context)
        if resolution is None:
            return DispatchResult(handled=False, value=await invoke(self._on_no_match))
        value = await invoke(
            resolution.route.handler,
            *resolution.args,
            offload=self._config.offload_sync_handlers,
        )
        return DispatchResult(
            handled=True,
            phase=resolution.phase,
            route=resolution.route,
            args=resolution.args,
            value=value,
        )
