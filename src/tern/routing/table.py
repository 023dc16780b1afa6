"""Ordered route table.

Routes are tried in registration order: first declared, first tried.
That order decides which route wins when several aliases match, so
the table never reorders or deduplicates.

Free-threading safety:
    - Route is a frozen dataclass (immutable)
    - RouteTable._routes becomes a tuple at compile time, never mutated
"""

from collections.abc import Iterator

from tern.errors import ConfigurationError, NoRouteError
from tern.routing.route import Route


class RouteTable:
    """Ordered collection of routes, frozen by ``compile()``.

    Usage::

        table = RouteTable()
        table.add(Route("/start", start))
        table.add(Route(["/ban", "block"], ban, return_data=True))
        table.compile()
        for route in table:
            ...
    """

    __slots__ = ("_compiled", "_pending", "_routes")

    def __init__(self, routes: list[Route] | tuple[Route, ...] = ()) -> None:
        self._pending: list[Route] = list(routes)
        self._routes: tuple[Route, ...] = ()
        self._compiled = False

    def add(self, route: Route) -> None:
        """Append a route. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise ConfigurationError(msg)
        self._pending.append(route)

    def compile(self) -> None:
        """Freeze the table. No more routes can be added.

        Raises ``NoRouteError`` if nothing was registered.
        """
        if self._compiled:
            return
        if not self._pending:
            raise NoRouteError
        self._routes = tuple(self._pending)
        self._pending = []
        self._compiled = True

    @property
    def compiled(self) -> bool:
        return self._compiled

    @property
    def routes(self) -> tuple[Route, ...]:
        """All routes in registration order."""
        if self._compiled:
            return self._routes
        return tuple(self._pending)

    def __iter__(self) -> Iterator[Route]:
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self.routes)
