"""Tern exception hierarchy.

Shared across RouteTable, Dispatcher, and the CLI so every module
raises and catches the same types.
"""


class TernError(Exception):
    """Base for all tern-specific errors."""


class ConfigurationError(TernError):
    """Raised when a route declaration or route table is invalid.

    Typically surfaces during ``RouteTable.compile()`` at startup.
    """


class NoRouteError(ConfigurationError):
    """The route table has no routes.

    Fatal to construction: a dispatcher without routes can never resolve.
    """

    def __init__(self, detail: str = "No routes registered.") -> None:
        super().__init__(detail)


class NoInputError(TernError):
    """No text could be obtained from the messenger context.

    Only raised when ``DispatchConfig.raise_on_no_input`` is set;
    otherwise the cycle falls through to the no-match callback.
    """

    def __init__(self, detail: str = "No input text available from context.") -> None:
        super().__init__(detail)
