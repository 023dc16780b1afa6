"""Import resolution — resolves ``"module:attribute"`` strings to dispatchers.

Shared utility used by ``tern routes`` and ``tern try`` to locate a
Dispatcher from a user-supplied import string.
"""

import importlib

from tern.dispatcher import Dispatcher
from tern.routing.table import RouteTable


def resolve_dispatcher(import_string: str) -> Dispatcher:
    """Resolve an import string to a tern Dispatcher.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"bot"`` (e.g. ``"mybot"`` resolves to
    ``mybot.bot``).

    A ``RouteTable`` is wrapped in a default Dispatcher. Factory
    functions are called if the resolved object is neither.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a Dispatcher or RouteTable.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "bot"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, (Dispatcher, RouteTable)):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if isinstance(obj, RouteTable):
        return Dispatcher(obj)
    if not isinstance(obj, Dispatcher):
        msg = (
            f"{import_string!r} resolved to {type(obj).__name__}, "
            "not a tern.Dispatcher or tern.RouteTable instance"
        )
        raise TypeError(msg)
    return obj
