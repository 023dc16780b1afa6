"""Dispatcher configuration.

DispatchConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DispatchConfig:
    """Dispatcher configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = DispatchConfig(abort_on_bot_name_mismatch=False)
    """

    # Exact phase: a foreign ``@botname`` stops the whole exact phase.
    # False skips only the offending route and keeps scanning.
    abort_on_bot_name_mismatch: bool = True

    # Input: raise NoInputError instead of falling through to no-match
    raise_on_no_input: bool = False

    # Fuzzy phase master switch (per-route temperature still applies)
    fuzzy_enabled: bool = True

    # run_async(): run plain ``def`` handlers in an anyio worker thread
    offload_sync_handlers: bool = False
