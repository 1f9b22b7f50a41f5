"""Router configuration.

RouterConfig is a frozen dataclass: set once when the Router is built and
never changed while paths are being resolved.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(aliases=(("id", r"[0-9]+"),), log_misses=True)
    """

    # Aliases installed when the router is constructed: (name, sub-pattern)
    aliases: tuple[tuple[str, str], ...] = ()

    # Longer paths are never matched
    max_path_length: int = 4096

    # Emit a debug record for every path that matches no route
    log_misses: bool = False

    # Seconds one resolve() may spend matching before giving up (None = no limit)
    match_timeout: float | None = 0.1
