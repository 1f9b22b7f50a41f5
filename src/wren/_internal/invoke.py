"""Handler invocation for ``Router.dispatch_async``.

Handlers registered on a router may be ``def`` or ``async def``; both
get the same ``(url, route, params)`` arguments and the same result
handling.
"""

import inspect
from typing import Any

from wren._internal.types import Handler


async def call_handler(handler: Handler, url: Any, route: Any, params: dict[str, str]) -> Any:
    """Call *handler* for a matched route, awaiting it when it is async.

    Whatever the handler returns (after awaiting) is handed back
    unchanged; ``RouteResult.from_handler`` decides what it means.
    """
    outcome = handler(url, route, params)
    return await outcome if inspect.isawaitable(outcome) else outcome
