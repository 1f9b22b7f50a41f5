"""Shared type aliases used across wren modules."""

from collections.abc import Callable
from typing import Any, Protocol, TypeAlias


class HasPath(Protocol):
    """Anything exposing a URL path (``SplitResult``, request objects, ...)."""

    @property
    def path(self) -> str: ...


# Route handler, called as handler(url, route, params)
Handler: TypeAlias = Callable[..., Any]

# Input accepted by resolve/dispatch
URLLike: TypeAlias = str | HasPath
