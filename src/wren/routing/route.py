"""Route, RouteMatch and RouteResult."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from wren._internal.types import Handler
from wren.routing.pattern import CompiledPattern


@dataclass(frozen=True, slots=True)
class Route:
    """A registered route: one handler bound to one or more templates.

    Created by ``Router.register``. The router stores and returns it but
    never looks inside beyond ``handler``.
    """

    pattern: str
    handler: Handler
    patterns: tuple[str, ...] = ()
    name: str | None = None

    def __post_init__(self) -> None:
        if not self.patterns:
            object.__setattr__(self, "patterns", (self.pattern,))


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful resolve."""

    route: Route
    path_params: dict[str, str]
    pattern: CompiledPattern | None = field(default=None, compare=False)
    path: str = "/"


class RouteResult(Enum):
    """Outcome of ``Router.dispatch``."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"

    def __bool__(self) -> bool:
        return self is RouteResult.SUCCEEDED

    @classmethod
    def from_handler(cls, value: Any) -> "RouteResult":
        """Normalize whatever a handler returned.

        ``None`` means the handler ran without complaint. A ``RouteResult``
        is passed through; anything else maps by truthiness.
        """
        if value is None:
            return cls.SUCCEEDED
        if isinstance(value, RouteResult):
            return value
        return cls.SUCCEEDED if value else cls.FAILED
