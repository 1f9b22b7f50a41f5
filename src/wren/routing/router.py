"""Ordered router with first-match-wins resolution.

Templates are compiled when registered, against the aliases known at
that moment, and appended to a table kept in registration order.
Resolution scans the table and stops at the first entry that matches.
"""

import logging
import re
import threading
import time
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any
from urllib.parse import urlsplit

from wren._internal.invoke import call_handler
from wren._internal.types import Handler, URLLike
from wren.config import RouterConfig
from wren.errors import ConfigurationError
from wren.routing.params import validate_alias
from wren.routing.pattern import CompiledPattern, compile_pattern, normalize_path
from wren.routing.route import Route, RouteMatch, RouteResult

logger = logging.getLogger("wren.routing")


# "scheme://" prefix; anything else is taken as a bare path
_URL_PREFIX = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*://")


def _path_of(url: URLLike) -> str | None:
    """Pull the path component out of a URL string or URL-like object.

    Only strings starting with ``scheme://`` are parsed as URLs; other
    strings are used verbatim, so ``//users/42`` or ``/faq?`` stay paths.
    Returns None for URL strings that can't be parsed.
    """
    if isinstance(url, str):
        if not _URL_PREFIX.match(url.lstrip()):
            return url
        try:
            return urlsplit(url.strip()).path
        except ValueError:
            return None
    return url.path


class Router:
    """Ordered route table with alias support.

    Usage::

        router = Router()
        router.add_alias("id", r"[0-9]+")
        router.register("/users/{id}", show_user)
        router.register(["/posts/{slug?}", "/blog/{slug?}"], show_post)

        match = router.resolve("/users/42")
        router.dispatch("myapp://host/posts/hello-world")

    Registration order is precedence: register specific templates before
    the general ones that would also match them.
    """

    __slots__ = ("_aliases", "_config", "_entries", "_frozen", "_lock")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self._config = config or RouterConfig()
        self._aliases: dict[str, str] = {}
        # Replaced wholesale on registration; readers take a snapshot
        self._entries: tuple[tuple[CompiledPattern, Route], ...] = ()
        self._frozen = False
        self._lock = threading.Lock()

        for name, pattern in self._config.aliases:
            self.add_alias(name, pattern)

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def aliases(self) -> Mapping[str, str]:
        """Read-only snapshot of the alias table."""
        return MappingProxyType(dict(self._aliases))

    @property
    def patterns(self) -> tuple[tuple[CompiledPattern, Route], ...]:
        """Every ``(CompiledPattern, Route)`` entry in table order."""
        return self._entries

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes, each once, in registration order."""
        seen: set[int] = set()
        result: list[Route] = []
        for _, route in self._entries:
            if id(route) not in seen:
                seen.add(id(route))
                result.append(route)
        return result

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = "Cannot change the route table after freeze()."
            raise RuntimeError(msg)

    def add_alias(self, name: str, pattern: str) -> None:
        """Define (or redefine) the sub-pattern used for ``{name}``.

        Only routes registered afterwards see the alias.
        """
        validate_alias(name, pattern)
        with self._lock:
            self._check_not_frozen()
            self._aliases[name] = pattern
        logger.debug("alias {%s} -> %s", name, pattern)

    def register(
        self,
        templates: str | Iterable[str],
        handler: Handler,
        *,
        name: str | None = None,
    ) -> Route:
        """Compile *templates* and bind them all to one ``Route``.

        Every template is compiled before anything is added, so a bad
        template leaves the table as it was.

        Raises ``ConfigurationError`` if *templates* is empty or any
        template fails to compile.
        """
        if isinstance(templates, str):
            templates = (templates,)
        else:
            templates = tuple(templates)

        if not templates:
            msg = "Route templates must contain at least one template."
            raise ConfigurationError(msg)
        for template in templates:
            if not isinstance(template, str):
                msg = f"Route template must be a string, got {type(template).__name__}."
                raise ConfigurationError(msg)

        route = Route(pattern=templates[0], handler=handler, patterns=templates, name=name)

        with self._lock:
            self._check_not_frozen()
            compiled = [compile_pattern(template, self._aliases) for template in templates]
            self._entries = self._entries + tuple((pattern, route) for pattern in compiled)

        for pattern in compiled:
            logger.debug(
                "registered %s as %s params=%s",
                pattern.template,
                pattern.regex.pattern,
                list(pattern.param_names),
            )
        return route

    def route(self, *templates: str, name: str | None = None) -> Callable[[Handler], Handler]:
        """Decorator form of ``register``::

            @router.route("/users/{id}")
            def show_user(url, route, params): ...
        """

        def decorator(handler: Handler) -> Handler:
            self.register(templates, handler, name=name)
            return handler

        return decorator

    def freeze(self) -> None:
        """End the build phase. No more aliases or routes can be added."""
        with self._lock:
            self._frozen = True

    def resolve(self, url: URLLike) -> RouteMatch | None:
        """Find the first route whose template matches the path of *url*.

        *url* is a ``scheme://`` URL string (query and fragment dropped),
        a bare path (used as-is, ``?`` included), or anything with a
        ``path`` attribute. Returns None when nothing matches; an
        unparseable URL string counts as nothing matching, as does a
        path whose matching runs past ``config.match_timeout``.
        """
        raw_path = _path_of(url)
        if raw_path is None:
            if self._config.log_misses:
                logger.debug("no route: unparseable url %r", url)
            return None

        path = normalize_path(raw_path)
        if len(path) > self._config.max_path_length:
            if self._config.log_misses:
                logger.debug("no route: path longer than %d", self._config.max_path_length)
            return None

        budget = self._config.match_timeout
        deadline = None if budget is None else time.monotonic() + budget
        for pattern, route in self._entries:
            timeout = None if deadline is None else deadline - time.monotonic()
            try:
                if timeout is not None and timeout <= 0:
                    raise TimeoutError
                params = pattern.match(path, timeout=timeout)
            except TimeoutError:
                logger.warning(
                    "no route: matching %.80s against %s exceeded %ss",
                    path,
                    pattern.template,
                    budget,
                )
                return None
            if params is not None:
                return RouteMatch(route=route, path_params=params, pattern=pattern, path=path)

        if self._config.log_misses:
            logger.debug("no route: %s", path)
        return None

    def dispatch(self, url: URLLike) -> RouteResult:
        """Resolve *url* and call its handler as ``handler(url, route, params)``.

        Returns ``RouteResult.FAILED`` when nothing matches. Exceptions
        from the handler propagate.
        """
        match = self.resolve(url)
        if match is None:
            return RouteResult.FAILED
        result: Any = match.route.handler(url, match.route, match.path_params)
        return RouteResult.from_handler(result)

    async def dispatch_async(self, url: URLLike) -> RouteResult:
        """Like ``dispatch``, awaiting the handler if it is async."""
        match = self.resolve(url)
        if match is None:
            return RouteResult.FAILED
        result = await call_handler(match.route.handler, url, match.route, match.path_params)
        return RouteResult.from_handler(result)
