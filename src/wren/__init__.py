"""Wren — a small URL-path router.

Compiles route templates such as ``/users/{id}/posts/{slug?}`` into
matchers and resolves paths to the first matching route, extracting
named parameters.

Basic usage::

    from wren import Router

    router = Router()
    router.add_alias("id", r"[0-9]+")

    @router.route("/users/{id}")
    def show_user(url, route, params):
        print(params["id"])

    router.dispatch("/users/42")
"""

__version__ = "0.1.0"
__all__ = [
    "CompiledPattern",
    "ConfigurationError",
    "Route",
    "RouteMatch",
    "RouteResult",
    "Router",
    "RouterConfig",
    "WrenError",
    "compile_pattern",
    "normalize_path",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from wren.routing.router import Router

        return Router

    if name == "RouterConfig":
        from wren.config import RouterConfig

        return RouterConfig

    if name in ("Route", "RouteMatch", "RouteResult"):
        from wren.routing import route as _route

        return getattr(_route, name)

    if name in ("CompiledPattern", "compile_pattern", "normalize_path"):
        from wren.routing import pattern as _pattern

        return getattr(_pattern, name)

    if name in ("WrenError", "ConfigurationError"):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
