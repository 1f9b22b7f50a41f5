"""Locate the Router a ``wren`` subcommand should inspect.

``MODULE:ATTR`` names the router (or a zero-argument factory returning
one). With a bare ``MODULE`` the module is searched for a Router
instance: ``router`` is preferred, otherwise exactly one module-level
Router must exist.
"""

import importlib
from types import ModuleType

from wren.routing.router import Router


class RouterLookupError(LookupError):
    """The import string doesn't lead to exactly one Router."""


def _module_routers(module: ModuleType) -> dict[str, Router]:
    return {
        name: value
        for name, value in vars(module).items()
        if isinstance(value, Router) and not name.startswith("_")
    }


def _from_attribute(module: ModuleType, attr_name: str) -> Router:
    try:
        obj = getattr(module, attr_name)
    except AttributeError:
        msg = f"module {module.__name__!r} has no attribute {attr_name!r}"
        raise RouterLookupError(msg) from None

    if isinstance(obj, Router):
        return obj
    if callable(obj):
        built = obj()
        if isinstance(built, Router):
            return built
        msg = f"{module.__name__}:{attr_name}() returned {type(built).__name__}, expected a Router"
        raise RouterLookupError(msg)
    msg = f"{module.__name__}:{attr_name} is a {type(obj).__name__}, expected a Router"
    raise RouterLookupError(msg)


def resolve_router(import_string: str) -> Router:
    """Import ``MODULE[:ATTR]`` and return the Router it designates.

    Import errors (``ModuleNotFoundError``) and exceptions raised by a
    factory propagate; everything else that prevents picking a single
    Router raises ``RouterLookupError``.
    """
    module_path, _, attr_name = import_string.partition(":")
    module = importlib.import_module(module_path)

    if attr_name:
        return _from_attribute(module, attr_name)

    found = _module_routers(module)
    if "router" in found:
        return found["router"]
    if len(found) == 1:
        return next(iter(found.values()))
    if not found:
        msg = f"module {module_path!r} defines no Router; pass MODULE:ATTR"
    else:
        msg = f"module {module_path!r} defines several Routers ({', '.join(sorted(found))}); pass MODULE:ATTR"
    raise RouterLookupError(msg)


def describe(router: Router) -> str:
    """One-line summary printed above CLI output."""
    state = "frozen" if router.frozen else "open"
    return f"{len(router.patterns)} template(s), {len(router.routes)} route(s), {len(router.aliases)} alias(es), {state}"
