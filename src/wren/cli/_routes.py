"""``wren routes`` — list compiled route templates.

Resolves an import string to a wren Router and prints every table entry
in precedence order with its parameters and handler.
"""

import argparse
import sys

from wren.cli._resolve import RouterLookupError, describe, resolve_router


def _handler_name(handler: object) -> str:
    return getattr(handler, "__name__", str(handler))


def run_routes(args: argparse.Namespace) -> None:
    """List the routing table of a wren Router.

    Prints a summary line, then a table of TEMPLATE, PARAMS and HANDLER, one row per compiled
    template, in the order resolution tries them.
    """
    try:
        router = resolve_router(args.router)
    except (ImportError, RouterLookupError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(describe(router))
    entries = router.patterns
    if not entries:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str]] = []
    for pattern, route in entries:
        handler_name = _handler_name(route.handler)
        if route.name:
            handler_name = f"{handler_name} ({route.name})"
        rows.append((pattern.path, ", ".join(pattern.param_names) or "-", handler_name))

    max_template = max(max(len(r[0]) for r in rows), 8)  # "TEMPLATE" header
    max_params = max(max(len(r[1]) for r in rows), 6)  # "PARAMS" header

    fmt = f"{{:<{max_template}}}  {{:<{max_params}}}  {{}}"
    print(fmt.format("TEMPLATE", "PARAMS", "HANDLER"))
    sep_len = max_template + max_params + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for template, params, handler_name in rows:
        print(fmt.format(template, params, handler_name))
