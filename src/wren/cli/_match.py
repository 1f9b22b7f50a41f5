"""``wren match`` — resolve one path and show what it hits."""

import argparse
import sys

from wren.cli._resolve import RouterLookupError, resolve_router


def run_match(args: argparse.Namespace) -> None:
    """Resolve ``args.path`` and print the matched template and parameters.

    Exits with status 1 when no route matches.
    """
    try:
        router = resolve_router(args.router)
    except (ImportError, RouterLookupError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    match = router.resolve(args.path)
    if match is None:
        print(f"No route matches {args.path!r}", file=sys.stderr)
        raise SystemExit(1)

    template = match.pattern.template if match.pattern is not None else match.route.pattern
    print(f"{match.path} -> {template}")
    for name, value in match.path_params.items():
        print(f"  {name} = {value}")
