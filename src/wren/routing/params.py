"""Path parameter grammar and alias validation.

Parameters appear in templates as ``{name}`` (required) or ``{name?}``
(optional). Aliases bind a parameter name to a caller-supplied
sub-pattern that replaces the default segment matcher.
"""

import re

from wren.errors import ConfigurationError

# Characters allowed in a parameter (and alias) name
PARAM_NAME = r"[A-Za-z0-9_-]+"

# Default matcher for a parameter with no alias: one or more non-separator characters
SEGMENT_PATTERN = r"[^/]+"

_PARAM_NAME_RE = re.compile(rf"{PARAM_NAME}\Z")


def is_param_name(name: str) -> bool:
    """Return True if *name* is usable inside ``{...}``."""
    return bool(_PARAM_NAME_RE.match(name))


def validate_alias(name: str, pattern: str) -> None:
    """Check an alias definition for basic syntax.

    Only the shape is checked here. A sub-pattern that is not a valid
    regular expression surfaces when a template using it is compiled.

    Raises ``ConfigurationError`` if *name* is not a valid parameter
    name or *pattern* is empty.
    """
    if not isinstance(name, str) or not is_param_name(name):
        msg = f"Alias name {name!r} must match {PARAM_NAME}."
        raise ConfigurationError(msg)
    if not isinstance(pattern, str) or not pattern:
        msg = f"Alias {name!r} needs a non-empty pattern string, got {pattern!r}."
        raise ConfigurationError(msg)
