"""Template compiler — turns route templates into anchored matchers.

A template is a normalized path made of literal text, required
parameters (``{id}``) and optional separator+parameter units
(``/{slug?}``). Compilation produces a ``CompiledPattern``: a regular
expression whose capture groups line up 1:1 with an explicit tuple of
parameter names.

Examples::

    "/users/{id}"        -> \\A/users/([^/]+)\\Z                 ("id",)
    "/posts/{slug?}"     -> \\A/posts(?:/([^/]+))?\\Z            ("slug",)
    "/files/\\{raw\\}"     -> \\A/files/\\{raw\\}\\Z                 ()
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass

import regex

from wren.errors import ConfigurationError
from wren.routing.params import PARAM_NAME, SEGMENT_PATTERN

# Parameter name as it looks after re.escape() ("-" becomes "\-")
_ESCAPED_NAME = r"(?:[A-Za-z0-9_]|\\-)+"

# Either a user-escaped reserved character (\{ \} \? in the template) or
# a whole {name} / {name?} token, both in re.escape() form
_RESERVED = re.compile(
    r"\\\\\\([{}?])"
    r"|\\\{(" + _ESCAPED_NAME + r")(\\\?)?\\\}"
)

_OPTIONAL_PARAM = re.compile(r"(/)?\{(" + PARAM_NAME + r")\?\}")

_PARAM = re.compile(r"\{(" + PARAM_NAME + r")\}")


def normalize_path(path: str | None) -> str:
    """Canonicalize a path: one leading ``/``, no trailing ``/``.

    Surrounding whitespace is trimmed; empty input becomes ``/``::

        normalize_path(" users/42/ ")  -> "/users/42"
        normalize_path("")             -> "/"
    """
    if path is None:
        return "/"
    path = path.strip()
    if not path:
        return "/"
    return "/" + path.strip("/")


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """An executable matcher plus the parameter name of each capture group.

    ``param_names[i]`` names capture group ``i + 1`` of ``regex``.
    """

    template: str
    path: str
    regex: regex.Pattern
    param_names: tuple[str, ...]

    @property
    def groups(self) -> int:
        return self.regex.groups

    def match(self, path: str, timeout: float | None = None) -> dict[str, str] | None:
        """Match an already-normalized path against the whole pattern.

        Returns the parameter mapping, or None if the path doesn't match.
        Parameters whose group took no part in the match (an omitted
        optional unit) are left out rather than mapped to ``""``.

        Several parameters in one segment (``{a}-{b}-{c}``) backtrack
        polynomially on a failing path, so *timeout* (seconds) bounds the
        work. Raises ``TimeoutError`` when it runs out.
        """
        found = self.regex.match(path, timeout=timeout)
        if found is None and path == "/":
            # "/" stands for the empty path when every unit is optional
            found = self.regex.match("", timeout=timeout)
        if found is None:
            return None

        params: dict[str, str] = {}
        for name, value in zip(self.param_names, found.groups(), strict=True):
            if value is not None:
                params[name] = value
        return params


def _unescape_reserved(match: re.Match[str]) -> str:
    literal, name, optional = match.groups()
    if literal is not None:
        return "\\" + literal
    name = name.replace("\\-", "-")
    if optional:
        return "{" + name + "?}"
    return "{" + name + "}"


def compile_pattern(template: str, aliases: Mapping[str, str] | None = None) -> CompiledPattern:
    """Compile a route template against the given alias table.

    Steps, in order:

    1. Normalize the template as a path.
    2. ``re.escape`` everything; the template is literal text.
    3. Turn ``\\{``, ``\\}``, ``\\?`` written by the user into literal
       characters and restore ``{name}`` / ``{name?}`` tokens.
    4. Expand ``/{name?}`` into ``(?:/{name})?`` so the separator and the
       value are optional together.
    5. Record parameter names left to right.
    6. Replace ``{name}`` with ``(alias pattern)`` when an alias exists,
       otherwise with ``([^/]+)``. One pass, so text coming from an alias
       (``[0-9]{4}``) is never rescanned.
    7. Anchor to the whole string.

    The alias table is read once; later alias changes don't affect the
    returned pattern.

    Raises ``ConfigurationError`` if the result is not a valid regular
    expression, or if its capture groups don't line up with the
    parameter names (an alias with its own capturing group).
    """
    aliases = dict(aliases or {})
    path = normalize_path(template)

    expression = re.escape(path)
    expression = _RESERVED.sub(_unescape_reserved, expression)
    expression = _OPTIONAL_PARAM.sub(
        lambda m: "(?:" + (m.group(1) or "") + "{" + m.group(2) + "})?",
        expression,
    )

    param_names = tuple(_PARAM.findall(expression))

    def _group(match: re.Match[str]) -> str:
        name = match.group(1)
        return "(" + aliases.get(name, SEGMENT_PATTERN) + ")"

    expression = _PARAM.sub(_group, expression)
    expression = rf"\A{expression}\Z"

    try:
        compiled = regex.compile(expression)
    except regex.error as exc:
        msg = f"Error compiling route template {template!r} (expression {expression!r}): {exc}"
        raise ConfigurationError(msg, template=template) from exc

    if compiled.groups != len(param_names):
        msg = (
            f"Route template {template!r} compiles to {compiled.groups} capture group(s) "
            f"for {len(param_names)} parameter(s) {list(param_names)}. "
            "Alias patterns must use non-capturing groups: (?:...)."
        )
        raise ConfigurationError(msg, template=template)

    return CompiledPattern(
        template=template,
        path=path,
        regex=compiled,
        param_names=param_names,
    )
