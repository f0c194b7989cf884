"""Route template placeholder matching."""

import re

from spa_service_generator.errors import MalformedRouteError

PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]*)\}")


def placeholder_name(token: str) -> str:
    """Bound parameter name of a placeholder body: '*path', 'id:int', 'id?', 'page=1'."""
    name = token.lstrip("*")
    for separator in (":", "="):
        name = name.split(separator, 1)[0]
    return name.rstrip("?").strip()


def match_route(route: str) -> list[str]:
    """Return the placeholder names of a route template, left to right.

    Duplicates are kept in textual order. A route without placeholders
    yields an empty list.
    """
    remainder = PLACEHOLDER_PATTERN.sub("", route)
    if "{" in remainder or "}" in remainder:
        raise MalformedRouteError(route, "unbalanced braces")

    names = []
    for match in PLACEHOLDER_PATTERN.finditer(route):
        name = placeholder_name(match.group(1))
        if not name:
            raise MalformedRouteError(route, f"empty placeholder at position {match.start()}")
        names.append(name)
    return names
