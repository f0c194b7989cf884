"""Identifier case conversions used for output paths and module names."""

import re

_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def dash_case(name: str) -> str:
    """Convert a PascalCase identifier to dash-case: 'APIKeys' -> 'api-keys'."""
    return _BOUNDARY.sub("-", name).replace("_", "-").lower()
