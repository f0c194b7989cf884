"""Partition of method parameters into path, query and body bindings."""

from typing import NamedTuple

from spa_service_generator.errors import AmbiguousBodyParameterError
from spa_service_generator.generator.model import Parameter


class ParameterBindings(NamedTuple):
    uri: list[Parameter]
    query: list[Parameter]
    body: Parameter | None


def classify_parameters(
    parameters: list[Parameter], placeholders: list[str], method: str = ""
) -> ParameterBindings:
    """Split parameters by binding source, keeping declaration order.

    Raises AmbiguousBodyParameterError when more than one parameter is body-bound.
    """
    bodies = [p for p in parameters if p.is_from_body]
    if len(bodies) > 1:
        raise AmbiguousBodyParameterError(method, [p.name for p in bodies])

    route_names = set(placeholders)
    uri = [p for p in parameters if not p.is_from_body and p.name in route_names]
    query = [p for p in parameters if not p.is_from_body and p.name not in route_names]
    return ParameterBindings(uri=uri, query=query, body=bodies[0] if bodies else None)
