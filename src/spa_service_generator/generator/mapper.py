"""Method-to-service mapping: one ServiceDeclaration per eligible controller method."""

from spa_service_generator.errors import (
    AmbiguousVerbAnnotationError,
    MalformedRouteError,
    MissingVerbAnnotationError,
)
from spa_service_generator.frontend.base import AnnotatedMethod, AttributeNode, SymbolResolver, TypeRef
from spa_service_generator.generator.documentation import extract_documentation
from spa_service_generator.generator.model import HttpVerb, Parameter, ServiceDeclaration
from spa_service_generator.generator.parameters import classify_parameters
from spa_service_generator.generator.routes import match_route

ASYNC_WRAPPER_TYPES = {"Task", "ValueTask"}

REDIRECT_MARKER = "Redirect"

FROM_BODY_ATTRIBUTES = {"FromBody", "FromBodyAttribute"}

VERB_ATTRIBUTES = {f"Http{verb.value.title()}": verb for verb in HttpVerb}


def unwrap_async(return_type: TypeRef) -> TypeRef:
    """Task<T> -> T. A non-generic Task is kept as is."""
    if return_type.name in ASYNC_WRAPPER_TYPES and len(return_type.arguments) == 1:
        return return_type.arguments[0]
    return return_type


def verb_of(attribute: AttributeNode) -> HttpVerb | None:
    name = attribute.name.rsplit(".", 1)[-1]
    if name.endswith("Attribute"):
        name = name[: -len("Attribute")]
    return VERB_ATTRIBUTES.get(name)


def find_verb_attribute(method: AnnotatedMethod) -> tuple[HttpVerb, AttributeNode]:
    """Return the single HTTP verb attribute of a method."""
    matches = [(verb_of(a), a) for a in method.attributes]
    matches = [(verb, a) for verb, a in matches if verb is not None]
    if not matches:
        raise MissingVerbAnnotationError(method.name)
    if len(matches) > 1:
        raise AmbiguousVerbAnnotationError(method.name, [a.name for _, a in matches])
    return matches[0]


def route_of(attribute: AttributeNode, method: str) -> str:
    if not attribute.arguments:
        raise MalformedRouteError(None, f"[{attribute.name}] has no route template", method)
    route = attribute.arguments[0]
    if route is None:
        raise MalformedRouteError(None, f"[{attribute.name}] route is not a string literal", method)
    return route


def map_method(method: AnnotatedMethod, resolver: SymbolResolver) -> ServiceDeclaration | None:
    """Turn a controller method into a ServiceDeclaration.

    Returns None for methods returning a redirect result: they are not data
    endpoints a client can call. Raises a GenerationError subclass when the
    method lacks documentation or a unique verb attribute, or when its route
    or body parameters cannot be interpreted.
    """
    return_type = unwrap_async(resolver.resolve_type(method.return_type))
    if REDIRECT_MARKER in return_type.name:
        return None

    documentation = extract_documentation(method.documentation, method.name)
    verb, attribute = find_verb_attribute(method)
    route = route_of(attribute, method.name)

    parameters = [
        Parameter(
            name=p.name,
            type=resolver.resolve_type(p.type),
            is_optional=p.has_default,
            is_from_body=any(a in FROM_BODY_ATTRIBUTES for a in p.attributes),
        )
        for p in method.parameters
    ]

    try:
        placeholders = match_route(route)
    except MalformedRouteError as e:
        raise MalformedRouteError(route, e.reason, method.name) from e
    bindings = classify_parameters(parameters, placeholders, method.name)

    return ServiceDeclaration(
        verb=verb,
        route=route,
        name=method.name,
        return_type=return_type,
        parameters=parameters,
        uri_parameters=bindings.uri,
        query_parameters=bindings.query,
        body_parameter=bindings.body,
        documentation=documentation,
    )
