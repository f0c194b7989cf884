"""Controller method resolution, including inherited base-controller methods."""

from spa_service_generator.errors import UnresolvableBaseControllerError
from spa_service_generator.frontend.base import AnnotatedMethod, ClassNode, SymbolResolver

ROOT_CONTROLLER_TYPES = {"Controller", "ControllerBase"}

PUBLIC_MODIFIER = "public"

NON_ACTION_ATTRIBUTES = {"NonAction", "NonActionAttribute"}


def is_action(method: AnnotatedMethod) -> bool:
    """Public methods not opted out of routing with [NonAction]."""
    return PUBLIC_MODIFIER in method.modifiers and not any(
        a.name.rsplit(".", 1)[-1] in NON_ACTION_ATTRIBUTES for a in method.attributes
    )


def resolve_methods(
    controller: ClassNode, resolver: SymbolResolver, depth: int = 1
) -> list[AnnotatedMethod]:
    """Return the controller's callable methods followed by inherited ones.

    Base controllers are merged up to `depth` levels; the walk stops at the
    framework root types. Raises UnresolvableBaseControllerError when a base
    class is not declared in the loaded solution.
    """
    methods = list(controller.methods)
    current = controller
    for _ in range(depth):
        base_type = current.base_type
        if base_type is None or base_type.name in ROOT_CONTROLLER_TYPES:
            break
        base = resolver.find_class(base_type)
        if base is None:
            raise UnresolvableBaseControllerError(controller.name, str(base_type))
        methods.extend(base.methods)
        current = base

    return [m for m in methods if is_action(m)]
