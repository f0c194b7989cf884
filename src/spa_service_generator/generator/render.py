"""TypeScript client module rendering with Jinja2 templates."""

import re
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from spa_service_generator.frontend.base import TypeRef
from spa_service_generator.generator.documentation import normalize_whitespace
from spa_service_generator.generator.model import ServiceDeclaration
from spa_service_generator.generator.routes import PLACEHOLDER_PATTERN, placeholder_name
from spa_service_generator.naming import dash_case

TEMPLATES_DIR = Path(__file__).parent / "templates"

SERVICE_TEMPLATE = "service.ts.j2"

NUMBER_TYPES = {
    "byte", "sbyte", "short", "ushort", "int", "uint", "long", "ulong",
    "float", "double", "decimal",
    "Byte", "SByte", "Int16", "UInt16", "Int32", "UInt32", "Int64", "UInt64",
    "Single", "Double", "Decimal",
}
STRING_TYPES = {
    "string", "String", "char", "Char", "Guid",
    "DateTime", "DateTimeOffset", "DateOnly", "TimeOnly", "TimeSpan",
}
BOOLEAN_TYPES = {"bool", "Boolean"}
ANY_TYPES = {"object", "Object", "dynamic"}
VOID_TYPES = {"void", "IActionResult", "ActionResult", "IResult", "Task", "ValueTask"}
FILE_TYPES = {"IFormFile"}
# Single-argument generics rendered as their argument.
UNWRAPPED_TYPES = {"ActionResult", "Nullable", "Task", "ValueTask"}
COLLECTION_TYPES = {
    "IEnumerable", "ICollection", "IList", "List", "ISet", "HashSet",
    "IReadOnlyList", "IReadOnlyCollection",
}
DICTIONARY_TYPES = {"Dictionary", "IDictionary", "IReadOnlyDictionary"}


def ts_type(ref: TypeRef) -> str:
    """TypeScript spelling of a resolved C# type."""
    if ref.array:
        return ts_type(ref.model_copy(update={"array": False, "nullable": False})) + "[]"

    name, args = ref.name, ref.arguments
    if len(args) == 1 and name in UNWRAPPED_TYPES:
        return ts_type(args[0])
    if len(args) == 1 and name in COLLECTION_TYPES:
        return ts_type(args[0]) + "[]"
    if len(args) == 2 and name in DICTIONARY_TYPES:
        return f"{{[key: string]: {ts_type(args[1])}}}"
    if not args:
        if name in VOID_TYPES:
            return "void"
        if name in NUMBER_TYPES:
            return "number"
        if name in STRING_TYPES:
            return "string"
        if name in BOOLEAN_TYPES:
            return "boolean"
        if name in FILE_TYPES:
            return "File"
        if name in ANY_TYPES:
            return "any"
    if ref.namespace:
        if args:
            return f"{name}<{', '.join(ts_type(a) for a in args)}>"
        return name
    return "any"


def model_module(namespace: str, project_name: str) -> str:
    """'Kinetix.Orders.Dto' with project 'Kinetix' -> 'orders/dto'."""
    if namespace == project_name:
        namespace = ""
    elif namespace.startswith(project_name + "."):
        namespace = namespace[len(project_name) + 1:]
    return "/".join(dash_case(part) for part in namespace.split(".") if part)


def _declared_types(ref: TypeRef) -> list[TypeRef]:
    found = [ref] if ref.namespace else []
    for arg in ref.arguments:
        found.extend(_declared_types(arg))
    return found


def collect_imports(services: list[ServiceDeclaration], project_name: str) -> list[tuple[str, list[str]]]:
    """Model imports grouped by module, both levels sorted."""
    modules: dict[str, set[str]] = {}
    for service in services:
        refs = [service.return_type] + [p.type for p in service.parameters]
        for ref in refs:
            for declared in _declared_types(ref):
                module = model_module(declared.namespace, project_name)
                modules.setdefault(module, set()).add(declared.name)
    return [(module, sorted(names)) for module, names in sorted(modules.items())]


def service_url(service: ServiceDeclaration) -> str:
    """Route as a template literal body: 'orders/{id:int}' -> './orders/${id}'."""
    uri_names = {p.name for p in service.uri_parameters}

    def substitute(match: re.Match) -> str:
        name = placeholder_name(match.group(1))
        return f"${{{name}}}" if name in uri_names else match.group(0)

    return "./" + PLACEHOLDER_PATTERN.sub(substitute, service.route.lstrip("~/"))


def request_init(service: ServiceDeclaration) -> str:
    parts = []
    if service.body_parameter is not None:
        parts.append(f"body: {service.body_parameter.name}")
    if service.query_parameters:
        parts.append("query: {" + ", ".join(p.name for p in service.query_parameters) + "}")
    return "{" + ", ".join(parts) + "}"


class TypeScriptRenderer:
    """Renders one client module per controller from its service declarations."""

    def __init__(self, templates_dir: Path = TEMPLATES_DIR):
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            autoescape=False,  # noqa: S701 - generating TypeScript
        )
        self.env.filters["ts_type"] = ts_type
        self.env.filters["url"] = service_url
        self.env.filters["request_init"] = request_init
        self.env.filters["oneline"] = normalize_whitespace

    def render(self, project_name: str, folder_count: int, services: list[ServiceDeclaration]) -> str:
        template = self.env.get_template(SERVICE_TEMPLATE)
        return template.render(
            project_name=project_name,
            root="../" * (folder_count + 1),
            imports=collect_imports(services, project_name),
            services=services,
        )
