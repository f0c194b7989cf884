"""C# source front end built on tree-sitter.

Extracts classes, their base type, methods, attributes, parameters and
XML documentation comments from a C# compilation unit.
"""

import re
import xml.etree.ElementTree as ET
from xml.sax.saxutils import unescape

import tree_sitter_c_sharp as tscsharp
from tree_sitter import Language, Node, Parser

from spa_service_generator.frontend.base import (
    AnnotatedMethod,
    AttributeNode,
    ClassNode,
    DocElement,
    ParameterNode,
    SourceDocument,
    TypeRef,
)

CSHARP_LANGUAGE = Language(tscsharp.language())

OTHER_TYPE_NODES = {
    "record_declaration",
    "record_struct_declaration",
    "struct_declaration",
    "interface_declaration",
    "enum_declaration",
}
DOC_COMMENT_PREFIX = "///"

# A top-level doc element, either self-closing or up to its matching end tag.
DOC_ELEMENT = re.compile(r"<(\w+)([^<>]*?)(?:/>|>(.*?)</\1\s*>)", re.DOTALL)
DOC_ATTRIBUTE = re.compile(r"""(\w+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")
BARE_AMPERSAND = re.compile(r"&(?!#?\w+;)")
MARKUP = re.compile(r"<[^<>]*>")

ESCAPE_SEQUENCE = re.compile(r"\\(u[0-9a-fA-F]{4}|U[0-9a-fA-F]{8}|x[0-9a-fA-F]{1,4}|.)", re.DOTALL)
SIMPLE_ESCAPES = {"0": "\0", "a": "\a", "b": "\b", "f": "\f", "n": "\n", "r": "\r", "t": "\t", "v": "\v"}


def create_parser() -> Parser:
    return Parser(CSHARP_LANGUAGE)


def _text(node: Node | None) -> str:
    if node is None:
        return ""
    return node.text.decode("utf-8")


def _is_interface_name(name: str) -> bool:
    return len(name) > 1 and name[0] == "I" and name[1].isupper()


def parse_type(node: Node) -> TypeRef:
    """Convert a type syntax node to a TypeRef (namespaces resolved later)."""
    kind = node.type
    if kind == "nullable_type":
        inner = node.child_by_field_name("type") or node.named_children[0]
        return parse_type(inner).model_copy(update={"nullable": True})
    if kind == "array_type":
        inner = node.child_by_field_name("type") or node.named_children[0]
        return parse_type(inner).model_copy(update={"array": True})
    if kind == "generic_name":
        name = next((c for c in node.named_children if c.type == "identifier"), node.named_children[0])
        arg_list = next((c for c in node.named_children if c.type == "type_argument_list"), None)
        arguments = [parse_type(a) for a in arg_list.named_children] if arg_list else []
        return TypeRef(name=_text(name), arguments=arguments)
    if kind in ("qualified_name", "alias_qualified_name"):
        # Namespaces come from the solution index, not from the qualifier.
        return parse_type(node.child_by_field_name("name") or node.named_children[-1])
    return TypeRef(name=_text(node))


def _unescape_sequence(match: re.Match) -> str:
    code = match.group(1)
    if len(code) > 1:
        return chr(int(code[1:], 16))
    return SIMPLE_ESCAPES.get(code, code)


def _string_literal(node: Node) -> str | None:
    if node.type == "string_literal":
        return ESCAPE_SEQUENCE.sub(_unescape_sequence, _text(node)[1:-1])
    if node.type == "verbatim_string_literal":
        return _text(node)[2:-1].replace('""', '"')
    return None


def parse_attribute(node: Node) -> AttributeNode:
    name = _text(node.child_by_field_name("name") or node.named_children[0])
    arguments: list[str | None] = []
    arg_list = next((c for c in node.named_children if c.type == "attribute_argument_list"), None)
    if arg_list is not None:
        for argument in arg_list.named_children:
            if argument.type != "attribute_argument":
                continue
            if any(c.type in ("name_equals", "name_colon") for c in argument.named_children):
                continue
            arguments.append(_string_literal(argument.named_children[-1]))
    return AttributeNode(name=name.rsplit(".", 1)[-1], arguments=arguments)


def _attributes(node: Node) -> list[AttributeNode]:
    return [
        parse_attribute(attribute)
        for attribute_list in node.children
        if attribute_list.type == "attribute_list"
        for attribute in attribute_list.named_children
        if attribute.type == "attribute"
    ]


def parse_parameter(node: Node) -> ParameterNode:
    type_node = node.child_by_field_name("type")
    has_default = any(c.type in ("=", "equals_value_clause") for c in node.children)
    return ParameterNode(
        name=_text(node.child_by_field_name("name")),
        type=parse_type(type_node) if type_node is not None else TypeRef(name="object"),
        has_default=has_default,
        attributes=[a.name for a in _attributes(node)],
    )


def _inner_text(element: ET.Element) -> str:
    """Element text with <see cref>, <paramref> and nested markup flattened."""
    parts = [element.text or ""]
    for child in element:
        if child.tag in ("see", "seealso") and "cref" in child.attrib:
            parts.append(child.attrib["cref"].split(":", 1)[-1].rsplit(".", 1)[-1])
        elif child.tag in ("paramref", "typeparamref"):
            parts.append(child.attrib.get("name", ""))
        else:
            parts.append(_inner_text(child))
        parts.append(child.tail or "")
    return "".join(parts)


def _parse_doc_element(match: re.Match) -> DocElement:
    """Parse one top-level element; markup that is not well-formed is stripped instead."""
    try:
        element = ET.fromstring(BARE_AMPERSAND.sub("&amp;", match.group(0)))
    except ET.ParseError:
        attributes = {
            name: double or single
            for name, double, single in DOC_ATTRIBUTE.findall(match.group(2))
        }
        text = unescape(MARKUP.sub("", match.group(3) or ""))
        return DocElement(tag=match.group(1), attributes=attributes, text=text)
    return DocElement(tag=element.tag, attributes=dict(element.attrib), text=_inner_text(element))


def parse_documentation(lines: list[str]) -> list[DocElement] | None:
    """Parse the lines of a /// comment block. Returns None when there is none.

    Each top-level element is parsed on its own, so a broken <returns> or
    <remarks> never hides the <summary>.
    """
    if not lines:
        return None
    body = "\n".join(line[len(DOC_COMMENT_PREFIX):].removeprefix(" ") for line in lines)
    return [_parse_doc_element(match) for match in DOC_ELEMENT.finditer(body)]


def _doc_comment_lines(node: Node) -> list[str]:
    lines = []
    sibling = node.prev_sibling
    while sibling is not None and sibling.type == "comment":
        text = _text(sibling).strip()
        if text.startswith(DOC_COMMENT_PREFIX):
            lines.append(text)
        sibling = sibling.prev_sibling
    return list(reversed(lines))


def parse_method(node: Node) -> AnnotatedMethod:
    returns = node.child_by_field_name("returns") or node.child_by_field_name("type")
    parameter_list = node.child_by_field_name("parameters")
    parameters = [
        parse_parameter(p)
        for p in (parameter_list.named_children if parameter_list is not None else [])
        if p.type == "parameter"
    ]
    return AnnotatedMethod(
        name=_text(node.child_by_field_name("name")),
        return_type=parse_type(returns) if returns is not None else TypeRef(name="void"),
        parameters=parameters,
        attributes=_attributes(node),
        modifiers=[_text(c) for c in node.children if c.type == "modifier"],
        documentation=parse_documentation(_doc_comment_lines(node)),
    )


def _base_type(node: Node) -> TypeRef | None:
    base_list = next((c for c in node.named_children if c.type == "base_list"), None)
    if base_list is None:
        return None
    for base in base_list.named_children:
        if base.type == "primary_constructor_base_type":
            base = base.named_children[0]
        if base.type == "argument_list":
            continue
        ref = parse_type(base)
        if not _is_interface_name(ref.name):
            return ref
    return None


def parse_class(node: Node, namespace: str) -> ClassNode:
    body = node.child_by_field_name("body") or next(
        (c for c in node.named_children if c.type == "declaration_list"), None
    )
    methods = [
        parse_method(member)
        for member in (body.named_children if body is not None else [])
        if member.type == "method_declaration"
    ]
    return ClassNode(
        name=_text(node.child_by_field_name("name")),
        namespace=namespace,
        base_type=_base_type(node),
        methods=methods,
    )


class _Collector:
    def __init__(self):
        self.classes: list[ClassNode] = []
        self.types: list[TypeRef] = []

    def visit(self, node: Node, namespace: str) -> None:
        for child in node.children:
            if child.type == "file_scoped_namespace_declaration":
                # Following siblings belong to this namespace.
                namespace = _text(child.child_by_field_name("name"))
                self.visit(child, namespace)
            elif child.type == "namespace_declaration":
                name = _text(child.child_by_field_name("name"))
                self.visit(child, f"{namespace}.{name}" if namespace else name)
            elif child.type == "class_declaration":
                self.classes.append(parse_class(child, namespace))
            elif child.type in OTHER_TYPE_NODES:
                self.types.append(TypeRef(name=_text(child.child_by_field_name("name")), namespace=namespace))
            elif child.type == "declaration_list":
                self.visit(child, namespace)


def parse_source(source: bytes, name: str, folders: list[str] | None = None, parser: Parser | None = None) -> SourceDocument:
    """Parse one C# file into a SourceDocument."""
    parser = parser or create_parser()
    tree = parser.parse(source)
    collector = _Collector()
    collector.visit(tree.root_node, "")
    return SourceDocument(
        name=name,
        folders=folders or [],
        classes=collector.classes,
        types=collector.types,
    )
