"""Front-end input models and the solution-wide symbol resolver.

Every front end (C# sources through tree-sitter, or a YAML/JSON snapshot)
converts its input into these models. The generator only reads them.
"""

from typing import Protocol

from pydantic import BaseModel, Field

FRONTEND_SUFFIX = "FrontEnd"


class TypeRef(BaseModel):
    """A reference to a named type, with its generic arguments."""

    name: str
    namespace: str = ""  # empty for types declared outside the solution
    arguments: list["TypeRef"] = Field(default_factory=list)
    nullable: bool = False
    array: bool = False

    model_config = {"frozen": True}

    def __str__(self) -> str:
        text = self.name
        if self.arguments:
            text += "<" + ", ".join(str(a) for a in self.arguments) + ">"
        if self.array:
            text += "[]"
        if self.nullable:
            text += "?"
        return text


class AttributeNode(BaseModel):
    """An attribute applied to a method, e.g. [HttpGet("orders/{id}")]."""

    name: str
    arguments: list[str | None] = Field(default_factory=list)  # None: not a string literal

    model_config = {"frozen": True}


class ParameterNode(BaseModel):
    name: str
    type: TypeRef
    has_default: bool = False
    attributes: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class DocElement(BaseModel):
    """A top-level element of an XML documentation comment."""

    tag: str
    attributes: dict[str, str] = Field(default_factory=dict)
    text: str = ""

    model_config = {"frozen": True}


class AnnotatedMethod(BaseModel):
    name: str
    return_type: TypeRef
    parameters: list[ParameterNode] = Field(default_factory=list)
    attributes: list[AttributeNode] = Field(default_factory=list)
    modifiers: list[str] = Field(default_factory=list)
    documentation: list[DocElement] | None = None

    model_config = {"frozen": True}


class ClassNode(BaseModel):
    name: str
    namespace: str = ""
    base_type: TypeRef | None = None
    methods: list[AnnotatedMethod] = Field(default_factory=list)

    model_config = {"frozen": True}


class SourceDocument(BaseModel):
    """A source file, located by its folder segments from the project root."""

    name: str
    folders: list[str] = Field(default_factory=list)
    classes: list[ClassNode] = Field(default_factory=list)
    types: list[TypeRef] = Field(default_factory=list)  # other declared types (DTOs, enums...)

    model_config = {"frozen": True}


class FrontEndProject(BaseModel):
    name: str
    assembly_name: str = ""
    documents: list[SourceDocument] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def assembly(self) -> str:
        return self.assembly_name or self.name


class SymbolResolver(Protocol):
    """Read-only semantic queries the generator needs from a front end."""

    def resolve_type(self, ref: TypeRef) -> TypeRef: ...

    def find_class(self, ref: TypeRef) -> ClassNode | None: ...


class LoadedSolution:
    """Immutable snapshot of a loaded solution, indexed for symbol lookups."""

    def __init__(self, projects: list[FrontEndProject]):
        self.projects = list(projects)
        self._classes: dict[str, list[ClassNode]] = {}
        self._namespaces: dict[str, list[str]] = {}
        for project in self.projects:
            for document in project.documents:
                for cls in document.classes:
                    self._classes.setdefault(cls.name, []).append(cls)
                    self._index_type(cls.name, cls.namespace)
                for declared in document.types:
                    self._index_type(declared.name, declared.namespace)

    def _index_type(self, name: str, namespace: str) -> None:
        namespaces = self._namespaces.setdefault(name, [])
        if namespace not in namespaces:
            namespaces.append(namespace)

    def frontends(self, project_name: str) -> list[FrontEndProject]:
        """Projects selected as generation targets, by assembly name convention."""
        return [
            p for p in self.projects
            if p.assembly.startswith(project_name) and p.assembly.endswith(FRONTEND_SUFFIX)
        ]

    def resolve_type(self, ref: TypeRef) -> TypeRef:
        """Fill in namespaces for types declared in the solution, arguments included.

        Lookup is by short name. A name declared in several namespaces resolves
        to the first one in project and document order.
        """
        namespace = ref.namespace
        if not namespace:
            candidates = self._namespaces.get(ref.name, [])
            namespace = candidates[0] if candidates else ""
        return ref.model_copy(update={
            "namespace": namespace,
            "arguments": [self.resolve_type(a) for a in ref.arguments],
        })

    def find_class(self, ref: TypeRef) -> ClassNode | None:
        candidates = self._classes.get(ref.name, [])
        if ref.namespace:
            candidates = [c for c in candidates if c.namespace == ref.namespace]
        return candidates[0] if candidates else None
