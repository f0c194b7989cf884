"""Normalized, target-agnostic description of callable endpoints.

The mapper builds these from front-end method nodes and the renderer turns
them into client modules.
"""

from enum import Enum

from pydantic import BaseModel, Field

from spa_service_generator.frontend.base import TypeRef


class HttpVerb(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class Parameter(BaseModel):
    name: str
    type: TypeRef
    is_optional: bool = False
    is_from_body: bool = False

    model_config = {"frozen": True}


class Documentation(BaseModel):
    summary: str
    parameters: list[tuple[str, str]] = Field(default_factory=list)  # (name, description)

    model_config = {"frozen": True}

    def description_for(self, name: str) -> str | None:
        for param_name, description in self.parameters:
            if param_name == name:
                return description
        return None


class ServiceDeclaration(BaseModel):
    """One callable endpoint: verb, route, signature and documentation."""

    verb: HttpVerb
    route: str
    name: str
    return_type: TypeRef
    parameters: list[Parameter]
    uri_parameters: list[Parameter]
    query_parameters: list[Parameter]
    body_parameter: Parameter | None = None
    documentation: Documentation

    model_config = {"frozen": True}


class ModulePath(BaseModel):
    path: str  # POSIX, relative to the services root
    folder_count: int

    model_config = {"frozen": True}


class GenerationReport(BaseModel):
    written: list[str] = Field(default_factory=list)
    failures: dict[str, str] = Field(default_factory=dict)  # project/folders/file -> error message

    @property
    def ok(self) -> bool:
        return not self.failures
