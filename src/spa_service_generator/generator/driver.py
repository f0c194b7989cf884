"""Generator driver: one client module per front-end controller."""

from pathlib import Path
from typing import Protocol

import click

from spa_service_generator.errors import (
    GenerationError,
    IOFailureError,
    MissingControllerClassError,
    NoFrontEndProjectsError,
)
from spa_service_generator.frontend.base import FrontEndProject, LoadedSolution, SourceDocument
from spa_service_generator.generator.mapper import map_method
from spa_service_generator.generator.model import GenerationReport, ModulePath, ServiceDeclaration
from spa_service_generator.generator.paths import CONTROLLER_MARKER, derive_module_path
from spa_service_generator.generator.render import TypeScriptRenderer
from spa_service_generator.generator.resolver import resolve_methods

OUTPUT_SUBDIR = Path("app") / "services"


class ServiceRenderer(Protocol):
    def render(self, project_name: str, folder_count: int, services: list[ServiceDeclaration]) -> str: ...


def document_key(project: FrontEndProject, document: SourceDocument) -> str:
    """'Kinetix.Orders.FrontEnd/Controllers/OrdersController.cs': unique across front ends."""
    return "/".join([project.name, *document.folders, document.name])


class ServiceGenerator:
    """Generates the SPA service modules of every front-end controller."""

    def __init__(
        self,
        solution: LoadedSolution,
        spa_root: Path,
        project_name: str,
        renderer: ServiceRenderer | None = None,
    ):
        self.solution = solution
        self.output_root = spa_root / OUTPUT_SUBDIR
        self.project_name = project_name
        self.renderer = renderer or TypeScriptRenderer()

    def frontends(self) -> list[FrontEndProject]:
        """Raises NoFrontEndProjectsError when no project matches the name prefix."""
        frontends = self.solution.frontends(self.project_name)
        if not frontends:
            raise NoFrontEndProjectsError(self.project_name)
        return frontends

    def controllers(self, frontends: list[FrontEndProject]) -> list[tuple[FrontEndProject, SourceDocument]]:
        """Controller documents of the front-end projects, in enumeration order."""
        return [
            (project, document)
            for project in frontends
            for document in project.documents
            if CONTROLLER_MARKER in document.name
        ]

    def generate(self) -> GenerationReport:
        """Run one pass over all controllers.

        A controller that fails is reported on stderr and skipped; the others
        are still generated.
        """
        frontends = self.frontends()
        multiple = len(frontends) > 1
        report = GenerationReport()

        for project, document in self.controllers(frontends):
            name = document.classes[0].name if document.classes else document.name
            try:
                path = self._generate_controller(project, document, multiple)
            except GenerationError as e:
                click.echo(f"Error in {name}: {e}", err=True)
                report.failures[document_key(project, document)] = str(e)
                continue
            report.written.append(path)

        return report

    def _generate_controller(self, project: FrontEndProject, document: SourceDocument, multiple: bool) -> str:
        if not document.classes:
            raise MissingControllerClassError(document.name)
        controller = document.classes[0]

        module = derive_module_path(project.name, document.folders, controller.name, multiple)
        click.echo(f"Generating {module.path}")

        services = []
        for method in resolve_methods(controller, self.solution):
            service = map_method(method, self.solution)
            if service is not None:
                services.append(service)

        output = self.renderer.render(self.project_name, module.folder_count, services)
        self._write(module, output)
        return module.path

    def _write(self, module: ModulePath, output: str) -> None:
        file_path = self.output_root / module.path
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(output, encoding="utf-8", newline="\n")
        except OSError as e:
            raise IOFailureError(str(file_path), e) from e
