"""Visual Studio solution loader.

Reads the projects of a .sln file, their assembly names from the .csproj
files, and parses every SDK-style C# source file with the tree-sitter front end.
"""

import re
import xml.etree.ElementTree as ET
from pathlib import Path, PureWindowsPath

from spa_service_generator.errors import SolutionLoadError
from spa_service_generator.frontend.base import FrontEndProject, LoadedSolution, SourceDocument
from spa_service_generator.frontend.csharp import create_parser, parse_source

PROJECT_LINE = re.compile(r'^Project\("\{[^}]+\}"\)\s*=\s*"([^"]+)",\s*"([^"]+)"', re.MULTILINE)

EXCLUDED_DIRS = {"bin", "obj"}


def parse_sln(text: str) -> list[tuple[str, str]]:
    """Return (project name, relative .csproj path) pairs; solution folders are skipped."""
    return [
        (name, PureWindowsPath(path).as_posix())
        for name, path in PROJECT_LINE.findall(text)
        if path.lower().endswith(".csproj")
    ]


def read_assembly_name(csproj_path: Path, default: str) -> str:
    try:
        root = ET.parse(csproj_path).getroot()
    except (OSError, ET.ParseError) as e:
        raise SolutionLoadError(f"Cannot read project {csproj_path}: {e}") from e
    for element in root.iter():
        # Old-style projects carry an XML namespace on every tag.
        if element.tag.rsplit("}", 1)[-1] == "AssemblyName" and element.text:
            return element.text.strip()
    return default


def source_files(project_dir: Path) -> list[Path]:
    """C# sources of an SDK-style project, in stable order."""
    return sorted(
        path for path in project_dir.rglob("*.cs")
        if not EXCLUDED_DIRS & {part.lower() for part in path.relative_to(project_dir).parts[:-1]}
    )


def load_project(name: str, csproj_path: Path, parser=None) -> FrontEndProject:
    parser = parser or create_parser()
    project_dir = csproj_path.parent
    documents: list[SourceDocument] = []
    for path in source_files(project_dir):
        relative = path.relative_to(project_dir)
        try:
            source = path.read_bytes()
        except OSError as e:
            raise SolutionLoadError(f"Cannot read {path}: {e}") from e
        documents.append(parse_source(source, relative.name, list(relative.parts[:-1]), parser))
    return FrontEndProject(
        name=name,
        assembly_name=read_assembly_name(csproj_path, name),
        documents=documents,
    )


def load_sln(sln_path: Path) -> LoadedSolution:
    """Load every C# project referenced by a solution file."""
    try:
        text = sln_path.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise SolutionLoadError(f"Cannot open solution {sln_path}: {e}") from e

    entries = parse_sln(text)
    if not entries:
        raise SolutionLoadError(f"Solution {sln_path} does not reference any C# project.")

    parser = create_parser()
    projects = [load_project(name, sln_path.parent / path, parser) for name, path in entries]
    return LoadedSolution(projects)
