"""Solution snapshot parser.

A snapshot is a YAML or JSON export of the projects of a solution, with
their controllers already reduced to the front-end models. It is useful when
the C# sources are analysed by an external compiler-side tool.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

from spa_service_generator.errors import SolutionLoadError
from spa_service_generator.frontend.base import FrontEndProject, LoadedSolution


class SolutionSnapshot(BaseModel):
    projects: list[FrontEndProject]


def parse_snapshot(text: str) -> LoadedSolution:
    """Parse snapshot text (YAML, which also accepts JSON) into a LoadedSolution."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SolutionLoadError(f"Invalid snapshot document: {e}") from e

    if not isinstance(data, dict):
        raise SolutionLoadError("Snapshot must be a mapping with a 'projects' list.")

    try:
        snapshot = SolutionSnapshot(**data)
    except ValidationError as e:
        raise SolutionLoadError(f"Invalid snapshot content: {e}") from e
    return LoadedSolution(snapshot.projects)


def load_snapshot(file_path: Path) -> LoadedSolution:
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise SolutionLoadError(f"Cannot read {file_path}: {e}") from e
    return parse_snapshot(text)
