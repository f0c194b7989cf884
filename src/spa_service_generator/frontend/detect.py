"""Auto-detect the solution input format and load it."""

from pathlib import Path

from spa_service_generator.errors import SolutionLoadError
from spa_service_generator.frontend.base import LoadedSolution
from spa_service_generator.frontend.snapshot import load_snapshot

SNAPSHOT_SUFFIXES = (".yaml", ".yml", ".json")


def detect_format(path: Path) -> str:
    """Detect the format of a solution location.

    Returns: 'solution' for a .sln file (or a directory holding exactly one),
    'snapshot' for a YAML/JSON solution snapshot.
    """
    if path.is_dir():
        candidates = sorted(path.glob("*.sln"))
        if len(candidates) != 1:
            raise SolutionLoadError(f"Expected exactly one .sln file in {path}, found {len(candidates)}.")
        return "solution"
    if path.suffix.lower() == ".sln":
        return "solution"
    if path.suffix.lower() in SNAPSHOT_SUFFIXES:
        return "snapshot"
    raise SolutionLoadError(f"Unsupported solution format: {path}")


def load_solution(path: Path) -> LoadedSolution:
    """Load a solution from a .sln file, a directory, or a snapshot document."""
    fmt = detect_format(path)
    if fmt == "snapshot":
        return load_snapshot(path)

    from spa_service_generator.frontend.solution import load_sln
    if path.is_dir():
        path = next(path.glob("*.sln"))
    return load_sln(path)
