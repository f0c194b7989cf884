"""Output module path derivation from a controller's project and folders."""

from pathlib import PurePosixPath

from spa_service_generator.generator.model import ModulePath
from spa_service_generator.naming import dash_case

CONTROLLER_MARKER = "Controller"

DEFAULT_EXTENSION = ".ts"


def project_segment(project_name: str) -> str:
    """'Kinetix.Orders.FrontEnd' -> 'orders'."""
    parts = project_name.split(".")
    return dash_case(parts[1] if len(parts) > 1 else parts[0])


def controller_base_name(class_name: str) -> str:
    if class_name.endswith(CONTROLLER_MARKER) and class_name != CONTROLLER_MARKER:
        class_name = class_name[: -len(CONTROLLER_MARKER)]
    return dash_case(class_name)


def derive_module_path(
    project_name: str,
    folders: list[str],
    class_name: str,
    multiple_frontends: bool,
    extension: str = DEFAULT_EXTENSION,
) -> ModulePath:
    """Compute a controller's output path and its folder depth.

    The first folder (the conventional "Controllers" root) is dropped. The
    project segment is only added when several front ends are generated.
    """
    segments = [project_segment(project_name)] if multiple_frontends else []
    segments.extend(dash_case(folder) for folder in folders[1:])
    segments.append(controller_base_name(class_name) + extension)

    folder_count = (1 if multiple_frontends else 0) + max(len(folders) - 1, 0)
    return ModulePath(path=str(PurePosixPath(*segments)), folder_count=folder_count)
