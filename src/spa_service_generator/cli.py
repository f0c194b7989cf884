"""CLI entry point for spa-service-generator."""

from pathlib import Path

import click

from spa_service_generator.errors import NoFrontEndProjectsError, SolutionLoadError
from spa_service_generator.frontend.detect import detect_format, load_solution
from spa_service_generator.generator.driver import ServiceGenerator


@click.command()
@click.argument("solution_path", type=click.Path(exists=True, path_type=Path))
@click.argument("spa_root", type=click.Path(file_okay=False, path_type=Path))
@click.argument("project_name")
def main(solution_path: Path, spa_root: Path, project_name: str):
    """Generate SPA service modules from the API controllers of a solution.

    SOLUTION_PATH is a .sln file (or its directory) or a YAML/JSON solution
    snapshot. SPA_ROOT is the root of the SPA; modules are written under
    app/services. PROJECT_NAME is the assembly name prefix of the front-end
    projects (for example "Kinetix").
    """
    try:
        fmt = detect_format(solution_path)
        click.echo(f"Loading {solution_path} (format: {fmt})...")
        solution = load_solution(solution_path)

        generator = ServiceGenerator(solution, spa_root, project_name)
        report = generator.generate()
    except (SolutionLoadError, NoFrontEndProjectsError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Generated {len(report.written)} files in {generator.output_root}")
    if not report.ok:
        click.echo(f"{len(report.failures)} controller(s) failed.", err=True)
        raise SystemExit(1)
