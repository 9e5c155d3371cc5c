"""
cenv — CLI entrypoint.

Usage:
    cenv demo                 # C++ + CMake
    cenv demo2 gcc -c         # C + run script
    cenv demo3 clangpp -g -r  # C++ + run script, git repo, readme
    python -m cenv.main --help
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import NoReturn

import click
from click.core import ParameterSource
from pydantic import ValidationError

from cenv import __version__
from cenv.core.models.options import BuildTool, Language, ProjectOptions
from cenv.core.observability.logging_config import setup_logging


def _fail(message: str) -> NoReturn:
    click.secho("✘", fg="red", err=True, nl=False)
    click.echo(f" {message}", err=True)
    sys.exit(1)


def _is_default(ctx: click.Context, name: str) -> bool:
    return ctx.get_parameter_source(name) in (ParameterSource.DEFAULT, None)


@click.command()
@click.version_option(version=__version__, prog_name="cenv")
@click.argument("project_name")
@click.argument(
    "build_type",
    required=False,
    default=BuildTool.CMAKE.value,
    type=click.Choice([t.value for t in BuildTool], case_sensitive=False),
)
@click.option("-c", "--c", "use_c", is_flag=True, default=False,
              help="Default: false | Use the C language.")
@click.option("-x", "--cpp", "use_cpp", is_flag=True, default=True,
              help="Default: true | Use the C++ language (-c wins).")
@click.option("-g", "--git", "init_git", is_flag=True, default=False,
              help="Initialize git and add a .gitignore.")
@click.option("-r", "--readme", is_flag=True, default=False, help="Add an empty readme.md.")
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Parent directory of the new project (default: current directory).",
)
@click.option("--dry-run", is_flag=True, help="Show what would be created, write nothing.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML defaults file (default: $CENV_CONFIG).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Only log errors.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(
    ctx: click.Context,
    project_name: str,
    build_type: str,
    use_c: bool,
    use_cpp: bool,
    init_git: bool,
    readme: bool,
    output_dir: Path | None,
    dry_run: bool,
    as_json: bool,
    config_path: Path | None,
    verbose: bool,
    quiet: bool,
    debug: bool,
) -> None:
    """Scaffold a new C/C++ project named PROJECT_NAME."""
    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("CENV_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("CENV_LOG_FILE"),
        log_file_level=os.environ.get("CENV_LOG_FILE_LEVEL"),
    )

    from cenv.core.config.loader import ConfigError, load_defaults

    try:
        defaults = load_defaults(config_path)
    except ConfigError as e:
        _fail(str(e))

    # ── Explicit flags > defaults file > built-in defaults ──────
    if use_c:
        language = Language.C
    elif not _is_default(ctx, "use_cpp"):
        language = Language.CPP
    else:
        language = defaults.language or Language.CPP

    tool = BuildTool(build_type.lower())
    if _is_default(ctx, "build_type") and defaults.build_type is not None:
        tool = defaults.build_type

    if _is_default(ctx, "init_git") and defaults.git is not None:
        init_git = defaults.git
    if _is_default(ctx, "readme") and defaults.readme is not None:
        readme = defaults.readme
    if output_dir is None:
        output_dir = defaults.output_dir or Path(".")

    try:
        options = ProjectOptions(
            name=project_name,
            language=language,
            build_tool=tool,
            init_vcs=init_git,
            create_readme=readme,
        )
    except ValidationError as e:
        message = e.errors()[0]["msg"].removeprefix("Value error, ")
        raise click.BadParameter(message, param_hint="'PROJECT_NAME'") from e

    from cenv.core.use_cases.new_project import run_new_project

    result = run_new_project(options, output_dir=output_dir, dry_run=dry_run)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if not result.ok:
        assert result.error is not None
        _fail(result.error)

    if dry_run:
        click.secho("Dry run: nothing written.", fg="yellow")
        click.echo(f"    Project root: {result.project_root}")
        for entry in result.planned:
            if entry == ".git/":
                entry = ".git/  (git init)"
            click.echo(f"      {entry}")
        return

    click.secho("✓", fg="bright_green", nl=False)
    click.echo(" Successfully Generated!")
    click.echo(f"    Project name: {options.name}")
    click.echo(f"    Language    : {result.language.display_name}")
    click.echo(f"    Build Type  : {result.build_tool.display_name}")


if __name__ == "__main__":
    cli()
