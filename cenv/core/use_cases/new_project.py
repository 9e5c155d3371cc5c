"""
New-project use case — guard, then generate (or plan), then report.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from cenv.adapters.base import Adapter
from cenv.core.models.options import BuildTool, Language, ProjectOptions
from cenv.core.services.scaffold import (
    GenerationError,
    PathExistsError,
    VersionControlInitError,
    check_path,
    generate_project,
    plan_project,
    resolve_build_tool,
)

ErrorKind = Literal["path_exists", "generation", "vcs"]


@dataclass
class NewProjectResult:
    """Outcome of one scaffold run."""

    project_name: str
    project_root: Path
    language: Language
    build_tool: BuildTool
    dry_run: bool = False
    init_vcs: bool = False
    written: list[str] = field(default_factory=list)
    planned: list[str] = field(default_factory=list)
    error: str | None = None
    error_kind: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        result: dict = {
            "ok": self.ok,
            "project": {
                "name": self.project_name,
                "root": str(self.project_root),
                "language": self.language.display_name,
                "build_type": self.build_tool.display_name,
            },
            "dry_run": self.dry_run,
        }
        if self.dry_run:
            result["planned"] = self.planned
            result["git_init"] = self.init_vcs
        else:
            result["written"] = self.written
        if self.error:
            result["error"] = self.error
            result["error_kind"] = self.error_kind
        return result


def run_new_project(
    options: ProjectOptions,
    output_dir: Path = Path("."),
    dry_run: bool = False,
    vcs: Adapter | None = None,
) -> NewProjectResult:
    """Scaffold ``output_dir / options.name``.

    Never raises for scaffold failures; they are reported in the result.

    Args:
        options: Validated project options.
        output_dir: Parent directory of the new project.
        dry_run: Plan only, write nothing.
        vcs: Version-control adapter override (tests pass a mock).
    """
    project_root = Path(output_dir) / options.name
    result = NewProjectResult(
        project_name=options.name,
        project_root=project_root,
        language=options.language,
        build_tool=resolve_build_tool(options.build_tool, options.language),
        dry_run=dry_run,
        init_vcs=options.init_vcs,
    )

    try:
        check_path(project_root)
    except PathExistsError as e:
        result.error = str(e)
        result.error_kind = "path_exists"
        return result

    if dry_run:
        result.planned = plan_project(options).paths()
        return result

    try:
        result.written = generate_project(project_root, options, vcs=vcs)
    except VersionControlInitError as e:
        result.error = str(e)
        result.error_kind = "vcs"
        result.written = e.written
    except GenerationError as e:
        result.error = str(e)
        result.error_kind = "generation"
        result.written = e.written

    return result
