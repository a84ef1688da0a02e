from pathlib import Path
from typing import Iterator

from pycompdb.domain.entities import IncludeSpec, ProjectConfig, WorkspaceConfig
from pycompdb.domain.paths import normalize, walk
from pycompdb.domain.patterns import PatternSet


def _join(base: Path, directory: str) -> Path:
    path = Path(directory)
    return path if path.is_absolute() else base / path


def include_roots(project: ProjectConfig, workspace: WorkspaceConfig) -> tuple[Path, ...]:
    """Common roots relative to the project, then workspace roots relative to the workspace."""
    common = project.common.includes or IncludeSpec()
    local = workspace.includes or IncludeSpec()
    return (
        *(_join(project.root, d) for d in common.dirs),
        *(_join(project.workspace_dir(workspace), d) for d in local.dirs),
    )


def _directories(root: Path) -> Iterator[Path]:
    if not root.is_dir():
        return
    yield root
    yield from filter(
        lambda entry: entry.is_dir() and not entry.is_symlink(),
        walk(root),
    )


def resolve_includes(project: ProjectConfig, workspace: WorkspaceConfig) -> tuple[str, ...]:
    """Every directory under the include roots that is not ignored, in discovery order."""
    spec = (project.common.includes or IncludeSpec()).extend(workspace.includes)
    ignore = PatternSet(spec.ignore)
    return tuple(
        path
        for root in include_roots(project, workspace)
        for path in map(lambda d: normalize(d, project.root), _directories(root))
        if not ignore.matches(path)
    )
