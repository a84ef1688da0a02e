from pycompdb.domain.entities import ProjectConfig, TargetSpec, WorkspaceConfig
from pycompdb.domain.paths import normalize, walk
from pycompdb.domain.patterns import PatternSet


def resolve_targets(project: ProjectConfig, workspace: WorkspaceConfig) -> tuple[str, ...]:
    """Root relative paths under the workspace that match and are not ignored."""
    spec = (project.common.targets or TargetSpec()).extend(workspace.targets)
    match = PatternSet(spec.match)
    ignore = PatternSet(spec.ignore)

    # an empty match set selects nothing, skip the walk
    if not match:
        return ()

    return tuple(
        path
        for path in map(
            lambda entry: normalize(entry, project.root),
            walk(project.workspace_dir(workspace)),
        )
        if match.matches(path) and not ignore.matches(path)
    )
