from itertools import chain

from pycompdb.domain.compiler import compile, select_compiler
from pycompdb.domain.entities import CompilationEntry, ProjectConfig, WorkspaceConfig
from pycompdb.domain.includes import resolve_includes
from pycompdb.domain.options import compose_options
from pycompdb.domain.targets import resolve_targets


def build_workspace(
    project: ProjectConfig, workspace: WorkspaceConfig
) -> tuple[CompilationEntry, ...]:
    """One entry per file selected in 'workspace', in walk order."""
    directory = project.root.as_posix()
    includes = resolve_includes(project, workspace)
    options = compose_options(project.common.options, workspace.options)
    compilers = project.compilers(workspace)

    return tuple(
        compile(
            select_compiler(file, compilers),
            includes,
            options,
            file,
            directory,
        )
        for file in resolve_targets(project, workspace)
    )


def build_compilation_database(project: ProjectConfig) -> tuple[CompilationEntry, ...]:
    return tuple(
        chain.from_iterable(
            build_workspace(project, workspace) for workspace in project.workspaces
        )
    )
