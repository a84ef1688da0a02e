"""Tests for the source file selection."""

from __future__ import annotations

from pycompdb.domain.entities import (
    CommonConfig,
    ProjectConfig,
    TargetSpec,
    WorkspaceConfig,
)
from pycompdb.domain.targets import resolve_targets


def test_match_and_ignore(project_builder) -> None:
    for name in ("app/a.c", "app/b_test.c", "app/c.h"):
        project_builder.file(name)
    workspace = WorkspaceConfig(
        dir="app", targets=TargetSpec(match=(r".*\.c$",), ignore=(r".*_test\.c$",))
    )
    project = ProjectConfig(root=project_builder.root, workspaces=(workspace,))

    assert resolve_targets(project, workspace) == ("app/a.c",)


def test_common_and_workspace_patterns_are_merged(project_builder) -> None:
    for name in ("app/a.c", "app/b.cpp", "app/gen/c.c", "app/d.h"):
        project_builder.file(name)
    workspace = WorkspaceConfig(
        dir="app", targets=TargetSpec(match=(r"\.cpp$",), ignore=(r"/gen/",))
    )
    project = ProjectConfig(
        root=project_builder.root,
        common=CommonConfig(targets=TargetSpec(match=(r"\.c$",))),
        workspaces=(workspace,),
    )

    assert resolve_targets(project, workspace) == ("app/a.c", "app/b.cpp")


def test_only_the_workspace_is_walked(project_builder) -> None:
    project_builder.file("app/a.c")
    project_builder.file("lib/b.c")
    workspace = WorkspaceConfig(dir="app", targets=TargetSpec(match=(r"\.c$",)))
    project = ProjectConfig(root=project_builder.root, workspaces=(workspace,))

    assert resolve_targets(project, workspace) == ("app/a.c",)


def test_paths_are_root_relative_in_walk_order(project_builder) -> None:
    for name in ("app/z.c", "app/sub/y.c", "app/a.c"):
        project_builder.file(name)
    workspace = WorkspaceConfig(dir="app", targets=TargetSpec(match=(r"\.c$",)))
    project = ProjectConfig(root=project_builder.root, workspaces=(workspace,))

    assert resolve_targets(project, workspace) == (
        "app/a.c",
        "app/sub/y.c",
        "app/z.c",
    )


def test_patterns_see_the_root_relative_path(project_builder) -> None:
    project_builder.file("app/src/a.c")
    project_builder.file("app/test/b.c")
    workspace = WorkspaceConfig(
        dir="app", targets=TargetSpec(match=(r"^app/src/",))
    )
    project = ProjectConfig(root=project_builder.root, workspaces=(workspace,))

    assert resolve_targets(project, workspace) == ("app/src/a.c",)


def test_empty_match_list_selects_nothing(project_builder) -> None:
    project_builder.file("app/a.c")
    workspace = WorkspaceConfig(dir="app", targets=TargetSpec(ignore=(r"\.h$",)))
    project = ProjectConfig(root=project_builder.root, workspaces=(workspace,))

    assert resolve_targets(project, workspace) == ()


def test_missing_workspace_directory(project_builder) -> None:
    workspace = WorkspaceConfig(dir="missing", targets=TargetSpec(match=(".*",)))
    project = ProjectConfig(root=project_builder.root, workspaces=(workspace,))

    assert resolve_targets(project, workspace) == ()
