from collections.abc import Iterable
from pathlib import Path

from returns.io import IOResultE, impure_safe

from pycompdb.domain.builder import build_compilation_database
from pycompdb.domain.config import load_config
from pycompdb.domain.database import write_compile_commands
from pycompdb.domain.entities import CompilationEntry, ProjectConfig


def display_config(project: ProjectConfig) -> ProjectConfig:
    common = project.common
    print(f"[pycompdb] root: {project.root}")
    print(f"  cc:  {' '.join(project.cc.command())}")
    print(f"  cxx: {' '.join(project.cxx.command())}")
    print(f"  common targets:  {common.targets}")
    print(f"  common includes: {common.includes}")
    print(f"  common options:  {common.options}")
    for workspace in project.workspaces:
        print(f"  [workspace] '{workspace.dir}'")
        print(f"    targets:  {workspace.targets}")
        print(f"    includes: {workspace.includes}")
        print(f"    options:  {workspace.options}")
    return project


def display(entries: Iterable[CompilationEntry]) -> tuple[CompilationEntry, ...]:
    entries = tuple(entries)
    for n, entry in enumerate(entries):
        print(f"  [{(n + 1) / len(entries):5.0%} ]: {' '.join(entry.arguments)}")
    return entries


def generate(args) -> IOResultE[tuple[Path, int]]:
    def write(entries: tuple[CompilationEntry, ...]) -> IOResultE[tuple[Path, int]]:
        return write_compile_commands(entries, args.output, args.command).map(
            lambda path: (path, len(entries))
        )

    return (
        load_config(args.config)
        .map(display_config if args.verbose else lambda project: project)
        .bind(impure_safe(build_compilation_database))
        .map(display if args.verbose else lambda entries: entries)
        .bind(write)
    )
