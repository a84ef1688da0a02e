from dataclasses import dataclass, field
from pathlib import Path
import shlex

from pycompdb.types import Args, Cmd, Patterns


@dataclass(frozen=True)
class Compiler:
    cmd: str
    args: Args = ()

    def command(self) -> Cmd:
        return (self.cmd, *self.args)


@dataclass(frozen=True)
class TargetSpec:
    match: Patterns = ()
    ignore: Patterns = ()

    def extend(self, other: "TargetSpec | None") -> "TargetSpec":
        if other is None:
            return self
        return TargetSpec(
            match=(*self.match, *other.match),
            ignore=(*self.ignore, *other.ignore),
        )


@dataclass(frozen=True)
class IncludeSpec:
    dirs: tuple[str, ...] = ()
    ignore: Patterns = ()

    def extend(self, other: "IncludeSpec | None") -> "IncludeSpec":
        if other is None:
            return self
        return IncludeSpec(
            dirs=(*self.dirs, *other.dirs),
            ignore=(*self.ignore, *other.ignore),
        )


@dataclass(frozen=True)
class OptionSpec:
    flags: Args = ()

    def extend(self, other: "OptionSpec | None") -> "OptionSpec":
        if other is None:
            return self
        return OptionSpec(flags=(*self.flags, *other.flags))


@dataclass(frozen=True)
class CommonConfig:
    targets: TargetSpec | None = None
    includes: IncludeSpec | None = None
    options: OptionSpec | None = None


@dataclass(frozen=True)
class WorkspaceConfig:
    dir: str
    targets: TargetSpec | None = None
    includes: IncludeSpec | None = None
    options: OptionSpec | None = None

    cc: Compiler | None = None
    cxx: Compiler | None = None


@dataclass(frozen=True)
class ProjectConfig:
    root: Path
    cc: Compiler = Compiler("gcc")
    cxx: Compiler = Compiler("g++")
    common: CommonConfig = field(default_factory=CommonConfig)
    workspaces: tuple[WorkspaceConfig, ...] = ()

    def workspace_dir(self, workspace: WorkspaceConfig) -> Path:
        return self.root / workspace.dir

    def compilers(self, workspace: WorkspaceConfig) -> tuple[Compiler, Compiler]:
        """The (C, C++) compilers in effect for 'workspace'."""
        return (workspace.cc or self.cc, workspace.cxx or self.cxx)


@dataclass(frozen=True)
class CompilationEntry:
    """One object of the compilation database."""

    directory: str
    arguments: Args
    file: str

    def as_dict(self, command: bool = False) -> dict[str, str | list[str]]:
        if command:
            return {
                "directory": self.directory,
                "command": shlex.join(self.arguments),
                "file": self.file,
            }
        return {
            "directory": self.directory,
            "arguments": list(self.arguments),
            "file": self.file,
        }
