import json
import os
from pathlib import Path
from typing import Any, NotRequired, TypedDict

import toml
from returns.io import IOResultE, impure_safe

from pycompdb.domain.entities import (
    CommonConfig,
    Compiler,
    IncludeSpec,
    OptionSpec,
    ProjectConfig,
    TargetSpec,
    WorkspaceConfig,
)
from pycompdb.domain.errors import ConfigError
from pycompdb.domain.patterns import PatternSet


class CmdConfig(TypedDict):
    cmd: str
    args: NotRequired[list[str]]


class TargetsConfig(TypedDict, total=False):
    match: list[str]
    ignore: list[str]


class IncludesConfig(TypedDict, total=False):
    dirs: list[str]
    ignore: list[str]


class OptionsConfig(TypedDict, total=False):
    flags: list[str]


class ScopeConfig(TypedDict, total=False):
    targets: TargetsConfig
    includes: IncludesConfig
    options: OptionsConfig


class WorkspaceEntry(ScopeConfig, total=False):
    dir: str
    cc: str | CmdConfig
    cxx: str | CmdConfig


class ProjectSection(TypedDict, total=False):
    root: str
    cc: str | CmdConfig
    cxx: str | CmdConfig


class Config(TypedDict, total=False):
    project: ProjectSection
    common: ScopeConfig
    workspaces: list[WorkspaceEntry]


@impure_safe
def load_config_file(config_path: Path) -> Config:
    """Reads a TOML configuration, or JSON if the file ends with '.json'."""
    text = config_path.read_text(encoding="utf-8")
    if config_path.suffix == ".json":
        return json.loads(text)
    return toml.loads(text)  # type: ignore


def _table(config: Any, key: str, where: str) -> dict[str, Any] | None:
    value = config.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ConfigError(f"'{where}{key}' must be a table")
    return value


def _strings(config: dict[str, Any], key: str, where: str) -> tuple[str, ...]:
    value = config.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{where}{key}' must be a list of strings")
    return tuple(value)


def _patterns(config: dict[str, Any], key: str, where: str) -> tuple[str, ...]:
    patterns = _strings(config, key, where)
    # fail on a broken regex before anything is written
    PatternSet(patterns)
    return patterns


def create_compiler(value: Any, where: str) -> Compiler:
    match value:
        case str(cmd) if cmd:
            return Compiler(cmd)
        case {"cmd": str(cmd), **rest} if cmd and set(rest) <= {"args"}:
            return Compiler(cmd, _strings(rest, "args", f"{where}."))
        case _:
            raise ConfigError(
                f"'{where}' must be a command or a table with 'cmd' and 'args'"
            )


def create_targets(config: dict[str, Any], where: str) -> TargetSpec | None:
    if (table := _table(config, "targets", where)) is None:
        return None
    where = f"{where}targets."
    return TargetSpec(
        match=_patterns(table, "match", where),
        ignore=_patterns(table, "ignore", where),
    )


def create_includes(config: dict[str, Any], where: str) -> IncludeSpec | None:
    if (table := _table(config, "includes", where)) is None:
        return None
    where = f"{where}includes."
    return IncludeSpec(
        dirs=_strings(table, "dirs", where),
        ignore=_patterns(table, "ignore", where),
    )


def create_options(config: dict[str, Any], where: str) -> OptionSpec | None:
    if (table := _table(config, "options", where)) is None:
        return None
    return OptionSpec(flags=_strings(table, "flags", f"{where}options."))


def create_common_config(config: dict[str, Any]) -> CommonConfig:
    return CommonConfig(
        targets=create_targets(config, "common."),
        includes=create_includes(config, "common."),
        options=create_options(config, "common."),
    )


def create_workspace_config(config: Any, index: int) -> WorkspaceConfig:
    where = f"workspaces[{index}]."
    if not isinstance(config, dict):
        raise ConfigError(f"'workspaces[{index}]' must be a table")
    if not isinstance(config.get("dir"), str):
        raise ConfigError(f"'{where}dir' is required")

    return WorkspaceConfig(
        dir=config["dir"],
        targets=create_targets(config, where),
        includes=create_includes(config, where),
        options=create_options(config, where),
        cc=create_compiler(config["cc"], f"{where}cc") if "cc" in config else None,
        cxx=create_compiler(config["cxx"], f"{where}cxx") if "cxx" in config else None,
    )


def parse_config(config: Config, base: Path) -> ProjectConfig:
    """Builds the project model. A relative 'root' is resolved against 'base'."""
    if not isinstance(config, dict):
        raise ConfigError("the configuration must be a table")

    project = _table(config, "project", "") or {}
    root = project.get("root", ".")
    if not isinstance(root, str):
        raise ConfigError("'project.root' must be a string")

    workspaces = config.get("workspaces", [])
    if not isinstance(workspaces, list):
        raise ConfigError("'workspaces' must be a list of tables")

    return ProjectConfig(
        root=Path(os.path.normpath((base / root).absolute())),
        cc=create_compiler(project.get("cc", "gcc"), "project.cc"),
        cxx=create_compiler(project.get("cxx", "g++"), "project.cxx"),
        common=create_common_config(_table(config, "common", "") or {}),
        workspaces=tuple(
            create_workspace_config(w, n) for n, w in enumerate(workspaces)
        ),
    )


def load_config(config_path: Path) -> IOResultE[ProjectConfig]:
    return load_config_file(config_path).bind(
        impure_safe(lambda config: parse_config(config, config_path.parent))
    )
