from collections.abc import Iterable
import json
import os
from pathlib import Path
import tempfile

from returns.io import impure_safe

from pycompdb.domain.entities import CompilationEntry

COMPILE_COMMANDS = "compile_commands.json"


def to_json(entries: Iterable[CompilationEntry], command: bool = False) -> str:
    return json.dumps([entry.as_dict(command) for entry in entries], indent=2) + "\n"


def output_path(path: Path | str) -> Path:
    """An existing directory, or a path ending in a separator, receives 'compile_commands.json'."""
    if str(path).endswith(("/", os.sep)) or Path(path).is_dir():
        return Path(path, COMPILE_COMMANDS)
    return Path(path)


def _create_path(*args) -> Path:
    """Create path and mkdir's the parents to make sure the directory is valid."""
    p = Path(*args)
    p.parent.mkdir(exist_ok=True, parents=True)
    return p


@impure_safe
def write_compile_commands(
    entries: Iterable[CompilationEntry], path: Path | str, command: bool = False
) -> Path:
    """Writes the database to 'path'. The file is replaced in one step or not at all."""
    output = _create_path(output_path(path))
    content = to_json(entries, command)

    fd, tmp = tempfile.mkstemp(
        dir=output.parent, prefix=f".{output.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp, output)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise
    return output
