from collections.abc import Iterable
from pathlib import PurePosixPath

from pycompdb.domain.entities import CompilationEntry, Compiler
from pycompdb.types import Args

CXX_EXTENSIONS = frozenset(("cc", "CC", "cpp", "CPP", "cxx", "CXX"))


def select_compiler(file: str, compilers: tuple[Compiler, Compiler]) -> Compiler:
    """Picks the C++ compiler for C++ extensions and the C compiler for everything else"""
    cc, cxx = compilers
    return cxx if PurePosixPath(file).suffix[1:] in CXX_EXTENSIONS else cc


def compile(
    compiler: Compiler,
    includes: Iterable[str],
    options: Args,
    file: str,
    directory: str,
) -> CompilationEntry:
    return CompilationEntry(
        directory=directory,
        arguments=(
            *compiler.command(),
            *map(lambda i: f"-I{i}", includes),
            *options,
            "-c",
            file,
        ),
        file=file,
    )
