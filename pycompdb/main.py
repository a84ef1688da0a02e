import sys

from returns.io import IOFailure
from returns.unsafe import unsafe_perform_io

from pycompdb.args import ArgsConfig, args_parse
from pycompdb.commands import generate


def pycompdb(args: ArgsConfig) -> int:
    result = generate(args)
    if isinstance(result, IOFailure):
        error = unsafe_perform_io(result.failure())
        print(f"[pycompdb] Error: {error}", file=sys.stderr)
        return 1

    path, count = unsafe_perform_io(result.unwrap())
    print(f"[pycompdb] wrote {count} entries to '{path}'")
    return 0


def main():
    sys.exit(pycompdb(args_parse(sys.argv[1:])))
