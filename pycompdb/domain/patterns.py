from collections.abc import Iterable
import re

from pycompdb.domain.errors import PatternError


def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PatternError(pattern, e) from e


class PatternSet:
    """Ordered set of regular expressions. A path matches if any of them is found in it."""

    def __init__(self, patterns: Iterable[str]):
        self.patterns = tuple(map(_compile, patterns))

    def __len__(self) -> int:
        return len(self.patterns)

    def matches(self, path: str) -> bool:
        return any(pattern.search(path) for pattern in self.patterns)
