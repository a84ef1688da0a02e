from pycompdb.domain.entities import OptionSpec
from pycompdb.types import Args


def compose_options(common: OptionSpec | None, workspace: OptionSpec | None) -> Args:
    """Common flags followed by workspace flags. Repeated flags are kept."""
    return (common or OptionSpec()).extend(workspace).flags
