Args = tuple[str, ...]
Cmd = tuple[str, ...]
Patterns = tuple[str, ...]
