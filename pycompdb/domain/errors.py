import re


class ConfigError(Exception):
    """The project configuration can not be used."""


class PatternError(ConfigError):
    def __init__(self, pattern: str, error: re.error):
        super().__init__(f"invalid pattern '{pattern}': {error}")
        self.pattern = pattern
