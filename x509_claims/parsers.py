from .errors import ConfigurationError


class NoOpParser:
    """Returns the matched value as the only claim."""

    __slots__ = ()

    def parse(self, value: str) -> list[str]:
        return [value]

    def __repr__(self):
        return "NoOpParser()"


class SplitParser:
    """
    Splits the matched value on every occurrence of `separator`.

    Empty segments are kept, so "a..b" gives ["a", "", "b"] and "" gives [""].
    """

    __slots__ = ("separator",)

    def __init__(self, separator: str):
        if not separator:
            raise ConfigurationError("SplitParser separator must not be empty")
        self.separator = separator

    def parse(self, value: str) -> list[str]:
        return value.split(self.separator)

    def __repr__(self):
        return f"SplitParser(separator={self.separator!r})"
