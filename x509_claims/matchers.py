import enum

from .certificate import Uri


class ValueKind(enum.Enum):
    """The type of value a locator hands to its matcher."""

    STRING = "string"
    URI = "uri"
    # only valid on matchers; pairs with every locator
    ANY = "any"


class PrefixMatcher:
    """Matches strings starting with `prefix` and strips it."""

    __slots__ = ("prefix",)
    kind = ValueKind.STRING

    def __init__(self, prefix: str):
        self.prefix = prefix

    def match(self, value: str) -> tuple[str, bool]:
        if value.startswith(self.prefix):
            return value[len(self.prefix):], True
        return value, False

    def __repr__(self):
        return f"PrefixMatcher(prefix={self.prefix!r})"


class SuffixMatcher:
    """Matches strings ending with `suffix` and strips it."""

    __slots__ = ("suffix",)
    kind = ValueKind.STRING

    def __init__(self, suffix: str):
        self.suffix = suffix

    def match(self, value: str) -> tuple[str, bool]:
        # "abc"[:-0] would be empty
        if not self.suffix:
            return value, True
        if value.endswith(self.suffix):
            return value[:-len(self.suffix)], True
        return value, False

    def __repr__(self):
        return f"SuffixMatcher(suffix={self.suffix!r})"


class SchemeMatcher:
    """Matches URIs whose scheme equals `scheme` exactly. The URI is not modified."""

    __slots__ = ("scheme",)
    kind = ValueKind.URI

    def __init__(self, scheme: str):
        self.scheme = scheme

    def match(self, uri: Uri) -> tuple[Uri, bool]:
        return uri, uri.scheme == self.scheme

    def __repr__(self):
        return f"SchemeMatcher(scheme={self.scheme!r})"


class AllMatcher:
    """
    Matches every value unchanged.

    The default ValueKind.ANY pairs with any locator. Pass a kind to pin it to one.
    """

    __slots__ = ("kind",)

    def __init__(self, kind: ValueKind = ValueKind.ANY):
        self.kind = kind

    def match(self, value):
        return value, True

    def __repr__(self):
        return f"AllMatcher(kind={self.kind})"
