"""
Declarative extraction of string claims from x509 certificates.

A Provider holds an ordered list of Definitions. Each Definition pairs a
Locator (which certificate field to read), a Matcher (which values in that
field are claims, and how to trim them) and a Parser (how one matched value
becomes one or more claims).

Example, returning every SPIFFE ID plus dotted claims from an email SAN:

    provider = Provider([
        Definition(UriSanLocator(), SchemeMatcher("spiffe"), NoOpParser()),
        Definition(EmailSanLocator(), SuffixMatcher("@my.domain.dev"), SplitParser(".")),
    ])
    provider.claims(cert)

Certificates are never verified here. Only pass certificates that are already
trusted.
"""
from cryptography import x509

from .errors import ConfigurationError
from .matchers import ValueKind


def _check_component(component, method: str, role: str):
    if not callable(getattr(component, method, None)):
        raise ConfigurationError(f"{role} {component!r} has no {method}() method")


def _kind_of(component, role: str) -> ValueKind:
    kind = getattr(component, "kind", None)
    if not isinstance(kind, ValueKind):
        raise ConfigurationError(f"{role} {component!r} does not declare a ValueKind, got {kind!r}")
    return kind


class Definition:
    """
    Locator -> Matcher -> Parser rule.

    The matcher must accept the kind of value the locator produces; a matcher
    declaring ValueKind.ANY is accepted by every locator. `kind`, when given,
    must agree with the locator too. The parts cannot be swapped afterwards.
    """

    __slots__ = ("locator", "matcher", "parser", "kind")

    def __init__(self, locator, matcher, parser, kind: ValueKind = None):
        _check_component(locator, "locate", "locator")
        _check_component(matcher, "match", "matcher")
        _check_component(parser, "parse", "parser")

        locator_kind = _kind_of(locator, "locator")
        if locator_kind is ValueKind.ANY:
            raise ConfigurationError(f"locator {locator!r} must produce a concrete value kind")

        if kind is not None:
            if not isinstance(kind, ValueKind):
                raise ConfigurationError(f"definition kind must be a ValueKind, got {kind!r}")
            if kind is not locator_kind:
                raise ConfigurationError(
                    f"definition declared for {kind.value} values but {locator!r} produces {locator_kind.value} values"
                )

        matcher_kind = _kind_of(matcher, "matcher")
        if matcher_kind is not ValueKind.ANY and matcher_kind is not locator_kind:
            raise ConfigurationError(
                f"{matcher!r} matches {matcher_kind.value} values but {locator!r} produces {locator_kind.value} values"
            )

        object.__setattr__(self, "locator", locator)
        object.__setattr__(self, "matcher", matcher)
        object.__setattr__(self, "parser", parser)
        object.__setattr__(self, "kind", locator_kind)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is read-only")

    def claims(self, cert: x509.Certificate) -> list[str]:
        result = []
        for value in self.locator.locate(cert, self.matcher):
            result.extend(self.parser.parse(value))
        return result

    def __repr__(self):
        return f"Definition({self.locator!r}, {self.matcher!r}, {self.parser!r})"


class Provider:
    """Runs each definition in order and concatenates their claims."""

    __slots__ = ("definitions",)

    def __init__(self, definitions=()):
        definitions = tuple(definitions)
        for definition in definitions:
            _check_component(definition, "claims", "definition")
        object.__setattr__(self, "definitions", definitions)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is read-only")

    def claims(self, cert: x509.Certificate) -> list[str]:
        result = []
        for definition in self.definitions:
            result.extend(definition.claims(cert))
        return result

    def __repr__(self):
        return f"Provider({list(self.definitions)!r})"
