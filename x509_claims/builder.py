from .claims import Definition, Provider
from .config import SPIFFE_SCHEME
from .errors import ConfigurationError
from .locators import CommonNameLocator, EmailSanLocator, UriSanLocator
from .matchers import AllMatcher, PrefixMatcher, SchemeMatcher, SuffixMatcher
from .parsers import NoOpParser, SplitParser

LOCATORS = {
    "common_name": CommonNameLocator,
    "san_uri": UriSanLocator,
    "san_email": EmailSanLocator,
}

MATCHERS = {
    "prefix": PrefixMatcher,
    "suffix": SuffixMatcher,
    "scheme": SchemeMatcher,
}


def _build_locator(value):
    locator_cls = LOCATORS.get(value) if isinstance(value, str) else None
    if locator_cls is None:
        raise ConfigurationError(f"unknown locator {value!r}")
    return locator_cls()


def _build_matcher(value):
    if value == "all":
        return AllMatcher()

    if not isinstance(value, dict) or len(value) != 1:
        raise ConfigurationError(f"matcher must be 'all' or a single-key mapping, got {value!r}")

    name, argument = next(iter(value.items()))
    if name not in MATCHERS:
        raise ConfigurationError(f"unknown matcher {name!r}")
    if not isinstance(argument, str):
        raise ConfigurationError(f"matcher {name!r} expects a string, got {argument!r}")
    return MATCHERS[name](argument)


def _build_parser(value):
    if value == "noop":
        return NoOpParser()

    if isinstance(value, dict) and set(value) == {"split"}:
        separator = value["split"]
        if not isinstance(separator, str):
            raise ConfigurationError(f"split separator must be a string, got {separator!r}")
        return SplitParser(separator)

    raise ConfigurationError(f"unknown parser {value!r}")


def definition_from_config(entry: dict) -> Definition:
    """
    Build one Definition from a mapping such as:

        {"locator": "san_email", "matcher": {"suffix": "@ziti.dev"}, "parser": {"split": "."}}

    Matchers: "all", {"prefix": P}, {"suffix": S}, {"scheme": S}.
    Parsers: "noop", {"split": SEP}.
    """
    if not isinstance(entry, dict):
        raise ConfigurationError(f"expected a mapping, got {type(entry).__name__}")

    for field in ("locator", "matcher", "parser"):
        if field not in entry:
            raise ConfigurationError(f"missing field: {field}")

    return Definition(
        _build_locator(entry["locator"]),
        _build_matcher(entry["matcher"]),
        _build_parser(entry["parser"]),
    )


def provider_from_config(entries) -> Provider:
    """Build a Provider from a list of definition mappings, keeping their order."""
    definitions = []
    for index, entry in enumerate(entries):
        try:
            definitions.append(definition_from_config(entry))
        except ConfigurationError as e:
            raise ConfigurationError(f"definition {index}: {e}") from e
    return Provider(definitions)


def spiffe_provider() -> Provider:
    """Provider returning every URI SAN with the `spiffe` scheme."""
    return Provider([
        Definition(UriSanLocator(), SchemeMatcher(SPIFFE_SCHEME), NoOpParser()),
    ])
