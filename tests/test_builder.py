import pytest

from x509_claims.builder import definition_from_config, provider_from_config, spiffe_provider
from x509_claims.errors import ConfigurationError
from x509_claims.locators import EmailSanLocator
from x509_claims.matchers import AllMatcher, SuffixMatcher
from x509_claims.parsers import NoOpParser, SplitParser


def test_definition_from_config():
    definition = definition_from_config(
        {"locator": "san_email", "matcher": {"suffix": "@ziti.dev"}, "parser": {"split": "."}}
    )

    assert isinstance(definition.locator, EmailSanLocator)
    assert isinstance(definition.matcher, SuffixMatcher)
    assert definition.matcher.suffix == "@ziti.dev"
    assert isinstance(definition.parser, SplitParser)
    assert definition.parser.separator == "."


def test_definition_from_config_all_and_noop():
    definition = definition_from_config({"locator": "common_name", "matcher": "all", "parser": "noop"})

    assert isinstance(definition.matcher, AllMatcher)
    assert isinstance(definition.parser, NoOpParser)


def test_provider_from_config_keeps_order(make_cert):
    provider = provider_from_config([
        {"locator": "common_name", "matcher": {"prefix": "SENTINEL:"}, "parser": {"split": "."}},
        {"locator": "san_uri", "matcher": {"scheme": "spiffe"}, "parser": "noop"},
        {"locator": "san_email", "matcher": {"suffix": "@ziti.dev"}, "parser": {"split": "."}},
    ])
    cert = make_cert(
        common_name="SENTINEL:a.b",
        uris=["spiffe://td/id"],
        emails=["c.d@ziti.dev"],
    )

    assert provider.claims(cert) == ["a", "b", "spiffe://td/id", "c", "d"]


def test_provider_from_empty_config(make_cert):
    assert provider_from_config([]).claims(make_cert(common_name="x")) == []


@pytest.mark.parametrize("entry, message", [
    ({"matcher": "all", "parser": "noop"}, "missing field: locator"),
    ({"locator": "common_name", "parser": "noop"}, "missing field: matcher"),
    ({"locator": "common_name", "matcher": "all"}, "missing field: parser"),
    ({"locator": "dns", "matcher": "all", "parser": "noop"}, "unknown locator"),
    ({"locator": ["san_uri"], "matcher": "all", "parser": "noop"}, "unknown locator"),
    ({"locator": "san_uri", "matcher": {"regex": ".*"}, "parser": "noop"}, "unknown matcher"),
    ({"locator": "san_uri", "matcher": {"scheme": 1}, "parser": "noop"}, "expects a string"),
    ({"locator": "san_uri", "matcher": {"scheme": "a", "prefix": "b"}, "parser": "noop"}, "single-key"),
    ({"locator": "san_uri", "matcher": "all", "parser": "lines"}, "unknown parser"),
    ({"locator": "san_uri", "matcher": "all", "parser": {"split": ""}}, "must not be empty"),
    ({"locator": "san_uri", "matcher": {"prefix": "x"}, "parser": "noop"}, "produces uri values"),
    ("san_uri", "expected a mapping"),
])
def test_invalid_config_entries(entry, message):
    with pytest.raises(ConfigurationError, match=message):
        definition_from_config(entry)


def test_provider_from_config_names_the_bad_entry():
    entries = [
        {"locator": "san_uri", "matcher": {"scheme": "spiffe"}, "parser": "noop"},
        {"locator": "san_email", "matcher": {"scheme": "spiffe"}, "parser": "noop"},
    ]
    with pytest.raises(ConfigurationError, match="^definition 1: "):
        provider_from_config(entries)


def test_spiffe_provider(make_cert):
    cert = make_cert(uris=["spiffe://td/id", "nomatch://x"])
    assert spiffe_provider().claims(cert) == ["spiffe://td/id"]
