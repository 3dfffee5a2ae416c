from .builder import definition_from_config, provider_from_config, spiffe_provider
from .certificate import Uri, common_name, email_sans, load_certificates, uri_sans
from .claims import Definition, Provider
from .errors import ConfigurationError
from .locators import CommonNameLocator, EmailSanLocator, UriSanLocator
from .matchers import AllMatcher, PrefixMatcher, SchemeMatcher, SuffixMatcher, ValueKind
from .parsers import NoOpParser, SplitParser

__all__ = [
    "AllMatcher",
    "CommonNameLocator",
    "ConfigurationError",
    "Definition",
    "EmailSanLocator",
    "NoOpParser",
    "PrefixMatcher",
    "Provider",
    "SchemeMatcher",
    "SplitParser",
    "SuffixMatcher",
    "Uri",
    "UriSanLocator",
    "ValueKind",
    "common_name",
    "definition_from_config",
    "email_sans",
    "load_certificates",
    "provider_from_config",
    "spiffe_provider",
    "uri_sans",
]
