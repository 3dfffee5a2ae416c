from cryptography import x509

from .certificate import common_name, email_sans, uri_sans
from .matchers import ValueKind


class CommonNameLocator:
    """Offers the subject common name to the matcher. Yields zero or one value."""

    __slots__ = ()
    kind = ValueKind.STRING

    def locate(self, cert: x509.Certificate, matcher) -> list[str]:
        value, ok = matcher.match(common_name(cert))
        if ok:
            return [value]
        return []

    def __repr__(self):
        return "CommonNameLocator()"


class UriSanLocator:
    """Offers each URI SAN to the matcher and returns the matched URIs exactly as written."""

    __slots__ = ()
    kind = ValueKind.URI

    def locate(self, cert: x509.Certificate, matcher) -> list[str]:
        result = []
        for uri in uri_sans(cert):
            value, ok = matcher.match(uri)
            if ok:
                result.append(str(value))
        return result

    def __repr__(self):
        return "UriSanLocator()"


class EmailSanLocator:
    __slots__ = ()
    kind = ValueKind.STRING

    def locate(self, cert: x509.Certificate, matcher) -> list[str]:
        result = []
        for email in email_sans(cert):
            value, ok = matcher.match(email)
            if ok:
                result.append(value)
        return result

    def __repr__(self):
        return "EmailSanLocator()"
