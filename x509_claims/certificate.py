"""
Read-only views over the certificate fields claims are located in, plus the
PEM decoding used to get certificates in the first place.

Nothing here verifies signatures or chains of trust. Certificates handed to
the claims pipeline are expected to be trusted already.
"""
import typing
from urllib.parse import urlsplit

from asn1crypto import pem
from cryptography import x509
from cryptography.x509.oid import NameOID

from .config import PEM_CERTIFICATE_TYPE


class Uri:
    """
    A URI SAN as written in the certificate, with its parsed parts.

    str() gives back the exact SAN value so claims are never rewritten.
    """

    __slots__ = ("value", "parts")

    def __init__(self, value: str):
        self.value = value
        self.parts = urlsplit(value)

    @property
    def scheme(self) -> str:
        return self.parts.scheme

    def __str__(self):
        return self.value

    def __repr__(self):
        return f"Uri({self.value!r})"

    def __eq__(self, other):
        if not isinstance(other, Uri):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)


def common_name(cert: x509.Certificate) -> str:
    """
    Subject common name, or "" when the subject has none.
    When several CN attributes are present the last one wins.
    """
    attributes = cert.subject.get_attributes_for_oid(NameOID.COMMON_NAME)
    if not attributes:
        return ""
    value = attributes[-1].value
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def _subject_alternative_names(cert: x509.Certificate) -> typing.Union[x509.SubjectAlternativeName, None]:
    try:
        return cert.extensions.get_extension_for_class(x509.SubjectAlternativeName).value
    except x509.ExtensionNotFound:
        return None


def uri_sans(cert: x509.Certificate) -> list[Uri]:
    """URI SANs in certificate order. Values that do not parse as URIs are skipped."""
    san = _subject_alternative_names(cert)
    if san is None:
        return []

    uris = []
    for value in san.get_values_for_type(x509.UniformResourceIdentifier):
        try:
            uris.append(Uri(value))
        except ValueError:
            continue
    return uris


def email_sans(cert: x509.Certificate) -> list[str]:
    """Email (RFC 822) SANs in certificate order."""
    san = _subject_alternative_names(cert)
    if san is None:
        return []
    return list(san.get_values_for_type(x509.RFC822Name))


def pem_blocks(pem_bytes: bytes) -> list[tuple[str, bytes]]:
    """
    Unarmor concatenated PEM data into (block type, DER bytes) pairs, in order.

    Text outside BEGIN/END lines is ignored. Decoding stops at the first block
    whose body is not valid base64; blocks before it are kept.
    """
    blocks = []
    try:
        for block_type, _headers, der_bytes in pem.unarmor(pem_bytes, multiple=True):
            blocks.append((block_type, der_bytes))
    except ValueError:
        pass
    return blocks


def load_certificates(pem_bytes: bytes) -> list[x509.Certificate]:
    """
    Decode every CERTIFICATE block in `pem_bytes`, in the order they appear.
    Other block types and blocks that fail to decode are discarded.
    """
    certs = []
    for block_type, der_bytes in pem_blocks(pem_bytes):
        if block_type != PEM_CERTIFICATE_TYPE:
            continue
        try:
            certs.append(x509.load_der_x509_certificate(der_bytes))
        except ValueError:
            continue
    return certs
