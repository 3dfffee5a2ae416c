import datetime

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID


@pytest.fixture(scope="session")
def signing_key():
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture
def make_cert(signing_key):
    """Build a self-signed certificate with the given subject CN and SANs."""

    def _make_cert(common_name=None, uris=(), emails=()):
        attributes = [x509.NameAttribute(NameOID.ORGANIZATION_NAME, "x509-claims tests")]
        if common_name is not None:
            attributes.append(x509.NameAttribute(NameOID.COMMON_NAME, common_name))
        name = x509.Name(attributes)

        now = datetime.datetime.now(datetime.timezone.utc)
        builder = (
            x509.CertificateBuilder()
            .subject_name(name)
            .issuer_name(name)
            .public_key(signing_key.public_key())
            .serial_number(x509.random_serial_number())
            .not_valid_before(now - datetime.timedelta(days=1))
            .not_valid_after(now + datetime.timedelta(days=30))
            .add_extension(x509.BasicConstraints(ca=False, path_length=None), critical=True)
        )

        names = [x509.UniformResourceIdentifier(u) for u in uris]
        names += [x509.RFC822Name(e) for e in emails]
        if names:
            builder = builder.add_extension(x509.SubjectAlternativeName(names), critical=False)

        return builder.sign(signing_key, hashes.SHA256())

    return _make_cert


@pytest.fixture
def to_pem():
    def _to_pem(*certs):
        return b"".join(c.public_bytes(serialization.Encoding.PEM) for c in certs)

    return _to_pem
