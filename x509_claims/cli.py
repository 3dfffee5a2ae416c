"""
Example driver for the claims package: prints the SPIFFE IDs found in every
certificate of a PEM file.
"""
import os
import sys

from .builder import spiffe_provider
from .certificate import load_certificates
from .config import PROGRAM_NAME


def print_usage():
    print()
    print("This program is an example implementation of x509-claims. "
          "It parses out SPIFFE IDs from x509 Certificates.\n")
    print("Usage:")
    print(f"\t{PROGRAM_NAME} [-h] <cert-pem-file>\n")


def read_pem_file(path: str) -> bytes:
    """Read the PEM file at `path`, exiting with status 1 on any read problem."""
    if os.path.isdir(path):
        print(f"error: error reading file {path}: is not a file")
        sys.exit(1)

    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        print(f"error: error reading file {path}: {e}")
        sys.exit(1)

    if len(data) == 0:
        print(f"error: error reading file {path}: 0 bytes read")
        sys.exit(1)

    return data


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)

    if len(args) != 1:
        print(f"error: unexpected argument count, expected 1 got {len(args)}")
        print_usage()
        sys.exit(1)

    if args[0] == "-h":
        print_usage()
        sys.exit(0)

    certs = load_certificates(read_pem_file(args[0]))

    if not certs:
        print("error: error parsing certificates, expected at least 1 certificate got: 0")
        sys.exit(1)

    print(f"...parsed {len(certs)} certificates")

    provider = spiffe_provider()

    for i, cert in enumerate(certs, start=1):
        print(f"\n--- cert {i}")
        for claim in provider.claims(cert):
            print(f"\t{claim}")


if __name__ == "__main__":
    main()
