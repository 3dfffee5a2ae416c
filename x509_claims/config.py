# x509_claims/config.py

PROGRAM_NAME = "x509-claims"
SPIFFE_SCHEME = "spiffe"
PEM_CERTIFICATE_TYPE = "CERTIFICATE"
