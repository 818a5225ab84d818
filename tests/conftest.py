"""
Shared fixtures: throwaway RSA key pairs written as PKCS#1 PEM files.
"""

from datetime import datetime, timezone

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from svctoken import KeyStore, TokenService
from svctoken.utils.time import FrozenClock

AUDIENCE = "svc.billing"


def private_pem(private_key) -> bytes:
    """PKCS#1 ("RSA PRIVATE KEY") PEM of a private key."""
    return private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )


def public_pem(private_key) -> bytes:
    """PKCS#1 ("RSA PUBLIC KEY") PEM of the matching public key."""
    return private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.PKCS1,
    )


@pytest.fixture(scope="session")
def rsa_private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def other_private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def key_files(tmp_path, rsa_private_key):
    """Paths of the private and public key files."""
    prv_path = tmp_path / "rsa_prv.key"
    pub_path = tmp_path / "rsa_pub.key"
    prv_path.write_bytes(private_pem(rsa_private_key))
    pub_path.write_bytes(public_pem(rsa_private_key))
    return str(prv_path), str(pub_path)


@pytest.fixture
def key_store(key_files):
    prv_path, pub_path = key_files
    store = KeyStore()
    store.load_signing_key(prv_path)
    store.load_verification_key(pub_path)
    return store


@pytest.fixture
def clock():
    return FrozenClock(datetime(2026, 3, 1, 12, 0, 0, 250000, tzinfo=timezone.utc))


@pytest.fixture
def service(key_store, clock):
    return TokenService(key_store, clock=clock)
