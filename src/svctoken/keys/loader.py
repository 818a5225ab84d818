"""
PKCS#1 RSA key loading.
Keys are read from PEM files; PKCS#8, encrypted and non-RSA keys are rejected.
"""

from pathlib import Path
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import (
    RSAPrivateKey,
    RSAPublicKey,
)

from ..config import PRIVATE_KEY_PEM_LABEL, PUBLIC_KEY_PEM_LABEL
from ..errors import EmptyKeyPathError, KeyFileError, KeyParseError


def read_key_file(path: str) -> bytes:
    """
    Read raw key file contents.

    Args:
        path: Path to PEM file

    Returns:
        File contents

    Raises:
        EmptyKeyPathError: If path is empty
        KeyFileError: If file cannot be read (missing, directory, permissions)
    """
    if path == "" or path is None:
        raise EmptyKeyPathError()

    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise KeyFileError(f"Cannot read key file {path}: {e}") from e


def load_private_key_pem(pem_data: bytes) -> RSAPrivateKey:
    """
    Load an RSA private key from PKCS#1 PEM.

    Args:
        pem_data: PEM-encoded "RSA PRIVATE KEY" block

    Returns:
        RSAPrivateKey object

    Raises:
        KeyParseError: If PEM is invalid or not an unencrypted PKCS#1 RSA key
    """
    if PRIVATE_KEY_PEM_LABEL not in pem_data:
        raise KeyParseError("PEM does not contain a PKCS#1 RSA private key")

    try:
        private_key = serialization.load_pem_private_key(
            pem_data,
            password=None,
        )
    except (ValueError, TypeError) as e:
        raise KeyParseError(f"Invalid PEM data: {e}") from e
    except UnsupportedAlgorithm as e:
        raise KeyParseError(f"Unsupported key: {e}") from e

    if not isinstance(private_key, RSAPrivateKey):
        raise KeyParseError("PEM does not contain an RSA key")
    return private_key


def load_public_key_pem(pem_data: bytes) -> RSAPublicKey:
    """
    Load an RSA public key from PKCS#1 PEM.

    Args:
        pem_data: PEM-encoded "RSA PUBLIC KEY" block

    Returns:
        RSAPublicKey object

    Raises:
        KeyParseError: If PEM is invalid or not a PKCS#1 RSA key
    """
    if PUBLIC_KEY_PEM_LABEL not in pem_data:
        raise KeyParseError("PEM does not contain a PKCS#1 RSA public key")

    try:
        public_key = serialization.load_pem_public_key(pem_data)
    except (ValueError, TypeError) as e:
        raise KeyParseError(f"Invalid PEM data: {e}") from e
    except UnsupportedAlgorithm as e:
        raise KeyParseError(f"Unsupported key: {e}") from e

    if not isinstance(public_key, RSAPublicKey):
        raise KeyParseError("PEM does not contain an RSA key")
    return public_key
