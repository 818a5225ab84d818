"""
Key store holding the active signing and verification keys.
Private keys never leave the store except to the signing primitive.
"""

import logging
import os
import threading
from typing import Mapping, Optional
from cryptography.hazmat.primitives.asymmetric.rsa import (
    RSAPrivateKey,
    RSAPublicKey,
)

from ..config import ENV_SIGNING_KEY_PATH, ENV_VERIFICATION_KEY_PATH
from ..errors import SigningKeyMissingError, VerificationKeyMissingError
from .loader import load_private_key_pem, load_public_key_pem, read_key_file

logger = logging.getLogger(__name__)


class KeyStore:
    """
    Holds at most one signing key and one verification key.

    The two keys have independent lifecycles: a verifier-only process never
    loads the signing key. Loading a key replaces the previous one; a failed
    load leaves the previous key in place.
    """

    def __init__(
        self,
        signing_key: Optional[RSAPrivateKey] = None,
        verification_key: Optional[RSAPublicKey] = None,
    ):
        """
        Initialize key store, optionally with already-parsed keys.

        Args:
            signing_key: RSA private key used to sign tokens
            verification_key: RSA public key used to verify tokens
        """
        self._lock = threading.Lock()
        self._signing_key = signing_key
        self._verification_key = verification_key

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'KeyStore':
        """
        Build a key store from key paths in the environment.

        Unset or empty variables are skipped, so a verifier-only process
        only sets SVCTOKEN_VERIFICATION_KEY_PATH.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            KeyStore instance

        Raises:
            ConfigError: If a named key file cannot be loaded
        """
        if environ is None:
            environ = os.environ

        store = cls()
        signing_path = environ.get(ENV_SIGNING_KEY_PATH, "")
        if signing_path:
            store.load_signing_key(signing_path)
        verification_path = environ.get(ENV_VERIFICATION_KEY_PATH, "")
        if verification_path:
            store.load_verification_key(verification_path)
        return store

    # ==================== Loading ====================

    def load_signing_key(self, path: str):
        """
        Load a PKCS#1 PEM private key file and install it.

        Raises:
            EmptyKeyPathError: If path is empty
            KeyFileError: If the file cannot be read
            KeyParseError: If the file is not a PKCS#1 RSA private key
        """
        key = load_private_key_pem(read_key_file(path))
        self._install_signing_key(key)
        logger.info("Signing key installed", extra={"key_path": path})

    def load_verification_key(self, path: str):
        """
        Load a PKCS#1 PEM public key file and install it.

        Raises:
            EmptyKeyPathError: If path is empty
            KeyFileError: If the file cannot be read
            KeyParseError: If the file is not a PKCS#1 RSA public key
        """
        key = load_public_key_pem(read_key_file(path))
        self._install_verification_key(key)
        logger.info("Verification key installed", extra={"key_path": path})

    def load_signing_key_pem(self, pem_data: bytes):
        """Install a signing key from in-memory PKCS#1 PEM."""
        self._install_signing_key(load_private_key_pem(pem_data))
        logger.info("Signing key installed")

    def load_verification_key_pem(self, pem_data: bytes):
        """Install a verification key from in-memory PKCS#1 PEM."""
        self._install_verification_key(load_public_key_pem(pem_data))
        logger.info("Verification key installed")

    def clear(self):
        """Drop both keys."""
        with self._lock:
            self._signing_key = None
            self._verification_key = None

    def _install_signing_key(self, key: RSAPrivateKey):
        with self._lock:
            self._signing_key = key

    def _install_verification_key(self, key: RSAPublicKey):
        with self._lock:
            self._verification_key = key

    # ==================== Queries ====================

    def has_signing_key(self) -> bool:
        with self._lock:
            return self._signing_key is not None

    def has_verification_key(self) -> bool:
        with self._lock:
            return self._verification_key is not None

    def signing_key(self) -> RSAPrivateKey:
        """
        Get the active signing key.

        Raises:
            SigningKeyMissingError: If no signing key is loaded
        """
        with self._lock:
            key = self._signing_key
        if key is None:
            raise SigningKeyMissingError()
        return key

    def verification_key(self) -> RSAPublicKey:
        """
        Get the active verification key.

        Raises:
            VerificationKeyMissingError: If no verification key is loaded
        """
        with self._lock:
            key = self._verification_key
        if key is None:
            raise VerificationKeyMissingError()
        return key
