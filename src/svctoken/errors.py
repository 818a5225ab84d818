"""
Domain-specific exceptions for svctoken.
All exceptions are explicit and carry meaningful context.
"""

from typing import Optional


class SvcTokenError(Exception):
    """Base exception for all svctoken errors."""
    pass


class ConfigError(SvcTokenError):
    """Base exception for key configuration errors."""
    pass


class EmptyKeyPathError(ConfigError):
    """Raised when a key file path is empty."""

    def __init__(self, message: str = "Key file path is empty"):
        super().__init__(message)


class KeyFileError(ConfigError):
    """Raised when a key file cannot be read."""
    pass


class KeyParseError(ConfigError):
    """Raised when key material is not a valid PKCS#1 RSA key."""
    pass


class KeyNotReadyError(SvcTokenError):
    """Base exception for operations attempted before a key is loaded."""
    pass


class SigningKeyMissingError(KeyNotReadyError):
    """Raised when signing is attempted without a signing key."""

    def __init__(self, message: str = "Signing key is not loaded"):
        super().__init__(message)


class VerificationKeyMissingError(KeyNotReadyError):
    """Raised when verification is attempted without a verification key."""

    def __init__(self, message: str = "Verification key is not loaded"):
        super().__init__(message)


class InputError(SvcTokenError):
    """Base exception for malformed caller input."""
    pass


class InvalidDurationError(InputError):
    """Raised when a duration string cannot be parsed."""
    pass


class MalformedSubjectError(InputError):
    """Raised when a subject does not contain the delimiter."""
    pass


class CryptoError(SvcTokenError):
    """Base exception for signature primitive failures."""
    pass


class SigningError(CryptoError):
    """Raised when the signature primitive fails to sign a token."""
    pass


class InvalidTokenError(SvcTokenError):
    """
    Raised when a token fails verification for any reason.

    The message is the same for every failure. ``detail`` names the check
    that failed and is meant for logs only.
    """

    def __init__(self, detail: Optional[str] = None):
        super().__init__("Token is invalid")
        self.detail = detail
