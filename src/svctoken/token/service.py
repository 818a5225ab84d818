"""
Token creation and verification.
Tokens are RS256-signed JWTs; verification needs only the public key.
"""

import hmac
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Tuple

import jwt

from ..config import (
    TOKEN_ISSUER,
    SIGNING_ALGORITHM,
    REQUIRED_CLAIMS,
    DETAIL_MALFORMED,
    DETAIL_SIGNATURE,
    DETAIL_EXPIRED,
    DETAIL_NOT_YET_VALID,
    DETAIL_AUDIENCE,
    DETAIL_ISSUER,
)
from ..errors import InvalidTokenError, SigningError
from ..keys import KeyStore
from ..utils.duration import MICROSECOND, SECOND, parse_duration_ns
from ..utils.time import Clock, to_unix, utc_now
from .claims import TokenClaims, parse_claims

logger = logging.getLogger(__name__)

# Time, audience and issuer are checked against the injected clock instead.
_DECODE_OPTIONS = {
    "require": list(REQUIRED_CLAIMS),
    "verify_exp": False,
    "verify_nbf": False,
    "verify_iat": False,
    "verify_aud": False,
    "verify_iss": False,
}


@dataclass(frozen=True)
class IssuedToken:
    """A signed token together with the claims it carries."""
    token: str
    claims: TokenClaims

    @property
    def expires_at(self) -> int:
        return self.claims.expires_at


def _same(actual: str, expected: str) -> bool:
    # claims decoded from JSON may carry lone surrogates
    return hmac.compare_digest(
        actual.encode("utf-8", "surrogatepass"),
        expected.encode("utf-8", "surrogatepass"),
    )


def _expiry(now: datetime, issued_at: int, lifetime_ns: int) -> int:
    if lifetime_ns > 0:
        # whole seconds after issued_at, rounded up so exp > iat
        return issued_at - (-lifetime_ns // SECOND)
    return to_unix(now + timedelta(microseconds=lifetime_ns // MICROSECOND))


class TokenService:
    """
    Issues and verifies signed identity tokens.

    Every verification failure raises the same InvalidTokenError; the
    failing check is only available as ``error.detail`` for logging.
    """

    def __init__(
        self,
        key_store: KeyStore,
        *,
        issuer: str = TOKEN_ISSUER,
        clock: Clock = utc_now,
        leeway: int = 0,
    ):
        """
        Initialize token service.

        Args:
            key_store: Store holding the signing and/or verification key
            issuer: Value of the "iss" claim written and required
            clock: Callable returning the current aware UTC datetime
            leeway: Seconds of clock skew tolerated by the time checks
        """
        self.key_store = key_store
        self.issuer = issuer
        self._clock = clock
        self.leeway = leeway

    # ==================== Creation ====================

    def issue(self, subject: str, audience: str, duration: str) -> IssuedToken:
        """
        Create and sign a token.

        Args:
            subject: Encoded subject (see encode_subject)
            audience: Intended consumer of the token
            duration: Lifetime such as "1h" or "1h20m"; may be negative

        Returns:
            IssuedToken with the signed string and its claims

        Raises:
            SigningKeyMissingError: If no signing key is loaded
            InvalidDurationError: If duration cannot be parsed
            SigningError: If the signature primitive fails
        """
        key = self.key_store.signing_key()
        lifetime_ns = parse_duration_ns(duration)

        now = self._clock()
        issued_at = to_unix(now)
        claims = TokenClaims(
            subject=subject,
            audience=audience,
            issuer=self.issuer,
            issued_at=issued_at,
            not_before=issued_at,
            expires_at=_expiry(now, issued_at, lifetime_ns),
            token_id=str(uuid.uuid4()),
        )

        try:
            token = jwt.encode(claims.to_dict(), key, algorithm=SIGNING_ALGORITHM)
        except (jwt.PyJWTError, ValueError, TypeError) as e:
            raise SigningError(f"Failed to sign token: {e}") from e

        logger.debug(
            "Token issued",
            extra={"jti": claims.token_id, "aud": audience, "exp": claims.expires_at},
        )
        return IssuedToken(token=token, claims=claims)

    def create(self, subject: str, audience: str, duration: str) -> Tuple[str, int]:
        """
        Create and sign a token.

        Returns:
            (token string, expires_at unix seconds)
        """
        issued = self.issue(subject, audience, duration)
        return issued.token, issued.expires_at

    # ==================== Verification ====================

    def verify_claims(self, token: str, audience: str) -> TokenClaims:
        """
        Verify a token and return its claims.

        Checks run in order: signature and structure, then time window,
        then audience and issuer.

        Args:
            token: Compact token string
            audience: Audience this service expects

        Returns:
            Verified TokenClaims

        Raises:
            VerificationKeyMissingError: If no verification key is loaded
            InvalidTokenError: If any check fails
        """
        key = self.key_store.verification_key()

        try:
            claims = self._decode(token, key)
            self._check_time(claims)
            self._check_claims(claims, audience)
        except InvalidTokenError as e:
            logger.debug("Token rejected", extra={"detail": e.detail})
            raise

        return claims

    def verify(self, token: str, audience: str) -> str:
        """
        Verify a token and return its subject, still encoded.

        Raises:
            VerificationKeyMissingError: If no verification key is loaded
            InvalidTokenError: If any check fails
        """
        return self.verify_claims(token, audience).subject

    def _decode(self, token: str, key) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                key,
                algorithms=[SIGNING_ALGORITHM],
                options=_DECODE_OPTIONS,
            )
        except jwt.InvalidSignatureError as e:
            raise InvalidTokenError(DETAIL_SIGNATURE) from e
        except jwt.PyJWTError as e:
            raise InvalidTokenError(DETAIL_MALFORMED) from e

        return parse_claims(payload)

    def _check_time(self, claims: TokenClaims):
        # fractional seconds: a token is expired from the instant exp is reached
        now = self._clock().timestamp()

        if claims.expires_at <= now - self.leeway:
            raise InvalidTokenError(DETAIL_EXPIRED)
        if claims.not_before > now + self.leeway:
            raise InvalidTokenError(DETAIL_NOT_YET_VALID)
        if claims.issued_at > now + self.leeway:
            raise InvalidTokenError(DETAIL_NOT_YET_VALID)

    def _check_claims(self, claims: TokenClaims, audience: str):
        if not claims.audience or not _same(claims.audience, audience):
            raise InvalidTokenError(DETAIL_AUDIENCE)
        if not claims.issuer or not _same(claims.issuer, self.issuer):
            raise InvalidTokenError(DETAIL_ISSUER)
