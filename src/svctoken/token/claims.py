"""
Token claim set.
Exactly seven registered claims are carried; no extension claims.
"""

from typing import Dict, Any
from dataclasses import dataclass

from ..config import (
    CLAIM_SUBJECT,
    CLAIM_AUDIENCE,
    CLAIM_ISSUER,
    CLAIM_ISSUED_AT,
    CLAIM_NOT_BEFORE,
    CLAIM_EXPIRES_AT,
    CLAIM_TOKEN_ID,
    DETAIL_MALFORMED,
)
from ..errors import InvalidTokenError


@dataclass(frozen=True)
class TokenClaims:
    """
    Signed payload of a token. Timestamps are unix seconds.
    """
    subject: str
    audience: str
    issuer: str
    issued_at: int
    not_before: int
    expires_at: int
    token_id: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert claims to the JWT payload dictionary."""
        return {
            CLAIM_SUBJECT: self.subject,
            CLAIM_AUDIENCE: self.audience,
            CLAIM_ISSUER: self.issuer,
            CLAIM_ISSUED_AT: self.issued_at,
            CLAIM_NOT_BEFORE: self.not_before,
            CLAIM_EXPIRES_AT: self.expires_at,
            CLAIM_TOKEN_ID: self.token_id,
        }


_STRING_CLAIMS = (CLAIM_SUBJECT, CLAIM_AUDIENCE, CLAIM_ISSUER, CLAIM_TOKEN_ID)
_TIME_CLAIMS = (CLAIM_ISSUED_AT, CLAIM_NOT_BEFORE, CLAIM_EXPIRES_AT)


def parse_claims(payload: Dict[str, Any]) -> TokenClaims:
    """
    Parse a decoded JWT payload into TokenClaims.

    Args:
        payload: Decoded payload dictionary

    Returns:
        TokenClaims object

    Raises:
        InvalidTokenError: If a claim is missing or has the wrong type
    """
    for name in _STRING_CLAIMS:
        if not isinstance(payload.get(name), str):
            raise InvalidTokenError(DETAIL_MALFORMED)

    for name in _TIME_CLAIMS:
        value = payload.get(name)
        # bool is an int subclass
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidTokenError(DETAIL_MALFORMED)

    return TokenClaims(
        subject=payload[CLAIM_SUBJECT],
        audience=payload[CLAIM_AUDIENCE],
        issuer=payload[CLAIM_ISSUER],
        issued_at=payload[CLAIM_ISSUED_AT],
        not_before=payload[CLAIM_NOT_BEFORE],
        expires_at=payload[CLAIM_EXPIRES_AT],
        token_id=payload[CLAIM_TOKEN_ID],
    )
