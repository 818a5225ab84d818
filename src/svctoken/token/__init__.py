"""Token construction, signing and verification for svctoken."""

from .claims import TokenClaims, parse_claims
from .service import IssuedToken, TokenService
from .subject import Subject, encode_subject, decode_subject

__all__ = [
    'TokenClaims',
    'parse_claims',
    'IssuedToken',
    'TokenService',
    'Subject',
    'encode_subject',
    'decode_subject',
]
