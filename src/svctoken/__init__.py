"""
svctoken - Signed identity tokens for inter-service authentication

A service mints an RS256-signed token asserting "this subject, for this
audience, until this time"; downstream services verify it with only the
public key and without contacting the issuer.

Main exports:
- KeyStore: Signing and verification key holder
- TokenService: Token creation and verification
- encode_subject / decode_subject: Two-part subject codec
- parse_duration: "1h20m"-style duration parser
"""

import logging as _logging

from .keys import KeyStore
from .token import (
    IssuedToken,
    Subject,
    TokenClaims,
    TokenService,
    decode_subject,
    encode_subject,
)
from .utils.duration import parse_duration
from .errors import *
from .config import TOKEN_ISSUER, SUBJECT_DELIMITER, SIGNING_ALGORITHM

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    'KeyStore',
    'TokenService',
    'IssuedToken',
    'TokenClaims',
    'Subject',
    'encode_subject',
    'decode_subject',
    'parse_duration',
    'TOKEN_ISSUER',
    'SUBJECT_DELIMITER',
    'SIGNING_ALGORITHM',
]
