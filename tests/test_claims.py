"""
Tests for the claim record and time helpers.
"""

from datetime import datetime, timedelta, timezone

import pytest

from svctoken.config import DETAIL_MALFORMED
from svctoken.errors import InvalidTokenError
from svctoken.token import TokenClaims, parse_claims
from svctoken.utils.time import FrozenClock, from_unix, to_unix


def sample_payload():
    return {
        'sub': 'user-42#device-9',
        'aud': 'svc.billing',
        'iss': 'svctoken',
        'iat': 1772366400,
        'nbf': 1772366400,
        'exp': 1772370000,
        'jti': '0b6f4a3e-7c55-4f1f-9d0b-3a2f8f3b9c11',
    }


class TestTokenClaims:
    """Test claim serialization and parsing."""

    def test_parse(self):
        """Test parsing a complete payload."""
        claims = parse_claims(sample_payload())
        assert claims.subject == 'user-42#device-9'
        assert claims.expires_at - claims.issued_at == 3600
        assert claims.to_dict() == sample_payload()

    def test_frozen(self):
        """Test that claims cannot be modified."""
        claims = parse_claims(sample_payload())
        with pytest.raises(AttributeError):
            claims.audience = 'svc.other'

    @pytest.mark.parametrize("name", ['sub', 'aud', 'iss', 'iat', 'nbf', 'exp', 'jti'])
    def test_missing_claim(self, name):
        """Test that every claim is mandatory."""
        payload = sample_payload()
        del payload[name]
        with pytest.raises(InvalidTokenError) as exc_info:
            parse_claims(payload)
        assert exc_info.value.detail == DETAIL_MALFORMED

    @pytest.mark.parametrize("name, value", [
        ('aud', ['svc.billing']),
        ('sub', 42),
        ('iat', 1772366400.5),
        ('exp', '1772370000'),
        ('nbf', True),
    ])
    def test_wrong_type(self, name, value):
        """Test that claims must have their declared types."""
        payload = sample_payload()
        payload[name] = value
        with pytest.raises(InvalidTokenError):
            parse_claims(payload)

    def test_extra_claims_dropped(self):
        """Test that only the fixed claim set is kept."""
        payload = {**sample_payload(), 'role': 'admin'}
        assert 'role' not in parse_claims(payload).to_dict()

    def test_constructor(self):
        """Test building claims directly."""
        claims = TokenClaims(
            subject='a#b', audience='x', issuer='svctoken',
            issued_at=10, not_before=10, expires_at=20, token_id='id',
        )
        assert claims.to_dict()['exp'] == 20


class TestTime:
    """Test unix conversions and the frozen clock."""

    def test_to_unix_floors(self):
        """Test rounding toward the past, including before the epoch."""
        assert to_unix(datetime(1970, 1, 1, 0, 0, 1, 900000, tzinfo=timezone.utc)) == 1
        assert to_unix(datetime(1969, 12, 31, 23, 59, 59, 500000, tzinfo=timezone.utc)) == -1

    def test_to_unix_rejects_naive(self):
        """Test that naive datetimes are rejected."""
        with pytest.raises(ValueError):
            to_unix(datetime(2026, 1, 1))

    def test_from_unix(self):
        """Test the inverse conversion."""
        assert to_unix(from_unix(1772366400)) == 1772366400

    def test_frozen_clock(self):
        """Test that the frozen clock only moves when told to."""
        start = datetime(2026, 3, 1, tzinfo=timezone.utc)
        clock = FrozenClock(start)
        assert clock() == start

        clock.advance(timedelta(seconds=90))
        assert clock() == start + timedelta(seconds=90)

        clock.set(start)
        assert clock() == start
