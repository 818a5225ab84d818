"""
Tests for two-part subject encoding.
"""

import pytest

from svctoken import Subject, decode_subject, encode_subject
from svctoken.errors import InputError, MalformedSubjectError


class TestSubjectCodec:
    """Test subject encode/decode."""

    def test_encode(self):
        """Test joining parts with the delimiter."""
        assert encode_subject("user-42", "device-9") == "user-42#device-9"

    @pytest.mark.parametrize("primary, secondary", [
        ("user-42", "device-9"),
        ("127.0.0.1", "clientId"),
        ("", "device"),
        ("user", ""),
        ("", ""),
        ("ユーザー", "端末"),
    ])
    def test_round_trip(self, primary, secondary):
        """Test that decode inverts encode for delimiter-free parts."""
        assert decode_subject(encode_subject(primary, secondary)) == (primary, secondary)

    def test_decode_returns_named_parts(self):
        """Test the named fields of the decoded subject."""
        subject = decode_subject("user-42#device-9")
        assert isinstance(subject, Subject)
        assert subject.primary == "user-42"
        assert subject.secondary == "device-9"

    def test_missing_delimiter_rejected(self):
        """Test that a subject without a delimiter is an input error."""
        with pytest.raises(MalformedSubjectError):
            decode_subject("user-42")
        assert issubclass(MalformedSubjectError, InputError)

    def test_splits_on_first_delimiter(self):
        """Test that extra delimiters stay in the second part."""
        assert decode_subject("a#b#c") == ("a", "b#c")
