"""
Two-part subject encoding for the token's "sub" claim.
"""

from typing import NamedTuple

from ..config import SUBJECT_DELIMITER
from ..errors import MalformedSubjectError


class Subject(NamedTuple):
    """Composite identity, e.g. user + device or IP + client."""

    primary: str
    secondary: str


def encode_subject(primary: str, secondary: str) -> str:
    """
    Join two identity parts into a single subject string.

    Parts are not checked for the delimiter; a delimiter in ``primary``
    will not survive decoding.
    """
    return primary + SUBJECT_DELIMITER + secondary


def decode_subject(subject: str) -> Subject:
    """
    Split a subject string on the first delimiter.

    Args:
        subject: Encoded subject, as returned by verification

    Returns:
        Subject(primary, secondary)

    Raises:
        MalformedSubjectError: If the delimiter is absent
    """
    primary, delimiter, secondary = subject.partition(SUBJECT_DELIMITER)
    if not delimiter:
        raise MalformedSubjectError(
            f"Subject has no {SUBJECT_DELIMITER!r} delimiter"
        )
    return Subject(primary, secondary)
