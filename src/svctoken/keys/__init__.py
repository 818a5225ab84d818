"""Key loading and storage for svctoken."""

from .loader import read_key_file, load_private_key_pem, load_public_key_pem
from .store import KeyStore

__all__ = [
    'KeyStore',
    'read_key_file',
    'load_private_key_pem',
    'load_public_key_pem',
]
