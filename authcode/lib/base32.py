from types import MappingProxyType

import cython
from pydantic import SecretBytes, SecretStr

from authcode.lib.exceptions import (
    EmptySecretError,
    InvalidCharacterError,
    InvalidPaddingCountError,
    InvalidPaddingPlacementError,
)

# 32 chars to encode 5 bits (RFC 4648)
_ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ234567'
_ALPHABET_MAP = MappingProxyType({c: i for i, c in enumerate(_ALPHABET)})
_PAD = '='

# trailing '=' counts a final 8-char group can end with
_PADDING_COUNTS = frozenset((0, 1, 3, 4, 6))


def base32_decode(secret: str | SecretStr) -> SecretBytes:
    """
    Decode a base32 secret into the raw key bytes.

    Padding is optional, but when present it must have one of the valid
    lengths and appear only at the end of the input.
    >>> base32_decode('MZXW6===').get_secret_value()
    b'foo'
    """
    s = secret.get_secret_value() if isinstance(secret, SecretStr) else secret
    if not s:
        raise EmptySecretError

    padding: cython.Py_ssize_t = s.count(_PAD)
    if padding not in _PADDING_COUNTS:
        raise InvalidPaddingCountError(padding)

    length: cython.Py_ssize_t = len(s) - padding
    embedded: cython.Py_ssize_t = s.find(_PAD, 0, length)
    if embedded != -1:
        raise InvalidPaddingPlacementError(embedded)

    return SecretBytes(_decode_groups(s, length))


@cython.cfunc
def _decode_groups(s: str, length: cython.Py_ssize_t) -> bytes:
    """Decode the first length chars of s, 8 chars (40 bits) at a time."""
    result = bytearray()
    i: cython.Py_ssize_t
    j: cython.Py_ssize_t
    k: cython.int

    for i in range(0, length, 8):
        end: cython.Py_ssize_t = min(i + 8, length)
        group: cython.ulonglong = 0

        for j in range(i, end):
            value: cython.int = _ALPHABET_MAP.get(s[j], -1)
            if value == -1:
                raise InvalidCharacterError(s[j], j)
            group = (group << 5) | value

        # missing chars of a short group are zero bits
        group <<= 5 * (8 - (end - i))

        # incomplete trailing byte is dropped
        num_bytes: cython.int = (5 * (end - i)) // 8
        for k in range(num_bytes):
            result.append((group >> (32 - 8 * k)) & 0xFF)

    return bytes(result)
