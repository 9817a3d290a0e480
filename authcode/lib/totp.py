import logging
from collections.abc import Callable
from hashlib import sha1
from hmac import HMAC, compare_digest
from time import time

import cython
from pydantic import SecretStr

from authcode.config import TOTP_DIGITS, TOTP_PERIOD
from authcode.lib.base32 import base32_decode
from authcode.validators.totp_code import validate_totp_code

_CODE_MODULO = 10**TOTP_DIGITS
_TIME_WINDOW_LIMIT = 1 << 32


def totp_time_window(clock: Callable[[], float] = time) -> int:
    """Get the current TOTP time window (counter value) as an unsigned 32-bit integer."""
    return (int(clock()) // TOTP_PERIOD) & 0xFFFFFFFF


def encode_time_window(time_window: int) -> bytes:
    """
    Encode the time window as the 8-byte big-endian HOTP counter.
    Only the low 4 bytes are used, the high 4 bytes are always zero.
    """
    if not 0 <= time_window < _TIME_WINDOW_LIMIT:
        raise ValueError(f'Time window {time_window} is out of the unsigned 32-bit range')
    return time_window.to_bytes(8)


def dynamic_truncate(digest: bytes) -> int:
    """Extract a 31-bit value from the HMAC digest (RFC 4226 dynamic truncation)."""
    offset: cython.int = digest[-1] & 0x0F
    return int.from_bytes(digest[offset : offset + 4]) & 0x7FFFFFFF


def format_code(value: int) -> str:
    """
    Format the truncated value as a zero-padded code.
    >>> format_code(42)
    '000042'
    """
    return f'{value % _CODE_MODULO:0{TOTP_DIGITS}d}'


def generate_totp_code(
    secret: str | SecretStr,
    time_window: int | None = None,
    *,
    clock: Callable[[], float] = time,
) -> str:
    """
    Generate the TOTP code for the given secret and time window.
    Implements RFC 6238 TOTP algorithm with HMAC-SHA1 and 6 digits.

    When time_window is None, the current window is read from the clock.
    Decoding errors of the secret are propagated unchanged.
    """
    if time_window is None:
        time_window = totp_time_window(clock)
        logging.debug('Using current TOTP time window %d', time_window)

    counter = encode_time_window(time_window)
    key = base32_decode(secret)

    hmac_hash = HMAC(key.get_secret_value(), counter, sha1).digest()
    return format_code(dynamic_truncate(hmac_hash))


def verify_totp_code(
    secret: str | SecretStr,
    code: str,
    time_window: int | None = None,
    *,
    clock: Callable[[], float] = time,
) -> bool:
    """
    Verify a TOTP code against the secret.

    Only the single current (or given) time window is accepted.
    Codes are normalized like user input ("287 082"), malformed ones never match.
    """
    try:
        code = validate_totp_code(code)
    except ValueError:
        return False

    expected_code = generate_totp_code(secret, time_window, clock=clock)
    return compare_digest(code, expected_code)
