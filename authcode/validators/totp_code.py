from typing import Annotated

from pydantic import BeforeValidator

from authcode.config import TOTP_DIGITS


def validate_totp_code(value: str) -> str:
    """
    Normalize a user-entered TOTP code.

    Authenticator apps display codes in groups ("287 082"), so every space
    and any surrounding whitespace is removed first.
    Raises ValueError unless exactly TOTP_DIGITS ASCII digits remain.
    """
    if not isinstance(value, str):
        raise ValueError('TOTP code must be a string')

    code = ''.join(value.split(' ')).strip()
    if not (code.isascii() and code.isdigit()):
        raise ValueError('TOTP code must contain only digits')

    if len(code) != TOTP_DIGITS:
        raise ValueError(f'TOTP code must be exactly {TOTP_DIGITS} digits')

    return code


TOTPCodeValidator = BeforeValidator(validate_totp_code)

TOTPCodeValidating = Annotated[str, TOTPCodeValidator]
