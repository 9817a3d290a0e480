import logging
import sys
from argparse import ArgumentParser

from pydantic import SecretStr

from authcode.config import NAME, VERSION
from authcode.lib.cython_detect import cython_compiled
from authcode.lib.exceptions import SecretDecodeError
from authcode.lib.totp import generate_totp_code


def main(argv: list[str] | None = None) -> int:
    parser = ArgumentParser(
        prog=NAME,
        description='Print the current 6-digit authenticator code for a base32 secret.',
    )
    parser.add_argument('secret', type=SecretStr, help='base32-encoded shared secret')
    parser.add_argument('--version', action='version', version=f'{NAME} {VERSION}')
    args = parser.parse_args(argv)

    if cython_compiled():
        logging.debug('🐇 Cython modules are compiled')
    else:
        logging.debug('🐌 Cython modules are not compiled')

    try:
        code = generate_totp_code(args.secret)
    except SecretDecodeError as e:
        logging.error('Cannot generate code: %s', e)
        return 1

    print(code)
    return 0


if __name__ == '__main__':
    sys.exit(main())
