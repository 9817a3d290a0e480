from logging.config import dictConfig
from sys import modules
from typing import Any, Literal, get_type_hints

from githead import githead
from pydantic import create_model
from pydantic_settings import BaseSettings, SettingsConfigDict


class _SettingsBase(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='AUTHCODE_',
        env_file='.env',
        extra='ignore',
    )


def load_settings(module_name: str, namespace: dict[str, Any], /) -> None:
    """
    Override the uppercase globals of a module with values from the environment.

    A settings model is created from the globals' type hints and defaults,
    populated from AUTHCODE_* environment variables (or a .env file),
    and the validated values are written back into the namespace.
    """
    names = [name for name in namespace if name[:1] != '_' and name.isupper()]
    if not names:
        return

    type_hints = get_type_hints(modules[module_name])
    fields: dict[str, Any] = {
        name: (type_hints.get(name, type(namespace[name])), namespace[name])
        for name in names
    }

    settings = create_model(
        f'{module_name}_Settings',
        __base__=_SettingsBase,
        **fields,
    )()

    for name in names:
        namespace[name] = getattr(settings, name)


# -------------------- System Configuration --------------------

ENV: Literal['dev', 'test', 'prod'] = 'prod'
LOG_LEVEL: Literal['DEBUG', 'INFO', 'WARNING', 'ERROR'] | None = None

load_settings(__name__, globals())

# -------------------- Constant or derived configuration --------------------

# RFC 6238 parameters as used by Google Authenticator
TOTP_DIGITS = 6
TOTP_PERIOD = 30

try:
    VERSION = 'git#' + githead()[:7]
except FileNotFoundError:
    VERSION = 'dev'  # pyright: ignore [reportConstantRedefinition]

NAME = 'authcode'

if LOG_LEVEL is None:
    LOG_LEVEL = 'INFO' if ENV == 'prod' else 'DEBUG'  # pyright: ignore[reportConstantRedefinition]

# -------------------- Logging configuration --------------------

dictConfig({
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': '%(levelname)s | %(asctime)s | %(name)s %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        'default': {
            'formatter': 'default',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stderr',
        },
    },
    'loggers': {
        'root': {'handlers': ['default'], 'level': LOG_LEVEL},
    },
})
