from collections.abc import Collection
from os import environ

import pytest

environ.setdefault('AUTHCODE_ENV', 'test')


def pytest_addoption(parser):
    parser.addoption(
        '--extended',
        action='store_true',
        default=False,
        help='run extended tests',
    )


def pytest_configure(config):
    config.addinivalue_line('markers', 'extended: mark test as part of the extended test suite')


def pytest_collection_modifyitems(config: pytest.Config, items: Collection[pytest.Item]):
    # skip extended tests by default
    if not config.getoption('--extended'):
        skip_marker = pytest.mark.skip(reason='need --extended option to run')
        for item in items:
            if 'extended' in item.keywords:
                item.add_marker(skip_marker)
