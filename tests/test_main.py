import logging

import pytest

from authcode.config import NAME
from authcode.main import main


def test_main_prints_code(capsys):
    assert main(['GEZDGNBVGY3TQOJQ']) == 0
    out = capsys.readouterr().out
    assert out.endswith('\n')
    code = out.rstrip('\n')
    assert len(code) == 6
    assert code.isdigit()


@pytest.mark.parametrize('secret', ['GEZDGNBVGY3TQOJ1', 'GEZDGNBVGY3TQO=='])
def test_main_rejects_secret(secret, capsys, caplog):
    with caplog.at_level(logging.ERROR):
        assert main([secret]) == 1
    assert capsys.readouterr().out == ''
    assert any(r.levelno == logging.ERROR for r in caplog.records)
    assert secret not in caplog.text


def test_main_missing_secret(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2
    assert 'secret' in capsys.readouterr().err


def test_main_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(['--version'])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith(NAME)
