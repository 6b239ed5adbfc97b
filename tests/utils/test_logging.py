import re

from localenu.utils.logging import _reset_warnings, warn_once


def test_warn_once(caplog):
    _reset_warnings()

    assert warn_once('test')
    assert 'test' in caplog.text

    assert not warn_once('test')
    assert len(re.findall('test', caplog.text)) == 1


def test_warn_once_formats_args(caplog):
    _reset_warnings()

    assert warn_once('failed after %d iterations', 10)
    assert 'failed after 10 iterations' in caplog.text

    # Deduplication is on the formatted message
    assert not warn_once('failed after %d iterations', 10)
    assert warn_once('failed after %d iterations', 11)
    assert len(re.findall('failed after', caplog.text)) == 2
