import logging
from unittest import mock

import delicious
from delicious import Config, ValidationError


def test_config_defaults():
    assert Config.DATETIME_FORMAT == '%Y-%m-%dT%H:%M:%SZ'
    assert Config.TAG_SEPARATOR == ' '
    assert Config.LOG_LEVEL


def test_configure_logging_uses_config_level():
    with mock.patch.object(logging, 'basicConfig') as basic_config:
        delicious.configure_logging()
    basic_config.assert_called_once_with(
        level=Config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')


def test_configure_logging_explicit_level():
    with mock.patch.object(logging, 'basicConfig') as basic_config:
        delicious.configure_logging(logging.DEBUG)
    assert basic_config.call_args.kwargs['level'] == logging.DEBUG


def test_validation_error_str_includes_details():
    error = ValidationError('Invalid post values', [{'loc': ('url',), 'msg': 'Field required'}])
    assert str(error) == 'Invalid post values (url: Field required)'
    assert str(ValidationError('plain')) == 'plain'


def test_validation_failure_is_logged(caplog, service):
    with caplog.at_level(logging.WARNING, logger='delicious'):
        try:
            delicious.Post(service, {'url': 'http://x.com'})
        except ValidationError:
            pass
    assert 'Invalid post values' in caplog.text
