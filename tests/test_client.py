# -*- coding: utf-8 -*-
# tests/test_client.py
# SailthruClient 便捷方法与 init_SailthruClient

import json
import logging
from unittest import mock

import pytest

from sailthru import SailthruClient, init_SailthruClient
from sailthru.core.errors import ConfigurationError

from conftest import build_response


def _sent(http_mock):
    args, kwargs = http_mock.call_args
    fields = kwargs.get('data') if args[0] == 'POST' else kwargs.get('params')
    return args[0], args[1], json.loads(fields['json'])


def test_get_email(client, http_mock):
    client.get_email('praj@sailthru.com')
    assert _sent(http_mock) == ('GET', 'https://api.sailthru.com/email', {'email': 'praj@sailthru.com'})


def test_set_email(client, http_mock):
    client.set_email('praj@sailthru.com', vars={'name': 'Praj'}, lists={'news': 1})
    method, url, data = _sent(http_mock)
    assert (method, url) == ('POST', 'https://api.sailthru.com/email')
    assert data == {'email': 'praj@sailthru.com', 'vars': {'name': 'Praj'}, 'lists': {'news': 1}}


def test_send_and_cancel(client, http_mock):
    client.send('welcome', 'praj@sailthru.com', vars={'a': 1})
    assert _sent(http_mock) == ('POST', 'https://api.sailthru.com/send',
                                {'template': 'welcome', 'email': 'praj@sailthru.com', 'vars': {'a': 1}})
    client.cancel_send('abc123')
    assert _sent(http_mock) == ('DELETE', 'https://api.sailthru.com/send', {'send_id': 'abc123'})


def test_multi_send_joins_emails(client, http_mock):
    client.multi_send('welcome', ['a@b.com', 'c@d.com'], evars={'a@b.com': {'x': 1}})
    _, _, data = _sent(http_mock)
    assert data['email'] == 'a@b.com,c@d.com'
    assert data['evars'] == {'a@b.com': {'x': 1}}


def test_blast_calls(client, http_mock):
    client.schedule_blast('Weekly', 'news', 'now', 'Sailthru', 'news@b.com', 'Hi', '<p>Hi</p>', 'Hi')
    method, url, data = _sent(http_mock)
    assert (method, url) == ('POST', 'https://api.sailthru.com/blast')
    assert data['list'] == 'news' and data['schedule_time'] == 'now'
    client.delete_blast(42)
    assert _sent(http_mock) == ('DELETE', 'https://api.sailthru.com/blast', {'blast_id': 42})


def test_list_and_template_calls(client, http_mock):
    client.get_lists()
    assert _sent(http_mock) == ('GET', 'https://api.sailthru.com/list', {})
    client.save_list('news', primary=1)
    assert _sent(http_mock) == ('POST', 'https://api.sailthru.com/list', {'list': 'news', 'primary': 1})
    client.delete_template('welcome')
    assert _sent(http_mock) == ('DELETE', 'https://api.sailthru.com/template', {'template': 'welcome'})


def test_user_event_stats(client, http_mock):
    client.save_user('praj@sailthru.com', key='email', vars={'vip': True})
    assert _sent(http_mock)[2] == {'id': 'praj@sailthru.com', 'key': 'email', 'vars': {'vip': True}}
    client.post_event('praj@sailthru.com', 'signup')
    assert _sent(http_mock) == ('POST', 'https://api.sailthru.com/event',
                                {'id': 'praj@sailthru.com', 'event': 'signup'})
    client.get_list_stats('news', date='2026-10-01')
    assert _sent(http_mock) == ('GET', 'https://api.sailthru.com/stats',
                                {'stat': 'list', 'list': 'news', 'date': '2026-10-01'})


def test_process_import_job_with_file(client, http_mock, tmp_path):
    upload = tmp_path / 'emails.csv'
    upload.write_text('email\na@b.com\n')
    client.process_import_job('news', file=str(upload))

    args, kwargs = http_mock.call_args
    assert args == ('POST', 'https://api.sailthru.com/job')
    assert json.loads(kwargs['data']['json']) == {'job': 'import', 'list': 'news'}
    assert kwargs['files']['file'][0] == 'emails.csv'


def test_process_import_job_with_emails(client, http_mock):
    client.process_import_job('news', emails=['a@b.com', 'c@d.com'])
    args, kwargs = http_mock.call_args
    assert 'files' not in kwargs
    assert json.loads(kwargs['data']['json'])['emails'] == 'a@b.com,c@d.com'


def test_process_import_job_needs_source(client):
    with pytest.raises(ValueError):
        client.process_import_job('news')


CONFIG = """
accounts:
  main:
    api_key: main-key
    api_secret: main-secret
  local:
    api_key: local-key
    api_secret: ""
    api_url: http://localhost:8080
http:
  timeout: 7
  expect_continue: false
logging:
  log_dir: "{log_dir}"
  log_name: sailthru_test_requests
"""


@pytest.fixture
def config_dir(tmp_path):
    (tmp_path / 'sailthru.yaml').write_text(CONFIG.format(log_dir=tmp_path / 'logs'), encoding='utf-8')
    return tmp_path


def test_init_client_from_config(config_dir, monkeypatch):
    for key in ('SAILTHRU_API_KEY', 'SAILTHRU_API_SECRET', 'SAILTHRU_API_URL'):
        monkeypatch.delenv(key, raising=False)

    c = init_SailthruClient('local', config_dir=str(config_dir))
    try:
        assert isinstance(c, SailthruClient)
        assert c.api_key == 'local-key'
        assert c.api_url == 'http://localhost:8080'
        assert not c.get_scheme().secure
        assert c.http_client.timeout == 7
        assert c.http_client.expect_continue is False
        assert c.logger.name == 'sailthru_test_requests'

        with mock.patch.object(c.http_client.session, 'request', return_value=build_response()):
            c.get_email('a@b.com')
        assert (config_dir / 'logs' / 'sailthru_test_requests.log').exists()
    finally:
        c.close()
        for handler in list(c.logger.handlers):
            handler.close()
            c.logger.removeHandler(handler)


def test_init_client_env_override(config_dir, monkeypatch):
    monkeypatch.delenv('SAILTHRU_API_URL', raising=False)
    monkeypatch.setenv('SAILTHRU_API_KEY', 'env-key')
    monkeypatch.setenv('SAILTHRU_CONFIG_DIR', str(config_dir))
    c = init_SailthruClient()
    try:
        assert c.api_key == 'env-key'
        assert c.api_url == 'https://api.sailthru.com'
    finally:
        c.close()
        logger = logging.getLogger('sailthru_test_requests')
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


def test_init_client_unknown_account(config_dir, monkeypatch):
    for key in ('SAILTHRU_API_KEY', 'SAILTHRU_API_SECRET', 'SAILTHRU_API_URL'):
        monkeypatch.delenv(key, raising=False)
    with pytest.raises(ConfigurationError):
        init_SailthruClient('missing', config_dir=str(config_dir))
