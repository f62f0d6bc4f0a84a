# -*- coding: utf-8 -*-
# tests/conftest.py

import sys
from pathlib import Path
from unittest import mock

import pytest
import requests

# Ensure project root (which contains the `sailthru/` package directory) is on sys.path
_THIS_FILE = Path(__file__).resolve()
_PROJECT_ROOT = _THIS_FILE.parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from sailthru import SailthruClient  # noqa: E402


def build_response(body=b'{"ok": true}', status_code=200, url='https://api.sailthru.com/email'):
    response = requests.Response()
    response.status_code = status_code
    response._content = body if isinstance(body, bytes) else body.encode('utf-8')
    response.url = url
    response.encoding = 'utf-8'
    return response


@pytest.fixture
def client():
    c = SailthruClient('test-key', 'test-secret')
    yield c
    c.close()


@pytest.fixture
def http_mock(client):
    """Patch the pooled session; returns the mock so tests can inspect the outbound request"""
    with mock.patch.object(client.http_client.session, 'request', return_value=build_response()) as m:
        yield m
