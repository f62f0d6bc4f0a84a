# -*- coding: utf-8 -*-
# sailthru/http/client.py
"""
Pooled HTTP transport.
Responsibilities:
- Negotiate plain/TLS from the base URL scheme
- Send the signed payload as query string (GET/DELETE) or form body (POST)
- Multipart POST when file parts are attached
- Surface every I/O failure as TransportError, no retries
"""

import logging
import os
from collections import namedtuple
from contextlib import ExitStack
from enum import Enum
from urllib.parse import urlparse

import requests
from requests.adapters import HTTPAdapter

from ..core.errors import ConfigurationError, TransportError

DEFAULT_HTTP_PORT = 80
DEFAULT_HTTPS_PORT = 443
DEFAULT_USER_AGENT = "Sailthru Python Client/1.0"
DEFAULT_ENCODING = "UTF-8"
DEFAULT_TIMEOUT = 30
DEFAULT_POOL_CONNECTIONS = 10
DEFAULT_POOL_MAXSIZE = 10

Scheme = namedtuple('Scheme', ['name', 'default_port', 'secure'])

HTTP_SCHEME = Scheme('http', DEFAULT_HTTP_PORT, False)
HTTPS_SCHEME = Scheme('https', DEFAULT_HTTPS_PORT, True)

logger = logging.getLogger(__name__)


class HttpRequestMethod(str, Enum):
    """HTTP methods supported by the Sailthru API (no PUT)."""
    GET = 'GET'
    POST = 'POST'
    DELETE = 'DELETE'


def get_scheme(api_url, strict=False):
    """
    https -> TLS on 443, http -> plain on 80.
    Anything else (unparsable URL, missing or unknown scheme) falls back to plain
    http, or raises ConfigurationError when strict is set.
    """
    try:
        parsed = urlparse(api_url)
        parsed.port  # raises ValueError on a malformed port
        scheme = (parsed.scheme or '').lower()
    except (ValueError, AttributeError) as e:
        if strict:
            raise ConfigurationError("Malformed API URL %r: %s" % (api_url, e)) from e
        logger.warning("Malformed API URL %r (%s), falling back to http", api_url, e)
        return HTTP_SCHEME

    if scheme == 'https':
        return HTTPS_SCHEME
    if scheme == 'http':
        return HTTP_SCHEME

    if strict:
        raise ConfigurationError("Unsupported scheme %r in API URL %r" % (scheme, api_url))
    logger.warning("Unsupported scheme %r in API URL %r, falling back to http", scheme, api_url)
    return HTTP_SCHEME


class SailthruHttpClient(object):
    def __init__(self, scheme=HTTPS_SCHEME, timeout=DEFAULT_TIMEOUT,
                 pool_connections=DEFAULT_POOL_CONNECTIONS, pool_maxsize=DEFAULT_POOL_MAXSIZE,
                 user_agent=DEFAULT_USER_AGENT, expect_continue=True, logger=None):
        self.scheme = scheme
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)

        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': user_agent,
            'Accept-Charset': DEFAULT_ENCODING,
        })
        self.expect_continue = expect_continue

        # thread-safe pool shared by every call made through this client
        self.adapter = HTTPAdapter(pool_connections=pool_connections, pool_maxsize=pool_maxsize)
        self.session.mount(scheme.name + '://', self.adapter)

    def execute_http_request(self, url, method, params, handler, file_params=None):
        """
        Send one request and hand the response to ``handler``.

        :param url: full URL, ``{api_url}/{action}``
        :param method: HttpRequestMethod or its name
        :param params: signed form fields
        :param handler: SailthruHandler used to parse the response
        :param file_params: optional {part name: file path}, POST only
        """
        method = HttpRequestMethod(str(getattr(method, 'value', method)).upper())
        kwargs = {'timeout': self.timeout}

        if method is HttpRequestMethod.POST:
            kwargs['data'] = params
            headers = {}
            # only requests with a body wait for 100 Continue
            if self.expect_continue:
                headers['Expect'] = '100-continue'
            if not file_params:
                headers['Content-Type'] = 'application/x-www-form-urlencoded; charset=%s' % DEFAULT_ENCODING
            if headers:
                kwargs['headers'] = headers
        else:
            if file_params:
                raise ValueError("File parts can only be sent with POST, got %s" % method.value)
            kwargs['params'] = params

        self.logger.info("%s %s", method.value, url)

        with ExitStack() as stack:
            if file_params:
                kwargs['files'] = {
                    name: (os.path.basename(path), stack.enter_context(open(path, 'rb')))
                    for name, path in file_params.items()
                }
            try:
                response = self.session.request(method.value, url, **kwargs)
            except requests.RequestException as e:
                self.logger.error("%s %s failed: %s", method.value, url, e)
                raise TransportError("%s %s failed: %s" % (method.value, url, e),
                                     url=url, method=method.value) from e

        return handler.handle_response(response)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
