# -*- coding: utf-8 -*-
# sailthru/core/abstract_client.py
# Generic signed API calls for the Sailthru API, see http://docs.sailthru.com/api

import logging
from typing import Any, Dict, Optional

from .signer import Signer
from .util import to_json
from ..handler import JSONHandler
from ..http.client import (
    DEFAULT_POOL_CONNECTIONS,
    DEFAULT_POOL_MAXSIZE,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    HttpRequestMethod,
    SailthruHttpClient,
    get_scheme,
)
from ..http.handler import SailthruHandler
from ..params.api_params import ApiFileParams, ApiParams

DEFAULT_API_URL = "https://api.sailthru.com"


def _action_name(action):
    return str(getattr(action, 'value', action)).strip('/')


class AbstractSailthruClient(object):
    """
    Verb-shaped API surface: api_get / api_post / api_delete.

    Each call either takes an action plus a plain mapping:
        client.api_get('email', {'email': 'praj@sailthru.com'})
    or a typed params object that already knows its action:
        client.api_get(Email('praj@sailthru.com'))

    Credentials and base URL are fixed after construction, so one client can be
    shared across threads; the connection pool is the only shared state.
    """

    def __init__(self, api_key, api_secret, api_url=DEFAULT_API_URL, timeout=DEFAULT_TIMEOUT,
                 pool_connections=DEFAULT_POOL_CONNECTIONS, pool_maxsize=DEFAULT_POOL_MAXSIZE,
                 user_agent=DEFAULT_USER_AGENT, expect_continue=True, strict_scheme=False,
                 response_handler=None, logger=None):
        self.logger = logger or logging.getLogger(__name__)
        self._scheme = get_scheme(api_url, strict=strict_scheme)
        self._api_url = self._normalize_api_url(api_url or '', self._scheme)
        self._signer = Signer(api_key, api_secret)
        self._handler = SailthruHandler(response_handler or JSONHandler())
        self._http_client = SailthruHttpClient(
            self._scheme,
            timeout=timeout,
            pool_connections=pool_connections,
            pool_maxsize=pool_maxsize,
            user_agent=user_agent,
            expect_continue=expect_continue,
            logger=self.logger,
        )

    @staticmethod
    def _normalize_api_url(api_url, scheme):
        """Rewrite the URL onto the negotiated scheme when it fell back to plain http."""
        api_url = api_url.strip().rstrip('/')
        head, sep, rest = api_url.partition('://')
        if sep and head.lower() == scheme.name:
            return api_url
        return '%s://%s' % (scheme.name, (rest if sep else api_url).lstrip('/'))

    @property
    def api_key(self):
        return self._signer.api_key

    @property
    def api_url(self):
        return self._api_url

    @property
    def http_client(self) -> SailthruHttpClient:
        return self._http_client

    def get_scheme(self):
        return self._scheme

    def get_response_handler(self):
        return self._handler.get_response_handler()

    def set_response_handler(self, response_handler):
        """Swap the response format, JSON is the only one shipped"""
        self._handler.set_response_handler(response_handler)

    # -------------- payload / signature --------------
    def get_signature_hash(self, params: Dict[str, str]) -> str:
        return self._signer.get_signature_hash(params)

    def build_payload(self, json_payload: str) -> Dict[str, str]:
        params = self._signer.build_payload(json_payload, self.get_response_handler().get_format())
        self.logger.debug("Params: %s", params)
        return params

    def build_request(self, action, data: Optional[Any] = None):
        """
        Return (url, signed form fields) for ``action``.
        ``action`` may be an ApiParams, in which case ``data`` must be None.
        """
        if isinstance(action, ApiParams):
            if data is not None:
                raise TypeError("data must be None when %s carries its own parameters"
                                % action.__class__.__name__)
            data = action.to_dict()
            action = action.get_api_call()
        url = "%s/%s" % (self._api_url, _action_name(action))
        return url, self.build_payload(to_json(data))

    # -------------- transport --------------
    def http_request(self, method, action, data=None, file_params=None):
        """
        Sign and send one request, return the parsed response.

        :param method: HttpRequestMethod
        :param action: ApiAction / action string / ApiParams
        :param data: parameter mapping, None for ApiParams
        :param file_params: ApiFileParams or {part name: path}, POST only
        """
        url, params = self.build_request(action, data)
        if isinstance(file_params, ApiFileParams):
            file_params = file_params.get_file_params()
        return self._http_client.execute_http_request(url, method, params, self._handler,
                                                      file_params=file_params or None)

    def api_get(self, action, data=None):
        return self.http_request(HttpRequestMethod.GET, action, data)

    def api_post(self, action, data=None, file_params=None):
        """
        POST with a mapping or ApiParams.
        ``api_post(import_job, import_job)`` sends the job's file as a multipart part.
        """
        if isinstance(action, ApiParams) and isinstance(data, ApiFileParams) and file_params is None:
            data, file_params = None, data
        return self.http_request(HttpRequestMethod.POST, action, data, file_params)

    def api_delete(self, action, data=None):
        return self.http_request(HttpRequestMethod.DELETE, action, data)

    def close(self):
        self._http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
