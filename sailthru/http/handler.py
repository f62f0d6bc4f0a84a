# -*- coding: utf-8 -*-
# sailthru/http/handler.py

import logging

from ..core.errors import ApiError, ResponseParseError

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = 'utf-8'


class SailthruHandler(object):
    """Turns a requests.Response into the value produced by the response handler."""

    def __init__(self, response_handler):
        self._response_handler = response_handler

    def get_response_handler(self):
        return self._response_handler

    def set_response_handler(self, response_handler):
        self._response_handler = response_handler

    def handle_response(self, response):
        status = response.status_code
        try:
            body = response.content.decode(DEFAULT_ENCODING) if response.content else ''
        except UnicodeDecodeError as e:
            if status >= 400:
                raise ApiError(status, body=response.content) from e
            raise ResponseParseError("Response body is not valid %s: %s" % (DEFAULT_ENCODING, e),
                                     body=response.content,
                                     response_format=self._response_handler.get_format()) from e

        if status >= 400:
            try:
                result = self._response_handler.get_response(body)
            except ResponseParseError:
                logger.warning("HTTP %s with unparsable body from %s", status, response.url)
                raise ApiError(status, body=body)
            if isinstance(result, dict):
                raise ApiError(status, result.get('error'), result.get('errormsg'), body=body)
            raise ApiError(status, body=body)

        return self._response_handler.get_response(body)
