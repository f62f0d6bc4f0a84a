# -*- coding: utf-8 -*-
# sailthru/handler/json_handler.py

import json

from .base import SailthruResponseHandler
from ..core.errors import ResponseParseError


class JSONHandler(SailthruResponseHandler):
    FORMAT = 'json'

    def get_format(self):
        return self.FORMAT

    def get_response(self, body):
        if isinstance(body, bytes):
            try:
                body = body.decode('utf-8')
            except UnicodeDecodeError as e:
                raise ResponseParseError("Response body is not valid UTF-8: %s" % e, body=body,
                                         response_format=self.FORMAT) from e
        if body is None or not body.strip():
            raise ResponseParseError("Empty response body", body=body, response_format=self.FORMAT)
        try:
            return json.loads(body)
        except ValueError as e:
            raise ResponseParseError("Malformed JSON response: %s" % e, body=body,
                                     response_format=self.FORMAT) from e
