# -*- coding: utf-8 -*-
# sailthru/core/errors.py
# Exception hierarchy shared by the signer, transport and response handlers.


class SailthruError(Exception):
    """Base class for every error raised by this package."""


class SerializationError(SailthruError):
    """Call parameters could not be encoded as JSON. Raised before any I/O."""


class TransportError(SailthruError):
    """Network-level failure: connection refused, timeout, bad URL, etc."""

    def __init__(self, message, url=None, method=None):
        super().__init__(message)
        self.url = url
        self.method = method


class ResponseParseError(SailthruError):
    """The server answered but its body could not be parsed."""

    def __init__(self, message, body=None, response_format=None):
        super().__init__(message)
        self.body = body
        self.response_format = response_format


class ApiError(SailthruError):
    """
    The API answered with an HTTP error status.

    Sailthru reports failures as ``{"error": <code>, "errormsg": <text>}``;
    both are kept when the body could be parsed.
    """

    def __init__(self, status_code, error_code=None, error_message=None, body=None):
        message = "HTTP %s" % status_code
        if error_code is not None:
            message += " (error %s)" % error_code
        if error_message:
            message += ": %s" % error_message
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code
        self.error_message = error_message
        self.body = body


class ConfigurationError(SailthruError):
    """Client configuration is unusable (bad base URL in strict mode, missing credentials)."""
