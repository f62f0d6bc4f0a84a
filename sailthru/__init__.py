# -*- coding: utf-8 -*-
# sailthru/__init__.py
# Sailthru API client package

import logging

from .core.abstract_client import AbstractSailthruClient, HttpRequestMethod, DEFAULT_API_URL
from .core.errors import (
    SailthruError,
    SerializationError,
    TransportError,
    ResponseParseError,
    ApiError,
    ConfigurationError,
)
from .handler import SailthruResponseHandler, JSONHandler
from .params import ApiAction, ApiParams, ApiFileParams
from .client import SailthruClient, init_SailthruClient

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__description__ = "Python client for the Sailthru API"

__all__ = [
    'AbstractSailthruClient',
    'SailthruClient',
    'init_SailthruClient',
    'HttpRequestMethod',
    'DEFAULT_API_URL',
    'SailthruResponseHandler',
    'JSONHandler',
    'ApiAction',
    'ApiParams',
    'ApiFileParams',
    'SailthruError',
    'SerializationError',
    'TransportError',
    'ResponseParseError',
    'ApiError',
    'ConfigurationError',
]
