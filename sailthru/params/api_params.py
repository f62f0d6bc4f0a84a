# -*- coding: utf-8 -*-
# sailthru/params/api_params.py

from enum import Enum
from typing import Any, Dict


class ApiAction(str, Enum):
    """Resource path segments, ``{api_url}/{action}``"""
    EMAIL = 'email'
    SEND = 'send'
    BLAST = 'blast'
    TEMPLATE = 'template'
    LIST = 'list'
    CONTENT = 'content'
    ALERT = 'alert'
    STATS = 'stats'
    PURCHASE = 'purchase'
    HORIZON = 'horizon'
    JOB = 'job'
    USER = 'user'
    EVENT = 'event'
    PREVIEW = 'preview'
    TRIGGER = 'trigger'
    SETTINGS = 'settings'

    def __str__(self):
        return self.value


class ApiParams(object):
    """
    Self-describing call parameters.
    Subclasses set ``api_call`` and store API fields as public attributes;
    fields left as None are not sent. Extra keyword arguments pass through
    untouched for fields without a dedicated argument.
    """
    api_call = None

    def __init__(self, **extra):
        self._extra = dict(extra)

    def get_api_call(self):
        if self.api_call is None:
            raise NotImplementedError("%s does not declare an api_call" % self.__class__.__name__)
        return self.api_call

    def to_dict(self) -> Dict[str, Any]:
        data = {k: v for k, v in vars(self).items() if not k.startswith('_') and v is not None}
        data.update({k: v for k, v in self._extra.items() if v is not None})
        return data

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self.to_dict())


class ApiFileParams(object):
    def get_file_params(self) -> Dict[str, str]:
        """Return {part name: file path} for multipart upload"""
        raise NotImplementedError
