# -*- coding: utf-8 -*-
# sailthru/core/util.py

import hashlib
import json
from typing import Any

from .errors import SerializationError


def md5(data: str) -> str:
    """Hex MD5 digest of the UTF-8 encoded string."""
    return hashlib.md5(data.encode('utf-8')).hexdigest()


def strip_nulls(value: Any) -> Any:
    """
    Drop ``None`` members from mappings, recursively.
    Arrays keep their ``None`` entries, only mapping members are removed.
    """
    if isinstance(value, dict):
        return {k: strip_nulls(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [strip_nulls(v) for v in value]
    return value


def to_json(data: Any) -> str:
    """
    Serialize call parameters to the string sent in the ``json`` field.
    Keys are sorted and separators compact so the same logical data always
    yields the same bytes.
    """
    if data is None:
        data = {}
    try:
        return json.dumps(strip_nulls(data), sort_keys=True, separators=(',', ':'),
                          ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError("Cannot serialize parameters to JSON: %s" % e) from e
