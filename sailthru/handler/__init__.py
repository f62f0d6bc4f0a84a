"""
Pluggable response handlers.
Only JSON is implemented, an XML handler would subclass SailthruResponseHandler.
"""

from .base import SailthruResponseHandler  # noqa: F401
from .json_handler import JSONHandler      # noqa: F401
