"""
HTTP plumbing: pooled requests session, scheme negotiation and response dispatch.
"""

from .client import SailthruHttpClient, HttpRequestMethod, Scheme, get_scheme  # noqa: F401
from .handler import SailthruHandler                                          # noqa: F401
