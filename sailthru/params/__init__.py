"""
Typed parameter objects. Each one knows its own action and how to serialize itself:
    from sailthru.params import Email, Send, ImportJob
"""

from .api_params import ApiAction, ApiParams, ApiFileParams  # noqa: F401
from .resources import (                                     # noqa: F401
    Email,
    Send,
    Blast,
    Template,
    MailList,
    User,
    Event,
    Content,
    Stats,
    Purchase,
    ImportJob,
)
