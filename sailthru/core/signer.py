# -*- coding: utf-8 -*-
# sailthru/core/signer.py
"""
Request signer for the Sailthru API.
- sig = md5(secret + sorted payload values)
- MD5 is what the live API verifies, do not swap the digest.
"""
from typing import Dict

from .util import md5

RESERVED_KEYS = ('api_key', 'format', 'json', 'sig')


class Signer:
    def __init__(self, api_key, api_secret):
        self.api_key = api_key
        self.api_secret = api_secret or ''

    def get_signature_hash(self, params: Dict[str, str]) -> str:
        """Hash the secret followed by every parameter value in sorted order."""
        values = sorted(str(v) for v in params.values())
        return md5(self.api_secret + ''.join(values))

    def build_payload(self, json_payload: str, response_format: str) -> Dict[str, str]:
        """Assemble the transmitted form fields, ``sig`` last."""
        params = {
            'api_key': self.api_key,
            'format': response_format,
            'json': json_payload,
        }
        params['sig'] = self.get_signature_hash(params)
        return params
