"""
Test helpers: well-known accounts and canned proxy responses.
"""

from unittest.mock import Mock
import json

ALICE_BECH32 = "erd1qyu5wthldzr8wx5c9ucg8kjagg0jfs53s8nr3zpz3hypefsdd8ssycr6th"
ALICE_HEX = "0139472eff6886771a982f3083da5d421f24c29181e63888228dc81ca60d69e1"


def fake_response(body, status_code=200):
    """A stand-in for requests.Response carrying ``body`` (dict or raw text)."""
    response = Mock()
    response.status_code = status_code
    response.text = body if isinstance(body, str) else json.dumps(body)
    return response


def envelope(data=None, error="", code="successful"):
    return {"data": data, "error": error, "code": code}
