"""
OAuth 1.0a request signing for the Instapaper API.

Every API call is a form-encoded POST whose body parameters take part in
the HMAC-SHA1 signature base string, so the body is encoded here once and
the exact same bytes are both signed and sent.
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import urlencode

from oauthlib.oauth1 import SIGNATURE_HMAC_SHA1, SIGNATURE_TYPE_AUTH_HEADER, Client

from .constants import CONTENT_TYPE_FORM
from .exceptions import ConfigurationError
from .models import Token

logger = logging.getLogger(__name__)


def stringify_value(value: Any) -> str:
    """
    Render one parameter value the way the API expects it on the wire.

    Booleans become "1"/"0", lists and dicts become compact JSON, and
    everything else goes through str() so numbers keep their decimal form.
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, separators=(',', ':'))
    return str(value)


def stringify_params(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Stringify every value, dropping parameters that are None."""
    if not params:
        return {}
    return {
        str(key): stringify_value(value)
        for key, value in params.items()
        if value is not None
    }


def encode_form(params: Mapping[str, str]) -> str:
    """Encode parameters as an application/x-www-form-urlencoded body."""
    return urlencode(list(params.items()))


class RequestSigner:
    """
    Signs form-encoded POST requests with the application's consumer credentials.

    The signing key is pct(consumer_secret) & pct(token_secret), with an
    empty token secret for the xAuth exchange itself.
    """

    def __init__(self, consumer_key: str, consumer_secret: str):
        if not consumer_key:
            raise ConfigurationError("consumer_key cannot be empty")
        if not consumer_secret:
            raise ConfigurationError("consumer_secret cannot be empty")
        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret

    def _client(self, token: Optional[Token], nonce: Optional[str], timestamp: Optional[str]) -> Client:
        return Client(
            self.consumer_key,
            client_secret=self.consumer_secret,
            resource_owner_key=token.key if token else None,
            resource_owner_secret=token.secret if token else None,
            signature_method=SIGNATURE_HMAC_SHA1,
            signature_type=SIGNATURE_TYPE_AUTH_HEADER,
            nonce=nonce,
            timestamp=timestamp,
        )

    def sign(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        token: Optional[Token] = None,
        nonce: Optional[str] = None,
        timestamp: Optional[str] = None,
    ) -> Tuple[Dict[str, str], str]:
        """
        Sign a POST to url carrying params as its form body.

        Args:
            url: Absolute request URL
            params: Form parameters; values are stringified, None is dropped
            token: Access token, or None to sign with consumer credentials only
            nonce: Fixed nonce (generated when omitted)
            timestamp: Fixed timestamp in seconds (current time when omitted)

        Returns:
            Tuple of (headers, body) to send unchanged
        """
        body = encode_form(stringify_params(params))
        client = self._client(token, nonce, timestamp)
        _, headers, _ = client.sign(
            url,
            http_method='POST',
            body=body,
            headers={'Content-Type': CONTENT_TYPE_FORM},
        )
        logger.debug("Signed POST %s (token=%s)", url, 'yes' if token else 'no')
        return dict(headers), body
