"""
Instapaper Full API client.

This module provides the signed request executor and the xAuth access
token exchange. Resource-specific methods live in endpoints.py and are
reached through the client's bookmarks, folders and highlights attributes.
"""

import logging
import os
from typing import Any, List, Mapping, Optional, Union
from urllib.parse import parse_qsl

import requests

from .auth import TokenManager, TokenState
from .constants import (
    ACCESS_TOKEN_PATH,
    CONTENT_TYPE_JSON,
    DEFAULT_CONFIG,
    ENV_CONSUMER_KEY,
    ENV_CONSUMER_SECRET,
    ENV_OAUTH_TOKEN,
    ENV_OAUTH_TOKEN_SECRET,
    ENV_PASSWORD,
    ENV_USERNAME,
    VERIFY_CREDENTIALS_PATH,
    XAUTH_MODE,
)
from .endpoints import Bookmarks, Folders, Highlights
from .exceptions import ApiError, ConfigurationError, HTTPError, ParameterError, ProtocolError
from .models import Token, User
from .signing import RequestSigner

logger = logging.getLogger(__name__)


class InstapaperClient:
    """
    Client for the Instapaper Full API.

    Every call is a signed form POST. A token is obtained from the
    username/password on first use unless one was passed in.
    """

    def __init__(self, consumer_key: str, consumer_secret: str,
                 username: Optional[str] = None, password: Optional[str] = None,
                 token: Union[Token, Mapping[str, str], tuple, None] = None, **config):
        """
        Initialize Instapaper client.

        Args:
            consumer_key: Application consumer key
            consumer_secret: Application consumer secret
            username: Instapaper account email or username
            password: Account password (may be empty for password-less accounts)
            token: Previously obtained access token
            **config: Configuration options (base_url, timeout, user_agent)
        """
        # Merge default config with user overrides
        unknown = sorted(set(config) - set(DEFAULT_CONFIG))
        if unknown:
            raise ConfigurationError(f"Unknown configuration option(s): {', '.join(unknown)}")
        self.config = {**DEFAULT_CONFIG, **config}

        # Validate configuration
        self._validate_config()

        self.base_url = self.config['base_url'].rstrip('/')
        self.signer = RequestSigner(consumer_key, consumer_secret)
        try:
            initial_token = Token.coerce(token)
        except ParameterError as e:
            raise ConfigurationError(str(e)) from e
        self._tokens = TokenManager(username, password, initial_token)

        # Create HTTP session
        self.session = requests.Session()
        self.session.headers['User-Agent'] = self.config['user_agent']

        self.bookmarks = Bookmarks(self)
        self.folders = Folders(self)
        self.highlights = Highlights(self)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **config) -> "InstapaperClient":
        """
        Build a client from INSTAPAPER_* environment variables.

        The consumer key and secret are required; username/password and
        oauth token/secret are picked up when present.
        """
        env = os.environ if environ is None else environ
        consumer_key = env.get(ENV_CONSUMER_KEY)
        consumer_secret = env.get(ENV_CONSUMER_SECRET)
        if not consumer_key or not consumer_secret:
            raise ConfigurationError(
                f"{ENV_CONSUMER_KEY} and {ENV_CONSUMER_SECRET} must be set"
            )

        token = None
        if env.get(ENV_OAUTH_TOKEN) and env.get(ENV_OAUTH_TOKEN_SECRET):
            token = Token(env[ENV_OAUTH_TOKEN], env[ENV_OAUTH_TOKEN_SECRET])

        return cls(
            consumer_key,
            consumer_secret,
            username=env.get(ENV_USERNAME) or None,
            password=env.get(ENV_PASSWORD),
            token=token,
            **config,
        )

    def _validate_config(self):
        """Validate client configuration."""
        base_url = self.config['base_url']
        if not base_url or not base_url.startswith(('http://', 'https://')):
            raise ConfigurationError("base_url must be an absolute http(s) URL")

        timeout = self.config['timeout']
        if timeout is not None and timeout <= 0:
            raise ConfigurationError("timeout must be positive")

    @property
    def token(self) -> Optional[Token]:
        """The cached access token, for callers that want to persist it."""
        return self._tokens.token

    @property
    def token_state(self) -> TokenState:
        return self._tokens.state

    def set_credentials(self, username: str, password: str):
        """Set the username/password used to obtain an access token."""
        self._tokens.set_credentials(username, password)

    def set_token(self, token: Union[Token, Mapping[str, str], tuple]):
        """Install an access token obtained in an earlier session."""
        self._tokens.set_token(Token.coerce(token))

    def _make_request(self, url: str, params: Optional[Mapping[str, Any]] = None,
                      token: Optional[Token] = None) -> Any:
        """
        Sign and POST a form request, then decode the response.

        Args:
            url: Absolute request URL
            params: Form parameters
            token: Access token, or None for consumer-only signing

        Returns:
            Parsed JSON when the response declares application/json,
            otherwise the response text

        Raises:
            HTTPError: If the request could not be sent
            ApiError: If the server answers with a non-2xx status
        """
        headers, body = self.signer.sign(url, params, token)
        logger.debug("POST %s params=%s", url, sorted(params or {}))

        try:
            response = self.session.request(
                'POST', url, headers=headers, data=body, timeout=self.config['timeout']
            )
        except requests.RequestException as e:
            raise HTTPError(f"HTTP request failed: {e}") from e

        logger.debug("POST %s -> %s", url, response.status_code)
        if not response.ok:
            logger.warning("Instapaper rejected %s: status=%s", url, response.status_code)
            raise ApiError(response.status_code, response.text)

        content_type = response.headers.get('Content-Type', '')
        if CONTENT_TYPE_JSON in content_type:
            return response.json()
        return response.text

    def _exchange_credentials(self, username: str, password: str) -> Token:
        params = {
            'x_auth_username': username,
            'x_auth_password': password,
            'x_auth_mode': XAUTH_MODE,
        }
        text = self._make_request(self.base_url + ACCESS_TOKEN_PATH, params)
        if not isinstance(text, str):
            raise ProtocolError("Access token response was not a form-encoded body")

        data = dict(parse_qsl(text.strip()))
        key = data.get('oauth_token')
        secret = data.get('oauth_token_secret')
        if not key or not secret:
            raise ProtocolError(
                "There was an error fetching the token: oauth_token and/or oauth_token_secret missing."
            )
        return Token(key, secret)

    def get_access_token(self) -> Token:
        """
        Return the access token, exchanging username/password on first use.

        Raises:
            PreconditionError: If neither a token nor credentials are available
            ProtocolError: If the token response is missing fields
        """
        return self._tokens.get_token(self._exchange_credentials)

    def request(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Make an authenticated API call.

        Args:
            endpoint: Path below base_url, e.g. "/1/folders/list"
            params: Form parameters

        Returns:
            Decoded response body
        """
        token = self.get_access_token()
        return self._make_request(self.base_url + endpoint, params, token)

    def verify_credentials(self) -> List[User]:
        """Return the authenticated user as a one-element list."""
        return self.request(VERIFY_CREDENTIALS_PATH)

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        return f"<InstapaperClient base_url={self.base_url!r} token_state={self.token_state.value}>"
