"""
Access token lifecycle for the Instapaper client.

A client starts without a token unless one is injected. The first call that
needs one exchanges the stored username/password for a token (xAuth) and
the result is kept for the lifetime of the client. Concurrent first calls
share a single exchange.
"""

import enum
import logging
import threading
from typing import Callable, Optional

from .exceptions import PreconditionError
from .models import Token

logger = logging.getLogger(__name__)

TokenFetcher = Callable[[str, str], Token]


class TokenState(enum.Enum):
    NO_TOKEN = "no_token"
    BOOTSTRAPPING = "bootstrapping"
    READY = "ready"


class TokenManager:
    """
    Holds user credentials and the cached access token.

    The token is never checked for validity once cached; a revoked token
    shows up as an ApiError from whichever call used it.
    """

    def __init__(self, username: Optional[str] = None, password: Optional[str] = None,
                 token: Optional[Token] = None):
        self._username = username
        self._password = password
        self._token = token
        self._state = TokenState.READY if token else TokenState.NO_TOKEN
        self._lock = threading.Lock()

    @property
    def state(self) -> TokenState:
        return self._state

    @property
    def token(self) -> Optional[Token]:
        return self._token

    @property
    def username(self) -> Optional[str]:
        return self._username

    @property
    def has_credentials(self) -> bool:
        return bool(self._username) and self._password is not None

    def set_credentials(self, username: str, password: str):
        """Replace the stored username/password. A cached token is left alone."""
        self._username = username
        self._password = password

    def set_token(self, token: Token):
        """Install a token obtained elsewhere, e.g. from a previous session."""
        with self._lock:
            self._token = token
            self._state = TokenState.READY

    def get_token(self, fetch: TokenFetcher) -> Token:
        """
        Return the cached token, running the exchange on first use.

        Args:
            fetch: Callable performing the xAuth exchange for (username, password)

        Returns:
            The access token

        Raises:
            PreconditionError: If no token is cached and no credentials are set
        """
        token = self._token
        if token is not None:
            return token

        with self._lock:
            # Another thread may have finished the exchange while we waited
            if self._token is not None:
                return self._token

            if not self.has_credentials:
                raise PreconditionError(
                    "No access token available: set username and password with set_credentials() first."
                )

            self._state = TokenState.BOOTSTRAPPING
            logger.debug("Exchanging credentials for an access token (user=%s)", self._username)
            try:
                token = fetch(self._username, self._password)
            except Exception:
                self._state = TokenState.NO_TOKEN
                raise

            self._token = token
            self._state = TokenState.READY
            logger.info("Obtained Instapaper access token for %s", self._username)
            return token
