"""
Instapaper Client Library

A Python client for the Instapaper Full API: OAuth 1.0a (HMAC-SHA1) request
signing, xAuth access token exchange and methods for bookmarks, folders and
highlights.

Example usage:
    from instapaper_client import InstapaperClient

    client = InstapaperClient("consumer-key", "consumer-secret",
                              username="me@example.com", password="secret")
    items = client.bookmarks.list(limit=10)
"""

from .auth import TokenManager, TokenState
from .client import InstapaperClient
from .constants import API_BASE_URL, CLIENT_VERSION, DEFAULT_CONFIG
from .exceptions import (
    InstapaperError,
    ApiError,
    ConfigurationError,
    HTTPError,
    ParameterError,
    PreconditionError,
    ProtocolError
)
from .models import (
    AddBookmarkParams,
    AddHighlightParams,
    Bookmark,
    Error,
    Folder,
    Highlight,
    ListItem,
    ListParams,
    Meta,
    Tag,
    Token,
    UpdateReadProgressParams,
    User
)
from .signing import RequestSigner

__version__ = CLIENT_VERSION
__all__ = [
    "InstapaperClient",
    "RequestSigner",
    "TokenManager",
    "TokenState",
    "Token",
    "InstapaperError",
    "ApiError",
    "ConfigurationError",
    "HTTPError",
    "ParameterError",
    "PreconditionError",
    "ProtocolError",
    "AddBookmarkParams",
    "AddHighlightParams",
    "ListParams",
    "UpdateReadProgressParams",
    "Bookmark",
    "Error",
    "Folder",
    "Highlight",
    "ListItem",
    "Meta",
    "Tag",
    "User",
    "API_BASE_URL",
    "DEFAULT_CONFIG"
]
