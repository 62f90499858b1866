"""
Constants for Instapaper client library.
Endpoint paths follow the Instapaper Full API documentation.
"""

# API location
API_BASE_URL = "https://www.instapaper.com/api"

# OAuth / xAuth (https://www.instapaper.com/api, "Authentication")
ACCESS_TOKEN_PATH = "/1/oauth/access_token"
XAUTH_MODE = "client_auth"
SIGNATURE_METHOD = "HMAC-SHA1"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"
CONTENT_TYPE_JSON = "application/json"

# Account
VERIFY_CREDENTIALS_PATH = "/1/account/verify_credentials"

# Bookmarks
BOOKMARKS_LIST_PATH = "/1/bookmarks/list"
BOOKMARKS_UPDATE_READ_PROGRESS_PATH = "/1/bookmarks/update_read_progress"
BOOKMARKS_ADD_PATH = "/1/bookmarks/add"
BOOKMARKS_DELETE_PATH = "/1/bookmarks/delete"
BOOKMARKS_STAR_PATH = "/1/bookmarks/star"
BOOKMARKS_UNSTAR_PATH = "/1/bookmarks/unstar"
BOOKMARKS_ARCHIVE_PATH = "/1/bookmarks/archive"
BOOKMARKS_UNARCHIVE_PATH = "/1/bookmarks/unarchive"
BOOKMARKS_MOVE_PATH = "/1/bookmarks/move"
BOOKMARKS_GET_TEXT_PATH = "/1/bookmarks/get_text"

# Folders
FOLDERS_LIST_PATH = "/1/folders/list"
FOLDERS_ADD_PATH = "/1/folders/add"
FOLDERS_DELETE_PATH = "/1/folders/delete"
FOLDERS_SET_ORDER_PATH = "/1/folders/set_order"

# Highlights (API v1.1, ids are part of the path)
HIGHLIGHTS_LIST_PATH = "/1.1/bookmarks/{bookmark_id}/highlights"
HIGHLIGHTS_ADD_PATH = "/1.1/bookmarks/{bookmark_id}/highlight"
HIGHLIGHTS_DELETE_PATH = "/1.1/highlights/{highlight_id}/delete"

# Built-in folder names accepted by bookmarks/list
BUILTIN_FOLDERS = ("unread", "starred", "archive")

# bookmarks/list accepts 1..500, server default is 25
MIN_LIST_LIMIT = 1
MAX_LIST_LIMIT = 500

CLIENT_VERSION = "1.0.0"

# Default configuration values
DEFAULT_CONFIG = {
    'base_url': API_BASE_URL,
    'timeout': None,            # seconds; None blocks until the server answers
    'user_agent': f"instapaper-client/{CLIENT_VERSION}",
}

# Environment variables read by InstapaperClient.from_env()
ENV_CONSUMER_KEY = "INSTAPAPER_CONSUMER_KEY"
ENV_CONSUMER_SECRET = "INSTAPAPER_CONSUMER_SECRET"
ENV_USERNAME = "INSTAPAPER_USERNAME"
ENV_PASSWORD = "INSTAPAPER_PASSWORD"
ENV_OAUTH_TOKEN = "INSTAPAPER_OAUTH_TOKEN"
ENV_OAUTH_TOKEN_SECRET = "INSTAPAPER_OAUTH_TOKEN_SECRET"
