#!/usr/bin/env python3
"""
Basic usage examples for the Instapaper Python client library.

Reads INSTAPAPER_CONSUMER_KEY / INSTAPAPER_CONSUMER_SECRET and either
INSTAPAPER_USERNAME / INSTAPAPER_PASSWORD or INSTAPAPER_OAUTH_TOKEN /
INSTAPAPER_OAUTH_TOKEN_SECRET from the environment.
"""

import logging
import sys

from instapaper_client import (
    ApiError,
    ConfigurationError,
    InstapaperClient,
    InstapaperError,
    PreconditionError
)


def main():
    """Run basic usage examples."""

    print("=== Instapaper Python Client Basic Usage Examples ===\n")

    # Create client
    print("1. Creating Instapaper client...")
    try:
        client = InstapaperClient.from_env(timeout=30)
    except ConfigurationError as e:
        print(f"   ✗ {e}")
        sys.exit(1)
    print(f"   Client created for: {client.base_url}")
    print(f"   Token state: {client.token_state.value}\n")

    try:
        # Example 1: Obtain (or reuse) the access token
        print("2. Obtaining access token...")
        try:
            token = client.get_access_token()
        except PreconditionError as e:
            print(f"   ✗ {e}")
            sys.exit(1)
        print(f"   ✓ Token: {token.key[:8]}...")
        print("   Store INSTAPAPER_OAUTH_TOKEN / INSTAPAPER_OAUTH_TOKEN_SECRET to skip the exchange next time.\n")

        # Example 2: Verify credentials
        print("3. Verifying credentials...")
        user = client.verify_credentials()[0]
        print(f"   ✓ Logged in as {user['username']} (user_id {user['user_id']})\n")

        # Example 3: List unread bookmarks
        print("4. Listing unread bookmarks...")
        items = client.bookmarks.list(limit=5)
        bookmarks = [item for item in items if item.get("type") == "bookmark"]
        for bookmark in bookmarks:
            starred = "★" if bookmark["starred"] == "1" else " "
            print(f"   {starred} [{bookmark['bookmark_id']}] {bookmark['title']}")
        if not bookmarks:
            print("   (no unread bookmarks)")
        print()

        # Example 4: Folders
        print("5. Listing folders...")
        for folder in client.folders.list():
            print(f"   [{folder['folder_id']}] {folder['title']}")
        print()

        # Example 5: Article text
        if bookmarks:
            print("6. Fetching text of the first bookmark...")
            text = client.bookmarks.get_text(bookmarks[0]["bookmark_id"])
            print(f"   ✓ {len(text)} characters of HTML\n")

        # Example 6: Error handling
        print("7. Demonstrating error handling...")
        try:
            client.bookmarks.star(0)
        except ApiError as e:
            print(f"   ✓ API rejected invalid bookmark: status {e.status_code}")
        print()

        print("=== All Examples Completed Successfully! ===")

    except InstapaperError as e:
        print(f"Instapaper Client Error: {e}")
        sys.exit(1)
    finally:
        # Clean up
        client.close()


def demonstrate_configuration():
    """Demonstrate client configuration options."""

    print("\n=== Configuration Options Example ===")

    with InstapaperClient(
        "consumer-key",
        "consumer-secret",
        token=("oauth-token", "oauth-token-secret"),
        timeout=10,                       # 10 second HTTP timeout
        user_agent="my-reader/1.0",
    ) as client:
        print("✓ Client configured with:")
        print(f"  - Base URL: {client.base_url}")
        print(f"  - HTTP timeout: {client.config['timeout']} seconds")
        print(f"  - User agent: {client.config['user_agent']}")
        print(f"  - Token state: {client.token_state.value}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
    demonstrate_configuration()
