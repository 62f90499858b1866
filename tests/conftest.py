"""
Shared fixtures for Instapaper client tests.
"""

import json

import pytest
import requests

from instapaper_client import InstapaperClient, Token


def build_response(status_code=200, body="", content_type=None):
    """Create a real requests.Response carrying the given body."""
    response = requests.Response()
    response.status_code = status_code
    if not isinstance(body, str):
        body = json.dumps(body)
        content_type = content_type or "application/json"
    response._content = body.encode('utf-8')
    response.encoding = 'utf-8'
    if content_type:
        response.headers['content-type'] = content_type
    return response


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def token():
    return Token("user-token", "user-token-secret")


@pytest.fixture
def client(token):
    """Client with an injected token, so no xAuth exchange happens."""
    with InstapaperClient("consumer-key", "consumer-secret", token=token) as client:
        yield client


@pytest.fixture
def login_client():
    """Client that must exchange username/password for a token first."""
    with InstapaperClient("consumer-key", "consumer-secret",
                          username="reader@example.com", password="hunter2") as client:
        yield client
