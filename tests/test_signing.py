"""
Unit tests for OAuth 1.0a request signing.
"""

import base64
import hashlib
import hmac
from urllib.parse import parse_qs, unquote

import pytest

from instapaper_client import ConfigurationError, RequestSigner, Token
from instapaper_client.signing import encode_form, stringify_params, stringify_value


def parse_authorization(header):
    """Split an 'OAuth k="v", ...' header into a dict of unquoted values."""
    assert header.startswith("OAuth ")
    params = {}
    for part in header[len("OAuth "):].split(","):
        key, _, value = part.strip().partition("=")
        params[key] = unquote(value.strip('"'))
    return params


def hmac_sha1(key, base_string):
    digest = hmac.new(key.encode('utf-8'), base_string.encode('utf-8'), hashlib.sha1).digest()
    return base64.b64encode(digest).decode('ascii')


class TestStringify:
    """Test form value rendering."""

    def test_numbers_keep_decimal_form(self):
        assert stringify_value(123) == "123"
        assert stringify_value(0.5) == "0.5"
        assert stringify_value(1340000000) == "1340000000"

    def test_booleans_become_flags(self):
        assert stringify_value(True) == "1"
        assert stringify_value(False) == "0"

    def test_lists_become_json(self):
        assert stringify_value([{"name": "python"}]) == '[{"name":"python"}]'

    def test_none_values_dropped(self):
        params = stringify_params({"text": "quote", "position": None})
        assert params == {"text": "quote"}

    def test_empty_params(self):
        assert stringify_params(None) == {}
        assert encode_form({}) == ""

    def test_form_round_trips_values(self):
        params = {"bookmark_id": 42, "progress": 0.25, "progress_timestamp": 1700000000, "title": "Ünïcode & more"}
        body = encode_form(stringify_params(params))
        decoded = {key: values[0] for key, values in parse_qs(body).items()}

        assert decoded == {
            "bookmark_id": "42",
            "progress": "0.25",
            "progress_timestamp": "1700000000",
            "title": "Ünïcode & more",
        }


class TestRequestSigner:
    """Test HMAC-SHA1 signature generation."""

    @pytest.fixture
    def signer(self):
        return RequestSigner("ck", "cs")

    def test_init_requires_consumer_credentials(self):
        with pytest.raises(ConfigurationError):
            RequestSigner("", "secret")

        with pytest.raises(ConfigurationError):
            RequestSigner("key", "")

    def test_published_vector(self):
        """Signature matches the worked example from Twitter's OAuth 1.0a documentation."""
        signer = RequestSigner(
            "xvz1evFS4wEEPTGEFPHBog",
            "kAcSOqF21Fu85e7zjz7ZN2U4ZRhfV3WpwPAoE3Z7kBw",
        )
        token = Token(
            "370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS6weJAEb",
            "LswwdoUaIvS8ltyTt5jkRh4J50vUPVVHtR2YPi5kE",
        )
        headers, _ = signer.sign(
            "https://api.twitter.com/1.1/statuses/update.json?include_entities=true",
            {"status": "Hello Ladies + Gentlemen, a signed OAuth request!"},
            token,
            nonce="kYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg",
            timestamp="1318622958",
        )

        base_string = (
            "POST&https%3A%2F%2Fapi.twitter.com%2F1.1%2Fstatuses%2Fupdate.json&"
            "include_entities%3Dtrue%26"
            "oauth_consumer_key%3Dxvz1evFS4wEEPTGEFPHBog%26"
            "oauth_nonce%3DkYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg%26"
            "oauth_signature_method%3DHMAC-SHA1%26"
            "oauth_timestamp%3D1318622958%26"
            "oauth_token%3D370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS6weJAEb%26"
            "oauth_version%3D1.0%26"
            "status%3DHello%2520Ladies%2520%252B%2520Gentlemen%252C%2520a%2520signed%2520OAuth%2520request%2521"
        )
        signing_key = (
            "kAcSOqF21Fu85e7zjz7ZN2U4ZRhfV3WpwPAoE3Z7kBw&"
            "LswwdoUaIvS8ltyTt5jkRh4J50vUPVVHtR2YPi5kE"
        )
        oauth = parse_authorization(headers['Authorization'])

        assert oauth['oauth_signature'] == hmac_sha1(signing_key, base_string)

    def test_xauth_signature_uses_consumer_secret_only(self, signer):
        headers, body = signer.sign(
            "https://www.instapaper.com/api/1/oauth/access_token",
            {"x_auth_username": "user@example.com", "x_auth_password": "pw", "x_auth_mode": "client_auth"},
            nonce="abc",
            timestamp="1700000000",
        )

        base_string = (
            "POST&https%3A%2F%2Fwww.instapaper.com%2Fapi%2F1%2Foauth%2Faccess_token&"
            "oauth_consumer_key%3Dck%26"
            "oauth_nonce%3Dabc%26"
            "oauth_signature_method%3DHMAC-SHA1%26"
            "oauth_timestamp%3D1700000000%26"
            "oauth_version%3D1.0%26"
            "x_auth_mode%3Dclient_auth%26"
            "x_auth_password%3Dpw%26"
            "x_auth_username%3Duser%2540example.com"
        )
        oauth = parse_authorization(headers['Authorization'])

        assert 'oauth_token' not in oauth
        assert oauth['oauth_signature'] == hmac_sha1("cs&", base_string)
        assert parse_qs(body)['x_auth_username'] == ["user@example.com"]

    def test_header_fields(self, signer):
        headers, _ = signer.sign(
            "https://www.instapaper.com/api/1/folders/list",
            token=Token("tk", "ts"),
            nonce="n1",
            timestamp="1700000000",
        )
        oauth = parse_authorization(headers['Authorization'])

        assert oauth['oauth_consumer_key'] == "ck"
        assert oauth['oauth_token'] == "tk"
        assert oauth['oauth_nonce'] == "n1"
        assert oauth['oauth_timestamp'] == "1700000000"
        assert oauth['oauth_signature_method'] == "HMAC-SHA1"
        assert oauth['oauth_version'] == "1.0"
        assert headers['Content-Type'] == "application/x-www-form-urlencoded"

    def test_signature_deterministic(self, signer):
        args = ("https://www.instapaper.com/api/1/bookmarks/star", {"bookmark_id": 123}, Token("tk", "ts"))

        first, _ = signer.sign(*args, nonce="fixed", timestamp="1700000000")
        second, _ = signer.sign(*args, nonce="fixed", timestamp="1700000000")

        assert first['Authorization'] == second['Authorization']

    def test_signature_depends_on_params(self, signer):
        url = "https://www.instapaper.com/api/1/bookmarks/star"
        token = Token("tk", "ts")

        first, _ = signer.sign(url, {"bookmark_id": 1}, token, nonce="fixed", timestamp="1700000000")
        second, _ = signer.sign(url, {"bookmark_id": 2}, token, nonce="fixed", timestamp="1700000000")

        assert (parse_authorization(first['Authorization'])['oauth_signature']
                != parse_authorization(second['Authorization'])['oauth_signature'])

    def test_generated_nonces_unique(self, signer):
        url = "https://www.instapaper.com/api/1/folders/list"

        first, _ = signer.sign(url)
        second, _ = signer.sign(url)

        assert (parse_authorization(first['Authorization'])['oauth_nonce']
                != parse_authorization(second['Authorization'])['oauth_nonce'])

    def test_body_is_stringified_form(self, signer):
        _, body = signer.sign(
            "https://www.instapaper.com/api/1/bookmarks/update_read_progress",
            {"bookmark_id": 7, "progress": 0.75, "progress_timestamp": 1700000000},
        )

        assert parse_qs(body) == {
            "bookmark_id": ["7"],
            "progress": ["0.75"],
            "progress_timestamp": ["1700000000"],
        }
