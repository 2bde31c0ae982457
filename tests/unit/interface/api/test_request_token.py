"""Unit tests for request token extraction."""

from topfive.interface.api.auth import request_token


class TestRequestToken:
    def test_cookie(self):
        assert request_token(auth_token="abc", authorization=None) == "abc"

    def test_bearer_header(self):
        assert request_token(auth_token=None, authorization="Bearer xyz") == "xyz"

    def test_cookie_wins_over_header(self):
        assert request_token(auth_token="abc", authorization="Bearer xyz") == "abc"

    def test_other_schemes_ignored(self):
        assert request_token(auth_token=None, authorization="Basic dXNlcg==") is None

    def test_nothing(self):
        assert request_token(auth_token=None, authorization=None) is None
