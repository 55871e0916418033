"""Unit tests for reviewgate.core.session.extract_token: cookie first, then Bearer header."""

import unittest

from starlette.datastructures import Headers

from reviewgate.core.session import extract_token, token_from_authorization, token_from_cookie


class TestCookieLookup(unittest.TestCase):
    def test_single_cookie(self) -> None:
        self.assertEqual(extract_token({"cookie": "token=abc.def.ghi"}), "abc.def.ghi")

    def test_among_other_cookies_with_spaces(self) -> None:
        headers = {"Cookie": "theme=dark;  token=abc.def.ghi ; lang=en"}
        self.assertEqual(extract_token(headers), "abc.def.ghi")

    def test_similar_cookie_name_is_not_matched(self) -> None:
        self.assertIsNone(extract_token({"cookie": "csrftoken=zzz; xtoken=yyy"}))

    def test_empty_cookie_value_counts_as_absent(self) -> None:
        self.assertIsNone(token_from_cookie("token="))

    def test_custom_cookie_name(self) -> None:
        self.assertEqual(token_from_cookie("sid=1; rg_session=xyz", "rg_session"), "xyz")


class TestAuthorizationLookup(unittest.TestCase):
    def test_bearer_header(self) -> None:
        self.assertEqual(extract_token({"Authorization": "Bearer abc.def.ghi"}), "abc.def.ghi")

    def test_non_bearer_scheme_is_ignored(self) -> None:
        self.assertIsNone(token_from_authorization("Basic dXNlcjpwYXNz"))

    def test_empty_bearer_counts_as_absent(self) -> None:
        self.assertIsNone(token_from_authorization("Bearer "))
        self.assertIsNone(token_from_authorization(None))


class TestPrecedence(unittest.TestCase):
    def test_cookie_wins_over_header(self) -> None:
        headers = {"cookie": "token=from-cookie", "authorization": "Bearer from-header"}
        self.assertEqual(extract_token(headers), "from-cookie")

    def test_header_used_when_cookie_has_no_token(self) -> None:
        headers = {"cookie": "theme=dark", "authorization": "Bearer from-header"}
        self.assertEqual(extract_token(headers), "from-header")

    def test_header_used_after_logout_cleared_cookie(self) -> None:
        headers = {"cookie": "token=", "authorization": "Bearer from-header"}
        self.assertEqual(extract_token(headers), "from-header")

    def test_nothing_present(self) -> None:
        self.assertIsNone(extract_token({}))
        self.assertIsNone(extract_token({"content-type": "application/json"}))

    def test_works_with_starlette_headers(self) -> None:
        headers = Headers(raw=[(b"cookie", b"token=abc"), (b"authorization", b"Bearer other")])
        self.assertEqual(extract_token(headers), "abc")
