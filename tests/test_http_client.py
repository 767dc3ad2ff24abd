"""Tests for the page fetcher."""

from unittest.mock import MagicMock, patch

import requests

from common.http_client import PageFetcher, ensure_trailing_slash
from registry.sbt_plugin import SbtPluginResolver

URL = "https://repo.example.org/plugins/com.example/my-plugin/"


def _response(status_code, text=""):
    res = MagicMock()
    res.status_code = status_code
    res.text = text
    return res


def _fetcher(session, **kwargs):
    return PageFetcher(session=session, retry_delay=0, **kwargs)


class TestFetch:
    """Status handling and retries."""

    def test_success_returns_body(self):
        session = MagicMock()
        session.headers = {}
        session.get.return_value = _response(200, "<html></html>")

        page = _fetcher(session, timeout=5).fetch(URL)

        assert page.body == "<html></html>"
        assert page.status_code == 200
        assert page.url == URL
        session.get.assert_called_once_with(URL, timeout=5)

    def test_not_found_returns_none_without_retry(self):
        session = MagicMock()
        session.headers = {}
        session.get.return_value = _response(404)

        assert _fetcher(session).fetch(URL) is None
        assert session.get.call_count == 1

    def test_server_error_is_retried(self):
        session = MagicMock()
        session.headers = {}
        session.get.side_effect = [_response(503), _response(200, "ok")]

        page = _fetcher(session, retry_max=3).fetch(URL)

        assert page.body == "ok"
        assert session.get.call_count == 2

    def test_connection_errors_exhaust_retries(self):
        session = MagicMock()
        session.headers = {}
        session.get.side_effect = requests.ConnectionError("boom")

        assert _fetcher(session, retry_max=3).fetch(URL) is None
        assert session.get.call_count == 3

    def test_timeout_returns_none(self):
        session = MagicMock()
        session.headers = {}
        session.get.side_effect = requests.Timeout()

        assert _fetcher(session, retry_max=2).fetch(URL) is None
        assert session.get.call_count == 2

    @patch("common.http_client.time.sleep")
    def test_backoff_grows_linearly(self, mock_sleep):
        session = MagicMock()
        session.headers = {}
        session.get.side_effect = [_response(500), _response(502), _response(200, "ok")]

        PageFetcher(session=session, retry_max=3, retry_delay=0.5).fetch(URL)

        assert [c.args[0] for c in mock_sleep.call_args_list] == [0.5, 1.0]

    def test_sets_user_agent(self):
        session = MagicMock()
        session.headers = {}
        PageFetcher(session=session)
        assert session.headers["User-Agent"] == "sbt-plugin-releases"


def test_slash_helpers():
    assert ensure_trailing_slash("https://a/b") == "https://a/b/"
    assert ensure_trailing_slash("https://a/b//") == "https://a/b/"


def test_invalid_port_resolves_to_no_releases():
    session = MagicMock()
    session.headers = {}
    session.get.side_effect = requests.exceptions.InvalidURL("bad port")
    resolver = SbtPluginResolver(_fetcher(session, retry_max=1))

    result = resolver.get_releases("com.example:my-plugin_2.12", "https://repo.example.org:abc/plugins")

    assert result is None
    assert session.get.call_count > 0
