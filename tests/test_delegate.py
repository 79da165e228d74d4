"""Tests for commitit.delegate module."""

import httpx
import pytest

from commitit.config import MessageSource, Settings
from commitit.delegate import DELEGATE_SEPARATOR, DelegateClient, build_request_body
from commitit.exceptions import CollaboratorError, ConfigurationError, DelegateError

URL = "http://delegate.test/generate"


def make_client(handler, **kwargs) -> DelegateClient:
    return DelegateClient(URL, transport=httpx.MockTransport(handler), **kwargs)


class TestBuildRequestBody:
    """Tests for build_request_body function."""

    def test_joins_with_separator(self):
        """Test body layout."""
        assert build_request_body("diff", "fix") == f"diff{DELEGATE_SEPARATOR}fix"

    def test_missing_instructions(self):
        """Test that absent instructions become an empty tail."""
        assert build_request_body("diff", None) == f"diff{DELEGATE_SEPARATOR}"

    def test_separator_is_not_diff_content(self):
        """Test that the separator cannot be read as a diff line."""
        for line in DELEGATE_SEPARATOR.strip("\n").split("\n"):
            assert not line.startswith(("+", "-", " ", "@", "diff", "index"))


class TestDelegateClient:
    """Tests for DelegateClient."""

    def test_returns_body_verbatim(self):
        """Test that the response body is returned unchanged."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["body"] = request.content.decode("utf-8")
            seen["content_type"] = request.headers["content-type"]
            return httpx.Response(200, text="  feat: add parser\n\nDetails\n")

        message = make_client(handler).generate("+++ b/a.py\n+x", "feat")

        assert message == "  feat: add parser\n\nDetails\n"
        assert seen["method"] == "POST"
        assert seen["body"] == f"+++ b/a.py\n+x{DELEGATE_SEPARATOR}feat"
        assert seen["content_type"].startswith("text/plain")

    def test_sends_bearer_token(self):
        """Test the Authorization header."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers.get("authorization")
            return httpx.Response(200, text="ok")

        make_client(handler, token="abc").generate("diff")
        assert seen["auth"] == "Bearer abc"

    def test_no_token_no_header(self):
        """Test that no Authorization header is sent without a token."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers.get("authorization")
            return httpx.Response(200, text="ok")

        make_client(handler).generate("diff")
        assert seen["auth"] is None

    def test_non_success_status(self):
        """Test that a non-2xx status raises DelegateError."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="overloaded")

        with pytest.raises(DelegateError) as exc_info:
            make_client(handler).generate("diff")

        assert "503" in str(exc_info.value)
        assert "overloaded" in str(exc_info.value)

    def test_transport_failure(self):
        """Test that connection errors raise DelegateError."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(CollaboratorError) as exc_info:
            make_client(handler).generate("diff")

        assert "connection refused" in str(exc_info.value)

    def test_timeout(self):
        """Test that timeouts raise DelegateError."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        with pytest.raises(DelegateError) as exc_info:
            make_client(handler, timeout=0.5).generate("diff")

        assert "timed out" in str(exc_info.value)

    def test_requires_url(self):
        """Test that an empty URL is a configuration error."""
        with pytest.raises(ConfigurationError):
            DelegateClient("")

    def test_from_settings(self):
        """Test construction from Settings."""
        settings = Settings(
            message_source=MessageSource.DELEGATE,
            delegate_url=URL,
            delegate_timeout=12,
            delegate_token="t",
        )
        client = DelegateClient.from_settings(settings)
        assert client.url == URL
        assert client.timeout == 12
        assert client.token == "t"
