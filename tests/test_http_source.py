"""Tests for HTTP sources."""
import io
import pytest
import requests
from unittest.mock import Mock, patch
from sources.http_source import HttpSource
from utils.chunked import chunked


def make_response(body: bytes, status_code: int = 200):
    """Create a mock streaming response."""
    response = Mock()
    response.status_code = status_code
    response.raw = io.BytesIO(body)
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"HTTP {status_code}", response=response
        )
    return response


def test_is_url():
    """Test URL detection for CLI sources."""
    assert HttpSource.is_url("https://example.com/file.bin")
    assert HttpSource.is_url("HTTP://example.com")
    assert not HttpSource.is_url("/tmp/file.bin")
    assert not HttpSource.is_url("-")


@patch("sources.http_source.requests.get")
def test_open_returns_raw_stream(mock_get):
    """Test that open streams the body and enables content decoding."""
    mock_get.return_value = make_response(b"Hello, World!")
    source = HttpSource(timeout=10, headers={"Authorization": "Bearer t"})

    stream = source.open("https://example.com/hello")

    mock_get.assert_called_once_with(
        "https://example.com/hello",
        headers={"Authorization": "Bearer t"},
        stream=True,
        timeout=10,
    )
    assert stream.decode_content is True
    assert list(chunked(stream, 5)) == [b"Hello", b", Wor", b"ld!"]


@patch("utils.retry.time.sleep")
@patch("sources.http_source.requests.get")
def test_open_retries_server_errors(mock_get, mock_sleep):
    """Test that 5xx responses are retried before giving up."""
    mock_get.side_effect = [make_response(b"", 503), make_response(b"ok")]

    stream = HttpSource().open("https://example.com/flaky")

    assert stream.read() == b"ok"
    assert mock_get.call_count == 2


@patch("utils.retry.time.sleep")
@patch("sources.http_source.requests.get")
def test_open_does_not_retry_not_found(mock_get, mock_sleep):
    """Test that 404 responses are raised immediately and closed."""
    response = make_response(b"", 404)
    mock_get.return_value = response

    with pytest.raises(requests.HTTPError):
        HttpSource().open("https://example.com/missing")

    assert mock_get.call_count == 1
    response.close.assert_called_once()
