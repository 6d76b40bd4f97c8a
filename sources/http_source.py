"""Readable streams over HTTP response bodies."""
from typing import Dict, Optional

import requests

from utils.retry import retry_with_backoff


class HttpSource:
    """Opens HTTP(S) URLs as streams implementing ``readinto``."""

    def __init__(self, timeout: float = 300, headers: Optional[Dict[str, str]] = None):
        """
        Initialize HTTP source.

        Args:
            timeout: Connect/read timeout in seconds
            headers: Extra request headers (e.g. Authorization)
        """
        self.timeout = timeout
        self.headers = headers or {}

    @staticmethod
    def is_url(source: str) -> bool:
        """Check whether a CLI source argument names an HTTP(S) URL."""
        return source.lower().startswith(("http://", "https://"))

    @retry_with_backoff()
    def open(self, url: str):
        """
        Start a streaming download.

        Only the request itself is retried; reads from the returned body
        are not.

        Args:
            url: URL to download

        Returns:
            The response body as a raw urllib3 stream, with content
            decoding (gzip, deflate) enabled

        Raises:
            requests.RequestException: On connection or HTTP errors
        """
        response = requests.get(url, headers=self.headers, stream=True, timeout=self.timeout)
        try:
            response.raise_for_status()
        except requests.HTTPError:
            response.close()
            raise

        raw = response.raw
        raw.decode_content = True
        return raw
