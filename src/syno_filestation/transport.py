"""
HTTP transport for File Station calls.
"""

from typing import Dict, Optional

import httpx

from .config import get_logger
from .core.params import ParameterSet
from .core.request import RemoteCallDescriptor
from .exceptions import ConfigurationError, TransportError
from .models import TransportResult, UploadFile

logger = get_logger("transport")

USER_AGENT = "syno-filestation-sdk/1.0"


def build_headers() -> Dict[str, str]:
    """Build default request headers."""
    return {"User-Agent": USER_AGENT, "Accept": "application/json, */*"}


class HttpTransport:
    """
    Executes File Station calls over HTTP.

    GET calls send the parameter set as a query string. POST calls send it
    as multipart form fields, followed by the file part for uploads.

    Args:
        api_base_url: Base URL including the API root, e.g.
            ``https://nas.local:5001/webapi``
        timeout: Request timeout in seconds
        verify_ssl: Verify the server certificate
        client: Pre-built httpx.Client to use instead of creating one
    """

    def __init__(
        self,
        api_base_url: str,
        timeout: float = 30,
        verify_ssl: bool = True,
        client: Optional[httpx.Client] = None,
    ):
        if not api_base_url or not api_base_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                "API base URL must start with http:// or https://",
                {"api_base_url": api_base_url},
            )
        self.api_base_url = api_base_url.rstrip("/")
        self.timeout = timeout
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(timeout),
            headers=build_headers(),
            verify=verify_ssl,
        )

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def url_for(self, descriptor: RemoteCallDescriptor) -> str:
        return f"{self.api_base_url}{descriptor.path}"

    def send(
        self,
        descriptor: RemoteCallDescriptor,
        params: ParameterSet,
        upload: Optional[UploadFile] = None,
    ) -> TransportResult:
        """Execute one HTTP round trip and return the raw result."""
        url = self.url_for(descriptor)
        method = descriptor.http_method.upper()

        try:
            if method == "GET":
                if upload is not None:
                    raise ConfigurationError(
                        f"{descriptor.api} does not accept file uploads"
                    )
                response = self._client.get(url, params=list(params.items_list()))
            else:
                files = None
                if upload is not None:
                    files = {
                        "file": (
                            upload.filename,
                            upload.content,
                            "application/octet-stream",
                        )
                    }
                response = self._client.request(
                    method, url, data=params.to_dict(), files=files
                )
        except httpx.TimeoutException as exc:
            logger.warning("Request to %s timed out: %s", url, exc)
            raise TransportError(f"Request to {descriptor.api} timed out") from exc
        except httpx.RequestError as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise TransportError(
                f"Network error calling {descriptor.api}: {exc}"
            ) from exc

        return TransportResult(
            status_code=response.status_code,
            content=response.content,
            content_type=response.headers.get("content-type", ""),
        )
