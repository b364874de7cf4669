"""
Pure functions for classifying File Station responses.

A response fails at one of two tiers. Transport failures (non-2xx status)
are reported without looking at the body. Protocol failures are reported
by the JSON envelope ``{"success": false, "error": {"code": N}}``.
"""

import json
from typing import Any, Dict, Optional

from ..exceptions import DecodingError, ProtocolError, TransportError
from ..models import ApiResult, TransportResult


def check_transport_status(result: TransportResult) -> None:
    """Raise TransportError for any non-2xx status."""
    if not result.is_success:
        raise TransportError(
            f"HTTP {result.status_code} from Synology API",
            status_code=result.status_code,
        )


def decode_envelope(content: bytes) -> Dict[str, Any]:
    """Parse and validate the JSON envelope structure."""
    try:
        envelope = json.loads(content)
    except (ValueError, UnicodeDecodeError) as exc:
        raise DecodingError(f"Response is not valid JSON: {exc}") from exc

    if not isinstance(envelope, dict):
        raise DecodingError("Invalid response format: expected JSON object")

    if not isinstance(envelope.get("success"), bool):
        raise DecodingError("Invalid response format: missing 'success' field")

    return envelope


def extract_error_code(envelope: Dict[str, Any]) -> int:
    error = envelope.get("error")
    if not isinstance(error, dict):
        raise DecodingError("Invalid error response: missing 'error' field")

    code = error.get("code")
    if isinstance(code, bool) or not isinstance(code, int):
        raise DecodingError("Invalid error response: missing numeric 'code'")
    return code


def raise_for_envelope(envelope: Dict[str, Any], api: Optional[str] = None) -> None:
    if envelope["success"]:
        return
    error = envelope.get("error")
    details = error if isinstance(error, dict) else {}
    raise ProtocolError(extract_error_code(envelope), api=api, details=details)


class ResponseClassifier:
    """Turns transport results into ApiResults or typed exceptions."""

    def classify(
        self, result: TransportResult, api: Optional[str] = None
    ) -> ApiResult:
        """Classify a response to a JSON operation."""
        check_transport_status(result)

        envelope = decode_envelope(result.content)
        raise_for_envelope(envelope, api)

        data = envelope.get("data")
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise DecodingError("Invalid response format: 'data' is not an object")

        return ApiResult(status_code=result.status_code, data=data)

    def classify_binary(
        self, result: TransportResult, api: Optional[str] = None
    ) -> ApiResult:
        """
        Classify a response to a binary operation (thumbnail, download).

        There is no envelope: any 2xx body is returned as-is, whatever its
        content type.
        """
        check_transport_status(result)
        return ApiResult(status_code=result.status_code, content=result.content)
