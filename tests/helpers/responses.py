import json

from syno_filestation.models import TransportResult


def json_result(payload, status_code: int = 200) -> TransportResult:
    """Build a TransportResult carrying a JSON body."""
    return TransportResult(
        status_code=status_code,
        content=json.dumps(payload).encode("utf-8"),
        content_type="application/json; charset=utf-8",
    )


def binary_result(content: bytes, content_type: str = "image/jpeg") -> TransportResult:
    """Build a TransportResult carrying raw file bytes."""
    return TransportResult(status_code=200, content=content, content_type=content_type)
