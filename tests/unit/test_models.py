"""
Unit tests for SDK models.
"""

import dataclasses

import pytest

from syno_filestation.exceptions import ConfigurationError
from syno_filestation.models import (
    ApiResult,
    CompressionFormat,
    Session,
    SharingSortBy,
    SortBy,
    ThumbnailRotation,
    TransportResult,
    UploadFile,
)


class TestSession:
    def test_create(self):
        session = Session(sid="abc")

        assert session.sid == "abc"

    @pytest.mark.parametrize("sid", ["", "   ", None])
    def test_empty_sid_rejected(self, sid):
        with pytest.raises(ConfigurationError):
            Session(sid=sid)

    def test_immutable(self):
        session = Session(sid="abc")

        with pytest.raises(dataclasses.FrozenInstanceError):
            session.sid = "other"

    def test_repr_hides_token(self):
        assert "abc" not in repr(Session(sid="abc"))


class TestWireEnums:
    def test_value_is_wire_name(self):
        assert SortBy.CRTIME.value == "crtime"
        assert SharingSortBy.IS_FOLDER.value == "isFolder"
        assert ThumbnailRotation.ROTATE_90.value == "rotate90"

    def test_str_is_wire_name(self):
        assert str(CompressionFormat.SEVEN_ZIP) == "7z"
        assert f"{CompressionFormat.ZIP}" == "zip"


class TestTransportResult:
    @pytest.mark.parametrize(
        "status_code,expected", [(200, True), (206, True), (301, False), (404, False), (500, False)]
    )
    def test_is_success(self, status_code, expected):
        assert TransportResult(status_code=status_code).is_success is expected

    def test_defaults(self):
        result = TransportResult(status_code=200)

        assert result.content == b""
        assert result.content_type == ""


class TestApiResult:
    def test_json_result(self):
        result = ApiResult(status_code=200, data={"total": 3})

        assert result.data == {"total": 3}
        assert result.content is None
        assert result.is_binary is False

    def test_binary_result(self):
        result = ApiResult(status_code=200, content=b"")

        assert result.is_binary is True


class TestUploadFile:
    def test_timestamps_optional(self):
        upload = UploadFile(filename="a.txt", content=b"hello")

        assert upload.mtime is None
        assert upload.crtime is None
        assert upload.atime is None
