"""
Tests for the httpx based transport.

Requests are answered by httpx.MockTransport handlers, so no network
access is needed.
"""

import httpx
import pytest

from syno_filestation import endpoints
from syno_filestation.core.request import RequestBuilder
from syno_filestation.exceptions import ConfigurationError, TransportError
from syno_filestation.models import UploadFile
from syno_filestation.transport import HttpTransport, build_headers

API_BASE = "https://nas.local:5001/webapi"


def make_transport(handler) -> HttpTransport:
    client = httpx.Client(transport=httpx.MockTransport(handler), headers=build_headers())
    return HttpTransport(API_BASE, client=client)


class TestHttpTransportInit:
    def test_rejects_bad_url(self):
        with pytest.raises(ConfigurationError):
            HttpTransport("nas.local/webapi")

    def test_strips_trailing_slash(self):
        with HttpTransport(API_BASE + "/", timeout=5) as transport:
            assert transport.api_base_url == API_BASE
            assert transport.timeout == 5

    def test_url_for_descriptor(self):
        with HttpTransport(API_BASE) as transport:
            url = transport.url_for(endpoints.LIST.method("list"))

        assert url == "https://nas.local:5001/webapi/FileStation/file_share.cgi"

    def test_default_headers(self):
        headers = build_headers()

        assert headers["User-Agent"] == "syno-filestation-sdk/1.0"


class TestHttpTransportSend:
    @pytest.fixture
    def builder(self, session):
        return RequestBuilder(session)

    def test_get_sends_query_in_order(self, builder):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["query"] = list(request.url.params.multi_items())
            return httpx.Response(200, json={"success": True, "data": {"shares": []}})

        descriptor = endpoints.LIST.method("list_share")
        params = builder.build(descriptor, {"onlywritable": False}, {"offset": 0})

        with make_transport(handler) as transport:
            result = transport.send(descriptor, params)

        assert seen["method"] == "GET"
        assert seen["path"] == "/webapi/FileStation/file_share.cgi"
        assert seen["query"] == list(params.items_list())
        assert result.status_code == 200
        assert result.content_type.startswith("application/json")
        assert b'"shares"' in result.content

    def test_non_2xx_is_returned_not_raised(self, builder):
        def handler(request):
            return httpx.Response(500, text="Internal Server Error")

        descriptor = endpoints.INFO.method("getinfo")

        with make_transport(handler) as transport:
            result = transport.send(descriptor, builder.build(descriptor))

        assert result.status_code == 500
        assert result.is_success is False

    def test_binary_body_passed_through(self, builder):
        def handler(request):
            return httpx.Response(
                200, content=b"\xff\xd8\xff", headers={"content-type": "image/jpeg"}
            )

        descriptor = endpoints.THUMB.method("get")
        params = builder.build(descriptor, {"path": "/photo/a.jpg"})

        with make_transport(handler) as transport:
            result = transport.send(descriptor, params)

        assert result.content == b"\xff\xd8\xff"
        assert result.content_type == "image/jpeg"

    def test_upload_posts_multipart(self, builder):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["content_type"] = request.headers["content-type"]
            seen["body"] = request.read()
            return httpx.Response(200, json={"success": True})

        descriptor = endpoints.UPLOAD.method("upload")
        params = builder.build(
            descriptor, {"dest_folder_path": "/home", "create_parents": True}
        )
        upload = UploadFile(filename="notes.txt", content=b"hello world")

        with make_transport(handler) as transport:
            transport.send(descriptor, params, upload=upload)

        body = seen["body"]
        assert seen["method"] == "POST"
        assert seen["content_type"].startswith("multipart/form-data")
        assert b'name="dest_folder_path"' in body
        assert b'name="_sid"' in body
        assert b'filename="notes.txt"' in body
        assert b"hello world" in body
        assert body.index(b'name="_sid"') < body.index(b'filename="notes.txt"')

    def test_upload_on_get_endpoint_rejected(self, builder):
        descriptor = endpoints.LIST.method("list")

        with make_transport(lambda request: httpx.Response(200)) as transport:
            with pytest.raises(ConfigurationError):
                transport.send(
                    descriptor,
                    builder.build(descriptor, {"folder_path": "/a"}),
                    upload=UploadFile(filename="x", content=b"x"),
                )

    def test_timeout_becomes_transport_error(self, builder):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        descriptor = endpoints.INFO.method("getinfo")

        with make_transport(handler) as transport:
            with pytest.raises(TransportError) as exc_info:
                transport.send(descriptor, builder.build(descriptor))

        assert exc_info.value.status_code is None
        assert "timed out" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, httpx.TimeoutException)

    def test_connection_failure_becomes_transport_error(self, builder):
        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)

        descriptor = endpoints.INFO.method("getinfo")

        with make_transport(handler) as transport:
            with pytest.raises(TransportError) as exc_info:
                transport.send(descriptor, builder.build(descriptor))

        assert "Connection refused" in str(exc_info.value)
