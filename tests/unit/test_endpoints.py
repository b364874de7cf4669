import pytest

from syno_filestation import endpoints
from syno_filestation.core.request import RemoteCallDescriptor


class TestEndpointTable:
    @pytest.mark.parametrize(
        "endpoint,path,api",
        [
            (endpoints.INFO, "/FileStation/info.cgi", "SYNO.FileStation.Info"),
            (endpoints.LIST, "/FileStation/file_share.cgi", "SYNO.FileStation.List"),
            (endpoints.SEARCH, "/FileStation/file_find.cgi", "SYNO.FileStation.Search"),
            (endpoints.VIRTUAL_FOLDER, "/FileStation/file_virtual.cgi", "SYNO.FileStation.VirtualFolder"),
            (endpoints.FAVORITE, "/FileStation/file_favorite.cgi", "SYNO.FileStation.Favorite"),
            (endpoints.THUMB, "/FileStation/file_thumb.cgi", "SYNO.FileStation.Thumb"),
            (endpoints.DIR_SIZE, "/FileStation/file_dirSize.cgi", "SYNO.FileStation.DirSize"),
            (endpoints.MD5, "/FileStation/file_md5.cgi", "SYNO.FileStation.MD5"),
            (endpoints.CHECK_PERMISSION, "/FileStation/file_permission.cgi", "SYNO.FileStation.CheckPermission"),
            (endpoints.UPLOAD, "/FileStation/api_upload.cgi", "SYNO.FileStation.Upload"),
            (endpoints.DOWNLOAD, "/FileStation/file_download.cgi", "SYNO.FileStation.Download"),
            (endpoints.SHARING, "/FileStation/file_sharing.cgi", "SYNO.FileStation.Sharing"),
            (endpoints.CREATE_FOLDER, "/FileStation/file_crtfdr.cgi", "SYNO.FileStation.CreateFolder"),
            (endpoints.RENAME, "/FileStation/file_rename.cgi", "SYNO.FileStation.Rename"),
            (endpoints.COPY_MOVE, "/FileStation/file_MVCP.cgi", "SYNO.FileStation.CopyMove"),
            (endpoints.DELETE, "/FileStation/file_delete.cgi", "SYNO.FileStation.Delete"),
            (endpoints.EXTRACT, "/FileStation/file_extract.cgi", "SYNO.FileStation.Extract"),
            (endpoints.COMPRESS, "/FileStation/file_compress.cgi", "SYNO.FileStation.Compress"),
            (endpoints.BACKGROUND_TASK, "/FileStation/background_task.cgi", "SYNO.FileStation.BackgroundTask"),
        ],
    )
    def test_wire_values(self, endpoint, path, api):
        assert endpoint.path == path
        assert endpoint.api == api
        assert endpoint.version == 1

    def test_all_endpoints_listed(self):
        assert len(endpoints.ALL_ENDPOINTS) == 19
        assert len({e.api for e in endpoints.ALL_ENDPOINTS}) == 19

    def test_only_upload_posts(self):
        posting = [e for e in endpoints.ALL_ENDPOINTS if e.http_method == "POST"]

        assert posting == [endpoints.UPLOAD]

    def test_method_builds_descriptor(self):
        descriptor = endpoints.SEARCH.method("start")

        assert descriptor == RemoteCallDescriptor(
            path="/FileStation/file_find.cgi",
            api="SYNO.FileStation.Search",
            version=1,
            method="start",
        )
        assert descriptor.sid_param == "_sid"

    def test_descriptor_keeps_http_method(self):
        assert endpoints.UPLOAD.method("upload").http_method == "POST"
