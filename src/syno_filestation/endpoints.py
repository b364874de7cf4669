"""
File Station endpoint table.

Each API lives at a fixed CGI path under the ``webapi`` root and is
addressed by namespace and version; the method name picks the operation.
"""

from dataclasses import dataclass

from .core.request import RemoteCallDescriptor


@dataclass(frozen=True)
class ApiEndpoint:
    path: str
    api: str
    version: int = 1
    http_method: str = "GET"

    def method(self, name: str) -> RemoteCallDescriptor:
        return RemoteCallDescriptor(
            path=self.path,
            api=self.api,
            version=self.version,
            method=name,
            http_method=self.http_method,
        )


INFO = ApiEndpoint("/FileStation/info.cgi", "SYNO.FileStation.Info")
LIST = ApiEndpoint("/FileStation/file_share.cgi", "SYNO.FileStation.List")
SEARCH = ApiEndpoint("/FileStation/file_find.cgi", "SYNO.FileStation.Search")
VIRTUAL_FOLDER = ApiEndpoint(
    "/FileStation/file_virtual.cgi", "SYNO.FileStation.VirtualFolder"
)
FAVORITE = ApiEndpoint("/FileStation/file_favorite.cgi", "SYNO.FileStation.Favorite")
THUMB = ApiEndpoint("/FileStation/file_thumb.cgi", "SYNO.FileStation.Thumb")
DIR_SIZE = ApiEndpoint("/FileStation/file_dirSize.cgi", "SYNO.FileStation.DirSize")
MD5 = ApiEndpoint("/FileStation/file_md5.cgi", "SYNO.FileStation.MD5")
CHECK_PERMISSION = ApiEndpoint(
    "/FileStation/file_permission.cgi", "SYNO.FileStation.CheckPermission"
)
UPLOAD = ApiEndpoint(
    "/FileStation/api_upload.cgi", "SYNO.FileStation.Upload", http_method="POST"
)
DOWNLOAD = ApiEndpoint("/FileStation/file_download.cgi", "SYNO.FileStation.Download")
SHARING = ApiEndpoint("/FileStation/file_sharing.cgi", "SYNO.FileStation.Sharing")
CREATE_FOLDER = ApiEndpoint(
    "/FileStation/file_crtfdr.cgi", "SYNO.FileStation.CreateFolder"
)
RENAME = ApiEndpoint("/FileStation/file_rename.cgi", "SYNO.FileStation.Rename")
COPY_MOVE = ApiEndpoint("/FileStation/file_MVCP.cgi", "SYNO.FileStation.CopyMove")
DELETE = ApiEndpoint("/FileStation/file_delete.cgi", "SYNO.FileStation.Delete")
EXTRACT = ApiEndpoint("/FileStation/file_extract.cgi", "SYNO.FileStation.Extract")
COMPRESS = ApiEndpoint("/FileStation/file_compress.cgi", "SYNO.FileStation.Compress")
BACKGROUND_TASK = ApiEndpoint(
    "/FileStation/background_task.cgi", "SYNO.FileStation.BackgroundTask"
)

ALL_ENDPOINTS = (
    INFO,
    LIST,
    SEARCH,
    VIRTUAL_FOLDER,
    FAVORITE,
    THUMB,
    DIR_SIZE,
    MD5,
    CHECK_PERMISSION,
    UPLOAD,
    DOWNLOAD,
    SHARING,
    CREATE_FOLDER,
    RENAME,
    COPY_MOVE,
    DELETE,
    EXTRACT,
    COMPRESS,
    BACKGROUND_TASK,
)
