"""
File Station client.
"""

from datetime import date, datetime
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from . import endpoints
from .config import SDKConfig, get_logger
from .core.config import Settings
from .core.request import RemoteCallDescriptor, RequestBuilder
from .core.response import ResponseClassifier
from .core.selectors import (
    FavoriteAdditional,
    FileInfoAdditional,
    FileListAdditional,
    SearchListAdditional,
    VirtualFolderAdditional,
    to_wire_string,
)
from .exceptions import (
    ConfigurationError,
    InvalidInputError,
    ProtocolError,
    TransportError,
)
from .models import (
    ApiResult,
    BackgroundTaskSortBy,
    CompressionFormat,
    CompressionLevel,
    CompressionMode,
    DownloadMode,
    ExtractSortBy,
    FileSystemType,
    FileTypeFilter,
    Session,
    SharingSortBy,
    SortBy,
    SortDirection,
    StatusFilter,
    ThumbnailRotation,
    ThumbnailSize,
    UploadFile,
)
from .transport import HttpTransport

Paths = Union[str, Sequence[str]]
DateBound = Optional[Union[date, datetime]]


def to_unix_millis(value: Optional[datetime]) -> Optional[int]:
    if value is None:
        return None
    return int(value.timestamp() * 1000)


class SynologyClient:
    """
    Client for the Synology File Station web API.

    Each method maps to one remote operation. Parameters are split into a
    required set (always sent, even when falsy) and an optional set (left
    out when None), then handed to the request builder together with the
    session id.

    Long-running operations (search, dir size, MD5, copy/move, delete,
    extract, compress) return a task id from their ``*_start`` call. Poll
    the matching ``*_status`` call and release the task with ``*_stop``;
    this client does not poll or retry on its own.

    Examples:
        Basic usage:
        >>> session = Session(sid="...")
        >>> transport = HttpTransport("https://nas.local:5001/webapi")
        >>> with SynologyClient(session, transport) as client:
        ...     shares = client.list_shares(additional=FileListAdditional(size=True))
        ...     print(shares.data["shares"])

        From environment settings:
        >>> client = SynologyClient.from_settings()
    """

    def __init__(
        self,
        session: Session,
        transport: HttpTransport,
        debug: bool = False,
        log_level: Union[str, int] = "INFO",
    ):
        if transport is None:
            raise ConfigurationError("A transport is required")

        self.config = SDKConfig(debug=debug, log_level=log_level)
        self.config.setup_logging()
        self.logger = get_logger("client")

        self._builder = RequestBuilder(session)
        self._classifier = ResponseClassifier()
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "SynologyClient":
        """
        Create a client from ``SYNOLOGY_*`` environment settings.

        Raises:
            ConfigurationError: If the settings are invalid or no session id
                is configured
        """
        if settings is None:
            try:
                settings = Settings()
            except ValidationError as exc:
                raise ConfigurationError(str(exc), {"errors": exc.errors()}) from exc

        if not settings.sid:
            raise ConfigurationError("SYNOLOGY_SID is not set")

        transport = HttpTransport(
            settings.api_base_url,
            timeout=settings.timeout_seconds,
            verify_ssl=settings.verify_ssl,
        )
        return cls(
            Session(sid=settings.sid),
            transport,
            debug=settings.debug,
            log_level=settings.log_level,
        )

    def __enter__(self) -> "SynologyClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    @property
    def session(self) -> Session:
        return self._builder.session

    def _call(
        self,
        descriptor: RemoteCallDescriptor,
        required: Optional[Mapping[str, Any]] = None,
        optional: Optional[Mapping[str, Any]] = None,
        upload: Optional[UploadFile] = None,
        binary: bool = False,
    ) -> ApiResult:
        params = self._builder.build(descriptor, required, optional)
        self.logger.debug("Calling %s.%s", descriptor.api, descriptor.method)

        try:
            result = self._transport.send(descriptor, params, upload=upload)
            if binary:
                return self._classifier.classify_binary(result, api=descriptor.api)
            return self._classifier.classify(result, api=descriptor.api)
        except ProtocolError as e:
            self.logger.warning(
                "%s.%s failed with code %d", descriptor.api, descriptor.method, e.code
            )
            raise
        except TransportError as e:
            self.logger.error(
                "%s.%s transport failure: %s", descriptor.api, descriptor.method, e
            )
            raise

    # Info

    def get_info(self) -> ApiResult:
        """Get File Station information (hostname, manager status, ...)."""
        return self._call(endpoints.INFO.method("getinfo"))

    # List

    def list_shares(
        self,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        sort_by: SortBy = SortBy.NAME,
        sort_direction: SortDirection = SortDirection.ASC,
        only_writable: bool = False,
        additional: Optional[FileListAdditional] = None,
    ) -> ApiResult:
        """List all shared folders."""
        return self._call(
            endpoints.LIST.method("list_share"),
            {
                "sort_by": sort_by,
                "sort_direction": sort_direction,
                "onlywritable": only_writable,
            },
            {
                "offset": offset,
                "limit": limit,
                "additional": to_wire_string(additional),
            },
        )

    def list_folder(
        self,
        folder_path: str,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        sort_by: SortBy = SortBy.NAME,
        sort_direction: SortDirection = SortDirection.ASC,
        pattern: Optional[Sequence[str]] = None,
        file_type: FileTypeFilter = FileTypeFilter.ALL,
        goto_path: Optional[str] = None,
        additional: Optional[FileListAdditional] = None,
    ) -> ApiResult:
        """
        Enumerate files in a folder.

        Args:
            folder_path: Folder to list, starting with a shared folder
            offset: Index of the first file to return
            limit: Number of files to return
            sort_by: Sort field
            sort_direction: Sort direction
            pattern: Glob patterns; omitted entirely when None or empty
            file_type: Return only files, only folders or both
            goto_path: Folder whose ancestors should also be returned
            additional: Extra fields to return per file
        """
        return self._call(
            endpoints.LIST.method("list"),
            {
                "folder_path": folder_path,
                "sort_by": sort_by,
                "sort_direction": sort_direction,
                "filetype": file_type,
            },
            {
                "offset": offset,
                "limit": limit,
                "pattern": pattern,
                "goto_path": goto_path,
                "additional": to_wire_string(additional),
            },
        )

    def get_file_info(
        self, paths: Paths, additional: Optional[FileInfoAdditional] = None
    ) -> ApiResult:
        """Get information about one or more files or folders."""
        return self._call(
            endpoints.LIST.method("getinfo"),
            {"path": paths},
            {"additional": to_wire_string(additional)},
        )

    # Search

    def search_start(
        self,
        folder_path: str,
        recursive: bool = True,
        pattern: Optional[Sequence[str]] = None,
        extension: Optional[Sequence[str]] = None,
        file_type: FileTypeFilter = FileTypeFilter.FILE,
        size_from: Optional[int] = None,
        size_to: Optional[int] = None,
        mtime_from: Optional[datetime] = None,
        mtime_to: Optional[datetime] = None,
        crtime_from: Optional[datetime] = None,
        crtime_to: Optional[datetime] = None,
        atime_from: Optional[datetime] = None,
        atime_to: Optional[datetime] = None,
        owner: Optional[str] = None,
        group: Optional[str] = None,
    ) -> ApiResult:
        """
        Start a search task.

        Time filters are sent as Unix timestamps in seconds. Returns the
        task id under ``data["taskid"]``.
        """
        return self._call(
            endpoints.SEARCH.method("start"),
            {
                "folder_path": folder_path,
                "recursive": recursive,
                "filetype": file_type,
            },
            {
                "pattern": pattern,
                "extension": extension,
                "size_from": size_from,
                "size_to": size_to,
                "mtime_from": mtime_from,
                "mtime_to": mtime_to,
                "crtime_from": crtime_from,
                "crtime_to": crtime_to,
                "atime_from": atime_from,
                "atime_to": atime_to,
                "owner": owner,
                "group": group,
            },
        )

    def search_list(
        self,
        task_id: str,
        offset: Optional[int] = None,
        limit: Optional[int] = 100,
        sort_by: SortBy = SortBy.NAME,
        sort_direction: SortDirection = SortDirection.ASC,
        pattern: Optional[Sequence[str]] = None,
        file_type: FileTypeFilter = FileTypeFilter.FILE,
        additional: Optional[SearchListAdditional] = None,
    ) -> ApiResult:
        """List the results of a search task."""
        return self._call(
            endpoints.SEARCH.method("list"),
            {
                "taskid": task_id,
                "sort_by": sort_by,
                "sort_direction": sort_direction,
                "filetype": file_type,
            },
            {
                "offset": offset,
                "limit": limit,
                "pattern": pattern,
                "additional": to_wire_string(additional),
            },
        )

    def search_stop(self, task_id: str) -> ApiResult:
        return self._call(endpoints.SEARCH.method("stop"), {"taskid": task_id})

    def search_clean(self, task_id: str) -> ApiResult:
        return self._call(endpoints.SEARCH.method("clean"), {"taskid": task_id})

    # Virtual folders

    def list_virtual_folders(
        self,
        file_system_type: FileSystemType = FileSystemType.CIFS,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        sort_by: SortBy = SortBy.NAME,
        sort_direction: SortDirection = SortDirection.ASC,
        additional: Optional[VirtualFolderAdditional] = None,
    ) -> ApiResult:
        """List mount point folders of the given file system type."""
        return self._call(
            endpoints.VIRTUAL_FOLDER.method("list"),
            {
                "type": file_system_type,
                "sort_by": sort_by,
                "sort_direction": sort_direction,
            },
            {
                "offset": offset,
                "limit": limit,
                "additional": to_wire_string(additional),
            },
        )

    # Favorites

    def list_favorites(
        self,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        status_filter: StatusFilter = StatusFilter.ALL,
        additional: Optional[FavoriteAdditional] = None,
    ) -> ApiResult:
        return self._call(
            endpoints.FAVORITE.method("list"),
            {"status_filter": status_filter},
            {
                "offset": offset,
                "limit": limit,
                "additional": to_wire_string(additional),
            },
        )

    def add_favorite(
        self, path: str, name: str, index: Optional[int] = None
    ) -> ApiResult:
        """Add a folder to the favorites; ``index=-1`` appends at the end."""
        return self._call(
            endpoints.FAVORITE.method("add"),
            {"path": path, "name": name},
            {"index": index},
        )

    def delete_favorite(self, path: str) -> ApiResult:
        return self._call(endpoints.FAVORITE.method("delete"), {"path": path})

    def clear_broken_favorites(self) -> ApiResult:
        return self._call(endpoints.FAVORITE.method("clear_broken"))

    def edit_favorite(self, path: str, name: str) -> ApiResult:
        return self._call(
            endpoints.FAVORITE.method("edit"), {"path": path, "name": name}
        )

    def replace_all_favorites(self, paths: Paths, names: Paths) -> ApiResult:
        """Replace the whole favorites list; ``paths`` and ``names`` pair up."""
        return self._call(
            endpoints.FAVORITE.method("replace_all"), {"path": paths, "name": names}
        )

    # Thumbnails

    def get_thumbnail(
        self,
        path: str,
        size: ThumbnailSize = ThumbnailSize.SMALL,
        rotate: ThumbnailRotation = ThumbnailRotation.NONE,
    ) -> bytes:
        """Fetch the thumbnail of an image file as raw bytes."""
        result = self._call(
            endpoints.THUMB.method("get"),
            {"path": path, "size": size, "rotate": rotate},
            binary=True,
        )
        return result.content

    # Directory size

    def dir_size_start(self, paths: Paths) -> ApiResult:
        return self._call(endpoints.DIR_SIZE.method("start"), {"path": paths})

    def dir_size_status(self, task_id: str) -> ApiResult:
        return self._call(endpoints.DIR_SIZE.method("status"), {"taskid": task_id})

    def dir_size_stop(self, task_id: str) -> ApiResult:
        return self._call(endpoints.DIR_SIZE.method("stop"), {"taskid": task_id})

    # MD5

    def md5_start(self, file_path: str) -> ApiResult:
        return self._call(endpoints.MD5.method("start"), {"file_path": file_path})

    def md5_status(self, task_id: str) -> ApiResult:
        return self._call(endpoints.MD5.method("status"), {"taskid": task_id})

    def md5_stop(self, task_id: str) -> ApiResult:
        return self._call(endpoints.MD5.method("stop"), {"taskid": task_id})

    # Permissions

    def check_permission(
        self,
        path: str,
        filename: Optional[str] = None,
        overwrite: Optional[bool] = None,
        create_only: Optional[bool] = True,
    ) -> ApiResult:
        """Check whether the logged-in user can write to ``path``."""
        return self._call(
            endpoints.CHECK_PERMISSION.method("write"),
            {"path": path},
            {
                "filename": filename,
                "overwrite": overwrite,
                "create_only": create_only,
            },
        )

    # Upload / download

    def upload(
        self,
        dest_folder_path: str,
        file: UploadFile,
        create_parents: bool = True,
        overwrite: Optional[bool] = False,
    ) -> ApiResult:
        """
        Upload a file with multipart POST.

        The file timestamps are sent as Unix times in milliseconds; any that
        are missing on ``file`` are left out.
        """
        return self._call(
            endpoints.UPLOAD.method("upload"),
            {
                "dest_folder_path": dest_folder_path,
                "create_parents": create_parents,
            },
            {
                "overwrite": overwrite,
                "mtime": to_unix_millis(file.mtime),
                "crtime": to_unix_millis(file.crtime),
                "atime": to_unix_millis(file.atime),
            },
            upload=file,
        )

    def upload_file(
        self,
        file_path: Union[str, Path],
        dest_folder_path: str,
        create_parents: bool = True,
        overwrite: Optional[bool] = False,
    ) -> ApiResult:
        """Upload a local file, keeping its modify, create and access times."""
        path = Path(file_path)
        if not path.is_file():
            raise InvalidInputError(f"File not found: {file_path}")

        stat = path.stat()
        created = getattr(stat, "st_birthtime", stat.st_ctime)
        with path.open("rb") as fh:
            upload = UploadFile(
                filename=path.name,
                content=fh,
                mtime=datetime.fromtimestamp(stat.st_mtime),
                crtime=datetime.fromtimestamp(created),
                atime=datetime.fromtimestamp(stat.st_atime),
            )
            return self.upload(dest_folder_path, upload, create_parents, overwrite)

    def download(self, paths: Paths, mode: DownloadMode = DownloadMode.DOWNLOAD) -> bytes:
        """
        Download files or folders as raw bytes.

        Several paths, or a folder, arrive as a zip archive.
        """
        result = self._call(
            endpoints.DOWNLOAD.method("download"),
            {"path": paths, "mode": mode},
            binary=True,
        )
        return result.content

    # Sharing

    def get_sharing_info(self, link_id: str) -> ApiResult:
        return self._call(endpoints.SHARING.method("getinfo"), {"id": link_id})

    def list_sharing_links(
        self,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        sort_by: Optional[SharingSortBy] = None,
        sort_direction: SortDirection = SortDirection.ASC,
        force_clean: Optional[bool] = True,
    ) -> ApiResult:
        return self._call(
            endpoints.SHARING.method("list"),
            {"sort_direction": sort_direction},
            {
                "offset": offset,
                "limit": limit,
                "sort_by": sort_by,
                "force_clean": force_clean,
            },
        )

    def create_sharing_link(
        self,
        paths: Paths,
        password: Optional[str] = None,
        date_expired: DateBound = None,
        date_available: DateBound = None,
    ) -> ApiResult:
        """
        Create sharing links for files or folders.

        Unset expiry and availability dates are sent as ``"0"`` (no bound).
        """
        return self._call(
            endpoints.SHARING.method("create"),
            {"path": paths},
            {
                "password": password,
                "date_expired": date_expired,
                "date_available": date_available,
            },
        )

    def delete_sharing_link(self, link_ids: Paths) -> ApiResult:
        return self._call(endpoints.SHARING.method("delete"), {"id": link_ids})

    def clear_invalid_sharing_links(self) -> ApiResult:
        return self._call(endpoints.SHARING.method("clear_invalid"))

    def edit_sharing_link(
        self,
        link_ids: Paths,
        password: Optional[str] = None,
        date_expired: DateBound = None,
        date_available: DateBound = None,
    ) -> ApiResult:
        return self._call(
            endpoints.SHARING.method("edit"),
            {"id": link_ids},
            {
                "password": password,
                "date_expired": date_expired,
                "date_available": date_available,
            },
        )

    # Folders

    def create_folder(
        self,
        folder_path: Paths,
        name: Paths,
        force_parent: Optional[bool] = True,
        additional: Optional[SearchListAdditional] = None,
    ) -> ApiResult:
        return self._call(
            endpoints.CREATE_FOLDER.method("create"),
            {"folder_path": folder_path, "name": name},
            {
                "force_parent": force_parent,
                "additional": to_wire_string(additional),
            },
        )

    def rename(
        self,
        paths: Paths,
        names: Paths,
        additional: Optional[SearchListAdditional] = None,
        search_task_id: Optional[str] = None,
    ) -> ApiResult:
        return self._call(
            endpoints.RENAME.method("rename"),
            {"path": paths, "name": names},
            {
                "additional": to_wire_string(additional),
                "search_taskid": search_task_id,
            },
        )

    # Copy / move

    def copy_move_start(
        self,
        paths: Paths,
        dest_folder_path: str,
        overwrite: Optional[bool] = None,
        remove_src: bool = False,
        accurate_progress: bool = False,
        search_task_id: Optional[str] = None,
    ) -> ApiResult:
        """
        Start copying (or moving, with ``remove_src=True``) files.

        With ``overwrite=None`` the server fails on existing files instead
        of overwriting (True) or skipping (False) them.
        """
        return self._call(
            endpoints.COPY_MOVE.method("start"),
            {
                "path": paths,
                "dest_folder_path": dest_folder_path,
                "remove_src": remove_src,
                "accurate_progress": accurate_progress,
            },
            {"overwrite": overwrite, "search_taskid": search_task_id},
        )

    def copy_move_status(self, task_id: str) -> ApiResult:
        return self._call(endpoints.COPY_MOVE.method("status"), {"taskid": task_id})

    def copy_move_stop(self, task_id: str) -> ApiResult:
        return self._call(endpoints.COPY_MOVE.method("stop"), {"taskid": task_id})

    # Delete

    def delete_start(
        self,
        paths: Paths,
        accurate_progress: bool = True,
        recursive: bool = True,
        search_task_id: Optional[str] = None,
    ) -> ApiResult:
        return self._call(
            endpoints.DELETE.method("start"),
            {
                "path": paths,
                "accurate_progress": accurate_progress,
                "recursive": recursive,
            },
            {"search_taskid": search_task_id},
        )

    def delete_status(self, task_id: str) -> ApiResult:
        return self._call(endpoints.DELETE.method("status"), {"taskid": task_id})

    def delete_stop(self, task_id: str) -> ApiResult:
        return self._call(endpoints.DELETE.method("stop"), {"taskid": task_id})

    def delete(
        self,
        paths: Paths,
        recursive: bool = True,
        search_task_id: Optional[str] = None,
    ) -> ApiResult:
        """Delete files and wait on the server until it has finished."""
        return self._call(
            endpoints.DELETE.method("delete"),
            {"path": paths, "recursive": recursive},
            {"search_taskid": search_task_id},
        )

    # Extract

    def extract_start(
        self,
        file_path: str,
        dest_folder_path: str,
        overwrite: bool = False,
        keep_dir: bool = True,
        create_subfolder: bool = False,
        codepage: Optional[str] = None,
        password: Optional[str] = None,
        item_id: Optional[Union[int, Sequence[int]]] = None,
    ) -> ApiResult:
        return self._call(
            endpoints.EXTRACT.method("start"),
            {
                "file_path": file_path,
                "dest_folder_path": dest_folder_path,
                "overwrite": overwrite,
                "keep_dir": keep_dir,
                "create_subfolder": create_subfolder,
            },
            {"codepage": codepage, "password": password, "item_id": item_id},
        )

    def extract_status(self, task_id: str) -> ApiResult:
        return self._call(endpoints.EXTRACT.method("status"), {"taskid": task_id})

    def extract_stop(self, task_id: str) -> ApiResult:
        return self._call(endpoints.EXTRACT.method("stop"), {"taskid": task_id})

    def extract_list(
        self,
        file_path: str,
        offset: Optional[int] = 0,
        limit: Optional[int] = -1,
        sort_by: ExtractSortBy = ExtractSortBy.NAME,
        sort_direction: SortDirection = SortDirection.ASC,
        codepage: Optional[str] = "enu",
        password: Optional[str] = None,
        item_id: Optional[int] = None,
    ) -> ApiResult:
        """List the contents of an archive."""
        return self._call(
            endpoints.EXTRACT.method("list"),
            {
                "file_path": file_path,
                "sort_by": sort_by,
                "sort_direction": sort_direction,
            },
            {
                "offset": offset,
                "limit": limit,
                "codepage": codepage,
                "password": password,
                "item_id": item_id,
            },
        )

    # Compress

    def compress_start(
        self,
        paths: Paths,
        dest_file_path: str,
        level: CompressionLevel = CompressionLevel.MODERATE,
        mode: CompressionMode = CompressionMode.ADD,
        archive_format: CompressionFormat = CompressionFormat.ZIP,
        password: Optional[str] = None,
    ) -> ApiResult:
        return self._call(
            endpoints.COMPRESS.method("start"),
            {
                "path": paths,
                "dest_file_path": dest_file_path,
                "level": level,
                "mode": mode,
                "format": archive_format,
            },
            {"password": password},
        )

    def compress_status(self, task_id: str) -> ApiResult:
        return self._call(endpoints.COMPRESS.method("status"), {"taskid": task_id})

    def compress_stop(self, task_id: str) -> ApiResult:
        return self._call(endpoints.COMPRESS.method("stop"), {"taskid": task_id})

    # Background tasks

    def list_background_tasks(
        self,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        sort_by: BackgroundTaskSortBy = BackgroundTaskSortBy.CRTIME,
        sort_direction: SortDirection = SortDirection.ASC,
        api_filter: Optional[Sequence[str]] = None,
    ) -> ApiResult:
        """List background tasks, optionally only those of some APIs."""
        return self._call(
            endpoints.BACKGROUND_TASK.method("list"),
            {"sort_by": sort_by, "sort_direction": sort_direction},
            {"offset": offset, "limit": limit, "api_filter": api_filter},
        )

    def clear_finished_tasks(self, task_ids: Optional[Paths] = None) -> ApiResult:
        """Remove finished background tasks; all of them when no id is given."""
        return self._call(
            endpoints.BACKGROUND_TASK.method("clear_finished"),
            optional={"taskid": task_ids},
        )
