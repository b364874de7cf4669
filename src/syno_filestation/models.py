"""
Data models for sessions, wire enumerations and call results.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, BinaryIO, Dict, Optional, Union

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class Session:
    """
    An authenticated File Station session.

    Only the opaque session id is kept. Logging in and out happens
    elsewhere; a client is bound to one session for its whole lifetime.

    Attributes:
        sid: Session id returned by ``SYNO.API.Auth`` login

    Example:
        >>> session = Session(sid="abc123")
        >>> client = SynologyClient(session, transport)
    """

    sid: str

    def __post_init__(self) -> None:
        if not isinstance(self.sid, str) or not self.sid.strip():
            raise ConfigurationError("Session id is empty")

    def __repr__(self) -> str:
        return "Session(sid='***')"


class WireEnum(str, Enum):
    """Enumeration whose value is the token sent on the wire."""

    def __str__(self) -> str:
        return self.value


class SortBy(WireEnum):
    NAME = "name"
    USER = "user"
    GROUP = "group"
    MTIME = "mtime"
    ATIME = "atime"
    CTIME = "ctime"
    CRTIME = "crtime"
    POSIX = "posix"
    SIZE = "size"
    TYPE = "type"


class SortDirection(WireEnum):
    ASC = "asc"
    DESC = "desc"


class FileTypeFilter(WireEnum):
    FILE = "file"
    DIR = "dir"
    ALL = "all"


class FileSystemType(WireEnum):
    NONE = "none"
    CIFS = "cifs"
    ISO = "iso"


class StatusFilter(WireEnum):
    VALID = "valid"
    BROKEN = "broken"
    ALL = "all"


class SharingSortBy(WireEnum):
    ID = "id"
    IS_FOLDER = "isFolder"
    PATH = "path"
    DATE_EXPIRED = "date_expired"
    DATE_AVAILABLE = "date_available"
    STATUS = "status"
    HAS_PASSWORD = "has_password"
    URL = "url"
    LINK_OWNER = "link_owner"


class ExtractSortBy(WireEnum):
    NAME = "name"
    SIZE = "size"
    PACK_SIZE = "pack_size"
    MTIME = "mtime"


class BackgroundTaskSortBy(WireEnum):
    CRTIME = "crtime"
    FINISHED = "finished"


class CompressionLevel(WireEnum):
    MODERATE = "moderate"
    STORE = "store"
    FAST = "fast"
    BEST = "best"


class CompressionMode(WireEnum):
    ADD = "add"
    UPDATE = "update"
    REFRESHEN = "refreshen"
    SYNCHRONIZE = "synchronize"


class CompressionFormat(WireEnum):
    ZIP = "zip"
    SEVEN_ZIP = "7z"


class DownloadMode(WireEnum):
    OPEN = "open"
    DOWNLOAD = "download"


class ThumbnailSize(WireEnum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    ORIGINAL = "original"


class ThumbnailRotation(WireEnum):
    NONE = "none"
    ROTATE_90 = "rotate90"
    ROTATE_180 = "rotate180"
    ROTATE_270 = "rotate270"
    ROTATE_360 = "rotate360"


@dataclass(frozen=True)
class TransportResult:
    """Raw outcome of one HTTP round trip."""

    status_code: int
    content: bytes = b""
    content_type: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True)
class UploadFile:
    """
    A file attachment for ``SYNO.FileStation.Upload``.

    Attributes:
        filename: Name the file gets in the destination folder
        content: Raw bytes or a readable binary stream
        mtime: Last modification time, sent as ``mtime``
        crtime: Creation time, sent as ``crtime``
        atime: Last access time, sent as ``atime``
    """

    filename: str
    content: Union[bytes, BinaryIO]
    mtime: Optional[datetime] = None
    crtime: Optional[datetime] = None
    atime: Optional[datetime] = None


@dataclass
class ApiResult:
    """
    Successful result of a remote call.

    JSON operations fill ``data`` with the envelope's ``data`` object;
    binary operations (thumbnail, download) fill ``content`` instead.
    Failures are raised as exceptions and never produce an ApiResult.

    Attributes:
        status_code: HTTP status of the response
        data: Decoded ``data`` payload of the envelope
        content: Raw response body for binary operations

    Example:
        >>> result = client.list_shares(limit=10)
        >>> for share in result.data["shares"]:
        ...     print(share["path"])
    """

    status_code: int
    data: Dict[str, Any] = field(default_factory=dict)
    content: Optional[bytes] = None

    @property
    def is_binary(self) -> bool:
        return self.content is not None
