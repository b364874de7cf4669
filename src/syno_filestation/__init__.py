"""
Synology File Station SDK

Typed Python client for the Synology File Station web API.
"""

from .client import SynologyClient
from .transport import HttpTransport
from .models import (
    ApiResult,
    Session,
    TransportResult,
    UploadFile,
    SortBy,
    SortDirection,
    FileTypeFilter,
    FileSystemType,
    StatusFilter,
    SharingSortBy,
    ExtractSortBy,
    BackgroundTaskSortBy,
    CompressionLevel,
    CompressionMode,
    CompressionFormat,
    DownloadMode,
    ThumbnailSize,
    ThumbnailRotation,
)
from .core.selectors import (
    FileListAdditional,
    FileInfoAdditional,
    SearchListAdditional,
    FavoriteAdditional,
    VirtualFolderAdditional,
)
from .exceptions import (
    SynologyError,
    ConfigurationError,
    InvalidInputError,
    TransportError,
    ProtocolError,
    DecodingError,
)

__version__ = "1.0.0"

__all__ = [
    "SynologyClient",
    "HttpTransport",
    "ApiResult",
    "Session",
    "TransportResult",
    "UploadFile",
    # Wire enumerations
    "SortBy",
    "SortDirection",
    "FileTypeFilter",
    "FileSystemType",
    "StatusFilter",
    "SharingSortBy",
    "ExtractSortBy",
    "BackgroundTaskSortBy",
    "CompressionLevel",
    "CompressionMode",
    "CompressionFormat",
    "DownloadMode",
    "ThumbnailSize",
    "ThumbnailRotation",
    # Additional-field selectors
    "FileListAdditional",
    "FileInfoAdditional",
    "SearchListAdditional",
    "FavoriteAdditional",
    "VirtualFolderAdditional",
    # Exceptions
    "SynologyError",
    "ConfigurationError",
    "InvalidInputError",
    "TransportError",
    "ProtocolError",
    "DecodingError",
]
