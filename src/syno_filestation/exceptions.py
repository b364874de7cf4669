"""
Custom exceptions for the File Station SDK.
"""

from typing import Dict, Any, Optional


COMMON_ERROR_CODES = {
    100: "Unknown error",
    101: "No parameter of API, method or version",
    102: "The requested API does not exist",
    103: "The requested method does not exist",
    104: "The requested version does not support the functionality",
    105: "The logged in session does not have permission",
    106: "Session timeout",
    107: "Session interrupted by duplicate login",
    119: "SID not found",
}

FILE_STATION_ERROR_CODES = {
    400: "Invalid parameter of file operation",
    401: "Unknown error of file operation",
    402: "System is too busy",
    403: "Invalid user does this file operation",
    404: "Invalid group does this file operation",
    405: "Invalid user and group does this file operation",
    406: "Can't get user/group information from the account server",
    407: "Operation not permitted",
    408: "No such file or directory",
    409: "Non-supported file system",
    410: "Failed to connect internet-based file system (e.g., CIFS)",
    411: "Read-only file system",
    412: "Filename too long in the non-encrypted file system",
    413: "Filename too long in the encrypted file system",
    414: "File already exists",
    415: "Disk quota exceeded",
    416: "No space left on device",
    417: "Input/output error",
    418: "Illegal name or path",
    419: "Illegal file name",
    420: "Illegal file name on FAT file system",
    421: "Device or resource busy",
    599: "No such task of the file operation",
}

API_ERROR_CODES = {
    "SYNO.FileStation.Favorite": {
        800: "A folder path of favorite folder is already added to user's favorites",
        801: "A name of favorite folder conflicts with an existing folder name in the user's favorites",
        802: "There are too many favorites to be added",
    },
    "SYNO.FileStation.Delete": {
        900: "Failed to delete file(s)/folder(s)",
    },
    "SYNO.FileStation.CopyMove": {
        1000: "Failed to copy files/folders",
        1001: "Failed to move files/folders",
        1002: "An error occurred at the destination",
        1003: "Cannot overwrite or skip the existing file because no overwrite parameter is given",
        1004: "File cannot overwrite a folder with the same name, or folder cannot overwrite a file with the same name",
        1006: "Cannot copy/move file/folder with special characters to a FAT32 file system",
        1007: "Cannot copy/move a file bigger than 4G to a FAT32 file system",
    },
    "SYNO.FileStation.CreateFolder": {
        1100: "Failed to create a folder",
        1101: "The number of folders to the parent folder would exceed the system limitation",
    },
    "SYNO.FileStation.Rename": {
        1200: "Failed to rename it",
    },
    "SYNO.FileStation.Compress": {
        1300: "Failed to compress files/folders",
        1301: "Cannot create the archive because the given archive name is too long",
    },
    "SYNO.FileStation.Extract": {
        1400: "Failed to extract files",
        1401: "Cannot open the file as archive",
        1402: "Failed to read archive data error",
        1403: "Wrong password",
        1404: "Failed to get the file and dir list in an archive",
        1405: "Failed to find the item ID in an archive file",
    },
    "SYNO.FileStation.Upload": {
        1800: "There is no Content-Length information in the HTTP header or the received size doesn't match",
        1801: "Wait too long, no date can be received from client",
        1802: "No filename information in the last part of file content",
        1803: "Upload connection is cancelled",
        1804: "Failed to upload too big file to FAT file system",
        1805: "Can't overwrite or skip the existed file, if no overwrite parameter is given",
    },
    "SYNO.FileStation.Sharing": {
        2000: "Sharing link does not exist",
        2001: "Cannot generate sharing link because too many sharing links exist",
        2002: "Failed to access sharing links",
    },
}


def describe_error_code(code: int, api: Optional[str] = None) -> Optional[str]:
    """Look up the vendor description of an error code."""
    if api and code in API_ERROR_CODES.get(api, {}):
        return API_ERROR_CODES[api][code]
    if code in COMMON_ERROR_CODES:
        return COMMON_ERROR_CODES[code]
    if api and api.startswith("SYNO.FileStation."):
        return FILE_STATION_ERROR_CODES.get(code)
    return None


class SynologyError(Exception):
    """Base exception for File Station SDK errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(SynologyError):
    """Raised when the session or client settings are missing or invalid."""

    pass


class InvalidInputError(SynologyError):
    """Raised when caller parameters cannot be turned into a request."""

    pass


class TransportError(SynologyError):
    """Raised on connection failures, timeouts and non-2xx HTTP statuses."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code


class ProtocolError(SynologyError):
    """Raised when the API envelope reports ``success: false``.

    The numeric ``code`` is kept exactly as the server sent it.
    """

    def __init__(
        self,
        code: int,
        api: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.api = api
        self.description = describe_error_code(code, api)
        message = f"{api or 'Synology API'} failed with error code {code}"
        if self.description:
            message = f"{message}: {self.description}"
        super().__init__(message, details)


class DecodingError(SynologyError):
    """Raised when a response payload has an unexpected shape."""

    pass
