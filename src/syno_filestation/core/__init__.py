"""
Core pure functions for the SDK.

This package contains the I/O-free parts of a remote call: parameter
normalization, additional-field selectors, request composition and
response classification.
"""

from .params import (
    ParameterSet,
    normalize_value,
    SENTINEL_DATE,
    SENTINEL_DATE_FIELDS,
)

from .selectors import (
    OptionSelector,
    FileListAdditional,
    FileInfoAdditional,
    SearchListAdditional,
    FavoriteAdditional,
    VirtualFolderAdditional,
    to_wire_string,
)

from .request import (
    RemoteCallDescriptor,
    RequestBuilder,
    build_base_parameters,
)

from .response import (
    ResponseClassifier,
    check_transport_status,
    decode_envelope,
    extract_error_code,
)

__all__ = [
    # Parameters
    "ParameterSet",
    "normalize_value",
    "SENTINEL_DATE",
    "SENTINEL_DATE_FIELDS",
    # Selectors
    "OptionSelector",
    "FileListAdditional",
    "FileInfoAdditional",
    "SearchListAdditional",
    "FavoriteAdditional",
    "VirtualFolderAdditional",
    "to_wire_string",
    # Requests
    "RemoteCallDescriptor",
    "RequestBuilder",
    "build_base_parameters",
    # Responses
    "ResponseClassifier",
    "check_transport_status",
    "decode_envelope",
    "extract_error_code",
]
