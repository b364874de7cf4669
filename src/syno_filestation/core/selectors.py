"""
Additional-field selectors.

List, search, favorite, virtual-folder and get-info calls accept an
``additional`` parameter naming extra fields to return. Each operation
allows its own set of names, so each gets its own selector class with an
explicit ``FIELDS`` order.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple


@dataclass(frozen=True)
class OptionSelector:
    """Base class for ``additional`` field selectors."""

    FIELDS: ClassVar[Tuple[str, ...]] = ()

    def selected(self) -> Tuple[str, ...]:
        return tuple(name for name in self.FIELDS if getattr(self, name) is True)


@dataclass(frozen=True)
class FileListAdditional(OptionSelector):
    """Fields for ``SYNO.FileStation.List`` list and list_share."""

    FIELDS: ClassVar[Tuple[str, ...]] = (
        "real_path",
        "size",
        "owner",
        "time",
        "perm",
        "mount_point_type",
        "volume_status",
    )

    real_path: bool = False
    size: bool = False
    owner: bool = False
    time: bool = False
    perm: bool = False
    mount_point_type: bool = False
    volume_status: bool = False


@dataclass(frozen=True)
class FileInfoAdditional(OptionSelector):
    """Fields for ``SYNO.FileStation.List`` getinfo."""

    FIELDS: ClassVar[Tuple[str, ...]] = (
        "real_path",
        "size",
        "owner",
        "time",
        "perm",
        "mount_point_type",
        "type",
    )

    real_path: bool = False
    size: bool = False
    owner: bool = False
    time: bool = False
    perm: bool = False
    mount_point_type: bool = False
    type: bool = False


@dataclass(frozen=True)
class SearchListAdditional(OptionSelector):
    """Fields for search results, folder creation and rename."""

    FIELDS: ClassVar[Tuple[str, ...]] = (
        "real_path",
        "size",
        "owner",
        "time",
        "perm",
        "type",
    )

    real_path: bool = False
    size: bool = False
    owner: bool = False
    time: bool = False
    perm: bool = False
    type: bool = False


@dataclass(frozen=True)
class FavoriteAdditional(OptionSelector):
    """Fields for ``SYNO.FileStation.Favorite`` list."""

    FIELDS: ClassVar[Tuple[str, ...]] = (
        "real_path",
        "size",
        "owner",
        "time",
        "perm",
        "mount_point_type",
    )

    real_path: bool = False
    size: bool = False
    owner: bool = False
    time: bool = False
    perm: bool = False
    mount_point_type: bool = False


@dataclass(frozen=True)
class VirtualFolderAdditional(OptionSelector):
    """Fields for ``SYNO.FileStation.VirtualFolder`` list."""

    FIELDS: ClassVar[Tuple[str, ...]] = (
        "real_path",
        "size",
        "owner",
        "time",
        "perm",
        "volume_status",
    )

    real_path: bool = False
    size: bool = False
    owner: bool = False
    time: bool = False
    perm: bool = False
    volume_status: bool = False


def to_wire_string(selector: Optional[OptionSelector]) -> Optional[str]:
    """
    Join the names of the enabled fields with commas.

    Returns None when the selector is absent or nothing is enabled, so the
    ``additional`` parameter gets left out of the request entirely.
    """
    if selector is None:
        return None
    names = selector.selected()
    return ",".join(names) if names else None
