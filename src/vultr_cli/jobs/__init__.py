"""Vultr Operations Jobs package."""

from .base import BaseJob
from .servers import (
    BandwidthJob,
    ChangeOSJob,
    CreateServerJob,
    DeleteServerJob,
    HaltServerJob,
    ListOSJob,
    ListServersJob,
    RebootServerJob,
    ReinstallServerJob,
    RenameServerJob,
    ShowServerJob,
    StartServerJob,
)

__all__ = [
    "BaseJob",
    "BandwidthJob",
    "ChangeOSJob",
    "CreateServerJob",
    "DeleteServerJob",
    "HaltServerJob",
    "ListOSJob",
    "ListServersJob",
    "RebootServerJob",
    "ReinstallServerJob",
    "RenameServerJob",
    "ShowServerJob",
    "StartServerJob",
]
