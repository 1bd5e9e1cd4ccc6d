"""Enumerations describing installed extensions and install button states."""

from __future__ import annotations

from enum import IntEnum


class ExtensionType(IntEnum):
    """Where an extension is installed."""

    SYSTEM = 1
    PER_USER = 2


class ExtensionState(IntEnum):
    """Runtime state of an extension as reported by the shell."""

    ACTIVE = 1
    INACTIVE = 2
    ERROR = 3
    OUT_OF_DATE = 4
    DOWNLOADING = 5
    INITIALIZED = 6
    DEACTIVATING = 7
    ACTIVATING = 8
    UNINSTALLED = 99


class InstallButtonState(IntEnum):
    """Visual state of an install button."""

    DEFAULT = 0
    INSTALLING = 1
    INSTALLED = 2
    UNSUPPORTED = 3