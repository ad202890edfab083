"""Failure kinds surfaced by an SDK acquisition."""

from __future__ import annotations


class AcquisitionError(Exception):
    """Base class for every non-transport acquisition failure."""


class InvalidVersionFormat(AcquisitionError, ValueError):
    def __init__(self, version: str):
        super().__init__(
            f'Parsing channel version failed for {version!r}, expected a major.minor format. e.g. "2.1"'
        )
        self.version = version


class ChannelNotFound(AcquisitionError, LookupError):
    def __init__(self, channel: str):
        super().__init__(f"Release channel {channel!r} was not found in the release index.")
        self.channel = channel


class VersionNotFound(AcquisitionError, LookupError):
    def __init__(self, version: str):
        super().__init__(f"SDK version {version!r} was not found in the channel release list.")
        self.version = version


class PlatformNotFound(AcquisitionError, LookupError):
    def __init__(self, version: str, rid: str):
        super().__init__(f"SDK version {version!r} has no installer for platform {rid!r}.")
        self.version = version
        self.rid = rid


class ReleaseDataError(AcquisitionError, ValueError):
    """Raised when a release document is missing a mandatory field."""


class IntegrityError(AcquisitionError):
    def __init__(self, path: str, expected: str, actual: str):
        super().__init__(f"Checksum mismatch for {path}: {actual} != {expected}")
        self.path = path
        self.expected = expected
        self.actual = actual


class AcquisitionCancelled(AcquisitionError):
    pass
