from installsdk.common.config import RuntimeConfig
from installsdk.common.errors import (
    AcquisitionCancelled,
    AcquisitionError,
    ChannelNotFound,
    IntegrityError,
    InvalidVersionFormat,
    PlatformNotFound,
    ReleaseDataError,
    VersionNotFound,
)

__all__ = [
    "RuntimeConfig",
    "AcquisitionCancelled",
    "AcquisitionError",
    "ChannelNotFound",
    "IntegrityError",
    "InvalidVersionFormat",
    "PlatformNotFound",
    "ReleaseDataError",
    "VersionNotFound",
]
