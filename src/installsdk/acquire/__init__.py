from installsdk.acquire.channel import parse_channel_version
from installsdk.acquire.downloader import (
    BufferPool,
    MegabyteProgress,
    ProgressThrottle,
    StreamingDownloader,
    copy_with_progress,
)
from installsdk.acquire.locator import ArtifactLocator, find_file, find_sdk, iter_sdk_candidates
from installsdk.acquire.platform_id import PlatformIdentifier, resolve_rid
from installsdk.acquire.process_service import InstallerLauncher
from installsdk.acquire.release_index import ReleaseIndexResolver, find_channel
from installsdk.acquire.service import SdkAcquirer, safe_file_name
from installsdk.acquire.verifier import IntegrityVerifier

__all__ = [
    "ArtifactLocator",
    "BufferPool",
    "InstallerLauncher",
    "IntegrityVerifier",
    "MegabyteProgress",
    "PlatformIdentifier",
    "ProgressThrottle",
    "ReleaseIndexResolver",
    "SdkAcquirer",
    "StreamingDownloader",
    "copy_with_progress",
    "find_channel",
    "find_file",
    "find_sdk",
    "iter_sdk_candidates",
    "parse_channel_version",
    "resolve_rid",
    "safe_file_name",
]
