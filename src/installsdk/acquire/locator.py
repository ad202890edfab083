from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping

import requests

from installsdk.common.config import RuntimeConfig
from installsdk.common.errors import PlatformNotFound, VersionNotFound
from installsdk.common.http import get_json
from installsdk.common.types import (
    FileDescriptor,
    ReleaseEntry,
    SdkDescriptor,
    require_field,
    require_list,
)


log = logging.getLogger(__name__)


def iter_releases(data: Any) -> Iterator[ReleaseEntry]:
    for item in require_list(data, "releases", "Release list"):
        yield ReleaseEntry.from_json(item)


def iter_sdk_candidates(releases: Iterable[ReleaseEntry]) -> Iterator[Mapping[str, Any]]:
    """Yield every SDK of every release: the primary ``sdk`` first, then its ``sdks`` variants."""
    for release in releases:
        yield from release.candidates()


def find_sdk(releases: Iterable[ReleaseEntry], version: str) -> SdkDescriptor:
    for candidate in iter_sdk_candidates(releases):
        if require_field(candidate, "version", "SDK descriptor") == version:
            return SdkDescriptor.from_json(candidate)
    raise VersionNotFound(version)


def find_file(sdk: SdkDescriptor, rid: str) -> FileDescriptor:
    for item in sdk.files:
        if require_field(item, "rid", f"SDK {sdk.version} file") == rid:
            return FileDescriptor.from_json(item)
    raise PlatformNotFound(sdk.version, rid)


class ArtifactLocator:
    def __init__(self, session: requests.Session, runtime: RuntimeConfig):
        self.session = session
        self.runtime = runtime

    def locate(self, release_list_url: str, version: str, rid: str) -> FileDescriptor:
        data = get_json(self.session, release_list_url, self.runtime)
        sdk = find_sdk(iter_releases(data), version)
        file = find_file(sdk, rid)
        log.info("Located %s for %s/%s at %s", file.name, version, rid, file.url)
        return file
