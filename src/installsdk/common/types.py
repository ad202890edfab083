from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from installsdk.common.errors import ReleaseDataError


def require_field(data: Any, key: str, where: str) -> Any:
    if not isinstance(data, Mapping):
        raise ReleaseDataError(f"{where} must be a JSON object.")
    if key not in data:
        raise ReleaseDataError(f"{where} missing field: {key!r}")
    return data[key]


def require_list(data: Any, key: str, where: str) -> list[Any]:
    value = require_field(data, key, where)
    if not isinstance(value, list):
        raise ReleaseDataError(f"{where} field {key!r} must be a list.")
    return value


@dataclass(frozen=True)
class ReleaseIndexEntry:
    channel_version: str
    releases_json: str

    @classmethod
    def from_json(cls, data: Any) -> "ReleaseIndexEntry":
        return cls(
            channel_version=str(require_field(data, "channel-version", "Release index entry")),
            releases_json=str(require_field(data, "releases.json", "Release index entry")),
        )


@dataclass(frozen=True)
class FileDescriptor:
    rid: str
    name: str
    url: str
    hash: str

    @classmethod
    def from_json(cls, data: Any) -> "FileDescriptor":
        return cls(
            rid=str(require_field(data, "rid", "SDK file")),
            name=str(require_field(data, "name", "SDK file")),
            url=str(require_field(data, "url", "SDK file")),
            hash=str(require_field(data, "hash", "SDK file")),
        )


@dataclass(frozen=True)
class SdkDescriptor:
    """An SDK version and its per-platform files, kept as raw JSON until one is selected."""

    version: str
    files: tuple[Mapping[str, Any], ...]

    @classmethod
    def from_json(cls, data: Any) -> "SdkDescriptor":
        version = str(require_field(data, "version", "SDK descriptor"))
        files = require_list(data, "files", f"SDK descriptor {version}")
        return cls(version=version, files=tuple(files))


@dataclass(frozen=True)
class ReleaseEntry:
    """One release of a channel; ``sdks`` holds the optional feature-band variants.

    Descriptors stay as raw JSON objects so that only the matching SDK has to be
    fully well-formed.
    """

    sdk: Mapping[str, Any]
    sdks: tuple[Mapping[str, Any], ...] = ()

    @classmethod
    def from_json(cls, data: Any) -> "ReleaseEntry":
        sdk = require_field(data, "sdk", "Release entry")
        if not isinstance(sdk, Mapping):
            raise ReleaseDataError("Release entry field 'sdk' must be a JSON object.")
        variants = data.get("sdks")
        if variants is None:
            return cls(sdk=sdk)
        if not isinstance(variants, list):
            raise ReleaseDataError("Release entry field 'sdks' must be a list.")
        return cls(sdk=sdk, sdks=tuple(variants))

    def candidates(self) -> tuple[Mapping[str, Any], ...]:
        return (self.sdk, *self.sdks)


@dataclass(frozen=True)
class AcquireResult:
    version: str
    channel_version: str
    rid: str
    file: FileDescriptor
    installer_path: Path
    hash_matched: bool
    launched: bool
