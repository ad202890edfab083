from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Protocol

import requests

from installsdk.acquire.channel import parse_channel_version
from installsdk.acquire.downloader import StreamingDownloader
from installsdk.acquire.locator import ArtifactLocator
from installsdk.acquire.platform_id import PlatformIdentifier
from installsdk.acquire.release_index import ReleaseIndexResolver
from installsdk.acquire.verifier import IntegrityVerifier
from installsdk.common.config import RuntimeConfig
from installsdk.common.console import TextWriter
from installsdk.common.errors import IntegrityError, ReleaseDataError
from installsdk.common.http import build_session
from installsdk.common.types import AcquireResult


log = logging.getLogger(__name__)


class Launcher(Protocol):
    def launch(self, installer_path: Path) -> object: ...


class PlatformSource(Protocol):
    def get_platform(self) -> str: ...


def safe_file_name(name: str) -> str:
    raw = str(name or "").strip()
    if not raw:
        raise ReleaseDataError("Installer file name cannot be empty.")
    path = Path(raw)
    if path.is_absolute() or len(path.parts) != 1:
        raise ReleaseDataError(f"Invalid installer file name: {name!r}")
    if raw in {".", ".."}:
        raise ReleaseDataError(f"Invalid installer file name: {name!r}")
    if any(ch in raw for ch in ("/", "\\")):
        raise ReleaseDataError(f"Invalid installer file name: {name!r}")
    return raw


class SdkAcquirer:
    """Resolves, downloads, verifies and launches one SDK installer per ``acquire`` call."""

    def __init__(
        self,
        runtime: RuntimeConfig,
        writer: TextWriter,
        launcher: Launcher,
        platform_identifier: PlatformSource | None = None,
        session: requests.Session | None = None,
    ):
        self.runtime = runtime
        self.writer = writer
        self.launcher = launcher
        self.platform_identifier = platform_identifier or PlatformIdentifier()
        self.session = session if session is not None else build_session(runtime)
        self.resolver = ReleaseIndexResolver(self.session, runtime)
        self.locator = ArtifactLocator(self.session, runtime)
        self.downloader = StreamingDownloader(self.session, runtime, writer)
        self.verifier = IntegrityVerifier(writer, strict=runtime.strict_hash)

    def acquire(
        self,
        version: str,
        launch: bool = True,
        cancel_event: threading.Event | None = None,
    ) -> AcquireResult:
        channel = parse_channel_version(version)
        rid = self.platform_identifier.get_platform()
        log.info("Acquiring SDK %s (channel %s) for %s", version, channel, rid)

        releases_url = self.resolver.resolve(channel)
        file = self.locator.locate(releases_url, version, rid)

        installer_path = self.runtime.download_dir / safe_file_name(file.name)
        self.downloader.download(file.url, installer_path, cancel_event=cancel_event)

        try:
            hash_matched = self.verifier.verify(installer_path, file.hash)
        except IntegrityError:
            log.warning("Removing rejected installer %s", installer_path)
            installer_path.unlink(missing_ok=True)
            raise
        if not hash_matched:
            # Non-strict mode keeps going to the launcher with an unverified installer.
            log.warning("Continuing with unverified installer %s", installer_path)

        launched = False
        if launch:
            self.launcher.launch(installer_path)
            launched = True

        return AcquireResult(
            version=version,
            channel_version=channel,
            rid=rid,
            file=file,
            installer_path=installer_path,
            hash_matched=hash_matched,
            launched=launched,
        )
