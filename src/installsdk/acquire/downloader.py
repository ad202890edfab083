from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from pathlib import Path
from typing import BinaryIO, Callable

import requests
from urllib3.exceptions import HTTPError as Urllib3HTTPError

from installsdk.common.config import DEFAULT_CHUNK_SIZE, RuntimeConfig
from installsdk.common.console import TextWriter
from installsdk.common.errors import AcquisitionCancelled


log = logging.getLogger(__name__)

MEGABYTE = 2**20


class BufferPool:
    """Hands out reusable byte buffers so a download never holds more than one chunk."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._free: dict[int, list[bytearray]] = {}

    def rent(self, size: int) -> bytearray:
        with self._lock:
            free = self._free.get(size)
            if free:
                return free.pop()
        return bytearray(size)

    def give_back(self, buffer: bytearray) -> None:
        with self._lock:
            self._free.setdefault(len(buffer), []).append(buffer)

    def available(self, size: int) -> int:
        with self._lock:
            return len(self._free.get(size, ()))


SHARED_BUFFER_POOL = BufferPool()


@dataclass(frozen=True)
class ProgressThrottle:
    last_whole_unit: int = 0
    unit: int = MEGABYTE

    def step(self, total_bytes: int) -> tuple[bool, "ProgressThrottle"]:
        current = total_bytes // self.unit
        if current <= self.last_whole_unit:
            return False, self
        return True, replace(self, last_whole_unit=current)


class MegabyteProgress:
    def __init__(self, writer: TextWriter, throttle: ProgressThrottle | None = None):
        self.writer = writer
        self.throttle = throttle or ProgressThrottle()
        self.emitted = 0

    def __call__(self, total_bytes: int) -> None:
        emit, self.throttle = self.throttle.step(total_bytes)
        if not emit:
            return
        self.emitted += 1
        self.writer.rewrite_line(f"Downloading: {self.throttle.last_whole_unit}MB")


def copy_with_progress(
    source: BinaryIO,
    destination: BinaryIO,
    progress: Callable[[int], None] | None = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    pool: BufferPool = SHARED_BUFFER_POOL,
    cancel_event: threading.Event | None = None,
) -> int:
    buffer = pool.rent(chunk_size)
    view = memoryview(buffer)
    total = 0
    try:
        while True:
            if cancel_event is not None and cancel_event.is_set():
                raise AcquisitionCancelled(f"Download cancelled after {total} bytes.")
            read = source.readinto(buffer)
            if not read:
                break
            destination.write(view[:read])
            total += read
            if progress is not None:
                progress(total)
    finally:
        pool.give_back(buffer)
    return total


class StreamingDownloader:
    def __init__(
        self,
        session: requests.Session,
        runtime: RuntimeConfig,
        writer: TextWriter,
        pool: BufferPool = SHARED_BUFFER_POOL,
    ):
        self.session = session
        self.runtime = runtime
        self.writer = writer
        self.pool = pool

    def download(self, url: str, destination: Path, cancel_event: threading.Event | None = None) -> int:
        log.info("Downloading %s to %s", url, destination)
        destination.parent.mkdir(parents=True, exist_ok=True)
        progress = MegabyteProgress(self.writer)
        try:
            with self.session.get(url, stream=True, timeout=self.runtime.timeout) as resp:
                resp.raise_for_status()
                resp.raw.decode_content = True
                with destination.open("wb") as fh:
                    try:
                        total = copy_with_progress(
                            resp.raw,
                            fh,
                            progress,
                            chunk_size=self.runtime.download_chunk_size,
                            pool=self.pool,
                            cancel_event=cancel_event,
                        )
                    except Urllib3HTTPError as exc:
                        # Reading resp.raw bypasses the wrapping iter_content would do.
                        raise requests.exceptions.ConnectionError(
                            f"Download of {url} interrupted: {exc}", request=resp.request
                        ) from exc
        except BaseException:
            log.warning("Download of %s failed, removing partial file %s", url, destination)
            destination.unlink(missing_ok=True)
            raise
        log.info("Downloaded %s bytes to %s", total, destination)
        return total
