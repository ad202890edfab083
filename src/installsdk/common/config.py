from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path


RELEASE_INDEX_URL = "https://raw.githubusercontent.com/dotnet/core/master/release-notes/releases-index.json"
DEFAULT_CHUNK_SIZE = 81920


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def _default_download_dir() -> Path:
    return Path(tempfile.gettempdir())


@dataclass(frozen=True)
class RuntimeConfig:
    release_index_url: str = RELEASE_INDEX_URL
    download_dir: Path = field(default_factory=_default_download_dir)
    log_dir: Path | None = None
    download_chunk_size: int = DEFAULT_CHUNK_SIZE
    connect_timeout_seconds: int = 10
    read_timeout_seconds: int = 60
    max_retries: int = 3
    backoff_factor: float = 0.5
    strict_hash: bool = False

    @property
    def timeout(self) -> tuple[int, int]:
        return (self.connect_timeout_seconds, self.read_timeout_seconds)

    @property
    def logs_dir(self) -> Path:
        if self.log_dir is not None:
            return self.log_dir
        return self.download_dir / "installsdk-logs"

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        download_dir = os.environ.get("INSTALLSDK_DOWNLOAD_DIR", "").strip()
        log_dir = os.environ.get("INSTALLSDK_LOG_DIR", "").strip()
        return cls(
            release_index_url=os.environ.get("INSTALLSDK_RELEASE_INDEX_URL", RELEASE_INDEX_URL),
            download_dir=Path(download_dir) if download_dir else _default_download_dir(),
            log_dir=Path(log_dir) if log_dir else None,
            download_chunk_size=int(os.environ.get("INSTALLSDK_DOWNLOAD_CHUNK", str(DEFAULT_CHUNK_SIZE))),
            connect_timeout_seconds=int(os.environ.get("INSTALLSDK_CONNECT_TIMEOUT", "10")),
            read_timeout_seconds=int(os.environ.get("INSTALLSDK_READ_TIMEOUT", "60")),
            max_retries=int(os.environ.get("INSTALLSDK_MAX_RETRIES", "3")),
            backoff_factor=float(os.environ.get("INSTALLSDK_BACKOFF_FACTOR", "0.5")),
            strict_hash=_env_flag("INSTALLSDK_STRICT_HASH"),
        )
