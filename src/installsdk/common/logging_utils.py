from __future__ import annotations

import logging
from pathlib import Path


LOG_FILE_NAME = "installsdk.log"


def configure_logging(log_dir: Path, level: str = "INFO", console: bool = False) -> Path:
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILE_NAME
    handlers: list[logging.Handler] = [logging.FileHandler(log_path, encoding="utf-8")]
    # User-facing output goes through ConsoleWriter; stderr only mirrors the log on request.
    if console:
        handlers.append(logging.StreamHandler())
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        handlers=handlers,
    )
    return log_path
