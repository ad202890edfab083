from __future__ import annotations

import hashlib
from pathlib import Path


def sha512_file(path: Path, chunk_size: int = 1024 * 1024) -> str:
    h = hashlib.sha512()
    with path.open("rb") as fh:
        while True:
            data = fh.read(chunk_size)
            if not data:
                break
            h.update(data)
    return h.hexdigest().upper()


def hashes_match(actual: str, expected: str) -> bool:
    return str(actual).strip().upper() == str(expected or "").strip().upper()
