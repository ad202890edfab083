from __future__ import annotations

import logging
from pathlib import Path

from installsdk.common.console import TextWriter
from installsdk.common.errors import IntegrityError
from installsdk.common.hashing import hashes_match, sha512_file


log = logging.getLogger(__name__)

HASH_MISMATCH_MESSAGE = "The downloaded file contents did not match expected hash."


class IntegrityVerifier:
    """Checks a downloaded installer against its published SHA-512 digest.

    A mismatch prints one warning line and returns ``False``. Unless ``strict``
    is set the caller carries on and the installer is still launched.
    """

    def __init__(self, writer: TextWriter, strict: bool = False, chunk_size: int = 1024 * 1024):
        self.writer = writer
        self.strict = strict
        self.chunk_size = chunk_size

    def verify(self, path: Path, expected_hash: str) -> bool:
        digest = sha512_file(path, chunk_size=self.chunk_size)
        if hashes_match(digest, expected_hash):
            log.info("SHA-512 verified for %s", path)
            return True
        log.warning("SHA-512 mismatch for %s: %s != %s", path, digest, expected_hash)
        self.writer.write_line(HASH_MISMATCH_MESSAGE)
        if self.strict:
            raise IntegrityError(str(path), expected_hash, digest)
        return False
