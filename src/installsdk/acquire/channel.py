from __future__ import annotations

from installsdk.common.errors import InvalidVersionFormat


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def parse_channel_version(version: str) -> str:
    """Return the ``major.minor`` channel of an SDK version, e.g. ``"6.0"`` for ``"6.0.100"``.

    Only the first three characters are validated and returned; anything after
    them is left alone.
    """
    if not isinstance(version, str) or len(version) < 3:
        raise InvalidVersionFormat(str(version))
    channel = version[:3]
    if not _is_ascii_digit(channel[0]) or channel[1] != "." or not _is_ascii_digit(channel[2]):
        raise InvalidVersionFormat(version)
    return channel
