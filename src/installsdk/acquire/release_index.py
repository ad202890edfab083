from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping

import requests

from installsdk.common.config import RuntimeConfig
from installsdk.common.errors import ChannelNotFound
from installsdk.common.http import get_json
from installsdk.common.types import ReleaseIndexEntry, require_field, require_list


log = logging.getLogger(__name__)


def iter_index_entries(data: Any) -> Iterator[Mapping[str, Any]]:
    yield from require_list(data, "releases-index", "Release index")


def find_channel(entries: Iterable[Mapping[str, Any]], channel: str) -> ReleaseIndexEntry:
    # Only the matching entry has to carry a "releases.json" link.
    for item in entries:
        if require_field(item, "channel-version", "Release index entry") == channel:
            return ReleaseIndexEntry.from_json(item)
    raise ChannelNotFound(channel)


class ReleaseIndexResolver:
    def __init__(self, session: requests.Session, runtime: RuntimeConfig):
        self.session = session
        self.runtime = runtime

    def resolve(self, channel: str) -> str:
        data = get_json(self.session, self.runtime.release_index_url, self.runtime)
        entry = find_channel(iter_index_entries(data), channel)
        log.info("Channel %s releases list: %s", channel, entry.releases_json)
        return entry.releases_json
