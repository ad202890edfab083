from __future__ import annotations

import unittest

import requests

from fakes import FakeSession
from installsdk.acquire.release_index import ReleaseIndexResolver, find_channel, iter_index_entries
from installsdk.common.config import RuntimeConfig
from installsdk.common.errors import ChannelNotFound, ReleaseDataError


INDEX_URL = "https://example.test/releases-index.json"

INDEX = {
    "releases-index": [
        {"channel-version": "5.0", "releases.json": "https://example.test/5.0/releases.json"},
        {"channel-version": "6.0", "releases.json": "https://example.test/6.0/releases.json"},
    ]
}


class ReleaseIndexTests(unittest.TestCase):
    def setUp(self) -> None:
        self.runtime = RuntimeConfig(release_index_url=INDEX_URL)

    def test_resolve_returns_matching_channel_url(self) -> None:
        session = FakeSession({INDEX_URL: INDEX})
        resolver = ReleaseIndexResolver(session, self.runtime)
        self.assertEqual(resolver.resolve("6.0"), "https://example.test/6.0/releases.json")
        self.assertEqual(session.urls, [INDEX_URL])
        self.assertEqual(session.calls[0][1]["timeout"], self.runtime.timeout)
        self.assertTrue(session.responses[0].closed)

    def test_first_match_wins_on_duplicates(self) -> None:
        doc = {
            "releases-index": [
                {"channel-version": "6.0", "releases.json": "first"},
                {"channel-version": "6.0", "releases.json": "second"},
            ]
        }
        self.assertEqual(find_channel(iter_index_entries(doc), "6.0").releases_json, "first")

    def test_exact_string_match_only(self) -> None:
        with self.assertRaises(ChannelNotFound):
            find_channel(iter_index_entries(INDEX), "6.0 ")
        with self.assertRaises(ChannelNotFound):
            find_channel(iter_index_entries(INDEX), "7.0")

    def test_missing_index_array_is_data_error(self) -> None:
        session = FakeSession({INDEX_URL: {"releases": []}})
        with self.assertRaises(ReleaseDataError):
            ReleaseIndexResolver(session, self.runtime).resolve("6.0")

    def test_only_the_matching_entry_needs_a_link(self) -> None:
        doc = {
            "releases-index": [
                {"channel-version": "5.0"},
                {"channel-version": "6.0", "releases.json": "https://example.test/6.0/releases.json"},
            ]
        }
        self.assertEqual(
            find_channel(iter_index_entries(doc), "6.0").releases_json, "https://example.test/6.0/releases.json"
        )
        with self.assertRaises(ReleaseDataError):
            find_channel(iter_index_entries(doc), "5.0")

    def test_entry_without_channel_version_is_data_error(self) -> None:
        with self.assertRaises(ReleaseDataError):
            find_channel(iter_index_entries({"releases-index": [{"releases.json": "x"}]}), "6.0")

    def test_http_error_propagates(self) -> None:
        session = FakeSession()
        with self.assertRaises(requests.HTTPError):
            ReleaseIndexResolver(session, self.runtime).resolve("6.0")


if __name__ == "__main__":
    unittest.main()
