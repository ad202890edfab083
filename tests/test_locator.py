from __future__ import annotations

import unittest

from fakes import FakeSession
from installsdk.acquire.locator import ArtifactLocator, find_file, find_sdk, iter_releases, iter_sdk_candidates
from installsdk.common.config import RuntimeConfig
from installsdk.common.errors import PlatformNotFound, ReleaseDataError, VersionNotFound
from installsdk.common.types import FileDescriptor, SdkDescriptor


RELEASES_URL = "https://example.test/6.0/releases.json"


def _file(rid: str, name: str | None = None) -> dict[str, str]:
    return {
        "rid": rid,
        "name": name or f"dotnet-sdk-{rid}.bin",
        "url": f"https://example.test/{rid}.bin",
        "hash": "AB" * 64,
    }


def _sdk(version: str, *rids: str) -> dict[str, object]:
    return {"version": version, "files": [_file(rid) for rid in rids]}


RELEASES = {
    "releases": [
        {"sdk": _sdk("6.0.101", "win-x64")},
        {
            "sdk": _sdk("6.0.100", "win-x64", "linux-x64"),
            "sdks": [_sdk("6.0.200", "linux-x64"), _sdk("6.0.100", "osx-x64")],
        },
    ]
}


class LocatorTests(unittest.TestCase):
    def test_candidates_are_primary_then_variants(self) -> None:
        versions = [c["version"] for c in iter_sdk_candidates(iter_releases(RELEASES))]
        self.assertEqual(versions, ["6.0.101", "6.0.100", "6.0.200", "6.0.100"])

    def test_missing_sdks_list_is_tolerated(self) -> None:
        sdk = find_sdk(iter_releases(RELEASES), "6.0.100")
        self.assertEqual(sdk.version, "6.0.100")
        self.assertEqual([f["rid"] for f in sdk.files], ["win-x64", "linux-x64"])

    def test_variant_sdk_is_found(self) -> None:
        sdk = find_sdk(iter_releases(RELEASES), "6.0.200")
        self.assertEqual([f["rid"] for f in sdk.files], ["linux-x64"])

    def test_primary_wins_over_duplicate_variant(self) -> None:
        sdk = find_sdk(iter_releases(RELEASES), "6.0.100")
        self.assertNotIn("osx-x64", [f["rid"] for f in sdk.files])

    def test_unknown_version(self) -> None:
        with self.assertRaises(VersionNotFound):
            find_sdk(iter_releases(RELEASES), "6.0.1")

    def test_file_selected_by_exact_rid(self) -> None:
        sdk = SdkDescriptor.from_json(_sdk("6.0.100", "win-x64", "linux-x64"))
        self.assertEqual(find_file(sdk, "linux-x64").rid, "linux-x64")
        self.assertEqual(find_file(sdk, "linux-x64"), FileDescriptor.from_json(sdk.files[1]))
        with self.assertRaises(PlatformNotFound):
            find_file(sdk, "linux")

    def test_first_file_wins_on_duplicate_rid(self) -> None:
        sdk = SdkDescriptor.from_json(
            {"version": "6.0.100", "files": [_file("win-x64", "a.exe"), _file("win-x64", "b.zip")]}
        )
        self.assertEqual(find_file(sdk, "win-x64").name, "a.exe")

    def test_only_the_matching_file_must_be_complete(self) -> None:
        incomplete = {"rid": "win-x64", "name": "dotnet-sdk-win-x64.exe", "url": "https://example.test/win.exe"}
        sdk = SdkDescriptor.from_json({"version": "6.0.100", "files": [incomplete, _file("linux-x64")]})
        self.assertEqual(find_file(sdk, "linux-x64").rid, "linux-x64")
        with self.assertRaises(ReleaseDataError):
            find_file(sdk, "win-x64")

    def test_only_the_matching_sdk_needs_files(self) -> None:
        doc = {"releases": [{"sdk": {"version": "6.0.102"}}, {"sdk": _sdk("6.0.100", "linux-x64")}]}
        self.assertEqual(find_sdk(iter_releases(doc), "6.0.100").version, "6.0.100")

    def test_release_without_sdk_is_data_error(self) -> None:
        with self.assertRaises(ReleaseDataError):
            find_sdk(iter_releases({"releases": [{"sdks": []}]}), "6.0.100")

    def test_locate_fetches_release_list(self) -> None:
        session = FakeSession({RELEASES_URL: RELEASES})
        locator = ArtifactLocator(session, RuntimeConfig())
        file = locator.locate(RELEASES_URL, "6.0.100", "linux-x64")
        self.assertEqual(file, FileDescriptor.from_json(_file("linux-x64")))
        self.assertEqual(session.urls, [RELEASES_URL])


if __name__ == "__main__":
    unittest.main()
