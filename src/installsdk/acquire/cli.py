from __future__ import annotations

import argparse
import json
import logging
from dataclasses import replace
from pathlib import Path

import requests

from installsdk.acquire.platform_id import PlatformIdentifier
from installsdk.acquire.process_service import InstallerLauncher
from installsdk.acquire.service import SdkAcquirer
from installsdk.common.config import RuntimeConfig
from installsdk.common.console import ConsoleWriter
from installsdk.common.errors import AcquisitionError
from installsdk.common.logging_utils import configure_logging


log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="installsdk", description="Download and launch a .NET SDK installer")
    parser.add_argument("version", help="Exact SDK version, e.g. 6.0.100")
    parser.add_argument("--rid", default=None, help="Runtime identifier override, e.g. win-x64")
    parser.add_argument("--download-dir", default=None, help="Where to save the installer (default: temp dir)")
    parser.add_argument("--no-install", action="store_true", help="Resolve, download and verify only")
    parser.add_argument("--strict-hash", action="store_true", help="Refuse to launch on checksum mismatch")
    parser.add_argument("--log-level", default="INFO", help="Log level.")
    parser.add_argument("--verbose", action="store_true", help="Mirror the log to stderr.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    runtime = RuntimeConfig.from_env()
    if args.download_dir:
        runtime = replace(runtime, download_dir=Path(args.download_dir))
    if args.strict_hash:
        runtime = replace(runtime, strict_hash=True)
    configure_logging(runtime.logs_dir, level=args.log_level, console=args.verbose)

    writer = ConsoleWriter()
    acquirer = SdkAcquirer(
        runtime,
        writer,
        InstallerLauncher(),
        platform_identifier=PlatformIdentifier(args.rid),
    )
    try:
        result = acquirer.acquire(args.version, launch=not args.no_install)
    except (AcquisitionError, requests.RequestException) as exc:
        log.exception("SDK acquisition failed: %s", exc)
        writer.write_line(f"error: {exc}")
        return 1

    writer.write_line(json.dumps({
        "version": result.version,
        "channel": result.channel_version,
        "rid": result.rid,
        "file": result.file.name,
        "path": str(result.installer_path),
        "hash_matched": result.hash_matched,
        "install": result.launched,
    }, indent=2))
    return 0
