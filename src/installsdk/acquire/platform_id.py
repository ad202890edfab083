from __future__ import annotations

import glob
import platform


def _normalize_os(system: str) -> str:
    s = system.lower()
    if s.startswith("win"):
        return "win"
    if s.startswith("darwin") or s.startswith("mac"):
        return "osx"
    return "linux"


def _normalize_arch(machine: str) -> str:
    m = machine.lower()
    if m in ("x86_64", "amd64", "x64"):
        return "x64"
    if m in ("i386", "i686", "x86"):
        return "x86"
    if m in ("aarch64", "arm64"):
        return "arm64"
    if m.startswith("armv") or m == "arm":
        return "arm"
    return m


def _is_musl() -> bool:
    return bool(glob.glob("/lib/ld-musl-*.so.1"))


def resolve_rid(system: str, machine: str, musl: bool = False) -> str:
    """Map ``platform.system()``/``platform.machine()`` values to a .NET runtime identifier."""
    os_name = _normalize_os(system)
    if os_name == "linux" and musl:
        os_name = "linux-musl"
    return f"{os_name}-{_normalize_arch(machine)}"


class PlatformIdentifier:
    def __init__(self, rid: str | None = None):
        self.rid = rid

    def get_platform(self) -> str:
        if self.rid:
            return self.rid
        system = platform.system()
        return resolve_rid(system, platform.machine(), musl=system.lower() == "linux" and _is_musl())
