"""Version information of the package."""

from __future__ import annotations

import platform
import sys

_CORE_VERSION = "0.15.0"
_PRERELEASE = "alpha"

_ARCH_ALIASES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
}


def core() -> str:
    """The core version."""
    return _CORE_VERSION


def short() -> str:
    """The version with the pre-release tag, if any."""
    version = core()
    if _PRERELEASE:
        version += "-" + _PRERELEASE
    return version


def full(commit: str = "") -> str:
    """The full version with commit hash, operating system and architecture."""
    if commit and not commit.startswith(" "):
        commit = " " + commit
    return f"v{short()}{commit} {_operating_system()}/{_architecture()}"


def _operating_system() -> str:
    name = sys.platform
    if name.startswith("linux"):
        return "linux"
    if name in ("win32", "cygwin"):
        return "windows"
    return name.rstrip("0123456789")


def _architecture() -> str:
    machine = platform.machine().lower()
    return _ARCH_ALIASES.get(machine, machine or "unknown")