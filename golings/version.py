"""Version text shown by the command line."""

from __future__ import annotations

import platform
import sys

DEFAULT_VERSION = "dev"
DEFAULT_COMMIT = "none"
DEFAULT_DATE = "unknown"

_OS_NAMES = {"win32": "windows", "cygwin": "windows", "darwin": "darwin"}
_ARCH_NAMES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
}


def _goos() -> str:
    for prefix, name in _OS_NAMES.items():
        if sys.platform.startswith(prefix):
            return name
    return sys.platform.rstrip("0123456789")


def _goarch() -> str:
    machine = platform.machine().lower()
    return _ARCH_NAMES.get(machine, machine)


def build_version(version: str, commit: str, date: str) -> str:
    """Version followed by commit, build date and the platform, one per line."""
    parts = [version]
    if commit:
        parts.append(f"commit: {commit}")
    if date:
        parts.append(f"built at: {date}")
    parts.append(f"goos: {_goos()}")
    parts.append(f"goarch: {_goarch()}")
    return "\n".join(parts)