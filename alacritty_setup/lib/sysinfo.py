from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .command import command_exists
from .pkg import PackageManager, get_package_manager

logger = logging.getLogger(__name__)

_DISTRO_PACKAGERS = {
    "fedora": "dnf",
    "debian": "apt-get",
    "arch": "pacman",
    "opensuse": "zypper",
}

# Fallback probe order when os-release does not settle it.
_PACKAGER_CANDIDATES = ["apt-get", "dnf", "pacman", "zypper"]

_ESCALATION_CANDIDATES = ["sudo-rs", "sudo", "doas"]


def read_os_release(path: str = "/etc/os-release") -> Dict[str, str]:
    """Parse os-release into a dict with lowercased keys and unquoted values."""

    try:
        text = Path(path).read_text(encoding="utf-8", errors="ignore")
    except OSError:
        return {}

    info: Dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        info[key.strip().lower()] = value.strip().strip('"').strip("'")
    return info


def packager_for_distro(os_info: Dict[str, str]) -> Optional[str]:
    ids = [os_info.get("id") or ""]
    ids += (os_info.get("id_like") or "").split()
    for distro in ids:
        distro = distro.lower()
        if distro in _DISTRO_PACKAGERS:
            return _DISTRO_PACKAGERS[distro]
        # opensuse-tumbleweed, opensuse-leap
        if distro.startswith("opensuse"):
            return _DISTRO_PACKAGERS["opensuse"]
    return None


def detect_packager(override: Optional[str] = None, *, os_release_path: str = "/etc/os-release") -> str:
    if override:
        if not command_exists(override):
            raise RuntimeError(f"Requested packager not found on PATH: {override}")
        return override

    hinted = packager_for_distro(read_os_release(os_release_path))
    if hinted and command_exists(hinted):
        logger.info("Packager from os-release: %s", hinted)
        return hinted

    for candidate in _PACKAGER_CANDIDATES:
        if command_exists(candidate):
            logger.info("Packager from PATH: %s", candidate)
            return candidate

    raise RuntimeError(f"No supported package manager found (tried {', '.join(_PACKAGER_CANDIDATES)})")


def detect_escalation_tool(override: Optional[str] = None) -> List[str]:
    """Return the argv prefix used to elevate package operations.

    Root needs no prefix.
    """

    if os.geteuid() == 0:
        logger.info("Running as root; no escalation tool needed")
        return []

    if override:
        if not command_exists(override):
            raise RuntimeError(f"Requested escalation tool not found on PATH: {override}")
        return [override]

    for candidate in _ESCALATION_CANDIDATES:
        if command_exists(candidate):
            logger.info("Using %s for privilege escalation", candidate)
            return [candidate]

    raise RuntimeError(f"Can't find a privilege escalation tool (tried {', '.join(_ESCALATION_CANDIDATES)})")


def check_env(
    home: str,
    *,
    packager: Optional[str] = None,
    escalation_tool: Optional[str] = None,
) -> Tuple[PackageManager, List[str]]:
    if not Path(home).is_dir():
        raise RuntimeError(f"Home directory does not exist: {home}")

    pm = get_package_manager(detect_packager(packager))
    escalation = detect_escalation_tool(escalation_tool)
    return pm, escalation
