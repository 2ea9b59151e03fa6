from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from .command import run_cmd

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageManager:
    """Generic packager: `<pm> install -y <pkg>` / `<pm> remove -y <pkg>`."""

    name: str

    def install_argv(self, package: str) -> List[str]:
        return [self.name, "install", "-y", package]

    def remove_argv(self, package: str) -> List[str]:
        return [self.name, "remove", "-y", package]


@dataclass(frozen=True)
class Pacman(PackageManager):
    name: str = "pacman"

    def install_argv(self, package: str) -> List[str]:
        return [self.name, "-S", "--needed", "--noconfirm", package]

    def remove_argv(self, package: str) -> List[str]:
        return [self.name, "-R", "--noconfirm", package]


def get_package_manager(name: str) -> PackageManager:
    if name == "pacman":
        return Pacman()
    return PackageManager(name=name)


def install_package(
    pm: PackageManager,
    package: str,
    *,
    escalation: Sequence[str] = (),
    dry_run: bool = False,
) -> None:
    run_cmd([*escalation, *pm.install_argv(package)], dry_run=dry_run)


def remove_package(
    pm: PackageManager,
    package: str,
    *,
    escalation: Sequence[str] = (),
    dry_run: bool = False,
) -> None:
    run_cmd([*escalation, *pm.remove_argv(package)], dry_run=dry_run)
