from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from typing import Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int


def _fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def command_exists(name: str) -> bool:
    """Return True if `name` resolves to an executable on PATH."""
    return shutil.which(name) is not None


def run_cmd(argv: Sequence[str], *, dry_run: bool = False) -> CmdResult:
    """Run a package-manager command attached to the terminal.

    Output goes straight to the operator (download progress, password prompts).
    A non-zero exit raises RuntimeError.
    """

    argv_list = list(argv)
    logger.info("CMD %s", _fmt_argv(argv_list))

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0)

    p = subprocess.run(argv_list)
    if p.returncode != 0:
        raise RuntimeError(f"Command failed ({p.returncode}): {_fmt_argv(argv_list)}")

    return CmdResult(argv=argv_list, returncode=p.returncode)
