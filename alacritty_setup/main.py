from __future__ import annotations

import argparse
import logging
from typing import Any, Callable, Dict, List, Optional

import httpx

from .lib.prompt import confirm
from .lib.sysinfo import check_env
from .logging_utils import configure_logging
from .pipeline import SetupContext, Step, run_pipeline
from .setup_config import load_setup_config
from .steps import (
    BackupConfigStep,
    FetchConfigStep,
    InstallPackageStep,
    RestoreBackupStep,
    UninstallPackageStep,
)

logger = logging.getLogger(__name__)

MODES = ("run", "revert")


def build_steps(mode: str) -> List[Step]:
    if mode == "run":
        return [
            InstallPackageStep(),
            BackupConfigStep(),
            FetchConfigStep(),
        ]
    if mode == "revert":
        return [
            RestoreBackupStep(),
            UninstallPackageStep(),
        ]
    raise ValueError(f"Unknown mode: {mode!r} (expected one of {', '.join(MODES)})")


def run(
    mode: str,
    *,
    config_path: Optional[str] = None,
    log_path: Optional[str] = None,
    packager: Optional[str] = None,
    escalation_tool: Optional[str] = None,
    dry_run: Optional[bool] = None,
    verbose: bool = False,
    confirm_fn: Callable[[str], bool] = confirm,
    http_client: Optional[httpx.Client] = None,
) -> Dict[str, Any]:
    """Run the install or revert procedure and return the final state."""

    configure_logging(log_path=log_path, level=logging.DEBUG if verbose else logging.INFO)

    steps = build_steps(mode)
    cfg = load_setup_config(config_path).with_overrides(
        packager=packager,
        escalation_tool=escalation_tool,
        dry_run=dry_run,
    )

    state: Dict[str, Any] = {"mode": mode, "execution": {}}
    try:
        pm, escalation = check_env(cfg.home, packager=cfg.packager, escalation_tool=cfg.escalation_tool)
        ctx = SetupContext(
            config=cfg,
            package_manager=pm,
            escalation=escalation,
            confirm=confirm_fn,
            http_client=http_client,
        )
        return run_pipeline(ctx, state=state, steps=steps).state
    except Exception:
        logger.exception("alacritty-setup %s failed (step=%s)", mode, state["execution"].get("current_step"))
        raise


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="alacritty-setup")
    p.add_argument("mode", choices=MODES, help="run: install + configure; revert: restore backup")
    p.add_argument("--config", default=None, help="Path to setup config (yaml)")
    p.add_argument("--log", default=None, help="Path to log file")
    p.add_argument("--packager", default=None, help="Package manager to use (e.g. pacman, apt-get)")
    p.add_argument("--escalation-tool", default=None, help="Privilege escalation tool (e.g. sudo, doas)")
    p.add_argument("--dry-run", action="store_true", default=None, help="Log actions without changing anything")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = p.parse_args(argv)

    run(
        args.mode,
        config_path=args.config,
        log_path=args.log,
        packager=args.packager,
        escalation_tool=args.escalation_tool,
        dry_run=args.dry_run,
        verbose=args.verbose,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
