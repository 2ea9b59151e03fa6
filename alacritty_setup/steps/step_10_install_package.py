from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib.command import command_exists
from ..lib.pkg import install_package
from ..pipeline import SetupContext

logger = logging.getLogger(__name__)


class InstallPackageStep:
    step_id = "10_install_package"

    def run(self, ctx: SetupContext, state: Dict[str, Any]) -> Dict[str, Any]:
        package = ctx.config.package
        logger.info("Install %s if not already installed...", package)

        if command_exists(package):
            logger.info("%s is already installed.", package)
            state.setdefault("install", {})["installed"] = False
            return state

        install_package(ctx.package_manager, package, escalation=ctx.escalation, dry_run=ctx.dry_run)
        state.setdefault("install", {})["installed"] = True
        return state
