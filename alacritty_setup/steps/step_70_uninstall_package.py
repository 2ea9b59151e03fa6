from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib.command import command_exists
from ..lib.pkg import remove_package
from ..pipeline import SetupContext

logger = logging.getLogger(__name__)


class UninstallPackageStep:
    step_id = "70_uninstall_package"

    def run(self, ctx: SetupContext, state: Dict[str, Any]) -> Dict[str, Any]:
        package = ctx.config.package
        result = state.setdefault("revert", {})
        result["uninstalled"] = False

        if not command_exists(package):
            return state

        if not ctx.confirm(f"Do you want to uninstall {package.capitalize()} as well?"):
            logger.info("Keeping %s installed", package)
            return state

        remove_package(ctx.package_manager, package, escalation=ctx.escalation, dry_run=ctx.dry_run)
        result["uninstalled"] = True
        logger.info("%s uninstalled.", package.capitalize())
        return state
