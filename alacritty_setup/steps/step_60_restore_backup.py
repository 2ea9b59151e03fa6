from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib.assets import move_tree, remove_tree
from ..pipeline import SetupContext, halt

logger = logging.getLogger(__name__)


class RestoreBackupStep:
    step_id = "60_restore_backup"

    def run(self, ctx: SetupContext, state: Dict[str, Any]) -> Dict[str, Any]:
        live = ctx.paths.live_dir
        backup = ctx.paths.backup_dir
        app = ctx.config.package.capitalize()
        result = state.setdefault("revert", {})

        logger.info("Reverting %s setup...", app)
        if not backup.is_dir():
            logger.info("No %s configuration found. Nothing to revert.", app)
            result["restored"] = False
            halt(state)
            return state

        remove_tree(str(live), dry_run=ctx.dry_run)
        move_tree(str(backup), str(live), dry_run=ctx.dry_run)
        result["restored"] = True
        logger.info("%s setup reverted", app)
        return state
