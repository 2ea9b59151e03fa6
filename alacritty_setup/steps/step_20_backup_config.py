from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib.assets import copy_tree
from ..pipeline import SetupContext

logger = logging.getLogger(__name__)


class BackupConfigStep:
    step_id = "20_backup_config"

    def run(self, ctx: SetupContext, state: Dict[str, Any]) -> Dict[str, Any]:
        live = ctx.paths.live_dir
        backup = ctx.paths.backup_dir
        result = state.setdefault("backup", {})
        result["created"] = False

        logger.info("Copy %s config files", ctx.config.package)
        if not live.is_dir():
            logger.info("No existing config at %s; nothing to back up", live)
            return state

        # An older backup holds the config from before the first run; keep it.
        if backup.exists():
            logger.info("Backup already present at %s; leaving it untouched", backup)
            return state

        copy_tree(str(live), str(backup), dry_run=ctx.dry_run)
        result["created"] = True
        result["path"] = str(backup)
        logger.info("Backed up %s -> %s", live, backup)
        return state
