from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib.net import download_file
from ..pipeline import SetupContext

logger = logging.getLogger(__name__)


class FetchConfigStep:
    step_id = "30_fetch_config"

    def run(self, ctx: SetupContext, state: Dict[str, Any]) -> Dict[str, Any]:
        live = ctx.paths.live_dir
        if ctx.dry_run:
            logger.info("Would create %s", live)
        else:
            live.mkdir(parents=True, exist_ok=True)

        written = []
        for filename, url in ctx.config.config_files.items():
            download_file(
                url,
                str(live / filename),
                client=ctx.http_client,
                timeout=ctx.config.http_timeout,
                dry_run=ctx.dry_run,
            )
            written.append(filename)

        state.setdefault("fetch", {})["files"] = written
        logger.info("Wrote %d config file(s) to %s", len(written), live)
        return state
