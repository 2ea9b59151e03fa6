from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

import httpx

from .lib.env import ConfigPaths
from .lib.pkg import PackageManager
from .lib import prompt
from .setup_config import SetupConfig

logger = logging.getLogger(__name__)


@dataclass
class SetupContext:
    """Everything a step needs, resolved once up front."""

    config: SetupConfig
    package_manager: PackageManager
    escalation: List[str] = field(default_factory=list)
    confirm: Callable[[str], bool] = prompt.confirm
    http_client: Optional[httpx.Client] = None

    @property
    def paths(self) -> ConfigPaths:
        return ConfigPaths(home=self.config.home, app=self.config.package)

    @property
    def dry_run(self) -> bool:
        return self.config.dry_run


class Step(Protocol):
    """A single fail-fast step."""

    step_id: str

    def run(self, ctx: SetupContext, state: Dict[str, Any]) -> Dict[str, Any]:
        ...


@dataclass(frozen=True)
class PipelineResult:
    state: Dict[str, Any]
    ran_steps: List[str]


def halt(state: Dict[str, Any]) -> None:
    """Mark the pipeline finished; remaining steps are not run."""
    state.setdefault("execution", {})["halted"] = True


def run_pipeline(
    ctx: SetupContext,
    *,
    state: Dict[str, Any],
    steps: Sequence[Step],
) -> PipelineResult:
    """Run steps in order. Any exception aborts the remaining steps."""

    ran: List[str] = []
    exe = state.setdefault("execution", {})
    exe.setdefault("halted", False)

    for step in steps:
        exe["current_step"] = step.step_id
        logger.debug("Running step %s", step.step_id)
        state = step.run(ctx, state)
        ran.append(step.step_id)

        if state.get("execution", {}).get("halted"):
            logger.debug("Halted after %s", step.step_id)
            break

    state.setdefault("execution", {})["current_step"] = None
    state["execution"]["ran_steps"] = ran
    return PipelineResult(state=state, ran_steps=ran)
