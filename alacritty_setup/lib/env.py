from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ConfigPaths:
    home: str
    app: str = "alacritty"

    @property
    def config_root(self) -> Path:
        return Path(self.home) / ".config"

    @property
    def live_dir(self) -> Path:
        return self.config_root / self.app

    @property
    def backup_dir(self) -> Path:
        return self.config_root / f"{self.app}-bak"
