from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_PACKAGE = "alacritty"

_CONFIG_BASE_URL = "https://github.com/ChrisTitusTech/dwm-titus/raw/main/config/alacritty"

DEFAULT_CONFIG_FILES: Dict[str, str] = {
    "alacritty.toml": f"{_CONFIG_BASE_URL}/alacritty.toml",
    "nordic.toml": f"{_CONFIG_BASE_URL}/nordic.toml",
}


@dataclass(frozen=True)
class SetupConfig:
    home: str = field(default_factory=lambda: str(Path.home()))
    package: str = DEFAULT_PACKAGE
    packager: Optional[str] = None
    escalation_tool: Optional[str] = None
    config_files: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_CONFIG_FILES))
    dry_run: bool = False
    http_timeout: float = 30.0

    def with_overrides(self, **overrides: Any) -> "SetupConfig":
        """Apply non-None overrides (CLI flags win over the file)."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def config_from_mapping(raw: Dict[str, Any]) -> SetupConfig:
    cfg = SetupConfig()

    files = raw.get("config_files")
    if files is not None:
        if not isinstance(files, dict) or not files:
            raise ValueError("config_files must be a non-empty mapping of filename -> url")
        for name in files:
            if "/" in str(name) or str(name) in {"", ".", ".."}:
                raise ValueError(f"config_files key must be a plain filename: {name!r}")
        files = {str(k): str(v) for k, v in files.items()}

    return cfg.with_overrides(
        home=str(Path(raw["home"]).expanduser()) if raw.get("home") else None,
        package=raw.get("package"),
        packager=raw.get("packager"),
        escalation_tool=raw.get("escalation_tool"),
        config_files=files,
        dry_run=bool(raw["dry_run"]) if "dry_run" in raw else None,
        http_timeout=float(raw["http_timeout"]) if raw.get("http_timeout") is not None else None,
    )


def load_setup_config(path: Optional[str]) -> SetupConfig:
    if not path:
        return SetupConfig()

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("setup config must be YAML")

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError("setup config must contain a mapping/object")

    return config_from_mapping(raw)
