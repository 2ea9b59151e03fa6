from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Dict, List, Set

import httpx
import pytest

from alacritty_setup.lib import pkg
from alacritty_setup.lib.pkg import get_package_manager
from alacritty_setup.pipeline import SetupContext
from alacritty_setup.setup_config import DEFAULT_CONFIG_FILES, SetupConfig

CONFIG_BODIES = {
    "alacritty.toml": b'[general]\nimport = ["~/.config/alacritty/nordic.toml"]\n',
    "nordic.toml": b'[colors.primary]\nbackground = "#242933"\n',
}


@pytest.fixture(autouse=True)
def _isolate_home(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep the developer's real ~/.config out of reach."""

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_STATE_HOME", raising=False)
    return home


@pytest.fixture(autouse=True)
def _reset_logging():
    root = logging.getLogger()
    before = list(root.handlers)
    yield
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()
    for attr in ("_alacritty_setup_configured", "_alacritty_setup_log_path"):
        if hasattr(root, attr):
            delattr(root, attr)


class FakeSystem:
    """PATH lookups and package-manager calls without touching the host."""

    def __init__(self) -> None:
        self.on_path: Set[str] = {"pacman", "sudo"}
        self.commands: List[List[str]] = []

    def which(self, name, *args, **kwargs):
        return f"/usr/bin/{name}" if name in self.on_path else None

    def run_cmd(self, argv, **kwargs):
        argv = list(argv)
        self.commands.append(argv)
        if "alacritty" in argv:
            if "-S" in argv or "install" in argv:
                self.on_path.add("alacritty")
            elif "-R" in argv or "remove" in argv:
                self.on_path.discard("alacritty")


@pytest.fixture
def fake_system(monkeypatch: pytest.MonkeyPatch) -> FakeSystem:
    fake = FakeSystem()
    monkeypatch.setattr(shutil, "which", fake.which)
    monkeypatch.setattr(pkg, "run_cmd", fake.run_cmd)
    monkeypatch.setattr("os.geteuid", lambda: 1000)
    return fake


@pytest.fixture
def requested_urls() -> List[str]:
    return []


@pytest.fixture
def http_client(requested_urls):
    by_url: Dict[str, bytes] = {url: CONFIG_BODIES[name] for name, url in DEFAULT_CONFIG_FILES.items()}

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        requested_urls.append(url)
        if url in by_url:
            return httpx.Response(200, content=by_url[url])
        return httpx.Response(404)

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        yield client


@pytest.fixture
def answers() -> List[str]:
    """Queue of replies for the uninstall prompt."""
    return []


@pytest.fixture
def ctx(_isolate_home: Path, fake_system, http_client, answers) -> SetupContext:
    def confirm(question: str) -> bool:
        return answers.pop(0) in {"y", "Y"} if answers else False

    return SetupContext(
        config=SetupConfig(home=str(_isolate_home)),
        package_manager=get_package_manager("pacman"),
        escalation=["sudo"],
        confirm=confirm,
        http_client=http_client,
    )


def snapshot(root: Path) -> Dict[str, bytes]:
    return {str(p.relative_to(root)): p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()}
