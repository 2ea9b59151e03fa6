"""Tests for the revert procedure."""

import os

from alacritty_setup.main import build_steps
from alacritty_setup.pipeline import run_pipeline

from .conftest import snapshot


def _install(ctx):
    return run_pipeline(ctx, state={}, steps=build_steps("run")).state


def _revert(ctx):
    return run_pipeline(ctx, state={}, steps=build_steps("revert")).state


def _seed(ctx):
    live = ctx.paths.live_dir
    live.mkdir(parents=True)
    (live / "alacritty.toml").write_text("# original\n")
    return snapshot(live)


class TestRevert:
    def test_nothing_to_revert(self, ctx, fake_system, answers, _isolate_home):
        original = _seed(ctx)
        fake_system.on_path.add("alacritty")
        answers.append("y")

        state = _revert(ctx)

        assert state["revert"]["restored"] is False
        assert state["execution"]["halted"] is True
        assert state["execution"]["ran_steps"] == ["60_restore_backup"]
        assert snapshot(ctx.paths.live_dir) == original
        assert fake_system.commands == []
        # The prompt was never shown.
        assert answers == ["y"]

    def test_nothing_to_revert_logs(self, ctx, caplog):
        with caplog.at_level("INFO"):
            _revert(ctx)

        assert "Nothing to revert" in caplog.text

    def test_restores_original_and_removes_backup(self, ctx, fake_system, answers):
        original = _seed(ctx)
        _install(ctx)
        answers.append("n")

        state = _revert(ctx)

        assert state["revert"]["restored"] is True
        assert state["revert"]["uninstalled"] is False
        assert snapshot(ctx.paths.live_dir) == original
        assert not ctx.paths.backup_dir.exists()
        assert "alacritty" in fake_system.on_path

    def test_revert_then_uninstall(self, ctx, fake_system, answers):
        _seed(ctx)
        _install(ctx)
        answers.append("y")

        state = _revert(ctx)

        assert state["revert"]["uninstalled"] is True
        assert fake_system.commands[-1] == ["sudo", "pacman", "-R", "--noconfirm", "alacritty"]
        assert "alacritty" not in fake_system.on_path

    def test_no_prompt_when_package_absent(self, ctx, fake_system, answers):
        _seed(ctx)
        _install(ctx)
        fake_system.on_path.discard("alacritty")
        answers.append("y")

        state = _revert(ctx)

        assert state["revert"]["uninstalled"] is False
        assert answers == ["y"]

    def test_revert_after_two_runs_restores_pre_run_state(self, ctx, fake_system, answers):
        original = _seed(ctx)
        _install(ctx)
        _install(ctx)

        _revert(ctx)

        assert snapshot(ctx.paths.live_dir) == original
        assert not ctx.paths.backup_dir.exists()

    def test_revert_with_backup_but_no_live_dir(self, ctx, fake_system):
        backup = ctx.paths.backup_dir
        backup.mkdir(parents=True)
        (backup / "alacritty.toml").write_text("# saved\n")

        _revert(ctx)

        assert snapshot(ctx.paths.live_dir) == {"alacritty.toml": b"# saved\n"}
        assert not backup.exists()

    def test_symlinked_config_survives_run_and_revert(self, ctx, fake_system):
        target = ctx.paths.config_root / "dotfiles.toml"
        target.parent.mkdir(parents=True)
        target.write_text("# managed elsewhere\n")
        live = ctx.paths.live_dir
        live.mkdir()
        (live / "alacritty.toml").symlink_to(target)

        _install(ctx)
        _revert(ctx)

        restored = live / "alacritty.toml"
        assert restored.is_symlink()
        assert os.readlink(restored) == str(target)
        assert not ctx.paths.backup_dir.exists()

    def test_messages_follow_package_name(self, ctx, caplog):
        ctx.config = ctx.config.with_overrides(package="kitty")

        with caplog.at_level("INFO"):
            _revert(ctx)

        assert "Reverting Kitty setup..." in caplog.text
        assert "No Kitty configuration found. Nothing to revert." in caplog.text

    def test_restores_backup_named_after_package(self, ctx, fake_system):
        ctx.config = ctx.config.with_overrides(package="kitty")
        backup = ctx.paths.config_root / "kitty-bak"
        backup.mkdir(parents=True)
        (backup / "kitty.conf").write_text("# saved\n")

        state = _revert(ctx)

        assert state["revert"]["restored"] is True
        assert snapshot(ctx.paths.config_root / "kitty") == {"kitty.conf": b"# saved\n"}
        assert not backup.exists()
