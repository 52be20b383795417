"""Tests for the status command."""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path
from unittest.mock import patch

from yabridgectl.bridge.locator import LibraryNotFoundError
from yabridgectl.cli.commands.status import StatusCommand
from yabridgectl.cli.exit_codes import EXIT_SUCCESS
from yabridgectl.config.models import YabridgectlConfig
from yabridgectl.core.models import InstallationMethod


def _run(config: YabridgectlConfig, capsys) -> str:
    assert StatusCommand().execute(Namespace(), config) == EXIT_SUCCESS
    return capsys.readouterr().out


class TestStatusCommand:
    """Tests for StatusCommand."""

    def test_command_name(self) -> None:
        assert StatusCommand().name == "status"

    def test_header_with_auto_path(self, capsys) -> None:
        with patch(
            "yabridgectl.cli.commands.status.BridgeLocator.resolve",
            side_effect=LibraryNotFoundError("missing"),
        ):
            out = _run(YabridgectlConfig(), capsys)

        assert out.splitlines() == [
            "yabridge path: <auto>",
            "libyabridge.so: <not found>",
            "installation method: copy",
        ]

    def test_header_with_found_library(self, tmp_path: Path, capsys) -> None:
        (tmp_path / "libyabridge.so").write_bytes(b"")
        config = YabridgectlConfig(yabridge_home=tmp_path, method=InstallationMethod.SYMLINK)

        out = _run(config, capsys)

        assert f"yabridge path: '{tmp_path}'" in out
        assert f"libyabridge.so: '{tmp_path / 'libyabridge.so'}'" in out
        assert "installation method: symlink" in out

    def test_override_without_library_is_not_found(self, tmp_path: Path, capsys) -> None:
        out = _run(YabridgectlConfig(yabridge_home=tmp_path), capsys)
        assert "libyabridge.so: <not found>" in out

    def test_lists_plugins_with_their_state(self, plugin_dir: Path, capsys) -> None:
        (plugin_dir / "A.dll").write_bytes(b"")
        (plugin_dir / "A.so").write_bytes(b"")
        (plugin_dir / "sub").mkdir()
        (plugin_dir / "sub" / "B.dll").write_bytes(b"")
        (plugin_dir / "sub" / "B.so").symlink_to("/nowhere/libyabridge.so")
        (plugin_dir / "C.dll").write_bytes(b"")
        (plugin_dir / "D.dll").write_bytes(b"")
        (plugin_dir / "D.so").mkdir()

        out = _run(YabridgectlConfig(plugin_dirs=frozenset({plugin_dir})), capsys)

        lines = out.splitlines()
        start = lines.index(f"{plugin_dir}:")
        assert lines[start - 1] == ""
        assert lines[start + 1 : start + 4] == [
            "  A.dll :: copy",
            "  C.dll :: not installed",
            f"  D.dll :: unknown ('{plugin_dir / 'D.so'}' is not a regular file or a symlink)",
        ]
        assert lines[start + 4] == "  sub/B.dll :: symlink"

    def test_missing_directory_is_reported_inline(self, tmp_path: Path, capsys) -> None:
        missing = tmp_path / "missing"
        out = _run(YabridgectlConfig(plugin_dirs=frozenset({missing})), capsys)

        assert f"{missing}:" in out
        assert f"  error: Directory '{missing}' does not exist" in out
