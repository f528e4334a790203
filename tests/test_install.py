import asyncio
from pathlib import Path

import pytest

from m3theme import install
from m3theme.color import Color
from m3theme.install import ThemeInstallError, apply_theme, get_themes_dir, run_command, switch_gtk_theme, write_theme


def test_themes_dir_override(monkeypatch, tmp_path):
    monkeypatch.setenv("M3THEME_THEMES_DIR", str(tmp_path / "themes"))
    assert get_themes_dir() == tmp_path / "themes"


def test_themes_dir_defaults_to_home(monkeypatch, tmp_path):
    monkeypatch.delenv("M3THEME_THEMES_DIR", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_themes_dir() == tmp_path / ".themes"


def test_write_theme(tmp_path):
    gtk_css = write_theme(tmp_path, "Foo", "window {}\n", Color(1, 2, 3))
    assert gtk_css == tmp_path / "Foo" / "gtk-3.0" / "gtk.css"
    assert gtk_css.read_text() == "window {}\n"
    index = (tmp_path / "Foo" / "index.theme").read_text()
    assert "Name=Foo" in index
    assert "RGB(1,2,3)" in index


def test_write_theme_failure(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    with pytest.raises(ThemeInstallError):
        write_theme(blocker, "Foo", "", Color(1, 2, 3))


class FakeProcess:
    def __init__(self, returncode, stderr=b""):
        self.returncode = returncode
        self._stderr = stderr

    async def communicate(self):
        return b"", self._stderr


def _fake_exec(returncode, stderr=b""):
    async def create_subprocess_exec(*args, **kwargs):
        return FakeProcess(returncode, stderr)
    return create_subprocess_exec


def test_run_command_success(monkeypatch):
    monkeypatch.setattr(install.asyncio, "create_subprocess_exec", _fake_exec(0))
    assert asyncio.run(run_command("gsettings", "set", "a", "b", "c")) is True


def test_run_command_failure_warns(monkeypatch, capsys):
    monkeypatch.setattr(install.asyncio, "create_subprocess_exec", _fake_exec(1, b"no such schema\n"))
    assert asyncio.run(run_command("gsettings", "set", "x")) is False
    assert "Warning: gsettings set x failed: no such schema" in capsys.readouterr().err


@pytest.fixture
def calls(monkeypatch):
    recorded = []

    async def fake_run_command(*args):
        recorded.append(args)
        return True

    monkeypatch.setattr(install, "run_command", fake_run_command)
    return recorded


def _which(*available):
    return lambda tool: f"/usr/bin/{tool}" if tool in available else None


def test_switch_uses_gsettings(monkeypatch, calls):
    monkeypatch.setattr(install.shutil, "which", _which("gsettings", "dconf"))
    assert asyncio.run(switch_gtk_theme("Foo")) is True
    assert calls == [("gsettings", "set", "org.gnome.desktop.interface", "gtk-theme", "Foo")]


def test_switch_falls_back_to_dconf(monkeypatch, calls):
    monkeypatch.setattr(install.shutil, "which", _which("dconf"))
    assert asyncio.run(switch_gtk_theme("Foo")) is True
    assert calls == [("dconf", "write", "/org/gnome/desktop/interface/gtk-theme", "'Foo'")]


def test_switch_without_tools(monkeypatch, calls, capsys):
    monkeypatch.setattr(install.shutil, "which", _which())
    assert asyncio.run(switch_gtk_theme("Foo")) is False
    assert calls == []
    assert "No gsettings or dconf found" in capsys.readouterr().err


def test_apply_theme(monkeypatch, calls, tmp_path, capsys):
    monkeypatch.setattr(install.shutil, "which", _which("gsettings"))

    result = asyncio.run(apply_theme("window {}\n", Color(28, 32, 39), "vibrant", "Foo", tmp_path, delay=0))

    assert result is True
    assert [call[-1] for call in calls] == ["FooTemp", "Foo"]
    assert (tmp_path / "Foo" / "gtk-3.0" / "gtk.css").read_text() == "window {}\n"
    assert (tmp_path / "FooTemp" / "gtk-3.0" / "gtk.css").read_text() == "window {}\n"
    assert "Comment=Material 3 Theme Temp - RGB(28,32,39)" in (tmp_path / "FooTemp" / "index.theme").read_text()

    out = capsys.readouterr().out
    assert "RGB(28,32,39)" in out
    assert "Variant: vibrant" in out
    assert "Seed color: #1c2027" in out


def test_apply_theme_uses_themes_dir_from_env(monkeypatch, calls, tmp_path):
    monkeypatch.setattr(install.shutil, "which", _which("gsettings"))
    monkeypatch.setenv("M3THEME_THEMES_DIR", str(tmp_path))

    asyncio.run(apply_theme("", Color(1, 1, 1), "neutral", delay=0))

    assert Path(tmp_path / "OmarchyTheme" / "index.theme").exists()
    assert Path(tmp_path / "OmarchyThemeTemp" / "index.theme").exists()
