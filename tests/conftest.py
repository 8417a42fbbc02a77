"""Shared fixtures: a sandboxed home directory and filesystem root."""

from pathlib import Path
from types import SimpleNamespace
import pytest
from config_dirs.config import paths


def write_file(path: Path, content: str) -> Path:
    """Create parent directories and write ``content`` to ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def fake_fs(tmp_path, monkeypatch):
    """
    Point ``~`` at tmp_path/home and re-root absolute fallback paths under tmp_path/root.
    
    ``/etc/my-app/config.toml`` becomes ``<tmp>/root/etc/my-app/config.toml``.
    """
    home = tmp_path / "home"
    home.mkdir()
    root = tmp_path / "root"
    root.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("MY_APP_CONFIG", raising=False)
    
    templates = tuple(
        (source, template if template.startswith("~/") else f"{root}{template}")
        for source, template in paths.FALLBACK_TEMPLATES
    )
    monkeypatch.setattr(paths, "FALLBACK_TEMPLATES", templates)
    
    return SimpleNamespace(
        home=home,
        root=root,
        user_config=home / ".config" / "my-app" / "config.toml",
        etc=root / "etc" / "my-app" / "config.toml",
        usr_local_etc=root / "usr" / "local" / "etc" / "my-app" / "config.toml",
        user_preferences=home / "Library" / "Preferences" / "my-app" / "config.toml",
        system_preferences=root / "Library" / "Preferences" / "my-app" / "config.toml",
        write=write_file,
    )
