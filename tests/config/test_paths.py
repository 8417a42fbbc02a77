"""Tests for candidate path templates and home expansion."""

import inspect
from pathlib import Path
from config_dirs.config import paths
from config_dirs.config.paths import expand_home, iter_candidate_paths
from config_dirs.contracts.probe import CandidateSource


class TestExpandHome:
    """Test home-directory expansion."""
    
    def test_expands_tilde_prefix(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert expand_home("~/.config/app/config.toml") == tmp_path / ".config" / "app" / "config.toml"
    
    def test_absolute_path_unchanged(self):
        assert expand_home("/etc/app/config.toml") == Path("/etc/app/config.toml")
    
    def test_relative_path_unchanged(self):
        assert expand_home("conf/config.toml") == Path("conf/config.toml")
    
    def test_bare_tilde_not_expanded(self):
        """Only the ``~/`` prefix is expanded."""
        assert expand_home("~") == Path("~")
        assert expand_home("~other/config.toml") == Path("~other/config.toml")
    
    def test_unknown_home_returns_none(self, monkeypatch):
        monkeypatch.setattr(paths, "get_home_dir", lambda: None)
        assert expand_home("~/.config/app/config.toml") is None
    
    def test_unknown_home_does_not_affect_absolute(self, monkeypatch):
        monkeypatch.setattr(paths, "get_home_dir", lambda: None)
        assert expand_home("/etc/app/config.toml") == Path("/etc/app/config.toml")
    
    def test_get_home_dir_handles_runtime_error(self, monkeypatch):
        def no_home():
            raise RuntimeError("Could not determine home directory.")
        monkeypatch.setattr(Path, "home", staticmethod(no_home))
        assert paths.get_home_dir() is None


class TestCandidatePaths:
    """Test fallback candidate ordering."""
    
    def test_order(self):
        assert list(iter_candidate_paths("my-app")) == [
            (CandidateSource.USER_CONFIG, "~/.config/my-app/config.toml"),
            (CandidateSource.ETC, "/etc/my-app/config.toml"),
            (CandidateSource.USR_LOCAL_ETC, "/usr/local/etc/my-app/config.toml"),
            (CandidateSource.USER_PREFERENCES, "~/Library/Preferences/my-app/config.toml"),
            (CandidateSource.SYSTEM_PREFERENCES, "/Library/Preferences/my-app/config.toml"),
        ]
    
    def test_is_lazy(self):
        candidates = iter_candidate_paths("my-app")
        assert inspect.isgenerator(candidates)
        assert next(candidates) == (CandidateSource.USER_CONFIG, "~/.config/my-app/config.toml")
    
    def test_restartable(self):
        """Each call produces a fresh sequence."""
        assert list(iter_candidate_paths("a")) == list(iter_candidate_paths("a"))
    
    def test_name_is_used_verbatim(self):
        """The directory name keeps the application's own spelling."""
        templates = [t for _, t in iter_candidate_paths("MyApp")]
        assert all("/MyApp/config.toml" in t for t in templates)
