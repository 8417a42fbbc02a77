"""Config path templates and home-directory expansion."""

from pathlib import Path
from typing import Iterator, Optional, Tuple
from ..contracts.probe import CandidateSource

CONFIG_FILE_NAME = "config.toml"

# Fallback locations, in probe order. ``{name}`` is the application name.
FALLBACK_TEMPLATES = (
    (CandidateSource.USER_CONFIG, "~/.config/{name}/" + CONFIG_FILE_NAME),
    (CandidateSource.ETC, "/etc/{name}/" + CONFIG_FILE_NAME),
    (CandidateSource.USR_LOCAL_ETC, "/usr/local/etc/{name}/" + CONFIG_FILE_NAME),
    (CandidateSource.USER_PREFERENCES, "~/Library/Preferences/{name}/" + CONFIG_FILE_NAME),
    (CandidateSource.SYSTEM_PREFERENCES, "/Library/Preferences/{name}/" + CONFIG_FILE_NAME),
)


def get_home_dir() -> Optional[Path]:
    """Current user's home directory, or None if it cannot be determined."""
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


def expand_home(raw: str) -> Optional[Path]:
    """
    Expand a leading ``~/`` to the current user's home directory.
    
    Args:
        raw: Path string, possibly starting with ``~/``
        
    Returns:
        Expanded path, ``Path(raw)`` unchanged when there is no ``~/`` prefix,
        or None if the home directory is unknown
    """
    if raw.startswith("~/"):
        home = get_home_dir()
        if home is None:
            return None
        return home / raw[2:]
    return Path(raw)


def iter_candidate_paths(name: str) -> Iterator[Tuple[CandidateSource, str]]:
    """Yield ``(source, template)`` for each fallback location of ``name``, lazily."""
    for source, template in FALLBACK_TEMPLATES:
        yield source, template.format(name=name)

