"""Resolve an application's config file from the override variable and fallback directories."""

import sys
from pathlib import Path
from typing import Any, Callable, Iterator, List, Optional, Tuple
from ..config.environment import get_override_path
from ..config.paths import expand_home, iter_candidate_paths
from ..contracts.probe import CandidateProbe, CandidateSource
from ..utils.errors import ConfigReadError, NoConfigPathError
from ..utils.logging import get_logger
from .file_loader import ContentMode, load_from_path

logger = get_logger("loader.resolver")

_NOT_FOUND = object()


def default_app_name() -> str:
    """
    Name of the running program.
    
    Normally the stem of ``sys.argv[0]``. Under ``python -m pkg`` that stem is
    ``__main__``, so the top-level package of the ``__main__`` module is used,
    falling back to the directory holding ``__main__.py``.
    """
    argv0 = Path(sys.argv[0] if sys.argv else "")
    if argv0.stem != "__main__":
        return argv0.stem
    
    spec = getattr(sys.modules.get("__main__"), "__spec__", None)
    if spec is not None and spec.name:
        return spec.name.split(".", 1)[0]
    return argv0.resolve().parent.name


def _resolve_name(name: Optional[str]) -> str:
    if name is None:
        name = default_app_name()
    if not name:
        raise ValueError("Application name must not be empty")
    return name


def iter_candidates(name: str) -> Iterator[Tuple[CandidateSource, str]]:
    """
    Yield every candidate ``(source, template)`` in probe order.
    
    The override variable comes first when it is set; the fallback
    directories follow.
    """
    override = get_override_path(name)
    if override:
        yield CandidateSource.ENV, override
    yield from iter_candidate_paths(name)


def _try_load(path: Path, parse: Callable[[Any], Any], mode: ContentMode) -> Any:
    """Load ``path``, returning the _NOT_FOUND sentinel if the file is missing."""
    try:
        return load_from_path(path, parse, mode)
    except ConfigReadError as e:
        if e.is_not_found:
            return _NOT_FOUND
        raise


def load(
    name: Optional[str],
    parse: Callable[[Any], Any],
    mode: ContentMode = ContentMode.TEXT,
) -> Any:
    """
    Load an application's config from the first existing candidate path.
    
    Probe order:
    1. ``<NAME>_CONFIG`` environment variable
    2. ~/.config/<name>/config.toml
    3. /etc/<name>/config.toml
    4. /usr/local/etc/<name>/config.toml
    5. ~/Library/Preferences/<name>/config.toml
    6. /Library/Preferences/<name>/config.toml
    
    A missing file moves on to the next candidate. Any other read error, or a
    parser error, is raised immediately without trying later candidates.
    
    Args:
        name: Application name; None uses the running program's name
        parse: Parser called with the contents of the first existing file
        mode: Pass contents to the parser as ``str`` (TEXT) or ``bytes`` (BYTES)
        
    Returns:
        The parsed config
        
    Raises:
        ConfigReadError: If an existing candidate cannot be read
        ConfigParseError: If the parser rejects the first existing candidate
        NoConfigPathError: If no candidate file exists
        ValueError: If the application name is empty
    """
    name = _resolve_name(name)
    tried: List[Path] = []
    
    for source, template in iter_candidates(name):
        path = expand_home(template)
        if path is None:
            logger.debug(f"Skipping {template}: home directory is unknown")
            continue
        tried.append(path)
        result = _try_load(path, parse, mode)
        if result is not _NOT_FOUND:
            return result
    
    logger.error(f"Failed to load config for '{name}'")
    raise NoConfigPathError(name, tried)


def _is_file(path: Path) -> bool:
    """``path.is_file()`` that reports unsearchable locations as missing."""
    try:
        return path.is_file()
    except OSError as e:
        logger.debug(f"Cannot stat {path}: {e}")
        return False


def probe_candidates(name: Optional[str]) -> List[CandidateProbe]:
    """
    Describe every candidate location without reading any of them.
    
    Args:
        name: Application name; None uses the running program's name
        
    Returns:
        One CandidateProbe per candidate, in probe order
    """
    name = _resolve_name(name)
    probes = []
    for source, template in iter_candidates(name):
        path = expand_home(template)
        probes.append(CandidateProbe(
            source=source,
            template=template,
            path=str(path) if path is not None else None,
            exists=path is not None and _is_file(path),
        ))
    return probes
