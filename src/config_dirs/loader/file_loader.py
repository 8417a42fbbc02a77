"""Read a single config file and hand its contents to a parser."""

from enum import Enum
from pathlib import Path
from typing import Any, Callable, Union
from ..utils.errors import ConfigReadError, ConfigParseError
from ..utils.logging import get_logger

logger = get_logger("loader.file_loader")


class ContentMode(str, Enum):
    """How file contents are passed to the parser."""
    TEXT = "text"
    BYTES = "bytes"


def read_contents(path: Path, mode: ContentMode = ContentMode.TEXT) -> Union[str, bytes]:
    """
    Read the full contents of ``path``.
    
    Raises:
        ConfigReadError: If the file cannot be read, or is not valid UTF-8 in text mode
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ConfigReadError(path, e) from e
    
    if ContentMode(mode) is ContentMode.BYTES:
        return data
    
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ConfigReadError(path, e) from e


def load_from_path(
    path: Union[str, Path],
    parse: Callable[[Any], Any],
    mode: ContentMode = ContentMode.TEXT,
) -> Any:
    """
    Load and parse one config file.
    
    Args:
        path: Config file path (no home-directory expansion is done here)
        parse: Parser called once with the file contents
        mode: Pass contents to the parser as ``str`` (TEXT) or ``bytes`` (BYTES)
        
    Returns:
        Whatever ``parse`` returns
        
    Raises:
        ConfigReadError: If the file cannot be read
        ConfigParseError: If ``parse`` raises
    """
    path = Path(path)
    logger.info(f"Loading config from {path}")
    
    contents = read_contents(path, mode)
    
    try:
        return parse(contents)
    except Exception as e:
        raise ConfigParseError(path, e) from e
