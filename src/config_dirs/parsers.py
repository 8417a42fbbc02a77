"""Bundled parsers for common config formats."""

import json
import tomllib
from typing import Any, Callable, Dict, Union
import yaml


def _as_text(contents: Union[str, bytes]) -> str:
    if isinstance(contents, bytes):
        return contents.decode("utf-8")
    return contents


def parse_toml(contents: Union[str, bytes]) -> Dict[str, Any]:
    """Parse TOML text or bytes."""
    return tomllib.loads(_as_text(contents))


def parse_yaml(contents: Union[str, bytes]) -> Any:
    """Parse YAML with ``yaml.safe_load``; an empty document gives ``{}``."""
    data = yaml.safe_load(contents)
    return {} if data is None else data


def parse_json(contents: Union[str, bytes]) -> Any:
    """Parse JSON text or bytes."""
    return json.loads(contents)


PARSERS: Dict[str, Callable[[Union[str, bytes]], Any]] = {
    "toml": parse_toml,
    "yaml": parse_yaml,
    "yml": parse_yaml,
    "json": parse_json,
}


def get_parser(fmt: str) -> Callable[[Union[str, bytes]], Any]:
    """
    Look up a bundled parser by format name.
    
    Raises:
        ValueError: If the format is not supported
    """
    try:
        return PARSERS[fmt.lower()]
    except KeyError:
        supported = ", ".join(sorted(PARSERS))
        raise ValueError(f"Unsupported config format '{fmt}' (supported: {supported})")
