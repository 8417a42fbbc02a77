"""config-dirs - Load an application's config file from conventional locations."""

from .config import expand_home, iter_candidate_paths, override_env_var
from .contracts import CandidateProbe, CandidateSource
from .loader import ContentMode, load, load_from_path, probe_candidates
from .parsers import get_parser, parse_json, parse_toml, parse_yaml
from .utils.errors import ConfigDirsError, ConfigReadError, ConfigParseError, NoConfigPathError

__version__ = "0.1.0"

__all__ = [
    "CandidateProbe",
    "CandidateSource",
    "ConfigDirsError",
    "ConfigParseError",
    "ConfigReadError",
    "ContentMode",
    "NoConfigPathError",
    "expand_home",
    "get_parser",
    "iter_candidate_paths",
    "load",
    "load_from_path",
    "override_env_var",
    "parse_json",
    "parse_toml",
    "parse_yaml",
    "probe_candidates",
]
