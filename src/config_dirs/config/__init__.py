"""Configuration location: override variable and conventional directories."""

from .environment import override_env_var, get_override_path
from .paths import (
    CONFIG_FILE_NAME,
    FALLBACK_TEMPLATES,
    expand_home,
    get_home_dir,
    iter_candidate_paths,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "FALLBACK_TEMPLATES",
    "expand_home",
    "get_home_dir",
    "get_override_path",
    "iter_candidate_paths",
    "override_env_var",
]
